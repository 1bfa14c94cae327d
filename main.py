"""
Quantity Measurement - unit conversion, comparison and arithmetic

Entry point for the application.

Usage:
    python main.py           # Launch the interactive console
    python main.py --demo    # Run the scripted walkthrough
"""

import argparse
import logging
import sys
from pathlib import Path

from quantity_measurement import __version__
from quantity_measurement.config import LOG_LEVELS, AppConfig
from quantity_measurement.core import (
    LengthUnit,
    MeasurementError,
    MeasurementService,
    Quantity,
    TemperatureUnit,
    VolumeUnit,
    WeightUnit,
)
from quantity_measurement.ui import Console, MainMenu
from quantity_measurement.utils.formatting import format_number, format_quantity
from quantity_measurement.utils.logging_utils import setup_logger

logger = logging.getLogger("quantity_measurement.main")


def run_console(config: AppConfig) -> None:
    """Launch the interactive console menus."""
    try:
        MainMenu(Console(), MeasurementService(), config).run()
    except KeyboardInterrupt:
        print("\nInterrupted.")


def run_demo(config: AppConfig) -> None:
    """Walk through the core operations with known results."""
    p = config.precision
    service = MeasurementService()

    print("Quantity Measurement - Demo")
    print("=" * 40)

    print("\nConversion:")
    inches = service.convert_value(1.0, LengthUnit.FEET, LengthUnit.INCH)
    print(f"  1 ft      = {format_number(inches, p)} in")
    inches = service.convert_value(2.54, LengthUnit.CENTIMETER, LengthUnit.INCH)
    print(f"  2.54 cm   = {format_number(inches, p)} in")
    boiling = Quantity(100.0, TemperatureUnit.CELSIUS).convert_to(TemperatureUnit.FAHRENHEIT)
    print(f"  100 °C    = {format_quantity(boiling, p)}")
    pounds = Quantity(1.0, WeightUnit.KILOGRAM).convert_to(WeightUnit.POUND)
    print(f"  1 kg      = {format_quantity(pounds, p)}")
    litres = Quantity(1.0, VolumeUnit.GALLON).convert_to(VolumeUnit.LITRE)
    print(f"  1 gal     = {format_quantity(litres, p)}")

    print("\nEquality:")
    pairs = [
        (Quantity(1.0, LengthUnit.FEET), Quantity(12.0, LengthUnit.INCH)),
        (Quantity(1.0, LengthUnit.YARD), Quantity(91.44, LengthUnit.CENTIMETER)),
        (Quantity(-40.0, TemperatureUnit.CELSIUS), Quantity(-40.0, TemperatureUnit.FAHRENHEIT)),
        (Quantity(1.0, LengthUnit.FEET), Quantity(1.0, WeightUnit.KILOGRAM)),
    ]
    for first, second in pairs:
        equal = service.are_quantities_equal(first, second)
        mark = "✓" if equal else "✗"
        print(f"  {mark} {format_quantity(first, p)} == {format_quantity(second, p)}: {equal}")

    print("\nArithmetic:")
    foot = Quantity(1.0, LengthUnit.FEET)
    twelve_in = Quantity(12.0, LengthUnit.INCH)
    total = service.add_quantities(foot, twelve_in)
    print(f"  1 ft + 12 in        = {format_quantity(total, p)}")
    total = service.add_quantities_with_target(foot, twelve_in, LengthUnit.YARD)
    print(f"  1 ft + 12 in (yd)   = {format_quantity(total, p)}")
    ratio = service.divide_quantities(foot, Quantity(6.0, LengthUnit.INCH))
    print(f"  1 ft / 6 in         = {format_number(ratio, p)}")

    print("\nRejected operations:")
    attempts = [
        ("NaN ft", lambda: Quantity(float("nan"), LengthUnit.FEET)),
        ("convert from unit 99", lambda: service.convert_value(1.0, 99, LengthUnit.FEET)),
        ("1 °C + 1 °C", lambda: Quantity(1.0, TemperatureUnit.CELSIUS).add(
            Quantity(1.0, TemperatureUnit.CELSIUS))),
        ("1 ft / 0 in", lambda: foot.divide(Quantity(0.0, LengthUnit.INCH))),
    ]
    for label, attempt in attempts:
        try:
            attempt()
            print(f"  ⚠ {label}: accepted")
        except MeasurementError as e:
            print(f"  ✓ {label}: {type(e).__name__}")

    print("\n" + "=" * 40)
    print("✓ Demo complete.")
    print("  Run 'pytest tests/' for the full test suite.\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Quantity Measurement - unit conversion, comparison and arithmetic",
        prog="quantity-measurement",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Run the scripted walkthrough instead of the menus"
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=4,
        help="Decimal places shown for results (default: 4)"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level (default: WARNING)"
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Quantity Measurement {__version__}"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = AppConfig(
            precision=args.precision,
            log_level=args.log_level,
            log_file=args.log_file,
            demo=args.demo,
        )
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(2)

    setup_logger(config.log_level, config.log_file)
    logger.debug(f"Starting with {config}")

    if config.demo:
        run_demo(config)
    else:
        run_console(config)


if __name__ == "__main__":
    main()
