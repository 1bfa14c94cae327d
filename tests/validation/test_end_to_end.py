"""
Validation tests for the application as a whole.

Checks the reference scenarios through the public package API and
drives main() the way the command line does.

Reference values:
    - 1 ft = 12 in, 1 in = 2.54 cm, 1 yd = 3 ft (exact by definition)
    - 1 lb = 0.45359237 kg (international avoirdupois pound)
    - 1 US gal = 3.78541 L
    - T[°F] = T[°C] * 9/5 + 32, T[K] = T[°C] + 273.15
"""

import logging

import pytest

import main
from quantity_measurement import __version__
from quantity_measurement.core import (
    DivisionByZeroError,
    InvalidUnitError,
    InvalidValueError,
    LengthUnit,
    MeasurementService,
    Quantity,
    TemperatureUnit,
    UnsupportedOperationError,
    VolumeUnit,
    WeightUnit,
    convert,
)
from quantity_measurement.utils.logging_utils import LOGGER_NAME, reset_logger


@pytest.fixture(autouse=True)
def clean_logger():
    reset_logger()
    yield
    reset_logger()


class TestReferenceScenarios:
    """Known results, each stated in a single line."""

    def test_foot_to_inches(self):
        assert convert(1.0, LengthUnit.FEET, LengthUnit.INCH) == 12.0

    def test_centimeters_to_inch(self):
        assert convert(2.54, LengthUnit.CENTIMETER, LengthUnit.INCH) == pytest.approx(1.0, abs=1e-6)

    def test_add_in_first_unit(self):
        result = Quantity(1.0, LengthUnit.FEET).add(Quantity(12.0, LengthUnit.INCH))
        assert result.value == pytest.approx(2.0)
        assert result.unit is LengthUnit.FEET

    def test_add_in_yards(self):
        result = Quantity(1.0, LengthUnit.FEET).add(Quantity(12.0, LengthUnit.INCH), LengthUnit.YARD)
        assert result.value == pytest.approx(0.6667, abs=1e-4)

    def test_boiling_point(self):
        result = Quantity(100.0, TemperatureUnit.CELSIUS).convert_to(TemperatureUnit.FAHRENHEIT)
        assert result.value == 212.0

    def test_crossing_point(self):
        assert Quantity(-40.0, TemperatureUnit.CELSIUS).equals(
            Quantity(-40.0, TemperatureUnit.FAHRENHEIT)
        )

    def test_pound_in_kilograms(self):
        assert convert(1.0, WeightUnit.POUND, WeightUnit.KILOGRAM) == pytest.approx(0.45359237)

    def test_gallon_in_millilitres(self):
        assert convert(1.0, VolumeUnit.GALLON, VolumeUnit.MILLILITRE) == pytest.approx(3785.41)


class TestBoundaryScenarios:

    def test_nan_quantity(self):
        with pytest.raises(InvalidValueError):
            Quantity(float("nan"), LengthUnit.FEET)

    def test_unit_out_of_range(self):
        with pytest.raises(InvalidUnitError):
            convert(1.0, 99, LengthUnit.FEET)

    def test_temperature_addition(self):
        with pytest.raises(UnsupportedOperationError):
            Quantity(1.0, TemperatureUnit.CELSIUS).add(Quantity(1.0, TemperatureUnit.CELSIUS))

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            Quantity(3.0, WeightUnit.OUNCE).divide(Quantity(0.0, WeightUnit.KILOGRAM))


class TestServiceWorkflow:
    """A short session through the service facade."""

    def test_parse_compare_and_combine(self):
        service = MeasurementService()
        first = service.parse_input("1", LengthUnit.YARD)
        second = service.parse_input("36", LengthUnit.INCH)
        assert service.are_quantities_equal(first, second)

        total = service.add_quantities_with_target(first, second, LengthUnit.FEET)
        assert total == Quantity(6.0, LengthUnit.FEET)
        assert service.divide_quantities(total, first) == pytest.approx(2.0)

        assert service.parse_input("six", LengthUnit.INCH) is None


class TestCommandLine:

    def test_demo(self, capsys):
        main.main(["--demo"])
        out = capsys.readouterr().out
        assert "1 ft      = 12 in" in out
        assert "100 °C    = 212 °F" in out
        assert "1 ft + 12 in (yd)   = 0.6667 yd" in out
        assert "1 ft / 6 in         = 2" in out
        assert "InvalidValueError" in out
        assert "InvalidUnitError" in out
        assert "UnsupportedOperationError" in out
        assert "DivisionByZeroError" in out
        assert "accepted" not in out
        assert "✓ Demo complete." in out

    def test_demo_precision(self, capsys):
        main.main(["--demo", "--precision", "2"])
        assert "1 ft + 12 in (yd)   = 0.67 yd" in capsys.readouterr().out

    def test_negative_precision_rejected(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main.main(["--demo", "--precision", "-1"])
        assert excinfo.value.code == 2
        assert "precision" in capsys.readouterr().err

    def test_unknown_log_level_rejected(self):
        with pytest.raises(SystemExit) as excinfo:
            main.main(["--demo", "--log-level", "chatty"])
        assert excinfo.value.code == 2

    def test_log_level_configures_logger(self, capsys):
        main.main(["--demo", "--log-level", "debug"])
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_log_file(self, tmp_path, capsys):
        log_path = tmp_path / "run.log"
        main.main(["--demo", "--log-level", "INFO", "--log-file", str(log_path)])
        assert "Logging to file" in log_path.read_text(encoding="utf-8")

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main.main(["--version"])
        assert excinfo.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_console_mode_reads_stdin(self, monkeypatch, capsys):
        replies = iter(["1", "2", "ft", "3", "in", "4", "5"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))
        main.main([])
        out = capsys.readouterr().out
        assert "3 ft = 36 in" in out
        assert "Goodbye!" in out
