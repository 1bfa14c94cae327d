"""
Display formatting for values and quantities.

Results are kept at full precision by the core; rounding happens only
here, when a number is shown to the user.
"""

from ..core.quantity import Quantity
from ..core.units import ALL_UNITS, MeasurementUnit, base_unit

DEFAULT_PRECISION = 4


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """
    Format a number with at most `precision` decimals.

    Trailing zeros are dropped and negative zero prints as "0".

    Example:
        >>> format_number(0.666666)
        '0.6667'
        >>> format_number(12.0)
        '12'
    """
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def format_quantity(quantity: Quantity, precision: int = DEFAULT_PRECISION) -> str:
    """Format as "<value> <symbol>", e.g. "12 in"."""
    return f"{format_number(quantity.value, precision)} {ALL_UNITS[quantity.unit].symbol}"


def format_quantity_long(quantity: Quantity, precision: int = DEFAULT_PRECISION) -> str:
    """Format as "<value> <name>", e.g. "12 inches"."""
    return f"{format_number(quantity.value, precision)} {ALL_UNITS[quantity.unit].name}"


def format_in_base(quantity: Quantity, precision: int = DEFAULT_PRECISION) -> str:
    """Format the quantity's magnitude in its category base unit."""
    base = base_unit(quantity.category)
    return f"{format_number(quantity.to_base(), precision)} {ALL_UNITS[base].symbol}"


def format_unit(unit: MeasurementUnit) -> str:
    definition = ALL_UNITS[unit]
    return f"{definition.name} ({definition.symbol})"
