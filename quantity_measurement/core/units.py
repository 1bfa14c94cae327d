"""
Unit registry for length, weight, volume and temperature.

Every category normalises values to a single base unit:

- Length: feet
- Weight: kilograms
- Volume: litres
- Temperature: degrees Celsius

Linear units carry a pair of multiplicative factors (to base, from base).
Temperature conversions have an offset and are handled by explicit
formulas instead of factors.

Unit tags are enum members whose value is their ordinal, so a tag can be
resolved from the member itself, its ordinal, its name or its symbol.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Sequence

import numpy as np
from numpy.typing import NDArray

from .constants import (
    CM_PER_FOOT,
    FAHRENHEIT_OFFSET,
    FEET_PER_YARD,
    GRAMS_PER_KILOGRAM,
    INCHES_PER_FOOT,
    KELVIN_OFFSET,
    KG_PER_POUND,
    LITRES_PER_GALLON,
    ML_PER_LITRE,
    OUNCES_PER_POUND,
)
from .types import InvalidUnitError, InvalidValueError


class UnitCategory(Enum):
    """Categories of mutually convertible units."""
    LENGTH = auto()
    WEIGHT = auto()
    VOLUME = auto()
    TEMPERATURE = auto()


@dataclass(frozen=True)
class UnitDefinition:
    """Definition of a unit with its conversion to the category base."""
    name: str               # Full name
    symbol: str             # Symbol/abbreviation
    category: UnitCategory
    to_base_factor: float = 1.0     # Multiply by this to convert to base
    from_base_factor: float = 1.0   # Multiply by this to convert from base
    to_base_fn: Callable[[float], float] | None = None    # Affine units only
    from_base_fn: Callable[[float], float] | None = None

    def to_base(self, value):
        if self.to_base_fn is not None:
            return self.to_base_fn(value)
        return value * self.to_base_factor

    def from_base(self, base_value):
        if self.from_base_fn is not None:
            return self.from_base_fn(base_value)
        return base_value * self.from_base_factor


class MeasurementUnit(Enum):
    """
    Common behaviour of the per-category unit enums.

    Subclasses only declare members; definitions live in the registry
    tables below.
    """

    @property
    def definition(self) -> UnitDefinition:
        return get_unit_definition(self)

    @property
    def symbol(self) -> str:
        return self.definition.symbol

    @property
    def display_name(self) -> str:
        return self.definition.name

    @property
    def category(self) -> UnitCategory:
        return self.definition.category

    def to_base(self, value: float) -> float:
        return to_base(value, self)

    def from_base(self, base_value: float) -> float:
        return from_base(base_value, self)

    def convert(self, value: float, target: "MeasurementUnit") -> float:
        return convert(value, self, target)

    def __str__(self) -> str:
        return f"{self.display_name} ({self.symbol})"


class LengthUnit(MeasurementUnit):
    FEET = 0
    INCH = 1
    YARD = 2
    CENTIMETER = 3


class WeightUnit(MeasurementUnit):
    KILOGRAM = 0
    GRAM = 1
    POUND = 2
    OUNCE = 3


class VolumeUnit(MeasurementUnit):
    LITRE = 0
    MILLILITRE = 1
    GALLON = 2


class TemperatureUnit(MeasurementUnit):
    CELSIUS = 0
    FAHRENHEIT = 1
    KELVIN = 2


# =============================================================================
# Unit Definitions
# =============================================================================

# Length units (base: foot)
LENGTH_UNITS = {
    LengthUnit.FEET: UnitDefinition("feet", "ft", UnitCategory.LENGTH, 1.0, 1.0),
    LengthUnit.INCH: UnitDefinition(
        "inches", "in", UnitCategory.LENGTH, 1 / INCHES_PER_FOOT, INCHES_PER_FOOT
    ),
    LengthUnit.YARD: UnitDefinition(
        "yards", "yd", UnitCategory.LENGTH, FEET_PER_YARD, 1 / FEET_PER_YARD
    ),
    LengthUnit.CENTIMETER: UnitDefinition(
        "centimeters", "cm", UnitCategory.LENGTH, 1 / CM_PER_FOOT, CM_PER_FOOT
    ),
}

# Weight units (base: kilogram)
WEIGHT_UNITS = {
    WeightUnit.KILOGRAM: UnitDefinition("kilograms", "kg", UnitCategory.WEIGHT, 1.0, 1.0),
    WeightUnit.GRAM: UnitDefinition(
        "grams", "g", UnitCategory.WEIGHT, 1 / GRAMS_PER_KILOGRAM, GRAMS_PER_KILOGRAM
    ),
    WeightUnit.POUND: UnitDefinition(
        "pounds", "lb", UnitCategory.WEIGHT, KG_PER_POUND, 1 / KG_PER_POUND
    ),
    WeightUnit.OUNCE: UnitDefinition(
        "ounces", "oz", UnitCategory.WEIGHT,
        KG_PER_POUND / OUNCES_PER_POUND, OUNCES_PER_POUND / KG_PER_POUND
    ),
}

# Volume units (base: litre)
VOLUME_UNITS = {
    VolumeUnit.LITRE: UnitDefinition("litres", "L", UnitCategory.VOLUME, 1.0, 1.0),
    VolumeUnit.MILLILITRE: UnitDefinition(
        "millilitres", "mL", UnitCategory.VOLUME, 1 / ML_PER_LITRE, ML_PER_LITRE
    ),
    VolumeUnit.GALLON: UnitDefinition(
        "gallons", "gal", UnitCategory.VOLUME, LITRES_PER_GALLON, 1 / LITRES_PER_GALLON
    ),
}

# Temperature units (base: Celsius)
# Offset conversions, factors are unused
TEMPERATURE_UNITS = {
    TemperatureUnit.CELSIUS: UnitDefinition(
        "Celsius", "°C", UnitCategory.TEMPERATURE,
        to_base_fn=lambda celsius: celsius,
        from_base_fn=lambda celsius: celsius,
    ),
    TemperatureUnit.FAHRENHEIT: UnitDefinition(
        "Fahrenheit", "°F", UnitCategory.TEMPERATURE,
        to_base_fn=lambda fahrenheit: (fahrenheit - FAHRENHEIT_OFFSET) * 5 / 9,
        from_base_fn=lambda celsius: celsius * 9 / 5 + FAHRENHEIT_OFFSET,
    ),
    TemperatureUnit.KELVIN: UnitDefinition(
        "Kelvin", "K", UnitCategory.TEMPERATURE,
        to_base_fn=lambda kelvin: kelvin - KELVIN_OFFSET,
        from_base_fn=lambda celsius: celsius + KELVIN_OFFSET,
    ),
}

ALL_UNITS: dict[MeasurementUnit, UnitDefinition] = {
    **LENGTH_UNITS, **WEIGHT_UNITS, **VOLUME_UNITS, **TEMPERATURE_UNITS
}

UNIT_TYPES: dict[UnitCategory, type[MeasurementUnit]] = {
    UnitCategory.LENGTH: LengthUnit,
    UnitCategory.WEIGHT: WeightUnit,
    UnitCategory.VOLUME: VolumeUnit,
    UnitCategory.TEMPERATURE: TemperatureUnit,
}

BASE_UNITS: dict[UnitCategory, MeasurementUnit] = {
    UnitCategory.LENGTH: LengthUnit.FEET,
    UnitCategory.WEIGHT: WeightUnit.KILOGRAM,
    UnitCategory.VOLUME: VolumeUnit.LITRE,
    UnitCategory.TEMPERATURE: TemperatureUnit.CELSIUS,
}

# Summing or dividing absolute temperatures has no physical meaning
ARITHMETIC_CATEGORIES = frozenset({
    UnitCategory.LENGTH,
    UnitCategory.WEIGHT,
    UnitCategory.VOLUME,
})


# =============================================================================
# Lookup and Validation
# =============================================================================

def ensure_finite(value) -> float:
    """
    Return value as a float, rejecting non-numbers, NaN and infinities.

    Raises:
        InvalidValueError: If value is not a finite real number
    """
    if isinstance(value, bool) or not isinstance(
        value, (int, float, np.integer, np.floating)
    ):
        raise InvalidValueError(value, f"Invalid value: {value!r}. Value must be a number.")
    if not np.isfinite(value):
        raise InvalidValueError(value)
    return float(value)


def _ensure_in_range(result: float, value: float) -> float:
    """Reject a conversion result that overflowed to infinity."""
    if not np.isfinite(result):
        raise InvalidValueError(
            value, f"Invalid value: {value!r}. Conversion overflows the floating-point range."
        )
    return result


def _match_unit_text(text: str, unit_type: type[MeasurementUnit]) -> MeasurementUnit | None:
    key = text.strip()
    for unit in unit_type:
        definition = ALL_UNITS[unit]
        if key == definition.symbol:
            return unit
        if key.lower() in (unit.name.lower(), definition.name.lower()):
            return unit
    return None


def resolve_unit(unit, unit_type: type[MeasurementUnit] | None = None) -> MeasurementUnit:
    """
    Resolve a unit tag, ordinal, name or symbol to a registered unit.

    Args:
        unit: Unit member, integer ordinal, or name/symbol string
        unit_type: Expected unit enum; required for ordinals and strings

    Returns:
        The registered unit member

    Raises:
        InvalidUnitError: If the unit does not belong to unit_type

    Example:
        >>> resolve_unit("in", LengthUnit)
        <LengthUnit.INCH: 1>
    """
    if isinstance(unit, MeasurementUnit):
        if unit not in ALL_UNITS:
            raise InvalidUnitError(unit)
        if unit_type is not None and not isinstance(unit, unit_type):
            raise InvalidUnitError(
                unit,
                f"Cannot use {unit.category.name} unit {unit.name} "
                f"where a {unit_type.__name__} is expected",
            )
        return unit

    if unit_type is None:
        raise InvalidUnitError(unit)

    if isinstance(unit, (int, np.integer)) and not isinstance(unit, bool):
        try:
            return unit_type(int(unit))
        except ValueError:
            raise InvalidUnitError(unit) from None

    if isinstance(unit, str):
        matched = _match_unit_text(unit, unit_type)
        if matched is None:
            raise InvalidUnitError(unit)
        return matched

    raise InvalidUnitError(unit)


def get_unit_definition(unit: MeasurementUnit) -> UnitDefinition:
    """Look up the registry entry for a unit member."""
    try:
        return ALL_UNITS[unit]
    except (KeyError, TypeError):
        raise InvalidUnitError(unit) from None


def get_unit_symbol(unit, unit_type: type[MeasurementUnit] | None = None) -> str:
    """Get the display symbol for a unit."""
    return ALL_UNITS[resolve_unit(unit, unit_type)].symbol


def get_unit_name(unit, unit_type: type[MeasurementUnit] | None = None) -> str:
    """Get the full display name for a unit."""
    return ALL_UNITS[resolve_unit(unit, unit_type)].name


def category_of(unit) -> UnitCategory:
    return ALL_UNITS[resolve_unit(unit)].category


def get_units_for_category(category: UnitCategory) -> list[MeasurementUnit]:
    """Get all units of a category, in ordinal order."""
    return list(UNIT_TYPES[category])


def base_unit(category: UnitCategory) -> MeasurementUnit:
    return BASE_UNITS[category]


def supports_arithmetic(category: UnitCategory) -> bool:
    return category in ARITHMETIC_CATEGORIES


# =============================================================================
# Conversion Functions
# =============================================================================

def _unit_type_of(*units) -> type[MeasurementUnit] | None:
    for unit in units:
        if isinstance(unit, MeasurementUnit):
            return type(unit)
    return None


def to_base(value: float, unit, unit_type: type[MeasurementUnit] | None = None) -> float:
    """
    Convert a value expressed in unit to its category base unit.

    Raises:
        InvalidUnitError: If unit is not a registered unit
        InvalidValueError: If value is NaN or infinite, or the result overflows
    """
    definition = ALL_UNITS[resolve_unit(unit, unit_type)]
    value = ensure_finite(value)
    return _ensure_in_range(definition.to_base(value), value)


def from_base(base_value: float, unit, unit_type: type[MeasurementUnit] | None = None) -> float:
    """
    Convert a base-unit magnitude to unit.

    Raises:
        InvalidUnitError: If unit is not a registered unit
        InvalidValueError: If base_value is NaN or infinite, or the result overflows
    """
    definition = ALL_UNITS[resolve_unit(unit, unit_type)]
    base_value = ensure_finite(base_value)
    return _ensure_in_range(definition.from_base(base_value), base_value)


def convert(value: float, from_unit, to_unit) -> float:
    """
    Convert a value from one unit to another of the same category.

    Either unit may be given as an ordinal, name or symbol as long as the
    other one is a unit member, which fixes the category.

    Args:
        value: Numeric value to convert
        from_unit: Source unit
        to_unit: Target unit

    Returns:
        Converted value; the input itself when both units are the same

    Raises:
        InvalidUnitError: If a unit is unknown or the categories differ
        InvalidValueError: If value is NaN or infinite, or the result overflows

    Example:
        >>> convert(1.0, LengthUnit.FEET, LengthUnit.INCH)
        12.0
    """
    unit_type = _unit_type_of(from_unit, to_unit)
    source = resolve_unit(from_unit, unit_type)
    target = resolve_unit(to_unit, unit_type)
    value = ensure_finite(value)

    if source is target:
        return value

    base_value = _ensure_in_range(ALL_UNITS[source].to_base(value), value)
    return _ensure_in_range(ALL_UNITS[target].from_base(base_value), value)


def convert_array(
    values: Sequence[float] | NDArray[np.float64],
    from_unit,
    to_unit,
) -> NDArray[np.float64]:
    """
    Convert many values at once.

    Args:
        values: Sequence or array of values in from_unit
        from_unit: Source unit
        to_unit: Target unit

    Returns:
        New float64 array in to_unit

    Raises:
        InvalidUnitError: If a unit is unknown or the categories differ
        InvalidValueError: If any element is not a finite number
    """
    unit_type = _unit_type_of(from_unit, to_unit)
    source = resolve_unit(from_unit, unit_type)
    target = resolve_unit(to_unit, unit_type)

    try:
        arr = np.array(values, dtype=np.float64)
    except (TypeError, ValueError):
        raise InvalidValueError(values, "Values must be numeric") from None

    bad = ~np.isfinite(arr)
    if np.any(bad):
        raise InvalidValueError(
            arr[bad][0], f"{int(np.count_nonzero(bad))} value(s) are not finite"
        )

    if source is target:
        return arr

    with np.errstate(over="ignore"):
        result = ALL_UNITS[target].from_base(ALL_UNITS[source].to_base(arr))
    overflowed = ~np.isfinite(result)
    if np.any(overflowed):
        raise InvalidValueError(
            arr[overflowed][0], "Conversion overflows the floating-point range"
        )
    return result
