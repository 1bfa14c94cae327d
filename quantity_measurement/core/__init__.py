"""Core measurement engine - console independent."""

from .constants import EPSILON, HASH_PRECISION
from .types import (
    MeasurementError,
    InvalidValueError,
    InvalidUnitError,
    InvalidOperandError,
    CategoryMismatchError,
    DivisionByZeroError,
    UnsupportedOperationError,
    ArithmeticOperation,
)
from .units import (
    UnitCategory,
    UnitDefinition,
    MeasurementUnit,
    LengthUnit,
    WeightUnit,
    VolumeUnit,
    TemperatureUnit,
    ALL_UNITS,
    UNIT_TYPES,
    resolve_unit,
    to_base,
    from_base,
    convert,
    convert_array,
    get_unit_symbol,
    get_unit_name,
    get_units_for_category,
    base_unit,
    category_of,
    supports_arithmetic,
)
from .quantity import Quantity
from .service import MeasurementService
from .validation import (
    ValidationResult,
    ValidationIssue,
    ValidationSeverity,
    validate_value,
    validate_arithmetic,
    validate_all_inputs,
)
