"""
Input Validation Framework for quantity measurement.

Advisory checks for user-entered values, reported as issues with a
severity instead of exceptions, so the console can show warnings
alongside a result. Each issue is tied to the unit (and through it the
category) it is about.
"""

from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from .constants import ABSOLUTE_ZERO_C, EPSILON
from .types import InvalidUnitError
from .units import (
    ALL_UNITS,
    MeasurementUnit,
    UnitCategory,
    resolve_unit,
    supports_arithmetic,
)


class ValidationSeverity(Enum):
    """Severity level for validation issues."""
    ERROR = "✗"      # Value cannot be measured
    WARNING = "!"    # Measurable but physically suspect
    INFO = "i"       # Unusual but meaningful

    @property
    def icon(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValidationIssue:
    """
    An advisory about one measurement input.

    The category is taken from the unit when only the unit is given.
    """
    severity: ValidationSeverity
    message: str
    unit: MeasurementUnit | None = None
    category: UnitCategory | None = None
    value: float | None = None

    def __post_init__(self):
        if self.category is None and self.unit is not None:
            object.__setattr__(self, "category", ALL_UNITS[self.unit].category)

    @property
    def subject(self) -> str:
        """What the issue is about: "-5 K", "Temperature" or "Unit"."""
        if self.unit is not None and self.value is not None:
            return f"{self.value:g} {ALL_UNITS[self.unit].symbol}"
        if self.category is not None:
            return self.category.name.title()
        return "Unit"

    def __str__(self) -> str:
        return f"[{self.severity.icon}] {self.subject}: {self.message}"


@dataclass
class ValidationResult:
    """Issues collected over several inputs; valid while none is an ERROR."""
    issues: list[ValidationIssue] = field(default_factory=list)

    def _with(self, severity: ValidationSeverity) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity is severity]

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def errors(self) -> list[ValidationIssue]:
        return self._with(ValidationSeverity.ERROR)

    @property
    def warnings(self) -> list[ValidationIssue]:
        return self._with(ValidationSeverity.WARNING)

    @property
    def infos(self) -> list[ValidationIssue]:
        return self._with(ValidationSeverity.INFO)

    def for_category(self, category: UnitCategory) -> list[ValidationIssue]:
        return [i for i in self.issues if i.category is category]

    def __str__(self) -> str:
        if self.is_valid and not self.warnings:
            return "All inputs valid"
        return "\n".join(str(issue) for issue in self.issues)


# =============================================================================
# Validation Functions
# =============================================================================

def validate_value(value, unit: MeasurementUnit) -> list[ValidationIssue]:
    """
    Validate a value about to be paired with unit.

    Args:
        value: Candidate magnitude
        unit: Unit member the value is expressed in

    Returns:
        List of validation issues
    """
    try:
        unit = resolve_unit(unit)
    except InvalidUnitError as e:
        return [ValidationIssue(ValidationSeverity.ERROR, str(e))]

    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        return [ValidationIssue(
            ValidationSeverity.ERROR,
            f"Value must be a number (got {value!r})",
            unit=unit,
        )]

    value = float(value)
    if not np.isfinite(value):
        return [ValidationIssue(
            ValidationSeverity.ERROR,
            "Value must be finite",
            unit=unit,
            value=value,
        )]

    definition = ALL_UNITS[unit]

    if definition.category is UnitCategory.TEMPERATURE:
        celsius = definition.to_base(value)
        if celsius < ABSOLUTE_ZERO_C - EPSILON:
            return [ValidationIssue(
                ValidationSeverity.WARNING,
                f"below absolute zero ({celsius:.2f} °C)",
                unit=unit,
                value=value,
            )]
    elif value < 0:
        return [ValidationIssue(
            ValidationSeverity.INFO,
            f"Negative {definition.category.name.lower()}",
            unit=unit,
            value=value,
        )]

    return []


def validate_arithmetic(category: UnitCategory) -> list[ValidationIssue]:
    """Report an error when category has no arithmetic."""
    if supports_arithmetic(category):
        return []
    return [ValidationIssue(
        ValidationSeverity.ERROR,
        f"{category.name.title()} does not support addition, "
        f"subtraction or division",
        category=category,
    )]


def validate_all_inputs(*pairs: tuple[float, MeasurementUnit]) -> ValidationResult:
    """
    Validate several (value, unit) pairs at once.

    Returns:
        ValidationResult, invalid if any pair has an ERROR
    """
    result = ValidationResult()
    for value, unit in pairs:
        result.issues.extend(validate_value(value, unit))
    return result
