"""
Error types and small enums shared across the core.

Every error raised by the core derives from MeasurementError and also
from the closest built-in exception, so callers may catch either.
"""

from enum import Enum


class MeasurementError(Exception):
    """Base class for all quantity measurement errors."""
    pass


class InvalidValueError(MeasurementError, ValueError):
    """Exception raised when a numeric value is NaN or infinite."""

    def __init__(self, value, message: str | None = None):
        self.value = value
        if message is None:
            message = f"Invalid value: {value}. Value must be a finite number."
        super().__init__(message)


class InvalidUnitError(MeasurementError, ValueError):
    """Exception raised when a unit is not a member of its category."""

    def __init__(self, unit, message: str | None = None):
        self.unit = unit
        if message is None:
            message = f"Invalid unit: {unit!r}. Unit must be a valid measurement unit."
        super().__init__(message)


class InvalidOperandError(MeasurementError, TypeError):
    """Exception raised when an operation is missing its second quantity."""
    pass


class CategoryMismatchError(InvalidOperandError):
    """Exception raised when quantities of different categories are combined."""
    pass


class DivisionByZeroError(MeasurementError, ZeroDivisionError):
    """Exception raised when the divisor is zero in the base unit."""
    pass


class UnsupportedOperationError(MeasurementError, NotImplementedError):
    """Exception raised when a category does not support an operation."""
    pass


class ArithmeticOperation(Enum):
    """Arithmetic operations dispatched through the base unit."""
    ADD = "addition"
    SUBTRACT = "subtraction"
    DIVIDE = "division"

    @property
    def symbol(self) -> str:
        return {"addition": "+", "subtraction": "-", "division": "/"}[self.value]
