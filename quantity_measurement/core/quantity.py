"""
Generic quantity: a finite value bound to a unit of one category.

All comparison and arithmetic happens on base-unit magnitudes, so the
result never depends on which units the operands were expressed in.
Temperature quantities support conversion and equality only.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from .constants import EPSILON, HASH_PRECISION
from .types import (
    ArithmeticOperation,
    CategoryMismatchError,
    DivisionByZeroError,
    InvalidOperandError,
    UnsupportedOperationError,
)
from .units import (
    ALL_UNITS,
    MeasurementUnit,
    UnitCategory,
    ensure_finite,
    from_base,
    resolve_unit,
    supports_arithmetic,
    to_base,
)

U = TypeVar("U", bound=MeasurementUnit)


@dataclass(frozen=True, eq=False)
class Quantity(Generic[U]):
    """
    Immutable measurement of a value in a unit.

    Attributes:
        value: Finite magnitude expressed in unit
        unit: Unit member of one category (LengthUnit.FEET, ...)

    Raises:
        InvalidValueError: If value is NaN, infinite or not a number, or
            overflows when expressed in the base unit
        InvalidUnitError: If unit is not a registered unit member

    Example:
        >>> Quantity(1.0, LengthUnit.FEET) == Quantity(12.0, LengthUnit.INCH)
        True
        >>> Quantity(1.0, LengthUnit.FEET).add(Quantity(12.0, LengthUnit.INCH))
        Quantity(value=2.0, unit=<LengthUnit.FEET: 0>)
    """

    value: float
    unit: U

    def __post_init__(self):
        object.__setattr__(self, "value", ensure_finite(self.value))
        object.__setattr__(self, "unit", resolve_unit(self.unit))
        # Base magnitude must be representable too
        self.to_base()

    @property
    def category(self) -> UnitCategory:
        return ALL_UNITS[self.unit].category

    def to_base(self) -> float:
        """Magnitude of this quantity in its category base unit."""
        return to_base(self.value, self.unit)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def convert_to(self, target_unit) -> "Quantity[U]":
        """
        Return an equal quantity expressed in target_unit.

        Raises:
            InvalidUnitError: If target_unit is not a unit of this category
        """
        target = resolve_unit(target_unit, type(self.unit))
        if target is self.unit:
            return Quantity(self.value, target)
        return Quantity(from_base(self.to_base(), target), target)

    def convert_to_value(self, target_unit) -> float:
        return self.convert_to(target_unit).value

    # -------------------------------------------------------------------------
    # Equality
    # -------------------------------------------------------------------------

    def equals(self, other) -> bool:
        """
        Tolerant equality across units of the same category.

        Returns False for None, non-quantities and other categories.
        """
        if self is other:
            return True
        if not isinstance(other, Quantity):
            return False
        if other.category is not self.category:
            return False
        return abs(self.to_base() - other.to_base()) < EPSILON

    def __eq__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        """
        Hash of the category and the base magnitude rounded to 6 decimals.

        Equal quantities usually hash alike, but two equal quantities on
        either side of a rounding boundary do not: 4.999e-7 ft and 5.001e-7 ft
        are equal yet round to 0.0 and 1e-6. Sets and dict keys may then
        hold both.
        """
        return hash((self.category, round(self.to_base(), HASH_PRECISION) + 0.0))

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _validate_arithmetic_operands(
        self,
        other,
        operation: ArithmeticOperation,
        target_unit=None,
    ) -> U:
        """Check capability, operand and target unit; return the result unit."""
        if not supports_arithmetic(self.category):
            raise UnsupportedOperationError(
                f"{self.category.name.title()} units do not support {operation.value}. "
                f"Adding, subtracting or dividing absolute temperatures is not "
                f"physically meaningful; only conversion and equality are supported."
            )
        if other is None:
            raise InvalidOperandError(
                f"Cannot perform {operation.value}: the other quantity is missing"
            )
        if not isinstance(other, Quantity):
            raise InvalidOperandError(
                f"Cannot perform {operation.value} with {type(other).__name__}"
            )
        if other.category is not self.category:
            raise CategoryMismatchError(
                f"Cannot combine {self.category.name} with {other.category.name}"
            )

        if target_unit is None:
            return self.unit
        return resolve_unit(target_unit, type(self.unit))

    def _perform_base_arithmetic(self, other: "Quantity[U]", operation: ArithmeticOperation) -> float:
        this_base = self.to_base()
        other_base = other.to_base()

        if operation is ArithmeticOperation.ADD:
            return this_base + other_base
        if operation is ArithmeticOperation.SUBTRACT:
            return this_base - other_base
        if other_base == 0.0:
            raise DivisionByZeroError("Cannot divide by a zero quantity")
        return ensure_finite(this_base / other_base)

    def add(self, other: "Quantity[U]", target_unit=None) -> "Quantity[U]":
        """
        Sum of two quantities, expressed in target_unit.

        Args:
            other: Quantity of the same category
            target_unit: Unit of the result (default: this quantity's unit)

        Raises:
            UnsupportedOperationError: For temperature quantities
            InvalidOperandError: If other is missing or of another category
            InvalidUnitError: If target_unit is not a unit of this category
        """
        target = self._validate_arithmetic_operands(other, ArithmeticOperation.ADD, target_unit)
        result_base = self._perform_base_arithmetic(other, ArithmeticOperation.ADD)
        return Quantity(from_base(result_base, target), target)

    def subtract(self, other: "Quantity[U]", target_unit=None) -> "Quantity[U]":
        """
        Difference of two quantities, expressed in target_unit.

        Raises the same errors as add().
        """
        target = self._validate_arithmetic_operands(
            other, ArithmeticOperation.SUBTRACT, target_unit
        )
        result_base = self._perform_base_arithmetic(other, ArithmeticOperation.SUBTRACT)
        return Quantity(from_base(result_base, target), target)

    def divide(self, other: "Quantity[U]") -> float:
        """
        Dimensionless ratio of the two base-unit magnitudes.

        Raises:
            DivisionByZeroError: If other is zero in the base unit
            UnsupportedOperationError: For temperature quantities
            InvalidOperandError: If other is missing or of another category
        """
        self._validate_arithmetic_operands(other, ArithmeticOperation.DIVIDE)
        return self._perform_base_arithmetic(other, ArithmeticOperation.DIVIDE)

    def __add__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.subtract(other)

    def __truediv__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.divide(other)

    def __str__(self) -> str:
        return f"{self.value:g} {ALL_UNITS[self.unit].symbol}"
