"""
Measurement service: the entry points used by the console layer.

Wraps the unit registry and Quantity so callers can work with raw values
and units without touching base-unit arithmetic directly.
"""

from ..utils.parsing import try_parse_float
from .quantity import Quantity
from .types import InvalidOperandError, MeasurementError
from .units import MeasurementUnit, convert


class MeasurementService:
    """
    Facade over conversion, comparison and arithmetic.

    Stateless; one instance can be shared freely.

    Example:
        >>> service = MeasurementService()
        >>> service.convert_value(1.0, LengthUnit.FEET, LengthUnit.INCH)
        12.0
    """

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def convert_value(self, value: float, source_unit, target_unit) -> float:
        """Convert a raw value between two units of one category."""
        return convert(value, source_unit, target_unit)

    def convert_quantity(self, quantity: Quantity, target_unit) -> Quantity:
        if quantity is None:
            raise InvalidOperandError("Quantity to convert is missing")
        return quantity.convert_to(target_unit)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def are_quantities_equal(self, first: Quantity | None, second: Quantity | None) -> bool:
        """
        Compare two quantities; a missing side is never equal.

        Quantities of different categories compare unequal.
        """
        if first is None or second is None:
            return False
        return first.equals(second)

    def compare_values(
        self,
        first_value: float,
        first_unit: MeasurementUnit,
        second_value: float,
        second_unit: MeasurementUnit,
    ) -> bool:
        """Build both quantities from raw values and compare them."""
        return self.are_quantities_equal(
            Quantity(first_value, first_unit),
            Quantity(second_value, second_unit),
        )

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    @staticmethod
    def _require_both(first, second) -> None:
        if first is None or second is None:
            raise InvalidOperandError("Quantities cannot be None")

    def add_quantities(self, first: Quantity, second: Quantity) -> Quantity:
        """Sum in the first quantity's unit."""
        self._require_both(first, second)
        return first.add(second)

    def add_quantities_with_target(self, first: Quantity, second: Quantity, target_unit) -> Quantity:
        self._require_both(first, second)
        return first.add(second, target_unit)

    def subtract_quantities(self, first: Quantity, second: Quantity) -> Quantity:
        """Difference in the first quantity's unit."""
        self._require_both(first, second)
        return first.subtract(second)

    def subtract_quantities_with_target(
        self, first: Quantity, second: Quantity, target_unit
    ) -> Quantity:
        self._require_both(first, second)
        return first.subtract(second, target_unit)

    def divide_quantities(self, first: Quantity, second: Quantity) -> float:
        """Dimensionless ratio first / second."""
        self._require_both(first, second)
        return first.divide(second)

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    def parse_input(self, text: str | None, unit) -> Quantity | None:
        """
        Best-effort parse of interactive input into a Quantity.

        Never raises: blank, non-numeric or non-finite text and an
        unresolvable unit all give None.
        """
        value = try_parse_float(text)
        if value is None:
            return None
        try:
            return Quantity(value, unit)
        except MeasurementError:
            return None
