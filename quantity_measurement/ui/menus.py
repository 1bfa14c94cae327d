"""
Interactive menus for comparing, converting and combining quantities.

Menus talk to the core only through MeasurementService. Errors raised by
the core are caught here, logged, and shown to the user as messages.
"""

import logging

from ..config import AppConfig
from ..core.quantity import Quantity
from ..core.service import MeasurementService
from ..core.types import ArithmeticOperation, InvalidUnitError, MeasurementError
from ..core.units import (
    ALL_UNITS,
    UNIT_TYPES,
    MeasurementUnit,
    UnitCategory,
    base_unit,
    get_units_for_category,
    resolve_unit,
    supports_arithmetic,
)
from ..core.validation import ValidationSeverity, validate_arithmetic, validate_value
from ..utils.formatting import format_number, format_quantity, format_unit
from ..utils.parsing import try_parse_choice
from .console import Console

logger = logging.getLogger(__name__)

# Result unit choices for addition and subtraction
RESULT_IN_FIRST = "first"
RESULT_IN_SECOND = "second"
RESULT_IN_BOTH = "both"


class CategoryMenu:
    """Compare / convert / arithmetic menu for one unit category."""

    def __init__(
        self,
        category: UnitCategory,
        console: Console,
        service: MeasurementService,
        config: AppConfig,
    ):
        self.category = category
        self.console = console
        self.service = service
        self.config = config
        self.units = get_units_for_category(category)

    @property
    def title(self) -> str:
        return self.category.name

    def _fmt(self, quantity: Quantity) -> str:
        return format_quantity(quantity, self.config.precision)

    def run(self) -> None:
        actions = {
            "1": self.compare,
            "2": self.convert,
            "3": self.arithmetic,
        }
        while True:
            self.console.header(f"{self.title} MEASUREMENTS")
            self.console.menu([
                "1.  Compare two quantities",
                "2.  Convert a quantity",
                "3.  Arithmetic (add, subtract, divide)",
                "4.  Back to Main Menu",
            ])
            choice = self.console.prompt("Enter your choice")
            if choice is None or choice.strip() == "4":
                return

            action = actions.get(choice.strip())
            if action is None:
                self.console.error("Invalid choice!")
                continue
            self._guarded(action)

    def _guarded(self, action) -> None:
        try:
            action()
        except MeasurementError as e:
            logger.warning(f"{self.title}: {type(e).__name__}: {e}")
            self.console.error(str(e))

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def read_unit(self, label: str) -> MeasurementUnit | None:
        """Ask for a unit by list number, name or symbol."""
        options = [f"{i}.  {format_unit(unit)}" for i, unit in enumerate(self.units, start=1)]
        while True:
            self.console.menu(options)
            text = self.console.prompt(label)
            if text is None:
                return None

            index = try_parse_choice(text, len(self.units))
            if index is not None:
                return self.units[index]
            try:
                return resolve_unit(text, UNIT_TYPES[self.category])
            except InvalidUnitError:
                self.console.error(f"Unknown unit: {text.strip()!r}")

    def read_quantity(self, label: str) -> Quantity | None:
        """Ask for a unit then a value; None when input is closed."""
        unit = self.read_unit(f"{label} unit")
        if unit is None:
            return None

        while True:
            text = self.console.prompt(f"{label} value in {ALL_UNITS[unit].symbol}")
            if text is None:
                return None
            quantity = self.service.parse_input(text, unit)
            if quantity is not None:
                self._show_advisories(quantity)
                return quantity
            self.console.error("Please enter a finite number.")

    def _show_advisories(self, quantity: Quantity) -> None:
        for issue in validate_value(quantity.value, quantity.unit):
            if issue.severity is not ValidationSeverity.ERROR:
                self.console.info(str(issue))

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def compare(self) -> None:
        self.console.attributed_header(f"{self.title} COMPARISON", "1 ft == 12 in")
        first = self.read_quantity("First")
        if first is None:
            return
        second = self.read_quantity("Second")
        if second is None:
            return

        equal = self.service.are_quantities_equal(first, second)
        logger.debug(f"compare {first!r} {second!r} -> {equal}")

        base = ALL_UNITS[base_unit(self.category)].symbol
        precision = self.config.precision
        self.console.result_box("COMPARISON RESULT", [
            f"First:  {self._fmt(first)} = {format_number(first.to_base(), precision)} {base}",
            f"Second: {self._fmt(second)} = {format_number(second.to_base(), precision)} {base}",
            "Result: EQUAL" if equal else "Result: NOT EQUAL",
        ])

    def convert(self) -> None:
        self.console.attributed_header(f"{self.title} CONVERSION", "1 ft -> 12 in")
        source = self.read_quantity("Source")
        if source is None:
            return
        target_unit = self.read_unit("Target unit")
        if target_unit is None:
            return

        result = self.service.convert_quantity(source, target_unit)
        logger.debug(f"convert {source!r} -> {result!r}")
        self.console.result_box("CONVERSION RESULT", [
            f"{self._fmt(source)} = {self._fmt(result)}",
        ])

    def arithmetic(self) -> None:
        if not supports_arithmetic(self.category):
            for issue in validate_arithmetic(self.category):
                logger.warning(f"{self.title}: {issue.message}")
                self.console.error(issue.message)
            return

        actions = {
            "1": self.add,
            "2": self.subtract,
            "3": self.divide,
        }
        while True:
            self.console.header(f"{self.title} ARITHMETIC")
            self.console.menu([
                "1.  Addition        (a + b)",
                "2.  Subtraction     (a - b)",
                "3.  Division        (a / b)",
                "4.  Back",
            ])
            choice = self.console.prompt("Enter your choice")
            if choice is None or choice.strip() == "4":
                return

            action = actions.get(choice.strip())
            if action is None:
                self.console.error("Invalid choice!")
                continue
            self._guarded(action)

    def _read_result_mode(self) -> str | None:
        modes = [RESULT_IN_FIRST, RESULT_IN_SECOND, RESULT_IN_BOTH]
        while True:
            self.console.menu([
                "1.  Result in FIRST unit",
                "2.  Result in SECOND unit",
                "3.  Results in BOTH units",
            ])
            text = self.console.prompt("Result unit")
            if text is None:
                return None
            index = try_parse_choice(text, len(modes))
            if index is not None:
                return modes[index]
            self.console.error("Invalid choice!")

    def _combine(self, operation: ArithmeticOperation, with_target) -> None:
        first = self.read_quantity("First")
        if first is None:
            return
        second = self.read_quantity("Second")
        if second is None:
            return
        mode = self._read_result_mode()
        if mode is None:
            return

        targets = {
            RESULT_IN_FIRST: [first.unit],
            RESULT_IN_SECOND: [second.unit],
            RESULT_IN_BOTH: [first.unit, second.unit],
        }[mode]

        lines = []
        for target in dict.fromkeys(targets):
            result = with_target(first, second, target)
            logger.debug(f"{operation.value} {first!r} {operation.symbol} {second!r} -> {result!r}")
            lines.append(
                f"{self._fmt(first)} {operation.symbol} {self._fmt(second)} = {self._fmt(result)}"
            )
        self.console.result_box(f"{operation.value.upper()} RESULT", lines)

    def add(self) -> None:
        self.console.attributed_header("ADDITION", "1 ft + 12 in = 2 ft")
        self._combine(ArithmeticOperation.ADD, self.service.add_quantities_with_target)

    def subtract(self) -> None:
        self.console.attributed_header("SUBTRACTION", "2 ft - 12 in = 1 ft")
        self._combine(ArithmeticOperation.SUBTRACT, self.service.subtract_quantities_with_target)

    def divide(self) -> None:
        self.console.attributed_header("DIVISION", "1 ft / 6 in = 2")
        first = self.read_quantity("Dividend")
        if first is None:
            return
        second = self.read_quantity("Divisor")
        if second is None:
            return

        ratio = self.service.divide_quantities(first, second)
        logger.debug(f"divide {first!r} / {second!r} -> {ratio}")
        self.console.result_box("DIVISION RESULT", [
            f"{self._fmt(first)} {ArithmeticOperation.DIVIDE.symbol} {self._fmt(second)} = "
            f"{format_number(ratio, self.config.precision)}",
        ])


class MainMenu:
    """Top-level category selection."""

    def __init__(
        self,
        console: Console | None = None,
        service: MeasurementService | None = None,
        config: AppConfig | None = None,
    ):
        self.console = console if console is not None else Console()
        self.service = service if service is not None else MeasurementService()
        self.config = config if config is not None else AppConfig()
        self.categories = list(UnitCategory)

    def run(self) -> None:
        exit_choice = str(len(self.categories) + 1)
        options = [
            f"{i}.  {category.name.title()}"
            for i, category in enumerate(self.categories, start=1)
        ]
        options.append(f"{exit_choice}.  Exit")

        while True:
            self.console.header("QUANTITY MEASUREMENT")
            self.console.menu(options)
            choice = self.console.prompt("Enter your choice")
            if choice is None or choice.strip() == exit_choice:
                self.console.write("Goodbye!")
                return

            index = try_parse_choice(choice, len(self.categories))
            if index is None:
                self.console.error("Invalid choice!")
                continue

            category = self.categories[index]
            logger.debug(f"Entering {category.name} menu")
            CategoryMenu(category, self.console, self.service, self.config).run()
