"""
Console I/O helpers: boxed headers, menus and result panels.

All output goes to one stream and all input comes from one callable, so
menus can be driven by scripted input in tests.
"""

import sys
from typing import Callable, Sequence, TextIO


class Console:
    """
    Text console with box-drawing helpers.

    Args:
        input_fn: Callable taking a prompt and returning a line; may raise
            EOFError when input is exhausted (default: built-in input)
        stream: Output stream (default: sys.stdout)
    """

    WIDTH = 60

    def __init__(
        self,
        input_fn: Callable[[str], str] | None = None,
        stream: TextIO | None = None,
    ):
        self._input = input_fn if input_fn is not None else input
        self.stream = stream if stream is not None else sys.stdout

    def write(self, text: str = "") -> None:
        print(text, file=self.stream)

    def prompt(self, label: str) -> str | None:
        """Ask for a line of input; None when input is closed."""
        try:
            return self._input(f"{label}: ")
        except EOFError:
            return None

    # -------------------------------------------------------------------------
    # Boxes
    # -------------------------------------------------------------------------

    def _inner(self) -> int:
        return self.WIDTH - 2

    def header(self, title: str) -> None:
        border = "═" * self._inner()
        self.write(f"╔{border}╗")
        self.write(f"║{title.center(self._inner())}║")
        self.write(f"╚{border}╝")
        self.write()

    def attributed_header(self, title: str, example: str) -> None:
        border = "═" * self._inner()
        self.write(f"╔{border}╗")
        self.write(f"║{title.center(self._inner())}║")
        self.write(f"╠{border}╣")
        self.write(f"║  Example: {example:<{self._inner() - 11}}║")
        self.write(f"╚{border}╝")
        self.write()

    def menu(self, options: Sequence[str]) -> None:
        border = "─" * self._inner()
        self.write(f"┌{border}┐")
        for option in options:
            self.write(f"│  {option:<{self._inner() - 3}} │")
        self.write(f"└{border}┘")

    def result_box(self, title: str, lines: Sequence[str]) -> None:
        border = "═" * self._inner()
        self.write(f"╔{border}╗")
        self.write(f"║{title.center(self._inner())}║")
        self.write(f"╠{border}╣")
        for line in lines:
            self.write(f"║  {line:<{self._inner() - 3}} ║")
        self.write(f"╚{border}╝")

    # -------------------------------------------------------------------------
    # Messages
    # -------------------------------------------------------------------------

    def error(self, message: str) -> None:
        self.write(f"✗ {message}")

    def success(self, message: str) -> None:
        self.write(f"✓ {message}")

    def info(self, message: str) -> None:
        self.write(f"  {message}")
