"""
Lenient parsing of user-entered numbers.

Interactive input is expected to be malformed now and then, so these
helpers report failure as None instead of raising.
"""

import math


def try_parse_float(text: str | None) -> float | None:
    """
    Parse text as a finite float.

    Surrounding whitespace and thousands separators ("1,250.5") are
    accepted. Blank, non-numeric, NaN and infinite input give None.

    Example:
        >>> try_parse_float(" 12.5 ")
        12.5
        >>> try_parse_float("twelve") is None
        True
    """
    if text is None:
        return None

    cleaned = text.strip().replace(",", "")
    if not cleaned:
        return None

    try:
        value = float(cleaned)
    except ValueError:
        return None

    if not math.isfinite(value):
        return None
    return value


def try_parse_choice(text: str | None, count: int) -> int | None:
    """
    Parse a 1-based menu choice and return its 0-based index.

    Returns None unless text is an integer between 1 and count.
    """
    if text is None:
        return None
    cleaned = text.strip()
    if not cleaned.isdigit():
        return None
    choice = int(cleaned)
    if 1 <= choice <= count:
        return choice - 1
    return None
