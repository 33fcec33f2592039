"""
Display formatting for ChainCalc
Converts between display strings and numbers using the configured decimal separator
"""
import re

import config
from expression import match_token

_DISPLAY_NUMBER = re.compile(r"-?[0-9]+(\.[0-9]*)?")


def parse_number(text, separator=None):
    """Parse a display string into a float

    Only what the display can show is accepted: an optional leading minus,
    digits and at most one separator ("." also works). Raises ValueError
    otherwise.
    """
    if separator is None:
        separator = config.DECIMAL_SEPARATOR
    cleaned = text.strip().replace(separator, ".")
    if not _DISPLAY_NUMBER.fullmatch(cleaned):
        raise ValueError(f"Not a display number: {text!r}")
    return float(cleaned)


def format_number(value, separator=None, max_fraction_digits=None):
    """Format a float for display: no grouping, trailing zeros stripped"""
    if separator is None:
        separator = config.DECIMAL_SEPARATOR
    if max_fraction_digits is None:
        max_fraction_digits = config.MAX_FRACTION_DIGITS

    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "-∞" if value < 0 else "∞"

    text = f"{round(value, max_fraction_digits):.{max_fraction_digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text.replace(".", separator)


def format_expression(expression, separator=None):
    """Render an expression the way it was typed, e.g. "2 + 3 x 4" """
    parts = [
        match_token(
            token,
            lambda value: format_number(value, separator),
            lambda kind: kind.symbol,
        )
        for token in expression
    ]
    return " ".join(parts)
