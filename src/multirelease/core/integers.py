"""
Strict integer parsing.

Values handed to the JVM tools are 32-bit signed decimal integers with an
optional ASCII sign. Digits may be any Unicode decimal digit, as the JVM
accepts them too ("١٧" is 17). Python's ``int()`` is otherwise more lenient
(surrounding whitespace, underscores, unbounded size), so it is guarded
here.
"""

import re

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def parse_int(text: str) -> int:
    """
    Parse a 32-bit signed decimal integer.

    Args:
        text: Decimal digits with an optional leading sign

    Returns:
        The parsed value

    Raises:
        ValueError: If text is not a decimal integer or is out of range
    """
    if text is None or not _INTEGER_PATTERN.fullmatch(text):
        raise ValueError(f"For input string: {text!r}")
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"Value out of range for input string: {text!r}")
    return value
