"""Small string helpers: ASCII case mapping, trimming and number parsing."""

from __future__ import annotations

import locale
import re
import string

_WHITESPACE = " \t\n\r\f\v"
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

_NUMBER_PATTERNS = {
    10: re.compile(r"[+-]?[0-9]+"),
    16: re.compile(r"[+-]?(?:0[xX](?=[0-9a-fA-F]))?[0-9a-fA-F]+"),
    8: re.compile(r"[+-]?[0-7]+"),
}


def lowercase(s: str) -> str:
    """Lowercase the ASCII letters of s, leaving other characters alone."""
    return s.translate(_TO_LOWER)


def uppercase(s: str) -> str:
    """Uppercase the ASCII letters of s, leaving other characters alone."""
    return s.translate(_TO_UPPER)


def rtrim(s: str) -> str:
    """Strip whitespace from the right of s."""
    return s.rstrip(_WHITESPACE)


def ltrim(s: str) -> str:
    """Strip whitespace from the left of s."""
    return s.lstrip(_WHITESPACE)


def trim(s: str) -> str:
    """Strip whitespace from both ends of s."""
    return ltrim(rtrim(s))


def comma(value: int | float) -> str:
    """Format a number with the digit grouping of the user's locale."""
    saved = locale.setlocale(locale.LC_NUMERIC)
    try:
        try:
            locale.setlocale(locale.LC_NUMERIC, "")
        except locale.Error:
            pass
        pattern = "%.6f" if isinstance(value, float) else "%d"
        return locale.format_string(pattern, value, grouping=True)
    finally:
        locale.setlocale(locale.LC_NUMERIC, saved)


def from_string(s: str, base: int = 10) -> int:
    """Parse the leading integer of s in base 8, 10 or 16; 0 if there is none."""
    pattern = _NUMBER_PATTERNS.get(base)
    if pattern is None:
        raise ValueError(f"unsupported base {base}")
    match = pattern.match(ltrim(s))
    if match is None:
        return 0
    return int(match.group(0), base)