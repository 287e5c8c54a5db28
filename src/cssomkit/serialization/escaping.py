"""Escape primitives and character classification for CSSOM serialization.

This module provides the single source of truth for the escaping rules shared
by the string and identifier serializers:

    Escape as code point:
        \\ + lowercase hex (minimum digits) + space
        U+0001 -> "\\1 ", U+001F -> "\\1f ", U+007F -> "\\7f "

    Escape as character:
        \\ + the character itself
        '"' -> '\\"', '!' -> '\\!'

All functions take a single character (one Unicode scalar value). Python
``str`` elements are code points, so iterating a ``str`` never splits an
encoded scalar and never groups a grapheme cluster.

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.

Python 3.13+.
"""

from __future__ import annotations

from cssomkit.constants import (
    C0_CONTROL_FIRST,
    C0_CONTROL_LAST,
    CODE_POINT_ESCAPE_TERMINATOR,
    DELETE,
    ESCAPE,
    NON_ASCII_FIRST,
)

__all__ = [
    "escape_as_character",
    "escape_as_code_point",
    "is_control",
    "is_digit",
    "is_identifier_char",
]


def escape_as_code_point(ch: str) -> str:
    """Escape a character as a code point.

    Args:
        ch: Single character to escape

    Returns:
        Reverse solidus, the code point in lowercase hexadecimal with no
        leading zeros, and a single terminating space

    Example:
        >>> escape_as_code_point("\\n")
        '\\\\a '
        >>> escape_as_code_point("3")
        '\\\\33 '
        >>> escape_as_code_point("\\x00")
        '\\\\0 '
    """
    return f"{ESCAPE}{ord(ch):x}{CODE_POINT_ESCAPE_TERMINATOR}"


def escape_as_character(ch: str) -> str:
    """Escape a character as itself, prefixed with a reverse solidus."""
    return ESCAPE + ch


def is_control(ch: str) -> bool:
    """Check if character is in U+0001-U+001F or is U+007F.

    U+0000 is deliberately excluded: both serializers replace it with
    U+FFFD before this check is reached.
    """
    cp = ord(ch)
    return C0_CONTROL_FIRST <= cp <= C0_CONTROL_LAST or cp == DELETE


def is_digit(ch: str) -> bool:
    """Check if character is an ASCII digit (U+0030-U+0039).

    Unlike str.isdigit(), this rejects non-ASCII digits such as '٣' or '²',
    which pass through identifiers unescaped.
    """
    return "0" <= ch <= "9"


def is_identifier_char(ch: str) -> bool:
    """Check if character may appear unescaped in a serialized identifier.

    Valid characters are:
    - ASCII letters (A-Z, a-z)
    - ASCII digits (0-9), subject to the positional rules of the caller
    - Hyphen (U+002D) and underscore (U+005F)
    - Anything at or above U+0080

    Args:
        ch: Single character to check

    Returns:
        True if the character needs no escaping on its own

    Example:
        >>> is_identifier_char("a")
        True
        >>> is_identifier_char("_")
        True
        >>> is_identifier_char("é")
        True
        >>> is_identifier_char("!")
        False
    """
    if ord(ch) >= NON_ASCII_FIRST:
        return True
    return ch.isalnum() or ch in "-_"
