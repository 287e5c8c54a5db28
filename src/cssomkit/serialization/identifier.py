"""Serialize an identifier per CSSOM.

Implements "serialize an identifier" from the CSS Object Model specification
(https://drafts.csswg.org/cssom/#serialize-an-identifier).

Each character is handled by the first matching rule:

1. NULL (U+0000): replaced with U+FFFD
2. Control characters (U+0001-U+001F, U+007F): escaped as code point
3. Digit at index 0: escaped as code point
4. Digit at index 1 when index 0 is "-": escaped as code point
5. "-" as the only character: escaped as character
6. Letters, digits, "-", "_", and anything >= U+0080: included as-is
7. Anything else: escaped as character

Rules 3 and 4 keep the token from reading as a number ("3d" -> "\\33 d",
"-1x" -> "-\\31 x"). Rule 5 exists because "-" alone is not an identifier.

Python 3.13+.
"""

from __future__ import annotations

from cssomkit.constants import HYPHEN, REPLACEMENT_CHARACTER

from .escaping import (
    escape_as_character,
    escape_as_code_point,
    is_control,
    is_digit,
    is_identifier_char,
)

__all__ = ["serialize_identifier"]


def serialize_identifier(value: str) -> str:
    """Serialize a string as a bare CSS identifier.

    Pure function, total over every ``str``. An empty value serializes to an
    empty string rather than raising.

    Args:
        value: Raw identifier value

    Returns:
        Escaped identifier, without quotes

    Example:
        >>> serialize_identifier("my-color")
        'my-color'
        >>> serialize_identifier("3d")
        '\\\\33 d'
        >>> serialize_identifier("-")
        '\\\\-'
    """
    if not value:
        return ""

    starts_with_hyphen = value[0] == HYPHEN
    output: list[str] = []

    for index, ch in enumerate(value):
        if ch == "\x00":
            output.append(REPLACEMENT_CHARACTER)
        elif is_control(ch):
            output.append(escape_as_code_point(ch))
        elif is_digit(ch) and (index == 0 or (index == 1 and starts_with_hyphen)):
            output.append(escape_as_code_point(ch))
        elif index == 0 and ch == HYPHEN and len(value) == 1:
            output.append(escape_as_character(ch))
        elif is_identifier_char(ch):
            output.append(ch)
        else:
            output.append(escape_as_character(ch))

    return "".join(output)
