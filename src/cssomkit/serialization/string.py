"""Serialize a string per CSSOM.

Implements "serialize a string" and "serialize a URL" from the CSS Object
Model specification (https://drafts.csswg.org/cssom/#serialize-a-string).

The string is wrapped in double quotes and each character is handled by the
first matching rule:

1. NULL (U+0000): replaced with U+FFFD
2. Control characters (U+0001-U+001F, U+007F): escaped as code point
3. Double quote (U+0022): escaped as character
4. Backslash (U+005C): escaped as character
5. Anything else, including U+0027: included as-is

Python 3.13+.
"""

from __future__ import annotations

from cssomkit.constants import (
    ESCAPE,
    FUNCTION_CLOSE,
    REPLACEMENT_CHARACTER,
    STRING_QUOTE,
    URL_PREFIX,
)

from .escaping import escape_as_character, escape_as_code_point, is_control

__all__ = ["serialize_string", "serialize_url"]


def serialize_string(value: str) -> str:
    """Serialize a string as a double-quoted CSS string literal.

    Pure function, total over every ``str``.

    Args:
        value: Raw string value

    Returns:
        Quoted and escaped CSS string

    Example:
        >>> serialize_string('Say "Hi"')
        '"Say \\\\"Hi\\\\""'
        >>> serialize_string("")
        '""'
    """
    output: list[str] = [STRING_QUOTE]

    for ch in value:
        if ch == "\x00":
            output.append(REPLACEMENT_CHARACTER)
        elif is_control(ch):
            output.append(escape_as_code_point(ch))
        elif ch in (STRING_QUOTE, ESCAPE):
            output.append(escape_as_character(ch))
        else:
            output.append(ch)

    output.append(STRING_QUOTE)
    return "".join(output)


def serialize_url(value: str) -> str:
    """Serialize a URL as ``url(`` + serialized string + ``)``.

    Example:
        >>> serialize_url("images/bg.png")
        'url("images/bg.png")'
    """
    return f"{URL_PREFIX}{serialize_string(value)}{FUNCTION_CLOSE}"
