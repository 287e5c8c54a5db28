"""CSSOM serialization algorithms.

Provides the string, URL, and identifier serializers together with the
escape primitives they share. Separate from the value types so callers can
serialize plain strings without constructing wrappers.

Python 3.13+.
"""

from .escaping import escape_as_character, escape_as_code_point
from .identifier import serialize_identifier
from .string import serialize_string, serialize_url

__all__ = [
    "escape_as_character",
    "escape_as_code_point",
    "serialize_identifier",
    "serialize_string",
    "serialize_url",
]
