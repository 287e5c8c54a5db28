"""Shared constants for cssomkit.

This module provides the literal fragments and code point bounds used across
the serialization and value packages. Placing them here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Escaping: characters emitted by the escape primitives
- Classification: code point bounds consulted by the serializers
- Composition: literal fragments wrapped around serialized text

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Escaping
    "ESCAPE",
    "CODE_POINT_ESCAPE_TERMINATOR",
    "REPLACEMENT_CHARACTER",
    "STRING_QUOTE",
    "HYPHEN",
    # Classification
    "C0_CONTROL_FIRST",
    "C0_CONTROL_LAST",
    "DELETE",
    "NON_ASCII_FIRST",
    # Composition
    "URL_PREFIX",
    "FUNCTION_CLOSE",
    "CUSTOM_PROPERTY_PREFIX",
    "VAR_PREFIX",
    "VAR_FALLBACK_SEPARATOR",
    "DATA_URL_SCHEME",
    "DATA_URL_BASE64_MARKER",
]

# ============================================================================
# ESCAPING
# ============================================================================

# Every escape sequence starts with a reverse solidus.
ESCAPE: str = "\\"

# Terminates a code point escape so that a following hex digit or space in
# the input is not read as part of the escape.
CODE_POINT_ESCAPE_TERMINATOR: str = " "

# Substituted for U+0000 by both serializers.
REPLACEMENT_CHARACTER: str = "\ufffd"

# Strings always serialize with double quotes. U+0027 is never escaped.
STRING_QUOTE: str = '"'

# Position-sensitive in identifiers: alone, or directly before a digit.
HYPHEN: str = "-"

# ============================================================================
# CLASSIFICATION
# ============================================================================

C0_CONTROL_FIRST: int = 0x0001
C0_CONTROL_LAST: int = 0x001F
DELETE: int = 0x007F
NON_ASCII_FIRST: int = 0x0080

# ============================================================================
# COMPOSITION
# ============================================================================

URL_PREFIX: str = "url("
FUNCTION_CLOSE: str = ")"
CUSTOM_PROPERTY_PREFIX: str = "--"
VAR_PREFIX: str = "var("
VAR_FALLBACK_SEPARATOR: str = ", "
DATA_URL_SCHEME: str = "data:"
DATA_URL_BASE64_MARKER: str = ";base64,"
