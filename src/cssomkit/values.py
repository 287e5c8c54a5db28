"""CSS value types that serialize themselves per CSSOM.

Defines the wrapper types callers interpolate into CSS text:
    - CSSString: Quoted string (content, font-family, quotes)
    - Url: url() reference, including data URLs
    - Ident: Bare identifier (keywords, property names)
    - CustomIdent: Author-defined identifier (animation-name, grid-area)
    - DashedIdent: Custom property name (--name) with var() helper

Each type stores the raw value and serializes on str(). All are frozen,
so equality and hashing follow the raw value and the concrete type:
Ident("a") != CustomIdent("a").

Python 3.13+.
"""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import ClassVar

from .constants import (
    CUSTOM_PROPERTY_PREFIX,
    DATA_URL_BASE64_MARKER,
    DATA_URL_SCHEME,
    FUNCTION_CLOSE,
    VAR_FALLBACK_SEPARATOR,
    VAR_PREFIX,
)
from .serialization import serialize_identifier, serialize_string, serialize_url

__all__ = [
    "CSSString",
    "CustomIdent",
    "DashedIdent",
    "Ident",
    "Url",
]

logger = logging.getLogger(__name__)


def _require_str(value: object, type_name: str) -> None:
    """Reject non-str values at construction time."""
    if not isinstance(value, str):
        msg = f"{type_name} value must be str, got {type(value).__name__}"
        raise TypeError(msg)


@dataclass(frozen=True, slots=True)
class CSSString:
    """CSS string value, serialized with double quotes.

    Example:
        >>> str(CSSString("Hello, world!"))
        '"Hello, world!"'
        >>> str(CSSString("Line 1\\nLine 2"))
        '"Line 1\\\\a Line 2"'
    """

    EMPTY: ClassVar[CSSString]

    value: str

    def __post_init__(self) -> None:
        _require_str(self.value, "CSSString")

    def __str__(self) -> str:
        return serialize_string(self.value)


CSSString.EMPTY = CSSString("")


@dataclass(frozen=True, slots=True)
class Url:
    """CSS URL value, serialized as ``url("...")``.

    The raw value goes through string serialization, so spaces, parentheses
    and single quotes stay literal while double quotes, backslashes and
    control characters are escaped.

    Example:
        >>> str(Url("images/background.png"))
        'url("images/background.png")'
        >>> str(Url.data_url("image/png", "iVBORw0KGgo="))
        'url("data:image/png;base64,iVBORw0KGgo=")'
    """

    value: str

    def __post_init__(self) -> None:
        _require_str(self.value, "Url")

    def __str__(self) -> str:
        return serialize_url(self.value)

    @classmethod
    def data_url(cls, mime_type: str, base64_data: str) -> Url:
        """Create a data URL from an already Base64-encoded payload.

        Args:
            mime_type: MIME type of the embedded resource
            base64_data: Base64-encoded payload, inserted as-is

        Returns:
            Url whose raw value is ``data:<mime_type>;base64,<base64_data>``
        """
        logger.debug("Building data URL: %s (%d payload chars)", mime_type, len(base64_data))
        return cls(f"{DATA_URL_SCHEME}{mime_type}{DATA_URL_BASE64_MARKER}{base64_data}")

    @classmethod
    def from_bytes(cls, mime_type: str, data: bytes | bytearray | memoryview) -> Url:
        """Create a data URL by Base64-encoding raw bytes.

        Uses the standard alphabet with padding.

        Raises:
            TypeError: If data is not bytes-like
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            msg = f"data must be bytes-like, got {type(data).__name__}"
            raise TypeError(msg)
        return cls.data_url(mime_type, base64.b64encode(data).decode("ascii"))


@dataclass(frozen=True, slots=True)
class Ident:
    """CSS identifier, serialized without quotes.

    Identifiers are case-sensitive. Leading digits, a digit after a leading
    hyphen, a lone hyphen, and ASCII punctuation are escaped.

    Example:
        >>> str(Ident("block"))
        'block'
        >>> str(Ident("3d"))
        '\\\\33 d'
    """

    value: str

    def __post_init__(self) -> None:
        _require_str(self.value, "Ident")

    def __str__(self) -> str:
        return serialize_identifier(self.value)


@dataclass(frozen=True, slots=True)
class CustomIdent:
    """Author-defined identifier such as an animation or grid area name.

    Serializes exactly like Ident but is a distinct type.
    """

    value: str

    def __post_init__(self) -> None:
        _require_str(self.value, "CustomIdent")

    def __str__(self) -> str:
        return serialize_identifier(self.value)


@dataclass(frozen=True, slots=True)
class DashedIdent:
    """Custom property name, serialized with a ``--`` prefix.

    One leading ``--`` is stripped on construction, so ``DashedIdent("x")``
    and ``DashedIdent("--x")`` are equal and both serialize to ``--x``.
    A single leading hyphen is part of the name: ``DashedIdent("-x")``
    serializes to ``---x``.

    Attributes:
        value: Name without the ``--`` prefix

    Example:
        >>> str(DashedIdent("primary-color"))
        '--primary-color'
        >>> DashedIdent("--primary-color").var(fallback="blue")
        'var(--primary-color, blue)'
    """

    value: str

    def __post_init__(self) -> None:
        """Strip one leading ``--`` from the stored name."""
        _require_str(self.value, "DashedIdent")
        if self.value.startswith(CUSTOM_PROPERTY_PREFIX):
            stripped = self.value.removeprefix(CUSTOM_PROPERTY_PREFIX)
            logger.debug("Stripped custom property prefix: %r -> %r", self.value, stripped)
            object.__setattr__(self, "value", stripped)

    def __str__(self) -> str:
        return CUSTOM_PROPERTY_PREFIX + serialize_identifier(self.value)

    def var(self, fallback: object | None = None) -> str:
        """Reference this custom property with ``var()``.

        Args:
            fallback: Optional fallback, inserted verbatim via str(). Pass
                another var() result to chain custom properties. An empty
                string still emits the separator.

        Returns:
            ``var(--name)`` or ``var(--name, fallback)``

        Example:
            >>> DashedIdent("a").var(DashedIdent("b").var("c"))
            'var(--a, var(--b, c))'
        """
        if fallback is None:
            return f"{VAR_PREFIX}{self}{FUNCTION_CLOSE}"
        return f"{VAR_PREFIX}{self}{VAR_FALLBACK_SEPARATOR}{fallback}{FUNCTION_CLOSE}"
