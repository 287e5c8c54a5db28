"""cssomkit - CSSOM string, URL, and identifier serialization.

Implements the serialization algorithms of the CSS Object Model specification
so arbitrary text can be embedded in generated CSS without breaking out of a
string literal or an identifier token.

Public API:
    serialize_string - Quote and escape text as a CSS string
    serialize_url - Wrap a serialized string in url()
    serialize_identifier - Escape text as a bare CSS identifier
    CSSString, Url, Ident, CustomIdent, DashedIdent - Value types that
        serialize on str()

Submodules:
    cssomkit.serialization - Serializers and escape primitives
    cssomkit.values - Value types
    cssomkit.constants - Literal fragments and code point bounds
    cssomkit.cli - Command-line interface
"""

from .serialization import serialize_identifier, serialize_string, serialize_url
from .values import CSSString, CustomIdent, DashedIdent, Ident, Url

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("cssomkit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# CSSOM conformance
__spec_url__ = "https://drafts.csswg.org/cssom/#common-serializing-idioms"

__all__ = [
    "CSSString",
    "CustomIdent",
    "DashedIdent",
    "Ident",
    "Url",
    "__spec_url__",
    "__version__",
    "serialize_identifier",
    "serialize_string",
    "serialize_url",
]
