"""Command-line interface for cssomkit.

Serializes text from the shell:

Usage:
    cssomkit string 'Say "Hi"'          # "Say \\"Hi\\""
    cssomkit ident 3d                   # \\33 d
    cssomkit url images/bg.png          # url("images/bg.png")
    cssomkit var primary --fallback red # var(--primary, red)
    cssomkit data-url logo.png --mime-type image/png
    printf 'a\\nb' | cssomkit string -

Exit Codes:
    0   Serialized successfully
    1   Input file could not be read
    2   Usage error

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .serialization import serialize_identifier, serialize_string, serialize_url
from .values import DashedIdent, Url

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

# Text argument value meaning "read from stdin".
_STDIN_MARKER = "-"


def _read_text(text: str) -> str:
    """Resolve a TEXT argument, reading stdin for "-"."""
    if text != _STDIN_MARKER:
        return text
    data = sys.stdin.read()
    return data.removesuffix("\n")


def _cmd_string(args: argparse.Namespace) -> str:
    return serialize_string(_read_text(args.text))


def _cmd_ident(args: argparse.Namespace) -> str:
    return serialize_identifier(_read_text(args.text))


def _cmd_url(args: argparse.Namespace) -> str:
    return serialize_url(_read_text(args.text))


def _cmd_var(args: argparse.Namespace) -> str:
    return DashedIdent(args.name).var(args.fallback)


def _cmd_data_url(args: argparse.Namespace) -> str:
    data = Path(args.path).read_bytes()
    logger.debug("Read %d bytes from %s", len(data), args.path)
    return str(Url.from_bytes(args.mime_type, data))


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per serializer."""
    parser = argparse.ArgumentParser(
        prog="cssomkit",
        description="Serialize strings, URLs, and identifiers per CSSOM.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    for name, handler, help_text in (
        ("string", _cmd_string, "Serialize TEXT as a quoted CSS string"),
        ("ident", _cmd_ident, "Serialize TEXT as a CSS identifier"),
        ("url", _cmd_url, "Serialize TEXT as a url() value"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("text", metavar="TEXT", help="Input text, or - to read stdin")
        sub.set_defaults(handler=handler)

    var = commands.add_parser("var", help="Reference a custom property with var()")
    var.add_argument("name", metavar="NAME", help="Custom property name, with or without --")
    var.add_argument("--fallback", default=None, help="Fallback inserted verbatim")
    var.set_defaults(handler=_cmd_var)

    data_url = commands.add_parser("data-url", help="Embed a file as a data URL")
    data_url.add_argument("path", metavar="PATH", help="File to embed")
    data_url.add_argument("--mime-type", required=True, help="MIME type of the file")
    data_url.set_defaults(handler=_cmd_data_url)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        result = args.handler(args)
    except OSError as e:
        logger.error("Cannot read input: %s", e)
        return 1

    print(result)
    return 0
