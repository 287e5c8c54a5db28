#!/usr/bin/env python3
"""Stability Fuzzer (Atheris).

Feeds random Unicode to both serializers and the value types. The contract
is stricter than a parser's: serialization is total, so ANY exception is a
finding. Output invariants (quoting, no raw NULL, no leading digit) are
checked on every input.

Usage:
    python fuzz/stability.py
    python fuzz/stability.py -max_total_time=60
"""

from __future__ import annotations

import atexit
import json
import logging
import re
import sys

# Crash-proof reporting: ensure summary is always emitted
_fuzz_stats: dict[str, int | str] = {"status": "incomplete", "iterations": 0, "findings": 0}


def _emit_final_report() -> None:
    """Emit JSON summary on exit (crash-proof reporting)."""
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)


atexit.register(_emit_final_report)

try:
    import atheris
except ImportError:
    print("-" * 80, file=sys.stderr)
    print("ERROR: 'atheris' not found.", file=sys.stderr)
    print("Install the fuzz extra: pip install -e '.[fuzz]'", file=sys.stderr)
    print("On macOS, install LLVM first: brew install llvm", file=sys.stderr)
    print("-" * 80, file=sys.stderr)
    sys.exit(1)

# Suppress value-type debug logging during fuzzing
logging.getLogger("cssomkit").setLevel(logging.CRITICAL)

with atheris.instrument_imports():
    from cssomkit import DashedIdent, Url
    from cssomkit.serialization import serialize_identifier, serialize_string

_LEADING_NUMERIC = re.compile(r"-?[0-9]")


class UnexpectedCrash(Exception):  # noqa: N818 - Domain-specific name
    """Raised when serialization raises or breaks an output invariant."""


def _check_invariants(source: str) -> None:
    """Serialize source every way and assert the output contracts."""
    quoted = serialize_string(source)
    if not (quoted.startswith('"') and quoted.endswith('"')) or "\x00" in quoted:
        msg = f"string serialization broke quoting: {quoted!r}"
        raise AssertionError(msg)

    ident = serialize_identifier(source)
    if ident == "-" or _LEADING_NUMERIC.match(ident) or "\x00" in ident:
        msg = f"identifier serialization left ambiguous output: {ident!r}"
        raise AssertionError(msg)

    str(Url(source))
    DashedIdent(source).var(source)


def TestOneInput(data: bytes) -> None:  # noqa: N802 - Atheris required name
    """Atheris entry point: serialize fuzzed input and detect any failure."""
    global _fuzz_stats  # noqa: PLW0602 - Required for crash-proof reporting

    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)
    source = fdp.ConsumeUnicodeNoSurrogates(len(data))

    try:
        _check_invariants(source)
    except Exception as e:
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        _fuzz_stats["status"] = "finding"

        print()
        print("=" * 80)
        print("[FINDING] SERIALIZATION CONTRACT BREACH")
        print("=" * 80)
        print(f"Exception: {type(e).__name__}: {e}")
        print(f"Input: {source!r}")
        print()
        print("Next steps:")
        print("  1. Add the input as a literal case in tests/test_serialization_*.py")
        print("  2. Fix the serializer, run tests to confirm")
        print("=" * 80)
        msg = f"{type(e).__name__}: {e}"
        raise UnexpectedCrash(msg) from e


def main() -> None:
    """Run the stability fuzzer."""
    print()
    print("=" * 80)
    print("Stability Fuzzer")
    print("=" * 80)
    print("Target: serialize_string, serialize_identifier, Url, DashedIdent")
    print("Contract: No exceptions, output invariants hold")
    print("Press Ctrl+C to stop.")
    print("=" * 80)
    print()

    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
