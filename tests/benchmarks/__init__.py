"""Performance benchmarks for cssomkit.

Benchmarks use pytest-benchmark to measure and track performance of the
serializers and value types. Output grows linearly with input, so these
guard against quadratic accumulation on escape-heavy input.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
