"""Kara ScanAccumulator — opt-in profiling for scanning.

This module provides accumulated metrics during scanning:
- Total scan time
- Source length
- Token and error counts

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from kara import tokenize
    from kara.profiling import profiled_scan

    with profiled_scan() as metrics:
        tokens = tokenize("let x = 5;")

    print(metrics.summary())
    # {"total_ms": 0.1, "source_length": 10, "token_count": 6, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics during scanning.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of sources scanned.
        token_count: Tokens produced, EOF included.
        error_count: Error tokens produced.
        scan_calls: Number of scans recorded.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    token_count: int = 0
    error_count: int = 0
    scan_calls: int = 0

    def record_scan(self, source_length: int, token_count: int, error_count: int) -> None:
        """Record one completed scan."""
        self.scan_calls += 1
        self.source_length += source_length
        self.token_count += token_count
        self.error_count += error_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with total_ms, source_length, token_count, error_count, scan_calls.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "token_count": self.token_count,
            "error_count": self.error_count,
            "scan_calls": self.scan_calls,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator populated by tokenize() calls.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
