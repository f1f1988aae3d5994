"""Run settings and their parsing from command-line arguments."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

NUMWORK = 1
"""Default number of producer threads (and of consumer threads)."""

MAX = 200
"""Default size of the bounded buffer."""

LOOPS = 1200
"""Default number of matrices to produce and consume."""

DEFAULT_MATRIX_MODE = 0
"""Mode 0 makes random matrices; mode n > 0 makes n x n matrices of ones."""


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way: garbage yields 0."""
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = ""
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch
    return sign * int(digits) if digits else 0


@dataclass(frozen=True)
class Settings:
    """How many workers to start, the buffer size, matrix count and mode."""

    workers: int = NUMWORK
    buffer_size: int = MAX
    matrices: int = LOOPS
    mode: int = DEFAULT_MATRIX_MODE

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> Settings:
        """Build settings from positional arguments, defaulting missing ones.

        The arguments, all optional and in order, are: worker threads,
        buffer size, number of matrices and matrix mode.
        """
        if len(argv) > 4:
            raise ValueError(
                f"expected at most 4 arguments, got {len(argv)}"
            )
        fields = ("workers", "buffer_size", "matrices", "mode")
        values = {name: _atoi(arg) for name, arg in zip(fields, argv)}
        return cls(**values)

    def describe(self, defaults_used: bool) -> str:
        """Return the one-line summary of the settings in use."""
        prefix = "USING DEFAULTS" if defaults_used else "USING"
        return (
            f"{prefix}: worker_threads={self.workers} "
            f"bounded_buffer_size={self.buffer_size} "
            f"matricies={self.matrices} matrix_mode={self.mode}"
        )