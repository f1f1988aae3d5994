"""Integer matrices: generation, multiplication and display."""

from __future__ import annotations

import random as _random
import sys
from dataclasses import dataclass, field
from typing import TextIO

ROW = 5
COL = 5


def _out(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


@dataclass
class Matrix:
    """A rows x cols matrix of integers stored as a list of rows."""

    rows: int
    cols: int
    cells: list[list[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        if not self.cells:
            self.cells = [[0] * self.cols for _ in range(self.rows)]
        if len(self.cells) != self.rows or any(
            len(row) != self.cols for row in self.cells
        ):
            raise ValueError(
                f"cells do not form a {self.rows}x{self.cols} matrix"
            )

    @classmethod
    def generate(
        cls,
        rows: int,
        cols: int,
        mode: int = 0,
        rng: _random.Random | None = None,
    ) -> Matrix:
        """Fill a new matrix: random 1..10 in mode 0, all ones otherwise."""
        rng = rng if rng is not None else _random.Random()
        if mode == 0:
            cells = [
                [1 + rng.randrange(10) for _ in range(cols)]
                for _ in range(rows)
            ]
        else:
            cells = [[1] * cols for _ in range(rows)]
        return cls(rows, cols, cells)

    @classmethod
    def random(
        cls, mode: int = 0, rng: _random.Random | None = None
    ) -> Matrix:
        """Make a matrix of random size 1..4 in mode 0, else mode x mode."""
        rng = rng if rng is not None else _random.Random()
        if mode == 0:
            rows = 1 + rng.randrange(4)
            cols = 1 + rng.randrange(4)
        else:
            rows = cols = mode
        return cls.generate(rows, cols, mode, rng)

    @classmethod
    def by_size(
        cls,
        rows: int,
        cols: int,
        mode: int = 0,
        rng: _random.Random | None = None,
        stream: TextIO | None = None,
    ) -> Matrix:
        """Announce and generate a matrix of the given size."""
        _out(stream).write(
            f"Generate random matrix (RxC) = ({rows}x{cols})\n"
        )
        return cls.generate(rows, cols, mode, rng)

    def multiply(
        self, other: Matrix, stream: TextIO | None = None
    ) -> Matrix | None:
        """Return self times other, or None when the shapes do not fit."""
        if self.cols != other.rows:
            return None
        _out(stream).write(
            f"MULTIPLY ({self.rows} x {self.cols}) "
            f"BY ({other.rows} x {other.cols}):\n"
        )
        columns = list(zip(*other.cells)) if other.rows else [
            () for _ in range(other.cols)
        ]
        cells = [
            [sum(a * b for a, b in zip(row, col)) for col in columns]
            for row in self.cells
        ]
        return Matrix(self.rows, other.cols, cells)

    def total(self) -> int:
        """Return the sum of all elements."""
        return sum(sum(row) for row in self.cells)

    def average(self, stream: TextIO | None = None) -> int:
        """Return the integer mean of the elements, truncated toward zero."""
        total = self.total()
        count = self.rows * self.cols
        _out(stream).write(f"x={total} ele={count}\n")
        if count == 0:
            raise ValueError("cannot average an empty matrix")
        quotient = abs(total) // count
        return quotient if total >= 0 else -quotient

    def render(self) -> str:
        """Return the matrix as text, one bar-delimited line per row."""
        return "".join(
            "|" + " ".join(f"{value:3d}" for value in row) + "|\n"
            for row in self.cells
        )


def display_matrix(
    matrix: Matrix | None, stream: TextIO | None = None
) -> None:
    """Write the rendered matrix to stream, or a notice if there is none."""
    if matrix is None:
        sys.stdout.write("DisplayMatrix: EMPTY matrix\n")
        return
    _out(stream).write(matrix.render())