"""Row-major 4x4 matrix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

SIZE = 4

Row = tuple[float, float, float, float]


@dataclass(frozen=True)
class Matrix4x4:
    """Immutable 4x4 matrix stored as a tuple of four rows."""

    m: tuple[Row, Row, Row, Row]

    def __init__(self, rows: Iterable[Iterable[float]]) -> None:
        values = tuple(tuple(float(v) for v in row) for row in rows)
        if len(values) != SIZE or any(len(row) != SIZE for row in values):
            raise ValueError("a Matrix4x4 needs exactly four rows of four values")
        object.__setattr__(self, "m", values)

    @classmethod
    def identity(cls) -> Matrix4x4:
        """The identity matrix."""
        return cls(
            tuple(1.0 if i == j else 0.0 for j in range(SIZE)) for i in range(SIZE)
        )

    @classmethod
    def zero(cls) -> Matrix4x4:
        """The all-zero matrix."""
        return cls((0.0,) * SIZE for _ in range(SIZE))

    def __getitem__(self, index: int) -> Row:
        return self.m[index]

    def __iter__(self) -> Iterator[Row]:
        return iter(self.m)

    def __add__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4(
            (a + b for a, b in zip(ra, rb)) for ra, rb in zip(self.m, other.m)
        )

    def __sub__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return Matrix4x4(
            (a - b for a, b in zip(ra, rb)) for ra, rb in zip(self.m, other.m)
        )

    def __mul__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        columns = list(zip(*other.m))
        return Matrix4x4(
            (sum(a * b for a, b in zip(row, col)) for col in columns)
            for row in self.m
        )

    def __neg__(self) -> Matrix4x4:
        return Matrix4x4((-v for v in row) for row in self.m)

    def transpose(self) -> Matrix4x4:
        """Swap rows and columns."""
        return Matrix4x4(zip(*self.m))

    def inverse(self) -> Matrix4x4:
        """Inverse by Gauss-Jordan elimination with partial pivoting.

        Raises ValueError if the matrix is singular.
        """
        rows = [
            list(row) + [1.0 if i == j else 0.0 for j in range(SIZE)]
            for i, row in enumerate(self.m)
        ]
        for k in range(SIZE):
            pivot = max(range(k, SIZE), key=lambda i: abs(rows[i][k]))
            if rows[pivot][k] == 0.0:
                raise ValueError("matrix is singular and has no inverse")
            rows[k], rows[pivot] = rows[pivot], rows[k]
            scale = 1.0 / rows[k][k]
            rows[k] = [v * scale for v in rows[k]]
            for i, row in enumerate(rows):
                if i == k:
                    continue
                factor = row[k]
                rows[i] = [a - factor * b for a, b in zip(row, rows[k])]
        return Matrix4x4(row[SIZE:] for row in rows)