"""Square matrices of floats with arithmetic, comparison and determinants."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from itertools import chain
from numbers import Real


def _accumulate(values: Iterable[float]) -> float:
    """Add values left to right, one rounding step per addition."""
    total = 0.0
    for value in values:
        total += value
    return total


def _fmod(value: float, divisor: int) -> float:
    return math.fmod(value, divisor) if divisor else math.nan


class SquareMat:
    """A mutable n-by-n matrix of floats.

    Matrices are compared by the sum of their elements, so matrices of
    different sizes can be equal or ordered.
    """

    __hash__ = None  # mutable

    def __init__(self, n: int) -> None:
        if n <= 0:
            raise ValueError("Matrix size must be positive non-zero")
        self._n = n
        self._rows = [[0.0] * n for _ in range(n)]

    @property
    def n(self) -> int:
        """The number of rows (and columns)."""
        return self._n

    # Construction helpers

    @classmethod
    def _from_rows(cls, rows: list[list[float]]) -> SquareMat:
        result = cls(len(rows))
        result._rows = rows
        return result

    @classmethod
    def diagonal(cls, n: int, value: float) -> SquareMat:
        """Return an n-by-n matrix with ``value`` on the diagonal, zero elsewhere."""
        result = cls(n)
        for i, row in enumerate(result._rows):
            row[i] = float(value)
        return result

    @classmethod
    def identity(cls, n: int) -> SquareMat:
        """Return the n-by-n identity matrix."""
        return cls.diagonal(n, 1.0)

    def copy(self) -> SquareMat:
        """Return an independent copy of this matrix."""
        return self._from_rows([list(row) for row in self._rows])

    # Internal element-wise helpers

    def _check_size(self, other: SquareMat) -> None:
        if self._n != other._n:
            raise ValueError("Matrix size mismatch")

    def _map(self, func: Callable[[float], float]) -> SquareMat:
        return self._from_rows([[func(x) for x in row] for row in self._rows])

    def _combine(self, other: SquareMat, func: Callable[[float, float], float]) -> SquareMat:
        self._check_size(other)
        return self._from_rows(
            [
                [func(x, y) for x, y in zip(row, other_row)]
                for row, other_row in zip(self._rows, other._rows)
            ]
        )

    def _minor(self, row: int, col: int) -> SquareMat:
        return self._from_rows(
            [
                [x for j, x in enumerate(r) if j != col]
                for i, r in enumerate(self._rows)
                if i != row
            ]
        )

    # Scalar results

    def det(self) -> float:
        """Return the determinant by cofactor expansion along the first row."""
        rows = self._rows
        if self._n == 1:
            return rows[0][0]
        if self._n == 2:
            return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
        if self == SquareMat.identity(self._n):
            return 1.0
        total = 0.0
        sign = 1
        for col, element in enumerate(rows[0]):
            if element != 0:
                total += sign * element * self._minor(0, col).det()
            sign = -sign
        return total

    def sum(self) -> float:
        """Return the sum of all elements."""
        return _accumulate(chain.from_iterable(self._rows))

    # In-place value setting

    def fill(self, value: float) -> SquareMat:
        """Set every element to ``value`` and return this matrix."""
        for row in self._rows:
            row[:] = [float(value)] * self._n
        return self

    def assign(self, other: SquareMat) -> SquareMat:
        """Copy the elements of a same-sized matrix into this one."""
        self._check_size(other)
        if other is not self:
            for row, other_row in zip(self._rows, other._rows):
                row[:] = other_row
        return self

    def increment(self) -> SquareMat:
        """Add one to every element in place and return this matrix."""
        for row in self._rows:
            row[:] = [x + 1 for x in row]
        return self

    def decrement(self) -> SquareMat:
        """Subtract one from every element in place and return this matrix."""
        for row in self._rows:
            row[:] = [x - 1 for x in row]
        return self

    def transpose(self) -> SquareMat:
        """Return the transposed matrix."""
        return self._from_rows([list(col) for col in zip(*self._rows)])

    # Element access

    def __getitem__(self, i: int) -> list[float]:
        return self._rows[i]

    # Arithmetic

    def __add__(self, other: object) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._combine(other, lambda x, y: x + y)

    def __sub__(self, other: object) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self._combine(other, lambda x, y: x - y)

    def __mul__(self, other: object) -> SquareMat:
        if isinstance(other, SquareMat):
            self._check_size(other)
            columns = list(zip(*other._rows))
            return self._from_rows(
                [
                    [_accumulate(x * y for x, y in zip(row, col)) for col in columns]
                    for row in self._rows
                ]
            )
        if isinstance(other, Real):
            return self._map(lambda x: x * other)
        return NotImplemented

    def __rmul__(self, scalar: object) -> SquareMat:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self * scalar

    def __mod__(self, other: object) -> SquareMat:
        """Element-wise product with a matrix, or element-wise fmod by an integer."""
        if isinstance(other, SquareMat):
            return self._combine(other, lambda x, y: x * y)
        if isinstance(other, Real):
            divisor = int(other)
            return self._map(lambda x: _fmod(x, divisor))
        return NotImplemented

    def __truediv__(self, scalar: object) -> SquareMat:
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Division by zero")
        return self._map(lambda x: x / scalar)

    def __pow__(self, exp: int) -> SquareMat:
        if exp < 0:
            raise ValueError("Negative exponent not supported")
        if exp == 1:
            return self.copy()
        result = SquareMat.identity(self._n)
        for _ in range(exp):
            result = result * self
        return result

    def __xor__(self, exp: int) -> SquareMat:
        return self ** exp

    # In-place arithmetic

    def __imul__(self, other: object) -> SquareMat:
        result = self.__mul__(other)
        if result is NotImplemented:
            return NotImplemented
        return self.assign(result)

    def __imod__(self, other: object) -> SquareMat:
        if isinstance(other, Real) and not isinstance(other, SquareMat) and int(other) == 0:
            raise ZeroDivisionError("Division by zero")
        result = self.__mod__(other)
        if result is NotImplemented:
            return NotImplemented
        return self.assign(result)

    def __itruediv__(self, scalar: object) -> SquareMat:
        result = self.__truediv__(scalar)
        if result is NotImplemented:
            return NotImplemented
        return self.assign(result)

    # Unary operators

    def __neg__(self) -> SquareMat:
        return self._map(lambda x: -x)

    def __invert__(self) -> SquareMat:
        return self.transpose()

    # Comparison by element sum

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.sum() == other.sum()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.sum() < other.sum()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self < other or self == other

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return other < self

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SquareMat):
            return NotImplemented
        return not self < other

    # Text

    def __str__(self) -> str:
        return "".join(
            "".join(f"{x:g}\t" for x in row) + "\n" for row in self._rows
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._rows!r})"