"""
Gaussian Integer Arithmetic

Elements are a + b*i with integer a, b. The ring has roots of unity of
order 1, 2 and 4 only (1, -1, i), so transforms over it stop at length 4.

Division is exact-or-raise: a / b is computed as a * conj(b) / |b|^2 and
fails with DivisionError whenever the quotient has non-integral parts.
"""

from __future__ import annotations
from typing import Tuple

from .errors import DivisionError
from .field import Field


class GaussianInteger:
    """Complex integer re + im*i."""

    __slots__ = ('re', 'im')

    def __init__(self, re: int = 0, im: int = 0):
        self.re = re
        self.im = im

    @staticmethod
    def _lift(other):
        if isinstance(other, GaussianInteger):
            return other
        if isinstance(other, int):
            return GaussianInteger(other, 0)
        return NotImplemented

    # =========================================================================
    # Arithmetic Operations
    # =========================================================================

    def __add__(self, other) -> GaussianInteger:
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        return GaussianInteger(self.re + other.re, self.im + other.im)

    __radd__ = __add__

    def __sub__(self, other) -> GaussianInteger:
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        return GaussianInteger(self.re - other.re, self.im - other.im)

    def __rsub__(self, other) -> GaussianInteger:
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        return other - self

    def __mul__(self, other) -> GaussianInteger:
        # (a + bi)(c + di) = (ac - bd) + (ad + bc)i
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        a, b = self.re, self.im
        c, d = other.re, other.im
        return GaussianInteger(a * c - b * d, a * d + b * c)

    __rmul__ = __mul__

    def __truediv__(self, other) -> GaussianInteger:
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        norm = other.norm()
        if norm == 0:
            raise DivisionError(f"Cannot divide {self} by zero")
        num = self * other.conjugate()
        if num.re % norm or num.im % norm:
            raise DivisionError(f"{self} / {other} is not a Gaussian integer")
        return GaussianInteger(num.re // norm, num.im // norm)

    def __rtruediv__(self, other) -> GaussianInteger:
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        return other / self

    def __neg__(self) -> GaussianInteger:
        return GaussianInteger(-self.re, -self.im)

    def __pow__(self, exp: int) -> GaussianInteger:
        if exp < 0:
            return GaussianInteger(1, 0) / (self ** (-exp))
        result = GaussianInteger(1, 0)
        base = self
        while exp:
            if exp & 1:
                result = result * base
            base = base * base
            exp >>= 1
        return result

    def conjugate(self) -> GaussianInteger:
        return GaussianInteger(self.re, -self.im)

    def norm(self) -> int:
        """|z|^2 = re^2 + im^2."""
        return self.re * self.re + self.im * self.im

    # =========================================================================
    # Comparison Operations
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GaussianInteger):
            return self.re == other.re and self.im == other.im
        if isinstance(other, int):
            return self.re == other and self.im == 0
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        if self.im == 0:
            return hash(self.re)
        return hash((self.re, self.im))

    def __bool__(self) -> bool:
        return bool(self.re or self.im)

    def __repr__(self) -> str:
        return f"GaussianInteger({self.re}, {self.im})"

    def __str__(self) -> str:
        if self.im == 0:
            return str(self.re)
        sign = "+" if self.im > 0 else "-"
        mag = abs(self.im)
        imag = "i" if mag == 1 else f"{mag}i"
        return f"{self.re} {sign} {imag}"

    def to_tuple(self) -> Tuple[int, int]:
        return (self.re, self.im)


I = GaussianInteger(0, 1)

_ROOTS = {
    1: GaussianInteger(1, 0),
    2: GaussianInteger(-1, 0),
    4: I,
}


class GaussianIntegers(Field):
    """The ring Z[i], used as a recovery domain over the 4th roots of unity."""

    name = "gaussian"

    def zero(self) -> GaussianInteger:
        return GaussianInteger(0, 0)

    def one(self) -> GaussianInteger:
        return GaussianInteger(1, 0)

    def from_int(self, value: int) -> GaussianInteger:
        return GaussianInteger(value, 0)

    def from_pair(self, re: int, im: int) -> GaussianInteger:
        return GaussianInteger(re, im)

    def coerce(self, value):
        if isinstance(value, tuple):
            return GaussianInteger(*value)
        return super().coerce(value)

    def primitive_root(self, n: int) -> GaussianInteger:
        try:
            return _ROOTS[n]
        except KeyError:
            raise ValueError(
                f"Gaussian integers have no primitive {n}-th root of unity"
            ) from None

    def describe(self) -> str:
        return "Z[i]"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, GaussianIntegers)

    def __hash__(self) -> int:
        return hash("gaussian")

    def __repr__(self) -> str:
        return "GaussianIntegers()"
