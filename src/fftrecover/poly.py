"""
Polynomial Operations

Provides:
- Fixed-length coefficient polynomials over any recovery domain
- Scale / unscale (composition with x -> k*x and x -> x/k)
- Zerofier construction for erased evaluation points
"""

from __future__ import annotations
from typing import Any, Iterable, Iterator, List, Sequence

from .field import Field


class Polynomial:
    """
    Polynomial over a recovery domain.

    Represented as coefficient tuple where coeffs[i] is the coefficient of x^i.
    Unlike a general-purpose polynomial the length is fixed: trailing zeros
    are kept so that the coefficient count always matches the transform
    length.
    """

    __slots__ = ('field', 'coeffs')

    def __init__(self, field: Field, coeffs: Iterable[Any]):
        """
        Args:
            field: Domain the coefficients live in
            coeffs: Coefficients [a_0, a_1, ..., a_n]; ints are lifted
        """
        self.field = field
        self.coeffs = tuple(field.coerce(c) for c in coeffs)

    @classmethod
    def from_ints(cls, field: Field, values: Iterable[int]) -> Polynomial:
        return cls(field, [field.from_int(v) for v in values])

    @property
    def degree(self) -> int:
        """Degree of polynomial (-1 for zero polynomial)."""
        for i in range(len(self.coeffs) - 1, -1, -1):
            if not self.field.is_zero(self.coeffs[i]):
                return i
        return -1

    def is_zero(self) -> bool:
        return self.degree == -1

    def __len__(self) -> int:
        return len(self.coeffs)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.coeffs)

    def __getitem__(self, index):
        return self.coeffs[index]

    def padded(self, length: int) -> Polynomial:
        """Extend with zero coefficients up to length."""
        if length < len(self.coeffs):
            raise ValueError(f"Cannot pad length {len(self.coeffs)} down to {length}")
        zero = self.field.zero()
        return Polynomial(self.field, self.coeffs + (zero,) * (length - len(self.coeffs)))

    def truncated(self, length: int) -> Polynomial:
        """
        Keep the first length coefficients.

        Raises ValueError if a dropped coefficient is non-zero.
        """
        if self.degree >= length:
            raise ValueError(f"Degree {self.degree} does not fit in {length} coefficients")
        return Polynomial(self.field, self.coeffs[:length])

    # =========================================================================
    # Arithmetic Operations
    # =========================================================================

    def __add__(self, other: Polynomial) -> Polynomial:
        n = max(len(self), len(other))
        a, b = self.padded(n), other.padded(n)
        return Polynomial(self.field, [x + y for x, y in zip(a, b)])

    def __sub__(self, other: Polynomial) -> Polynomial:
        n = max(len(self), len(other))
        a, b = self.padded(n), other.padded(n)
        return Polynomial(self.field, [x - y for x, y in zip(a, b)])

    def __mul__(self, other: Polynomial) -> Polynomial:
        """Multiply two polynomials (naive O(n^2)); length is len(a) + len(b) - 1."""
        result = [self.field.zero()] * (len(self.coeffs) + len(other.coeffs) - 1)
        for i, a in enumerate(self.coeffs):
            for j, b in enumerate(other.coeffs):
                result[i + j] = result[i + j] + a * b
        return Polynomial(self.field, result)

    def __neg__(self) -> Polynomial:
        return Polynomial(self.field, [-c for c in self.coeffs])

    def scalar_mul(self, scalar) -> Polynomial:
        """Multiply every coefficient by scalar."""
        scalar = self.field.coerce(scalar)
        return Polynomial(self.field, [c * scalar for c in self.coeffs])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.field == other.field and self.coeffs == other.coeffs

    def __hash__(self) -> int:
        return hash(self.coeffs)

    def __repr__(self) -> str:
        return f"Polynomial([{', '.join(str(c) for c in self.coeffs)}])"

    # =========================================================================
    # Scaling
    # =========================================================================

    def scale(self, k) -> Polynomial:
        """
        Multiply coefficient j by k^j.

        This shifts the implicit evaluation points of the transform by k,
        moving them off the roots of a zerofier before pointwise division.
        """
        k = self.field.coerce(k)
        fac = self.field.one()
        result = []
        for c in self.coeffs:
            result.append(c * fac)
            fac = fac * k
        return Polynomial(self.field, result)

    def unscale(self, k) -> Polynomial:
        """Exact inverse of scale: divide coefficient j by k^j."""
        k = self.field.coerce(k)
        fac = self.field.one()
        result = []
        for c in self.coeffs:
            result.append(self.field.div(c, fac))
            fac = fac * k
        return Polynomial(self.field, result)

    # =========================================================================
    # Evaluation
    # =========================================================================

    def evaluate(self, x) -> Any:
        """Evaluate polynomial at a point using Horner's method."""
        x = self.field.coerce(x)
        result = self.field.zero()
        for c in reversed(self.coeffs):
            result = result * x + c
        return result

    def evaluate_domain(self, domain: Sequence[Any]) -> List[Any]:
        """Naive O(n^2) evaluation at every point in domain."""
        return [self.evaluate(x) for x in domain]

    # =========================================================================
    # Special Polynomials
    # =========================================================================

    @staticmethod
    def zerofier(field: Field, roots: Iterable[Any], length: int = 0) -> Polynomial:
        """
        Compute zerofier polynomial: Z(x) = ∏(x - d) for d in roots.

        The result is padded to length coefficients when that is larger
        than its natural size.
        """
        result = Polynomial(field, [field.one()])
        for d in roots:
            result = result * Polynomial(field, [-field.coerce(d), field.one()])
        if length > len(result):
            result = result.padded(length)
        return result
