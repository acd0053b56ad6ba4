"""
Prime Field Arithmetic

Field: F_p for a small prime p (17 by default).

Every element is kept reduced to [0, p). Division goes through an
extended-Euclid inverse instead of a precomputed table, so any prime
modulus works. The evaluation domain for a transform of length n is the
set of powers of a primitive n-th root of unity, which exists exactly
when n divides p - 1.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from math import gcd
from typing import Any, List, Tuple

from .errors import DivisionError, InvariantViolation


DEFAULT_MODULUS = 17


# =============================================================================
# Helper Functions
# =============================================================================

def is_prime(n: int) -> bool:
    """Check if a number is prime (trial division)."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    i = 3
    while i * i <= n:
        if n % i == 0:
            return False
        i += 2
    return True


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def _egcd(a: int, b: int) -> Tuple[int, int, int]:
    if b == 0:
        return (1, 0, a)
    x1, y1, g = _egcd(b, a % b)
    return (y1, x1 - (a // b) * y1, g)


def mod_inverse(a: int, m: int) -> int:
    """
    Multiplicative inverse of a modulo m via the extended Euclidean algorithm.

    Raises DivisionError when gcd(a, m) != 1 (including a == 0).
    """
    a %= m
    x, _, g = _egcd(a, m)
    if g != 1:
        raise DivisionError(f"{a} has no inverse mod {m}")
    return x % m


def _prime_factors(n: int) -> List[int]:
    factors = []
    d = 2
    while d * d <= n:
        if n % d == 0:
            factors.append(d)
            while n % d == 0:
                n //= d
        d += 1
    if n > 1:
        factors.append(n)
    return factors


# =============================================================================
# Field Interface
# =============================================================================

class Field(ABC):
    """
    An arithmetic domain for the transform and the recovery pipeline.

    Subclasses supply the element constructor and the roots of unity;
    the arithmetic itself is delegated to the element operators.
    """

    name: str = "field"

    def __init__(self, check_invariants: bool = True):
        self.check_invariants = check_invariants

    @abstractmethod
    def zero(self) -> Any:
        """Additive identity."""

    @abstractmethod
    def one(self) -> Any:
        """Multiplicative identity."""

    @abstractmethod
    def from_int(self, value: int) -> Any:
        """Lift a Python int into the domain."""

    @abstractmethod
    def primitive_root(self, n: int) -> Any:
        """A root of unity of exact order n."""

    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b

    def neg(self, a):
        return -a

    def mul(self, a, b):
        return a * b

    def div(self, a, b):
        """
        Exact division: returns q with q * b == a.

        Raises DivisionError when b has no inverse (or the quotient is
        not representable), InvariantViolation if the result does not
        multiply back to a.
        """
        q = a / b
        if self.check_invariants and q * b != a:
            raise InvariantViolation(f"{q} * {b} != {a} in {self.describe()}")
        return q

    def equal(self, a, b) -> bool:
        return a == b

    def is_zero(self, a) -> bool:
        return a == self.zero()

    def coerce(self, value):
        """Accept either a domain element or a plain int."""
        if isinstance(value, int):
            return self.from_int(value)
        return value

    def root_of_unity_domain(self, n: int) -> List[Any]:
        """
        Evaluation domain of size n.

        Returns [1, r, r^2, ..., r^{n-1}] where r is the primitive n-th root.
        """
        root = self.primitive_root(n)
        domain = [self.one()]
        for _ in range(n - 1):
            domain.append(domain[-1] * root)
        return domain

    def describe(self) -> str:
        return self.name


# =============================================================================
# Prime Field
# =============================================================================

class ModElement:
    """
    Element of F_p.

    Immutable; arithmetic returns new elements. Plain ints are accepted on
    either side of an operator and reduced first.
    """

    __slots__ = ('value', 'modulus')

    def __init__(self, value: int, modulus: int = DEFAULT_MODULUS):
        self.value = value % modulus
        self.modulus = modulus

    def _lift(self, other) -> ModElement:
        if isinstance(other, ModElement):
            if other.modulus != self.modulus:
                raise ValueError(
                    f"Modulus mismatch: {self.modulus} vs {other.modulus}"
                )
            return other
        if isinstance(other, int):
            return ModElement(other, self.modulus)
        return NotImplemented

    # =========================================================================
    # Arithmetic Operations
    # =========================================================================

    def __add__(self, other) -> ModElement:
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        return ModElement(self.value + other.value, self.modulus)

    __radd__ = __add__

    def __sub__(self, other) -> ModElement:
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        return ModElement(self.value - other.value, self.modulus)

    def __rsub__(self, other) -> ModElement:
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        return ModElement(other.value - self.value, self.modulus)

    def __mul__(self, other) -> ModElement:
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        return ModElement(self.value * other.value, self.modulus)

    __rmul__ = __mul__

    def __truediv__(self, other) -> ModElement:
        """Division in F_p (multiplication by inverse)."""
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        return self * other.inverse()

    def __rtruediv__(self, other) -> ModElement:
        other = self._lift(other)
        if other is NotImplemented:
            return NotImplemented
        return other * self.inverse()

    def __neg__(self) -> ModElement:
        return ModElement(-self.value, self.modulus)

    def __pow__(self, exp: int) -> ModElement:
        if exp < 0:
            return self.inverse() ** (-exp)
        return ModElement(pow(self.value, exp, self.modulus), self.modulus)

    def inverse(self) -> ModElement:
        return ModElement(mod_inverse(self.value, self.modulus), self.modulus)

    # =========================================================================
    # Comparison Operations
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ModElement):
            return self.modulus == other.modulus and self.value == other.value
        if isinstance(other, int):
            return self.value == other % self.modulus
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        # Same hash as the canonical int in [0, p)
        return hash(self.value)

    def __bool__(self) -> bool:
        return self.value != 0

    def __repr__(self) -> str:
        return f"ModElement({self.value}, {self.modulus})"

    def __str__(self) -> str:
        return str(self.value)

    def to_int(self) -> int:
        return self.value


class PrimeField(Field):
    """Integers modulo a prime."""

    name = "prime"

    def __init__(self, modulus: int = DEFAULT_MODULUS, check_invariants: bool = True):
        if not is_prime(modulus):
            raise ValueError(f"Modulus must be prime, got {modulus}")
        super().__init__(check_invariants)
        self.modulus = modulus

    def zero(self) -> ModElement:
        return ModElement(0, self.modulus)

    def one(self) -> ModElement:
        return ModElement(1, self.modulus)

    def from_int(self, value: int) -> ModElement:
        return ModElement(value, self.modulus)

    def primitive_root(self, n: int) -> ModElement:
        """
        Smallest residue of exact multiplicative order n.

        For p = 17 and n = 4 this is 4, giving the domain [1, 4, 16, 13].
        """
        p = self.modulus
        if n < 1 or (p - 1) % n != 0:
            raise ValueError(f"No primitive {n}-th root of unity mod {p}")
        if n == 1:
            return self.one()

        factors = _prime_factors(n)
        for x in range(2, p):
            y = pow(x, (p - 1) // n, p)
            if all(pow(y, n // q, p) != 1 for q in factors):
                break
        else:
            raise ValueError(f"No primitive {n}-th root of unity mod {p}")

        # Every element of order n is y^k with gcd(k, n) == 1
        smallest = min(pow(y, k, p) for k in range(1, n) if gcd(k, n) == 1)
        return ModElement(smallest, p)

    def describe(self) -> str:
        return f"F_{self.modulus}"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PrimeField) and other.modulus == self.modulus

    def __hash__(self) -> int:
        return hash(("prime", self.modulus))

    def __repr__(self) -> str:
        return f"PrimeField({self.modulus})"
