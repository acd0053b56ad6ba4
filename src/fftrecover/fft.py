"""
Discrete Fourier Transform over a recovery domain

Converts between coefficient form and evaluation form at the powers of a
primitive n-th root of unity, [1, ω, ω^2, ..., ω^{n-1}].

Provides:
- Transform: the forward / inverse interface
- Length4Transform: hand-unrolled butterfly for n = 4
- RadixTwoTransform: iterative Cooley-Tukey for any power-of-two n
- fft / ifft: the underlying module-level routines
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, List, Sequence, Union

from .field import Field, is_power_of_two
from .poly import Polynomial


Values = Union[Polynomial, Sequence[Any]]


class Transform(ABC):
    """
    Length-n DFT bound to a domain.

    forward evaluates a polynomial at the domain points; inverse
    interpolates back. Both are exact: inverse(forward(p)) == p.
    """

    def __init__(self, field: Field, n: int):
        if not is_power_of_two(n):
            raise ValueError(f"Length must be power of 2, got {n}")
        self.field = field
        self.n = n
        self.root = field.primitive_root(n)

    @property
    def domain(self) -> List[Any]:
        return self.field.root_of_unity_domain(self.n)

    def _check(self, values: Values) -> List[Any]:
        values = [self.field.coerce(v) for v in values]
        if len(values) != self.n:
            raise ValueError(f"Expected {self.n} values, got {len(values)}")
        return values

    def eval_from_poly(self, coeffs: Values) -> List[Any]:
        """Coefficients -> evaluations at [1, ω, ω^2, ...]."""
        return self.forward(self._check(coeffs))

    def poly_from_eval(self, evals: Values) -> Polynomial:
        """Evaluations at [1, ω, ω^2, ...] -> coefficient polynomial."""
        return Polynomial(self.field, self.inverse(self._check(evals)))

    @abstractmethod
    def forward(self, coeffs: List[Any]) -> List[Any]:
        """Forward transform of exactly n coefficients."""

    @abstractmethod
    def inverse(self, evals: List[Any]) -> List[Any]:
        """Inverse transform of exactly n evaluations."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.field.describe()}, n={self.n})"


class Length4Transform(Transform):
    """
    Radix-2 butterfly unrolled for n = 4.

    With r the primitive 4th root, the domain is [1, r, -1, -r] and
    r^{-1} = -r, so the inverse is the same butterfly with the odd
    outputs swapped, followed by division by 4.
    """

    def __init__(self, field: Field):
        super().__init__(field, 4)

    def forward(self, coeffs: List[Any]) -> List[Any]:
        r = self.root
        c0_p_c2 = coeffs[0] + coeffs[2]
        c0_m_c2 = coeffs[0] - coeffs[2]
        c1_p_c3 = coeffs[1] + coeffs[3]
        c1_m_c3 = coeffs[1] - coeffs[3]
        return [
            c0_p_c2 + c1_p_c3,
            c0_m_c2 + r * c1_m_c3,
            c0_p_c2 - c1_p_c3,
            c0_m_c2 - r * c1_m_c3,
        ]

    def inverse(self, evals: List[Any]) -> List[Any]:
        r = self.root
        e0_p_e2 = evals[0] + evals[2]
        e0_m_e2 = evals[0] - evals[2]
        e1_p_e3 = evals[1] + evals[3]
        e1_m_e3 = evals[1] - evals[3]
        result = [
            e0_p_e2 + e1_p_e3,
            e0_m_e2 - r * e1_m_e3,
            e0_p_e2 - e1_p_e3,
            e0_m_e2 + r * e1_m_e3,
        ]
        four = self.field.from_int(4)
        return [self.field.div(v, four) for v in result]


class RadixTwoTransform(Transform):
    """Iterative Cooley-Tukey transform for any power-of-two length."""

    def forward(self, coeffs: List[Any]) -> List[Any]:
        return fft(coeffs, self.root, self.field)

    def inverse(self, evals: List[Any]) -> List[Any]:
        return ifft(evals, self.root, self.field)


def get_transform(field: Field, n: int) -> Transform:
    """Pick the unrolled transform for n = 4, the general one otherwise."""
    if n == 4:
        return Length4Transform(field)
    return RadixTwoTransform(field, n)


# =============================================================================
# FFT Operations
# =============================================================================

def fft(values: List[Any], omega, field: Field) -> List[Any]:
    """
    Fast Fourier Transform over a recovery domain.

    Computes DFT: Y[k] = Σ_{j=0}^{n-1} x[j] * ω^{jk}

    Args:
        values: Input values (length must be power of 2)
        omega: Primitive n-th root of unity
        field: Domain the values live in

    Returns:
        FFT result (evaluations at [1, ω, ω^2, ..., ω^{n-1}])
    """
    n = len(values)
    if n == 1:
        return values[:]

    if not is_power_of_two(n):
        raise ValueError("Length must be power of 2")

    result = _bit_reverse_copy(values)

    m = 1
    while m < n:
        wm = omega ** (n // (2 * m))  # Principal 2m-th root
        for k in range(0, n, 2 * m):
            w = field.one()
            for j in range(m):
                t = w * result[k + j + m]
                u = result[k + j]
                result[k + j] = u + t
                result[k + j + m] = u - t
                w = w * wm
        m *= 2

    return result


def ifft(values: List[Any], omega, field: Field) -> List[Any]:
    """
    Inverse Fast Fourier Transform.

    Computes inverse DFT: x[j] = (1/n) * Σ_{k=0}^{n-1} Y[k] * ω^{-jk}

    ω^{-1} is taken as ω^{n-1} so that domains without general inverses
    (the Gaussian integers) work too. The final division by n is exact
    and raises DivisionError if it is not.
    """
    n = len(values)
    omega_inv = omega ** (n - 1)
    result = fft(values, omega_inv, field)
    n_elem = field.from_int(n)
    return [field.div(v, n_elem) for v in result]


def _bit_reverse_copy(values: List[Any]) -> List[Any]:
    """Copy with bit-reversal permutation."""
    n = len(values)
    log_n = (n - 1).bit_length()
    result = list(values)

    for i in range(n):
        result[_bit_reverse(i, log_n)] = values[i]

    return result


def _bit_reverse(x: int, bits: int) -> int:
    """Reverse bits of x."""
    result = 0
    for _ in range(bits):
        result = (result << 1) | (x & 1)
        x >>= 1
    return result
