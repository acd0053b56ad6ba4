"""
Tests for fixed-length polynomials, scaling and zerofiers.
"""

import pytest

from fftrecover.errors import DivisionError
from fftrecover.field import PrimeField
from fftrecover.gaussian import GaussianInteger, GaussianIntegers
from fftrecover.poly import Polynomial


F17 = PrimeField(17)
ZI = GaussianIntegers()


def p17(*values):
    return Polynomial.from_ints(F17, values)


class TestPolynomial:

    def test_keeps_trailing_zeros(self):
        p = p17(5, 7, 0, 0)
        assert len(p) == 4
        assert p.degree == 1

    def test_zero_polynomial(self):
        assert p17(0, 0, 0, 0).is_zero()
        assert p17(0, 0, 0, 0).degree == -1

    def test_evaluate(self):
        p = p17(5, 7, 0, 0)
        assert p.evaluate(0) == 5
        assert p.evaluate(4) == 33 % 17
        assert p.evaluate(16) == 117 % 17

    def test_evaluate_domain(self):
        assert p17(5, 7, 0, 0).evaluate_domain(F17.root_of_unity_domain(4)) == [12, 16, 15, 11]

    def test_add_sub(self):
        assert p17(1, 2, 3) + p17(16, 0, 0, 1) == p17(0, 2, 3, 1)
        assert p17(1, 2) - p17(1, 2) == p17(0, 0)

    def test_mul(self):
        # (x - 4)(x - 16) = x^2 + 14x + 13 mod 17
        assert p17(-4, 1) * p17(-16, 1) == p17(13, 14, 1)

    def test_scalar_mul(self):
        assert p17(1, 2, 3).scalar_mul(6) == p17(6, 12, 1)

    def test_padded_truncated(self):
        assert p17(1, 2).padded(4) == p17(1, 2, 0, 0)
        assert p17(1, 2, 0, 0).truncated(2) == p17(1, 2)
        with pytest.raises(ValueError):
            p17(1, 2, 3).truncated(2)
        with pytest.raises(ValueError):
            p17(1, 2, 3).padded(2)

    def test_equality_requires_same_field(self):
        assert p17(1, 2) != Polynomial.from_ints(PrimeField(97), [1, 2])

    def test_immutable_coefficients(self):
        p = p17(1, 2)
        with pytest.raises(TypeError):
            p.coeffs[0] = F17.one()


class TestScale:
    """scale(k) multiplies coefficient j by k^j; unscale undoes it."""

    def test_scale(self):
        assert p17(1, 1, 1, 1).scale(2) == p17(1, 2, 4, 8)

    def test_scale_is_composition(self):
        p = p17(13, 14, 1, 0)
        q = p.scale(2)
        for x in range(17):
            assert q.evaluate(x) == p.evaluate(2 * x)

    def test_unscale(self):
        assert p17(1, 2, 4, 8).unscale(2) == p17(1, 1, 1, 1)

    def test_unscale_zero(self):
        with pytest.raises(DivisionError):
            p17(1, 2, 3, 4).unscale(0)

    def test_scale_gaussian(self):
        p = Polynomial(ZI, [GaussianInteger(0, -1), GaussianInteger(1, -1), 1, 0])
        q = p.scale(2)
        assert list(q) == [GaussianInteger(0, -1), GaussianInteger(2, -2), 4, 0]
        assert q.unscale(2) == p


class TestZerofier:

    def test_modulus_17(self):
        z = Polynomial.zerofier(F17, [4, 16], length=4)
        assert z == p17(13, 14, 1, 0)

    def test_gaussian(self):
        z = Polynomial.zerofier(ZI, [GaussianInteger(0, 1), -1], length=4)
        expected = [GaussianInteger(0, -1), GaussianInteger(1, -1), GaussianInteger(1, 0), GaussianInteger(0, 0)]
        assert list(z) == expected

    def test_vanishes_on_roots(self):
        roots = [1, 4, 13]
        z = Polynomial.zerofier(F17, roots)
        assert z.degree == 3
        assert all(z.evaluate(r) == 0 for r in roots)
        assert z.evaluate(16) != 0

    def test_empty(self):
        assert Polynomial.zerofier(F17, [], length=4) == p17(1, 0, 0, 0)
