"""
Tests for prime field arithmetic and the generic Field interface.
"""

import pytest

from fftrecover.errors import DivisionError, InvariantViolation
from fftrecover.field import (
    ModElement, PrimeField, mod_inverse, is_prime, is_power_of_two,
)


# Inverses mod 17, as tabulated for the original toy example
INVERSES_MOD_17 = {
    1: 1, 2: 9, 3: 6, 4: 13, 5: 7, 6: 3, 7: 5, 8: 15,
    9: 2, 10: 12, 11: 14, 12: 10, 13: 4, 14: 11, 15: 8, 16: 16,
}


class _OffByOne(ModElement):
    """Element whose division is deliberately wrong."""

    __slots__ = ()

    def __truediv__(self, other):
        return ModElement.__truediv__(self, other) + 1


class TestModElement:
    """Arithmetic on residues."""

    def test_add_wrap(self):
        assert ModElement(16, 17) + ModElement(2, 17) == ModElement(1, 17)

    def test_sub_wrap(self):
        assert ModElement(0, 17) - ModElement(1, 17) == ModElement(16, 17)

    def test_neg(self):
        a = ModElement(5, 17)
        assert a + (-a) == 0

    def test_mul(self):
        assert ModElement(5, 17) * ModElement(7, 17) == 35 % 17

    def test_canonical_representation(self):
        """Residues are always reduced to [0, p)."""
        assert ModElement(-1, 17).value == 16
        assert ModElement(35, 17).value == 1
        assert ModElement(18, 17) == ModElement(1, 17)

    def test_int_operands(self):
        assert 3 + ModElement(15, 17) == 1
        assert 3 - ModElement(4, 17) == 16
        assert 2 * ModElement(9, 17) == 1

    def test_div(self):
        a, b = ModElement(5, 17), ModElement(7, 17)
        assert (a / b) * b == a

    def test_div_by_zero(self):
        with pytest.raises(DivisionError):
            ModElement(5, 17) / ModElement(0, 17)

    def test_division_error_is_zero_division_error(self):
        with pytest.raises(ZeroDivisionError):
            ModElement(5, 17) / 0

    def test_pow(self):
        assert ModElement(4, 17) ** 4 == 1
        assert ModElement(2, 17) ** -1 == 9

    def test_modulus_mismatch(self):
        with pytest.raises(ValueError):
            ModElement(1, 17) + ModElement(1, 97)

    def test_hash_and_bool(self):
        assert len({ModElement(1, 17), ModElement(18, 17)}) == 1
        assert not ModElement(17, 17)
        assert ModElement(3, 17)

    def test_hash_matches_int(self):
        """Elements equal to an int share its hash, so set lookups agree."""
        assert 5 in {ModElement(5, 17)}
        assert ModElement(5, 17) in {5}
        assert hash(ModElement(22, 17)) == hash(5)
        assert {ModElement(0, 17): 'zero'}[0] == 'zero'

    def test_str(self):
        assert str(ModElement(-4, 17)) == "13"


class TestModInverse:
    """Extended-Euclid inverses."""

    def test_matches_table(self):
        for a, inv in INVERSES_MOD_17.items():
            assert mod_inverse(a, 17) == inv

    def test_zero_has_no_inverse(self):
        with pytest.raises(DivisionError):
            mod_inverse(0, 17)

    def test_non_coprime(self):
        with pytest.raises(DivisionError):
            mod_inverse(6, 9)

    def test_large_prime(self):
        p = (1 << 61) - 1
        a = 123456789
        assert (a * mod_inverse(a, p)) % p == 1


class TestPrimeField:
    """Domain object for F_p."""

    def test_rejects_composite_modulus(self):
        with pytest.raises(ValueError):
            PrimeField(16)

    def test_identities(self):
        f = PrimeField(17)
        assert f.zero() == 0
        assert f.one() == 1
        assert f.is_zero(f.from_int(34))

    def test_operations(self):
        f = PrimeField(17)
        a, b = f.from_int(5), f.from_int(7)
        assert f.add(a, b) == 12
        assert f.sub(a, b) == 15
        assert f.neg(a) == 12
        assert f.mul(a, b) == 1
        assert f.div(a, b) == 5 * 5 % 17
        assert f.equal(f.from_int(22), a)

    def test_primitive_root_of_order_4_is_4(self):
        assert PrimeField(17).primitive_root(4) == 4

    def test_primitive_roots(self):
        f = PrimeField(17)
        assert f.primitive_root(1) == 1
        assert f.primitive_root(2) == 16
        assert f.primitive_root(8) == 2
        assert f.primitive_root(16) == 3

    def test_primitive_root_has_exact_order(self):
        f = PrimeField(97)
        for n in (2, 4, 8, 16, 32):
            r = f.primitive_root(n)
            assert r ** n == 1
            assert all(r ** k != 1 for k in range(1, n))

    def test_no_root_of_order(self):
        with pytest.raises(ValueError):
            PrimeField(17).primitive_root(3)
        with pytest.raises(ValueError):
            PrimeField(17).primitive_root(32)

    def test_domain(self):
        assert PrimeField(17).root_of_unity_domain(4) == [1, 4, 16, 13]

    def test_div_by_zero(self):
        f = PrimeField(17)
        with pytest.raises(DivisionError):
            f.div(f.one(), f.zero())

    def test_invariant_violation(self):
        """A division that does not multiply back is a fatal error."""
        f = PrimeField(17)
        with pytest.raises(InvariantViolation):
            f.div(_OffByOne(6, 17), ModElement(3, 17))

    def test_invariant_check_can_be_disabled(self):
        f = PrimeField(17, check_invariants=False)
        assert f.div(_OffByOne(6, 17), ModElement(3, 17)) == 3

    def test_equality(self):
        assert PrimeField(17) == PrimeField(17)
        assert PrimeField(17) != PrimeField(97)
        assert PrimeField(17).describe() == "F_17"


class TestHelpers:

    def test_is_prime(self):
        assert [n for n in range(20) if is_prime(n)] == [2, 3, 5, 7, 11, 13, 17, 19]

    def test_is_power_of_two(self):
        assert [n for n in range(-1, 17) if is_power_of_two(n)] == [1, 2, 4, 8, 16]
