"""Tests for prime-field arithmetic."""

import pytest

from secretrecon.config import FIXED_PRIME
from secretrecon.crypto.errors import NonInvertibleDenominator
from secretrecon.crypto.field import PrimeField

F = PrimeField(FIXED_PRIME)
PRIME = FIXED_PRIME


def test_add_basic():
    assert F.add(2, 3) == 5


def test_add_wrap():
    assert F.add(PRIME - 1, 2) == 1


def test_mul_wrap():
    a = PRIME - 1
    b = 2
    assert F.multiply(a, b) == (a * b) % PRIME


def test_inv():
    a = 12345
    a_inv = F.invert(a)
    assert F.multiply(a, a_inv) == 1


def test_inv_one():
    assert F.invert(1) == 1


def test_inv_negative_value():
    assert F.multiply(F.lift(-7), F.invert(-7)) == 1


def test_inv_zero_fails():
    with pytest.raises(NonInvertibleDenominator) as exc:
        F.invert(0)
    assert exc.value.modulus == PRIME


def test_inv_multiple_of_prime_fails():
    small = PrimeField(7)
    with pytest.raises(NonInvertibleDenominator):
        small.invert(14)


def test_non_invertible_is_zero_division():
    with pytest.raises(ZeroDivisionError):
        PrimeField(7).invert(7)


def test_lift():
    assert F.lift(PRIME + 5) == 5
    assert F.lift(-1) == PRIME - 1


def test_finalize_in_range():
    small = PrimeField(11)
    assert small.finalize(25) == 3


def test_invalid_modulus():
    with pytest.raises(ValueError):
        PrimeField(1)


def test_modulus_property():
    assert PrimeField(13).modulus == 13
