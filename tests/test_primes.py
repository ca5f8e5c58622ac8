"""Tests for probable-prime search."""

from secretrecon.config import FIXED_PRIME
from secretrecon.crypto.primes import is_probable_prime, next_probable_prime


def test_small_values():
    assert not is_probable_prime(0)
    assert not is_probable_prime(1)
    assert is_probable_prime(2)
    assert is_probable_prime(3)
    assert not is_probable_prime(4)
    assert is_probable_prime(97)
    assert not is_probable_prime(91)  # 7 * 13


def test_carmichael_number_rejected():
    # 561 = 3 * 11 * 17; fools Fermat, not Miller-Rabin
    assert not is_probable_prime(561)
    assert not is_probable_prime(41041)  # 7 * 11 * 13 * 41


def test_large_known_primes():
    assert is_probable_prime(2**127 - 1)
    assert is_probable_prime(FIXED_PRIME)
    assert not is_probable_prime((2**127 - 1) * (2**61 - 1))


def test_next_prime_strictly_greater():
    assert next_probable_prime(7) == 11
    assert next_probable_prime(10) == 11
    assert next_probable_prime(13) == 17
    assert next_probable_prime(1) == 2
    assert next_probable_prime(2) == 3
    assert next_probable_prime(1000) == 1009


def test_next_prime_after_power_of_two():
    assert next_probable_prime(2**128) == FIXED_PRIME
