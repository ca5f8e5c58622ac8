"""Probable-prime testing and search (Miller-Rabin)."""

from __future__ import annotations

import secrets

from secretrecon.config import MILLER_RABIN_ROUNDS

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47)


def is_probable_prime(n: int, rounds: int = MILLER_RABIN_ROUNDS) -> bool:
    """Miller-Rabin test with *rounds* random bases.

    A composite passes with probability at most 4**-rounds.
    """
    if n < 2:
        return False
    for p in _SMALL_PRIMES:
        if n % p == 0:
            return n == p
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for _ in range(rounds):
        a = 2 + secrets.randbelow(n - 3)  # a in [2, n-2]
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def next_probable_prime(n: int, rounds: int = MILLER_RABIN_ROUNDS) -> int:
    """Return the smallest probable prime strictly greater than *n*."""
    if n < 2:
        return 2
    candidate = n + 1
    if candidate % 2 == 0:
        candidate += 1
    while not is_probable_prime(candidate, rounds):
        candidate += 2
    return candidate
