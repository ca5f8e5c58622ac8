"""Prime-field arithmetic F_p.

All values are Python ints reduced into [0, p).  ``PrimeField`` is the
modular backend of the reconstruction engine; the prime is injected so the
same code serves the fixed and the dynamically chosen modulus.
"""

from __future__ import annotations

import math

from secretrecon.crypto.errors import NonInvertibleDenominator


class PrimeField:
    """Arithmetic modulo a (probable) prime *prime*."""

    def __init__(self, prime: int) -> None:
        if prime < 2:
            raise ValueError(f"Invalid modulus: {prime}")
        self.prime = prime

    def __repr__(self) -> str:
        return f"PrimeField({self.prime})"

    @property
    def modulus(self) -> int:
        return self.prime

    def lift(self, a: int) -> int:
        """Reduce an integer into [0, p)."""
        return a % self.prime

    def add(self, a: int, b: int) -> int:
        """Field addition."""
        return (a + b) % self.prime

    def multiply(self, a: int, b: int) -> int:
        """Field multiplication."""
        return (a * b) % self.prime

    def invert(self, a: int) -> int:
        """Multiplicative inverse via the extended Euclidean algorithm."""
        a = a % self.prime
        if math.gcd(a, self.prime) != 1:
            raise NonInvertibleDenominator(a, self.prime)
        return pow(a, -1, self.prime)

    def finalize(self, acc: int) -> int:
        return acc % self.prime
