"""Exact rational arithmetic over Q.

Values are ``fractions.Fraction`` instances, which are always kept in
lowest terms with a positive denominator.  No modulus is involved, so an
interpolation that does not land on an integer is reported instead of being
silently wrapped.
"""

from __future__ import annotations

from fractions import Fraction

from secretrecon.crypto.errors import DivisionByZero, InconsistentShares


class RationalField:
    """Arithmetic backend over the rationals."""

    modulus = None

    def __repr__(self) -> str:
        return "RationalField()"

    def lift(self, a: int) -> Fraction:
        return Fraction(a)

    def add(self, a: Fraction, b: Fraction) -> Fraction:
        return a + b

    def multiply(self, a: Fraction, b: Fraction) -> Fraction:
        return a * b

    def invert(self, a: Fraction) -> Fraction:
        if a == 0:
            raise DivisionByZero()
        return 1 / a

    def finalize(self, acc: Fraction) -> int:
        """Return *acc* as an int, or raise if it is not integer-valued."""
        if acc.denominator != 1:
            raise InconsistentShares(acc.numerator, acc.denominator)
        return acc.numerator
