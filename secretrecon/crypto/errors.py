"""Failure conditions raised while reconstructing a secret.

Every error derives from ``ReconstructionError`` and also from the builtin
exception that best describes it, so callers can catch either.
"""

from __future__ import annotations


class ReconstructionError(Exception):
    """Base class for all reconstruction failures."""


class InsufficientShares(ReconstructionError, ValueError):
    """Fewer shares were supplied than the threshold requires."""

    def __init__(self, available: int, required: int) -> None:
        self.available = available
        self.required = required
        super().__init__(
            f"insufficient shares: have {available}, need {required}"
        )


class DivisionByZero(ReconstructionError, ZeroDivisionError):
    """Two shares carry the same index, so an index difference is zero."""

    def __init__(self, index: int | None = None) -> None:
        self.index = index
        if index is None:
            msg = "division by zero"
        else:
            msg = f"division by zero: index {index} appears more than once"
        super().__init__(msg)


class NonInvertibleDenominator(ReconstructionError, ZeroDivisionError):
    """A denominator has no inverse modulo the chosen prime."""

    def __init__(self, denominator: int, modulus: int) -> None:
        self.denominator = denominator
        self.modulus = modulus
        super().__init__(
            f"non-invertible denominator {denominator} modulo {modulus}"
        )


class InconsistentShares(ReconstructionError, ArithmeticError):
    """The exact interpolation result is not an integer."""

    def __init__(self, numerator: int, denominator: int) -> None:
        self.numerator = numerator
        self.denominator = denominator
        super().__init__(
            "inconsistent shares: interpolated constant term is "
            f"{numerator}/{denominator}, not an integer"
        )
