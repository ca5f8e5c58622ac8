"""Arithmetic strategies for the reconstruction engine.

A strategy turns the shares about to be interpolated into an arithmetic
backend.  Backends expose ``lift``, ``add``, ``multiply``, ``invert`` and
``finalize`` plus a ``modulus`` attribute (``None`` over the rationals).

  fixed     – PrimeField over a configured prime
  dynamic   – PrimeField over the smallest probable prime above
              max(values) + margin, chosen per call
  rational  – exact fractions, no modulus
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol, Sequence

from secretrecon.config import (
    DEFAULT_STRATEGY,
    DYNAMIC_PRIME_MARGIN,
    FIXED_PRIME,
    MILLER_RABIN_ROUNDS,
    STRATEGIES,
)
from secretrecon.crypto.field import PrimeField
from secretrecon.crypto.primes import is_probable_prime, next_probable_prime
from secretrecon.crypto.rational import RationalField
from secretrecon.document.shares import Share

logger = logging.getLogger(__name__)


class Backend(Protocol):
    modulus: Optional[int]

    def lift(self, a: int) -> Any: ...

    def add(self, a: Any, b: Any) -> Any: ...

    def multiply(self, a: Any, b: Any) -> Any: ...

    def invert(self, a: Any) -> Any: ...

    def finalize(self, acc: Any) -> int: ...


class Strategy(Protocol):
    name: str

    def backend_for(self, shares: Sequence[Share]) -> Backend: ...


class FixedModulus:
    """Every reconstruction runs in F_p for one injected prime."""

    name = "fixed"

    def __init__(
        self,
        prime: int = FIXED_PRIME,
        rounds: int = MILLER_RABIN_ROUNDS,
    ) -> None:
        if not is_probable_prime(prime, rounds):
            raise ValueError(f"Fixed modulus {prime} is not prime")
        self.field = PrimeField(prime)

    @property
    def prime(self) -> int:
        return self.field.prime

    def backend_for(self, shares: Sequence[Share]) -> PrimeField:
        return self.field


class DynamicModulus:
    """Pick p = next probable prime above max(share values) + margin.

    The prime is derived from the shares themselves, so it only matches the
    field the secret was shared in if the dealer happened to use the same
    rule.  Otherwise the result is a well-formed but unrelated number.
    """

    name = "dynamic"

    def __init__(
        self,
        margin: int = DYNAMIC_PRIME_MARGIN,
        rounds: int = MILLER_RABIN_ROUNDS,
    ) -> None:
        if margin < 0:
            raise ValueError(f"Invalid margin: {margin}")
        if rounds < 1:
            raise ValueError(f"Invalid round count: {rounds}")
        self.margin = margin
        self.rounds = rounds

    def select_prime(self, shares: Sequence[Share]) -> int:
        largest = max((s.value for s in shares), default=0)
        return next_probable_prime(largest + self.margin, self.rounds)

    def backend_for(self, shares: Sequence[Share]) -> PrimeField:
        prime = self.select_prime(shares)
        logger.debug(
            "dynamic modulus %d chosen from %d share(s); result is only "
            "meaningful if the shares were dealt over this field",
            prime,
            len(shares),
        )
        return PrimeField(prime)


class Rational:
    """Exact interpolation over Q."""

    name = "rational"

    def backend_for(self, shares: Sequence[Share]) -> RationalField:
        return RationalField()


def make_strategy(
    name: str = DEFAULT_STRATEGY,
    *,
    prime: Optional[int] = None,
    margin: Optional[int] = None,
    rounds: Optional[int] = None,
) -> Strategy:
    """Build a strategy by *name*; unset options fall back to config."""
    if name == "fixed":
        return FixedModulus(
            FIXED_PRIME if prime is None else prime,
            MILLER_RABIN_ROUNDS if rounds is None else rounds,
        )
    if name == "dynamic":
        return DynamicModulus(
            DYNAMIC_PRIME_MARGIN if margin is None else margin,
            MILLER_RABIN_ROUNDS if rounds is None else rounds,
        )
    if name == "rational":
        return Rational()
    raise ValueError(f"Unknown strategy {name!r} (expected one of {', '.join(STRATEGIES)})")
