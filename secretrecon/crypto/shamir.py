"""Shamir (K-of-N) secret reconstruction.

API
---
reconstruct(shares, k, strategy)  -> secret
recover(shares, k, strategy)      -> Reconstruction (secret + modulus + indices)

Shares are sorted by index and the first *k* are interpolated at x = 0:

    secret = sum_i y_i * prod_{j != i} (-x_j) / (x_i - x_j)

with every operation carried out by the strategy's arithmetic backend.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from pydantic import BaseModel

from secretrecon.crypto.errors import DivisionByZero, InsufficientShares
from secretrecon.crypto.strategy import Backend, Strategy, make_strategy
from secretrecon.document.shares import Share

logger = logging.getLogger(__name__)

Point = Tuple[int, int]


class Reconstruction(BaseModel):
    """Outcome of one reconstruction call."""

    secret: int
    strategy: str
    modulus: Optional[int] = None
    threshold: int
    indices: List[int]


def select_shares(shares: Iterable[Share], k: int) -> List[Share]:
    """Return the first *k* shares in ascending index order."""
    if k < 1:
        raise ValueError(f"Invalid threshold: k={k}")
    ordered = sorted(shares, key=lambda s: s.index)
    if len(ordered) < k:
        raise InsufficientShares(len(ordered), k)
    return ordered[:k]


def interpolate_at_zero(points: Sequence[Point], backend: Backend) -> int:
    """Evaluate the Lagrange polynomial through *points* at x = 0."""
    if not points:
        raise ValueError("Need at least one point")
    acc = backend.lift(0)
    for i, (xi, yi) in enumerate(points):
        term = backend.lift(yi)
        for j, (xj, _) in enumerate(points):
            if i == j:
                continue
            diff = xi - xj
            if diff == 0:
                raise DivisionByZero(xi)
            factor = backend.multiply(backend.lift(-xj), backend.invert(backend.lift(diff)))
            term = backend.multiply(term, factor)
        acc = backend.add(acc, term)
    return backend.finalize(acc)


def recover(
    shares: Iterable[Share],
    k: int,
    strategy: Strategy | None = None,
) -> Reconstruction:
    """Reconstruct the secret and report how it was obtained."""
    if strategy is None:
        strategy = make_strategy()
    ordered = sorted(shares, key=lambda s: s.index)
    chosen = select_shares(ordered, k)
    backend = strategy.backend_for(ordered)
    secret = interpolate_at_zero([s.as_point() for s in chosen], backend)
    indices = [s.index for s in chosen]
    logger.debug(
        "reconstructed with strategy=%s k=%d indices=%s", strategy.name, k, indices
    )
    return Reconstruction(
        secret=secret,
        strategy=strategy.name,
        modulus=backend.modulus,
        threshold=k,
        indices=indices,
    )


def reconstruct(
    shares: Iterable[Share],
    k: int,
    strategy: Strategy | None = None,
) -> int:
    """Reconstruct the secret from the first *k* shares by index."""
    return recover(shares, k, strategy).secret
