"""Reconstruction service FastAPI application.

Endpoints:
- GET  /health       – liveness + default strategy
- POST /reconstruct  – parse a share document and return the secret

Large integers (secret, modulus, prime) travel as decimal strings.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Dict, List, Optional, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from secretrecon.config import (
    DEFAULT_STRATEGY,
    DYNAMIC_PRIME_MARGIN,
    FIXED_PRIME,
    MILLER_RABIN_ROUNDS,
)
from secretrecon.crypto import shamir
from secretrecon.crypto.errors import ReconstructionError
from secretrecon.crypto.strategy import make_strategy
from secretrecon.document.errors import DocumentError
from secretrecon.document.parser import parse_mapping

logger = logging.getLogger(__name__)


class ServiceSettings(BaseModel):
    """Defaults applied when a request leaves an option unset."""

    strategy: str = DEFAULT_STRATEGY
    prime: int = FIXED_PRIME
    margin: int = DYNAMIC_PRIME_MARGIN
    rounds: int = MILLER_RABIN_ROUNDS


# ------ request / response models ------


class ReconstructRequest(BaseModel):
    document: Dict[str, Any]
    strategy: Optional[str] = None
    prime: Optional[Union[str, int]] = None
    margin: Optional[int] = None


class ReconstructResponse(BaseModel):
    secret: str
    strategy: str
    modulus: Optional[str] = None
    threshold: int
    indices: List[int]


def create_app(settings: ServiceSettings | None = None) -> FastAPI:
    """Factory that creates the reconstruction app."""
    if settings is None:
        settings = ServiceSettings()

    # share values and secrets have no size bound
    sys.set_int_max_str_digits(0)

    app = FastAPI(title="secretrecon")

    @app.post("/reconstruct", response_model=ReconstructResponse)
    async def reconstruct(req: ReconstructRequest):
        try:
            prime = int(req.prime) if req.prime is not None else settings.prime
            strategy = make_strategy(
                req.strategy or settings.strategy,
                prime=prime,
                margin=req.margin if req.margin is not None else settings.margin,
                rounds=settings.rounds,
            )
        except ValueError as exc:
            raise HTTPException(422, str(exc))

        try:
            doc = parse_mapping(req.document)
        except DocumentError as exc:
            raise HTTPException(422, str(exc))

        try:
            result = shamir.recover(doc.shares, doc.threshold, strategy)
        except ReconstructionError as exc:
            logger.info("reconstruction failed: %s", exc)
            raise HTTPException(400, str(exc))

        return ReconstructResponse(
            secret=str(result.secret),
            strategy=result.strategy,
            modulus=None if result.modulus is None else str(result.modulus),
            threshold=result.threshold,
            indices=result.indices,
        )

    @app.get("/health")
    async def health():
        return {"status": "ok", "strategy": settings.strategy}

    return app


app = create_app()
