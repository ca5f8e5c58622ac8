#!/usr/bin/env python3
"""Batch secret reconstruction.

Usage:
    secretrecon [options] FILE_OR_URL [FILE_OR_URL ...]
    python -m secretrecon.cli.run_batch [options] FILE_OR_URL [...]

For every input the script:
1. Reads the document (local file, or http(s) URL fetched with httpx).
2. Parses the threshold and shares.
3. Reconstructs the secret with the selected strategy.
4. Prints ``<input>: <secret>`` on stdout, or an error line on stderr.

A failing input never stops the batch and never changes the exit status.
"""

from __future__ import annotations

import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import httpx

from secretrecon.config import DEFAULT_STRATEGY, FETCH_TIMEOUT, LOG_FORMAT, LOG_LEVEL, STRATEGIES
from secretrecon.crypto import shamir
from secretrecon.crypto.errors import ReconstructionError
from secretrecon.crypto.strategy import Strategy, make_strategy
from secretrecon.document.errors import DocumentError
from secretrecon.document.parser import parse_document

logger = logging.getLogger(__name__)

# (succeeded, line)
Outcome = Tuple[bool, str]


def load_source(identifier: str, client: httpx.Client) -> str:
    """Return the text behind *identifier* (URL or file path)."""
    if identifier.startswith(("http://", "https://")):
        resp = client.get(identifier)
        resp.raise_for_status()
        return resp.text
    return Path(identifier).read_text(encoding="utf-8")


def process(identifier: str, strategy: Strategy, client: httpx.Client) -> Outcome:
    """Reconstruct one input; never raises."""
    try:
        text = load_source(identifier, client)
    except (OSError, UnicodeDecodeError, httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.info("%s: could not be read: %s", identifier, exc)
        return False, f"{identifier}: I/O error - {exc}"

    try:
        doc = parse_document(text)
        secret = shamir.reconstruct(doc.shares, doc.threshold, strategy)
        return True, f"{identifier}: {secret}"
    except (DocumentError, ReconstructionError) as exc:
        logger.info("%s: %s", identifier, exc)
        return False, f"{identifier}: Error - {exc}"
    except Exception as exc:  # isolate unexpected failures to this item
        logger.exception("%s: unexpected failure", identifier)
        return False, f"{identifier}: Unexpected error - {exc}"


def run(
    identifiers: Sequence[str],
    strategy: Strategy,
    client: httpx.Client,
    jobs: int = 1,
) -> List[Outcome]:
    """Process *identifiers*, possibly concurrently, preserving input order."""
    if jobs <= 1:
        return [process(ident, strategy, client) for ident in identifiers]
    with ThreadPoolExecutor(max_workers=jobs) as pool:
        return list(pool.map(lambda ident: process(ident, strategy, client), identifiers))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="secretrecon",
        description="Reconstruct Shamir secrets from share documents.",
    )
    parser.add_argument("inputs", nargs="+", metavar="FILE_OR_URL")
    parser.add_argument("--strategy", choices=STRATEGIES, default=DEFAULT_STRATEGY)
    parser.add_argument("--prime", type=int, help="modulus for the fixed strategy")
    parser.add_argument("--margin", type=int, help="dynamic strategy: prime > max value + margin")
    parser.add_argument("--rounds", type=int, help="Miller-Rabin rounds for prime checks")
    parser.add_argument("--jobs", type=int, default=1, help="inputs processed in parallel")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None, client: httpx.Client | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # share values and secrets have no size bound
    sys.set_int_max_str_digits(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format=LOG_FORMAT,
    )

    try:
        strategy = make_strategy(
            args.strategy, prime=args.prime, margin=args.margin, rounds=args.rounds
        )
    except ValueError as exc:
        parser.error(str(exc))

    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=FETCH_TIMEOUT)
    try:
        outcomes = run(args.inputs, strategy, client, jobs=args.jobs)
    finally:
        if owns_client:
            client.close()

    for ok, line in outcomes:
        print(line, file=sys.stdout if ok else sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
