"""Share document parser.

Documents are JSON objects of the form::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2",  "value": "111"},
        ...
    }

The parser enforces:
- A threshold ``k`` (in ``keys`` or at top level) that is a positive integer
- Every all-digit top-level key is a share with ``base`` and ``value``
- Each share value decodes in its declared base
Other top-level keys are ignored.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from secretrecon.document.errors import (
    DocumentError,
    InvalidThreshold,
    MissingThreshold,
    ShareDecodeError,
)
from secretrecon.document.shares import Share, ShareDocument

logger = logging.getLogger(__name__)


def parse_document(text: str) -> ShareDocument:
    """Parse JSON *text* and return a validated ``ShareDocument``."""
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentError(f"Invalid JSON: {exc}") from exc
    return parse_mapping(obj)


def parse_mapping(obj: Any) -> ShareDocument:
    """Validate an already-decoded JSON object."""
    if not isinstance(obj, dict):
        raise DocumentError(f"Document root must be an object, got {type(obj).__name__}")

    keys = obj.get("keys")
    if keys is not None and not isinstance(keys, dict):
        raise DocumentError("'keys' must be an object")
    keys = keys or {}

    threshold = _positive_int(_find(keys, obj, "k"), InvalidThreshold)
    if threshold is None:
        raise MissingThreshold()
    declared = _positive_int(
        keys.get("n"), lambda v: DocumentError(f"Invalid n: {v!r}")
    )

    shares: List[Share] = []
    for name, entry in obj.items():
        if not name.isdigit():
            if name not in ("keys", "k"):
                logger.debug("ignoring unknown field %r", name)
            continue
        shares.append(_decode_entry(name, entry))
    shares.sort(key=lambda s: s.index)

    if declared is not None and declared != len(shares):
        logger.warning("document declares n=%d but holds %d share(s)", declared, len(shares))

    return ShareDocument(threshold=threshold, declared_count=declared, shares=shares)


def _find(keys: Dict[str, Any], obj: Dict[str, Any], name: str) -> Any:
    if name in keys:
        return keys[name]
    return obj.get(name)


def _positive_int(value: Any, error) -> Optional[int]:
    if value is None:
        return None
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise error(value)
    return value


def _decode_entry(name: str, entry: Any) -> Share:
    if not isinstance(entry, dict):
        raise ShareDecodeError(name, "entry must be an object with 'base' and 'value'")
    for field in ("base", "value"):
        if field not in entry:
            raise ShareDecodeError(name, f"missing '{field}'")
    return Share.decode(name, entry["base"], entry["value"])
