"""Share model.

A ``Share`` is one decoded point ``(index, value)`` of the sharing
polynomial.  ``ShareDocument`` is the validated content of one input
document: the threshold plus its shares ordered by index.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from secretrecon.document.errors import ShareDecodeError

_DIGITS = re.compile(r"[0-9A-Za-z]+")
_DECIMAL = re.compile(r"[0-9]+")


def _parse_decimal(entry: str, what: str, raw: Union[str, int]) -> int:
    if isinstance(raw, bool):
        raise ShareDecodeError(entry, f"{what} must be a decimal number, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str) or not _DECIMAL.fullmatch(raw):
        raise ShareDecodeError(entry, f"{what} must be a decimal number, got {raw!r}")
    try:
        return int(raw)
    except ValueError:
        raise ShareDecodeError(entry, f"{what} is too long ({len(raw)} digits)") from None


class Share(BaseModel):
    """A single decoded share."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=1)
    value: int = Field(ge=0)

    @classmethod
    def decode(
        cls,
        index: Union[str, int],
        base: Union[str, int],
        value: str,
    ) -> "Share":
        """Decode *value* written in *base* (2-36, case-insensitive)."""
        entry = str(index)
        x = _parse_decimal(entry, "index", index)
        if x < 1:
            raise ShareDecodeError(entry, f"index must be >= 1, got {x}")
        radix = _parse_decimal(entry, "base", base)
        if not 2 <= radix <= 36:
            raise ShareDecodeError(entry, f"base must be in 2..36, got {radix}")
        if not isinstance(value, str) or not _DIGITS.fullmatch(value):
            raise ShareDecodeError(entry, f"value must be alphanumeric, got {value!r}")
        try:
            y = int(value.lower(), radix)
        except ValueError:
            raise ShareDecodeError(
                entry, f"value {value!r} is not a valid base-{radix} number"
            ) from None
        return cls(index=x, value=y)

    def as_point(self) -> Tuple[int, int]:
        return (self.index, self.value)


class ShareDocument(BaseModel):
    """Validated share document."""

    model_config = ConfigDict(frozen=True)

    threshold: int = Field(ge=1)
    declared_count: Optional[int] = None
    shares: List[Share] = []
