"""Errors raised while reading a share document."""

from __future__ import annotations


class DocumentError(ValueError):
    """Raised when a share document is malformed."""


class MissingThreshold(DocumentError):
    """The document has no threshold field ``k``."""

    def __init__(self) -> None:
        super().__init__("Missing k in document")


class InvalidThreshold(DocumentError):
    """The threshold field is present but not a positive integer."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid k: {value!r} (expected a positive integer)")


class ShareDecodeError(DocumentError):
    """A share entry cannot be decoded."""

    def __init__(self, entry: str, reason: str) -> None:
        self.entry = entry
        self.reason = reason
        super().__init__(f"Share {entry!r}: {reason}")
