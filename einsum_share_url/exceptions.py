"""Exception hierarchy for einsum-share-url.

ShareUrlError
└── CompressionError
"""

from __future__ import annotations


class ShareUrlError(Exception):
    """Base exception for all einsum-share-url errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint


class CompressionError(ShareUrlError):
    """Raised when the gzip stream cannot be started or does not finish cleanly."""
