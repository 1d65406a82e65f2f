"""Cancellation error type."""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    Kept distinct from ``ProviderError`` so callers can tell a deliberate stop
    apart from a provider failure and skip retry logic for it.
    """


__all__ = ["CancelledError"]
