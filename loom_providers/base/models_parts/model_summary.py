"""
ModelSummary DTO for remote model listings.

One entry of a provider's "list models" response. Only ``name`` matters to
the model puller; the remaining fields are carried for callers that display
listings.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ModelSummary:
    """A single listed model.

    Attributes:
        name: Exact model name as known to the provider (e.g. ``"llama3.2:1b"``).
        size: Optional size on disk in bytes.
        digest: Optional content digest.
        modified_at: Optional ISO-8601 timestamp of the last modification.
    """

    name: str
    size: Optional[int] = None
    digest: Optional[str] = None
    modified_at: Optional[str] = None


__all__ = ["ModelSummary"]
