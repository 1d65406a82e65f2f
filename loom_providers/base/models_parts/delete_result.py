"""DeleteResult DTO returned by a provider's "delete model" operation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DeleteResult:
    """Outcome of a remote delete.

    Attributes:
        success: Whether the provider reported the deletion as successful.
        detail: Optional provider message.
    """

    success: bool
    detail: Optional[str] = None


__all__ = ["DeleteResult"]
