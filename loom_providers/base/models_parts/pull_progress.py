"""
PullProgress DTO returned by a provider's "pull model" operation.

Providers may stream many progress events per pull; collaborators report
the latest one. The puller only inspects ``status``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PullProgress:
    """Latest status of a model pull.

    Attributes:
        status: Free-form status token (``"success"`` once complete on Ollama).
        digest: Optional digest of the layer being downloaded.
        total: Optional total bytes for the current layer.
        completed: Optional bytes downloaded so far for the current layer.
    """

    status: str
    digest: Optional[str] = None
    total: Optional[int] = None
    completed: Optional[int] = None


__all__ = ["PullProgress"]
