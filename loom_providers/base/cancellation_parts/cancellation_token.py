"""Cooperative cancellation token implementation.

A token is backed by a ``threading.Event``: polling code calls
``raise_if_cancelled`` between steps, and blocking delays (such as the pause
between model pull attempts) call ``wait`` so that a cancel request ends the
delay at once instead of after it elapses.
"""

from __future__ import annotations

from threading import Event, Lock
from typing import List, Optional

from .cancelled_error import CancelledError


class CancellationToken:
    """A cooperative cancellation token with cascading children.

    ``cancel`` may be called from any thread; the first reason wins and later
    calls are no-ops. Children linked to a cancelled parent are cancelled
    immediately with the parent's reason.
    """

    def __init__(self, *, parent: Optional["CancellationToken"] = None) -> None:
        self._event = Event()
        self._lock = Lock()
        self._reason: Optional[str] = None
        self._children: List[CancellationToken] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def cancel(self, reason: Optional[str] = None) -> None:
        """Request cancellation and cascade it to linked children."""
        with self._lock:
            if self._event.is_set():
                return
            self._reason = reason
            self._event.set()
            children = list(self._children)
        for child in children:
            child.cancel(reason)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Link ``token`` so this token's cancellation reaches it; returns it."""
        with self._lock:
            self._children.append(token)
            cancelled = self._event.is_set()
        if cancelled:
            token.cancel(self._reason)
        return token

    def child(self) -> "CancellationToken":
        return CancellationToken(parent=self)

    def wait(self, seconds: float) -> bool:
        """Block for up to ``seconds``; return ``True`` if cancelled meanwhile."""
        if seconds <= 0:
            return self._event.is_set()
        return self._event.wait(seconds)

    def raise_if_cancelled(self) -> None:
        """Raise ``CancelledError`` carrying the cancel reason, if cancelled."""
        if self._event.is_set():
            raise CancelledError(self._reason or "operation cancelled")

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"CancellationToken(cancelled={self.cancelled}, reason={self._reason!r})"


__all__ = ["CancellationToken"]
