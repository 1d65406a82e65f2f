"""Cooperative cancellation primitives (public API facade).

``CancellationToken`` lets a caller stop a long-running operation, such as a
model pull loop, from another thread. ``CancelledError`` is raised by
operations that observe a cancellation request.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError"]
