"""Unit tests for cooperative cancellation primitives.

Covers idempotent cancel, cascade to children, late link of child after
parent cancel, raise_if_cancelled behavior and interruptible waits.
"""
from __future__ import annotations

import threading
import time

import pytest

from loom_providers.base.cancellation import (
    CancellationToken,
    CancelledError,
)


def test_cancel_cascades_to_children_and_is_idempotent():
    parent = CancellationToken()
    child1 = parent.child()
    child2 = parent.child()

    parent.cancel(reason="stop")
    # idempotent second call
    parent.cancel(reason="ignored")

    assert parent.cancelled is True and parent.reason == "stop"  # nosec B101 - pytest assert in tests
    assert child1.cancelled is True and child1.reason == "stop"  # nosec B101 - pytest assert in tests
    assert child2.cancelled is True and child2.reason == "stop"  # nosec B101 - pytest assert in tests


def test_link_child_after_parent_cancel_immediately_cancels_child():
    parent = CancellationToken()
    parent.cancel("done")
    late_child = CancellationToken(parent=parent)
    assert late_child.cancelled is True and late_child.reason == "done"  # nosec B101 - pytest assert in tests


def test_raise_if_cancelled_raises_custom_error():
    token = CancellationToken()
    token.cancel("terminate")
    with pytest.raises(CancelledError):
        token.raise_if_cancelled()


def test_wait_times_out_when_not_cancelled():
    token = CancellationToken()
    assert token.wait(0.01) is False  # nosec B101 - pytest assert in tests
    assert token.wait(0) is False  # nosec B101 - pytest assert in tests


def test_wait_returns_immediately_when_already_cancelled():
    token = CancellationToken()
    token.cancel()
    started = time.monotonic()
    assert token.wait(30) is True  # nosec B101 - pytest assert in tests
    assert time.monotonic() - started < 5  # nosec B101 - pytest assert in tests


def test_cancel_from_another_thread_wakes_waiter():
    token = CancellationToken()
    timer = threading.Timer(0.05, token.cancel, kwargs={"reason": "bye"})
    timer.start()
    try:
        assert token.wait(30) is True  # nosec B101 - pytest assert in tests
    finally:
        timer.cancel()
    assert token.reason == "bye"  # nosec B101 - pytest assert in tests


def test_parent_cancel_wakes_child_waiter():
    parent = CancellationToken()
    child = parent.child()
    parent.cancel("cascade")
    assert child.wait(30) is True  # nosec B101 - pytest assert in tests
