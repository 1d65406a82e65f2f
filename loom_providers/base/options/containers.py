"""Structural copying of option values.

Option values may hold live caller objects (services, locks, callbacks in a
tool context or tool spec). Only the ``dict`` / ``list`` / ``tuple`` nesting
is rebuilt; leaf objects are shared by reference, never deep-copied.
"""
from __future__ import annotations

from typing import Any


def copy_containers(value: Any) -> Any:
    """Return ``value`` with fresh dict/list/tuple containers and shared leaves."""
    if isinstance(value, dict):
        return {key: copy_containers(item) for key, item in value.items()}
    if isinstance(value, list):
        return [copy_containers(item) for item in value]
    if isinstance(value, tuple):
        return tuple(copy_containers(item) for item in value)
    return value


__all__ = ["copy_containers"]
