"""Names of the portable (vendor-neutral) option fields.

Kept in its own module so both ``ModelOptions`` and ``ProviderExtension`` can
import it without a cycle.
"""
from __future__ import annotations

PORTABLE_FIELDS: tuple[str, ...] = (
    "model",
    "temperature",
    "top_p",
    "max_tokens",
    "stop",
    "seed",
    "frequency_penalty",
    "presence_penalty",
    "tools",
    "tool_choice",
    "tool_context",
    "http_headers",
)

# Values replaced wholesale on merge (runtime value wins entirely).
REPLACED_COLLECTIONS: frozenset[str] = frozenset({"stop", "tools", "tool_choice", "http_headers"})

# Mapping fields merged key by key, runtime keys winning.
DEEP_MERGED: frozenset[str] = frozenset({"tool_context"})


__all__ = ["PORTABLE_FIELDS", "REPLACED_COLLECTIONS", "DEEP_MERGED"]
