"""InvocationClient Protocol (single-class module).

Collaborator contract consumed by ``ModelInvoker``: executes one model call
with already-resolved options.
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

from ..options import ModelOptions


@runtime_checkable
class InvocationClient(Protocol):
    """Executes a model call for a payload and effective options."""

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"stabilityai"``."""
        ...

    def invoke(self, *, prompt: str, instructions: Sequence[str], options: ModelOptions) -> Any:
        """Run the call and return the provider's typed result.

        Failures should surface as ``ProviderError``.
        """
        ...
