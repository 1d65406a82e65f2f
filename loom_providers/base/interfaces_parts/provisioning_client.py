"""ModelProvisioningClient Protocol (single-class module).

Collaborator contract consumed by the model puller. Transport,
authentication and response decoding live behind it.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ..models import DeleteResult, ModelSummary, PullProgress


@runtime_checkable
class ModelProvisioningClient(Protocol):
    """Remote model inventory operations.

    Implementations raise ``ProviderError`` on transport or protocol failures.
    Any other exception is classified and wrapped by the caller.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"ollama"``."""
        ...

    def list_models(self) -> Sequence[ModelSummary]:
        """Return every model currently present on the remote system."""
        ...

    def delete_model(self, name: str) -> DeleteResult:
        """Delete ``name`` remotely and report whether it succeeded."""
        ...

    def pull_model(self, name: str) -> PullProgress:
        """Request a fetch of ``name`` and return the latest progress status."""
        ...
