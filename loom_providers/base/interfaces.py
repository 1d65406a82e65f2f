"""
Collaborator interfaces for the providers layer.

Re-exports the Protocols under ``loom_providers.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import InvocationClient, ModelProvisioningClient

__all__ = [
    "ModelProvisioningClient",
    "InvocationClient",
]
