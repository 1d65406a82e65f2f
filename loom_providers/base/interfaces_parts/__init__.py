"""Interfaces (Protocols) split into single-class modules.

``loom_providers.base.interfaces`` re-exports them as the stable import path.
"""

from .provisioning_client import ModelProvisioningClient
from .invocation_client import InvocationClient

__all__ = [
    "ModelProvisioningClient",
    "InvocationClient",
]
