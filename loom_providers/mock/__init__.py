"""Mock collaborators exposing deterministic, scripted behaviour for tests."""

from .client import MockInvocationClient, MockProvisioningClient, RecordedInvocation

__all__ = ["MockProvisioningClient", "MockInvocationClient", "RecordedInvocation"]
