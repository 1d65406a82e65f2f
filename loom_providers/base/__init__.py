"""
Providers Base Package

Provider-agnostic building blocks:

- Options: tiered ``ModelOptions`` and the runtime-over-defaults merge engine
- Provisioning: ``ModelPuller`` for presence checks, removal and pull loops
- Invocation: ``RequestContext`` and the ``ModelInvoker`` facade
- Interfaces: collaborator Protocols
- Errors, cancellation and structured logging shared by all of the above
"""

from .cancellation import CancellationToken, CancelledError
from .errors import ErrorCode, ProviderError, ProvisioningTimeoutError, classify_exception
from .interfaces import InvocationClient, ModelProvisioningClient
from .invocation import ModelInvoker, RequestContext
from .models import DeleteResult, ModelSummary, PullProgress
from .options import (
    ModelOptions,
    OptionsMerger,
    ProviderExtension,
    merge_options,
    options_from_config,
)
from .provisioning import ModelPuller

__all__ = [
    # Options
    "ModelOptions",
    "ProviderExtension",
    "OptionsMerger",
    "merge_options",
    "options_from_config",
    # Provisioning
    "ModelPuller",
    "ModelSummary",
    "PullProgress",
    "DeleteResult",
    # Invocation
    "ModelInvoker",
    "RequestContext",
    # Interfaces
    "ModelProvisioningClient",
    "InvocationClient",
    # Errors & cancellation
    "ErrorCode",
    "ProviderError",
    "ProvisioningTimeoutError",
    "classify_exception",
    "CancellationToken",
    "CancelledError",
]
