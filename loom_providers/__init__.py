"""loom_providers package

Option resolution and model provisioning for AI model providers.

Purpose:
    Merge per-call model options over provider defaults across a portable and
    a provider-specific tier, and make sure remote models are present before
    use by driving a provider's pull operation to completion.

Public API (re-exported):
    - Version: ``__version__``
    - Options: :class:`ModelOptions`, :class:`ProviderExtension`,
      :class:`OptionsMerger`, :func:`merge_options`
    - Provisioning: :class:`ModelPuller`
    - Invocation: :class:`ModelInvoker`, :class:`RequestContext`
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode`,
      :class:`ProvisioningTimeoutError`, :class:`CancelledError`
    - Cancellation: :class:`CancellationToken`

Provider presets live in ``loom_providers.openai``,
``loom_providers.stabilityai`` and ``loom_providers.ollama``.
"""

from .base import (
    CancellationToken,
    CancelledError,
    ErrorCode,
    ModelInvoker,
    ModelOptions,
    ModelPuller,
    OptionsMerger,
    ProviderError,
    ProviderExtension,
    ProvisioningTimeoutError,
    RequestContext,
    merge_options,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ModelOptions",
    "ProviderExtension",
    "OptionsMerger",
    "merge_options",
    "ModelPuller",
    "ModelInvoker",
    "RequestContext",
    "ProviderError",
    "ErrorCode",
    "ProvisioningTimeoutError",
    "CancelledError",
    "CancellationToken",
]
