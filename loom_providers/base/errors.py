"""Provider error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``loom_providers.base.errors_parts`` so callers import from a single stable
path: ``from loom_providers.base.errors import ProviderError``.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.provisioning_timeout import ProvisioningTimeoutError
from .errors_parts.classification import classify_exception, wrap_exception

__all__ = [
    "ErrorCode",
    "ProviderError",
    "ProvisioningTimeoutError",
    "classify_exception",
    "wrap_exception",
]
