"""Errors parts package.

Prefer importing from ``loom_providers.base.errors``.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .provisioning_timeout import ProvisioningTimeoutError
from .classification import classify_exception, wrap_exception

__all__ = [
    "ErrorCode",
    "ProviderError",
    "ProvisioningTimeoutError",
    "classify_exception",
    "wrap_exception",
]
