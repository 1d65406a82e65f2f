"""
Provisioning ceiling error.

Raised by the model puller when a configured attempt or duration ceiling is
exhausted before the provider reports its success sentinel.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass
class ProvisioningTimeoutError(ProviderError):
    """A pull loop gave up before the model finished provisioning.

    Attributes:
        attempts: Number of pull requests issued before giving up.
        elapsed_seconds: Wall-clock seconds spent in the loop.
        last_status: Last status token reported by the provider, if any.
    """

    code: ErrorCode = ErrorCode.TIMEOUT
    message: str = "model provisioning did not complete"
    provider: str = "unknown"
    attempts: int = 0
    elapsed_seconds: float = 0.0
    last_status: Optional[str] = None


__all__ = ["ProvisioningTimeoutError"]
