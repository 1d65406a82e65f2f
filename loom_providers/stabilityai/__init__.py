"""
Stability AI provider package.

Exports:
- StabilityImageExtension: Stability-specific option tier
- STABILITY_LOCKED_FIELDS: fields callers cannot override
- merge_stability_image_options / default_stability_image_options
- stability_image_invoker: ModelInvoker preset for image clients
"""

from typing import Optional

from ..base.interfaces import InvocationClient
from ..base.invocation import ModelInvoker
from ..base.options import ModelOptions
from .options import (
    STABILITY_IMAGE_MERGER,
    STABILITY_LOCKED_FIELDS,
    StabilityImageExtension,
    default_stability_image_options,
    merge_stability_image_options,
)


def stability_image_invoker(client: InvocationClient, defaults: Optional[ModelOptions] = None) -> ModelInvoker:
    """Return a ``ModelInvoker`` using Stability AI's merge policy and defaults."""
    return ModelInvoker(
        client, default_stability_image_options() if defaults is None else defaults, STABILITY_IMAGE_MERGER
    )


__all__ = [
    "StabilityImageExtension",
    "STABILITY_LOCKED_FIELDS",
    "STABILITY_IMAGE_MERGER",
    "merge_stability_image_options",
    "default_stability_image_options",
    "stability_image_invoker",
]
