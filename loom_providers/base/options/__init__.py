"""Tiered model options and the merge engine.

Public surface:

- ``ModelOptions``: portable fields plus an optional provider extension.
- ``ProviderExtension``: base class for provider-specific option tiers.
- ``OptionsMerger`` / ``merge_options``: runtime-over-defaults resolution.
- ``options_from_config``: default option sets from the config layer.
"""

from .extension import ProviderExtension
from .from_config import options_from_config
from .merge import OptionsMerger, merge_context, merge_options, merge_value
from .model_options import ModelOptions
from .portable_fields import PORTABLE_FIELDS

__all__ = [
    "ModelOptions",
    "ProviderExtension",
    "OptionsMerger",
    "merge_options",
    "merge_context",
    "merge_value",
    "options_from_config",
    "PORTABLE_FIELDS",
]
