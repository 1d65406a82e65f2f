"""
Build a provider's default option set from the configuration layer.

The provider's ``options`` mapping is split into portable and extension
fields. The config ``model`` entry seeds ``ModelOptions.model`` unless the
``options`` mapping names a model itself. Unknown keys fail pydantic
validation (``extra="forbid"``) so typos in config files surface early.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Type

from ...config import get_provider_config
from .extension import ProviderExtension
from .model_options import ModelOptions
from .portable_fields import PORTABLE_FIELDS


def options_from_config(
    provider: str,
    extension_type: Optional[Type[ProviderExtension]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> ModelOptions:
    """Return the default ``ModelOptions`` configured for ``provider``.

    Parameters
    ----------
    provider:
        Provider key used for ``get_provider_config``.
    extension_type:
        Extension class receiving non-portable keys. When ``None`` every key
        must be portable.
    overrides:
        Option values applied on top of the configured ones (``None`` values
        ignored).

    Raises
    ------
    pydantic.ValidationError
        If a key is unknown or a value is out of range.
    """
    cfg = get_provider_config(provider)
    raw: Dict[str, Any] = dict(cfg.get("options") or {})
    raw.setdefault("model", cfg.get("model"))
    if overrides:
        raw.update({k: v for k, v in overrides.items() if v is not None})

    portable = {k: v for k, v in raw.items() if k in PORTABLE_FIELDS}
    extra = {k: v for k, v in raw.items() if k not in PORTABLE_FIELDS}
    if extension_type is None:
        return ModelOptions(**portable, **extra)
    return ModelOptions(**portable, extension=extension_type(**extra))


__all__ = ["options_from_config"]
