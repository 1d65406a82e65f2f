"""
Base class for provider-specific option payloads.

A provider that understands knobs beyond the portable set declares a
``ProviderExtension`` subclass and attaches an instance to
``ModelOptions.extension``. The merge engine only reads extension fields after
checking that the runtime options carry the provider's extension type.

Subclass rules
--------------
- Every field must be optional with a ``None`` default; ``None`` means
  "absent" for merge precedence.
- Field names may not shadow a portable field (``TypeError`` at class
  creation).
- ``provider`` names the owning provider; ``unsupported_portable`` lists
  portable fields that provider ignores (they read as absent through
  ``ModelOptions.get`` and ``ModelOptions.to_params``).
"""
from __future__ import annotations

from typing import Any, ClassVar, FrozenSet

from pydantic import BaseModel, ConfigDict

from .containers import copy_containers
from .portable_fields import PORTABLE_FIELDS


class ProviderExtension(BaseModel):
    """Provider-specific option tier attached to ``ModelOptions``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    provider: ClassVar[str] = "generic"
    unsupported_portable: ClassVar[FrozenSet[str]] = frozenset()

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        clashes = sorted(set(cls.model_fields) & set(PORTABLE_FIELDS))
        if clashes:
            raise TypeError(f"{cls.__name__} shadows portable option fields: {', '.join(clashes)}")
        unknown = sorted(set(cls.unsupported_portable) - set(PORTABLE_FIELDS))
        if unknown:
            raise TypeError(f"{cls.__name__} lists unknown portable fields as unsupported: {', '.join(unknown)}")
        required = sorted(name for name, info in cls.model_fields.items() if info.is_required())
        if required:
            raise TypeError(f"{cls.__name__} extension fields must be optional: {', '.join(required)}")

    def detached(self) -> "ProviderExtension":
        """Return a copy with fresh containers; contained objects are shared."""
        return self.model_copy(update={name: copy_containers(getattr(self, name)) for name in type(self).model_fields})


__all__ = ["ProviderExtension"]
