"""
Tiered option set for a single model invocation.

``ModelOptions`` holds the portable fields every provider understands plus an
optional provider ``extension``. Instances are frozen value objects: the
merge engine always builds a new instance and never mutates its inputs.

``None`` means "absent" for every field; merge precedence only lets a runtime
value win when it is not ``None``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

from .extension import ProviderExtension
from .containers import copy_containers
from .portable_fields import PORTABLE_FIELDS


class ModelOptions(BaseModel):
    """Portable option tier plus an optional provider-specific extension.

    Attributes:
        model: Target model identifier.
        temperature: Sampling temperature.
        top_p: Nucleus sampling probability mass.
        max_tokens: Maximum output size in tokens.
        stop: Stop sequences.
        seed: Random seed for reproducible sampling.
        frequency_penalty: Penalty applied to frequent tokens.
        presence_penalty: Penalty applied to already present tokens.
        tools: Provider-agnostic tool/function specifications.
        tool_choice: Tool selection policy (``"auto"``, ``"none"`` or a spec).
        tool_context: Arbitrary caller context handed to tool executions.
        http_headers: Extra HTTP headers for the outgoing request.
        extension: Provider-specific tier, or ``None`` for portable-only use.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    model: Optional[str] = None
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    max_tokens: Optional[int] = Field(default=None, gt=0)
    stop: Optional[List[str]] = None
    seed: Optional[int] = None
    frequency_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    presence_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    tools: Optional[List[Dict[str, Any]]] = None
    tool_choice: Optional[Union[str, Dict[str, Any]]] = None
    tool_context: Optional[Dict[str, Any]] = None
    http_headers: Optional[Dict[str, str]] = None
    extension: Optional[SerializeAsAny[ProviderExtension]] = None

    def carries(self, extension_type: Type[ProviderExtension]) -> bool:
        """Return whether the options carry ``extension_type``'s fields."""
        return isinstance(self.extension, extension_type)

    def portable(self) -> "ModelOptions":
        """Return a copy without the provider extension."""
        return self.detached().model_copy(update={"extension": None})

    def detached(self) -> "ModelOptions":
        """Return a copy with fresh containers in both tiers.

        Objects held inside the containers (services, locks, callbacks in
        ``tool_context`` or ``tools``) are shared, never deep-copied.
        """
        values: Dict[str, Any] = {name: copy_containers(getattr(self, name)) for name in PORTABLE_FIELDS}
        values["extension"] = self.extension.detached() if self.extension is not None else None
        return self.model_copy(update=values)

    def get(self, name: str) -> Any:
        """Read a portable or extension field by name.

        Portable fields the attached provider does not support read as
        ``None``. Unknown names raise ``KeyError``.
        """
        if name in PORTABLE_FIELDS:
            if self.extension is not None and name in type(self.extension).unsupported_portable:
                return None
            return getattr(self, name)
        if self.extension is not None and name in type(self.extension).model_fields:
            return getattr(self.extension, name)
        raise KeyError(name)

    def to_params(self) -> Dict[str, Any]:
        """Flatten both tiers into one mapping of present, supported values."""
        params = {name: self.get(name) for name in PORTABLE_FIELDS}
        if self.extension is not None:
            params.update(self.extension.model_dump())
        return {k: v for k, v in params.items() if v is not None}


__all__ = ["ModelOptions"]
