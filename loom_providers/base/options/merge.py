"""
Options merge engine.

Combines a per-call ``runtime`` option set with a provider's stored
``defaults`` into the ``effective`` option set sent to the provider.

Rules
-----
- ``runtime is None``: the result equals ``defaults`` (as a fresh copy).
- Portable fields: runtime value when not ``None``, else the default.
- ``stop``, ``tools``, ``tool_choice`` and ``http_headers`` are replaced
  wholesale (fresh containers, shared leaf objects).
- ``tool_context`` is deep-merged key by key, runtime keys winning.
- Extension fields are merged with the same precedence only when the runtime
  options carry the provider's extension type. Portable-only runtime options
  (or options carrying another provider's extension) leave the extension
  exactly as in ``defaults``.
- Policy-locked fields always come from ``defaults``.

The engine is pure: no I/O, no shared state, inputs are never mutated (their
containers are rebuilt, leaf objects such as services or locks are shared), and
type mismatches resolve to "skip the extension merge" rather than an error.
"""
from __future__ import annotations

from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Type

from .extension import ProviderExtension
from .model_options import ModelOptions
from .containers import copy_containers
from .portable_fields import DEEP_MERGED, PORTABLE_FIELDS, REPLACED_COLLECTIONS


def merge_value(runtime_value: Any, default_value: Any) -> Any:
    """Return ``runtime_value`` if present, else ``default_value``.

    Containers are copied; the objects inside them are shared.
    """
    return copy_containers(runtime_value if runtime_value is not None else default_value)


def merge_context(
    runtime: Optional[Mapping[str, Any]],
    defaults: Optional[Mapping[str, Any]],
) -> Optional[Dict[str, Any]]:
    """Deep-merge two context maps; keys from ``runtime`` overwrite ``defaults``.

    Nested mappings present on both sides are merged recursively; any other
    runtime value replaces the default value for its key. Leaf values keep
    their identity.
    """
    if runtime is None:
        return copy_containers(dict(defaults)) if defaults is not None else None
    if defaults is None:
        return copy_containers(dict(runtime))
    merged: Dict[str, Any] = copy_containers(dict(defaults))
    for key, value in runtime.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_context(value, current)
        else:
            merged[key] = copy_containers(value)
    return merged


class OptionsMerger:
    """Provider-bound merge policy.

    Parameters
    ----------
    extension_type:
        The provider's ``ProviderExtension`` subclass, or ``None`` for a
        provider without extra fields. When ``None`` the type of
        ``defaults.extension`` (if any) is used for the capability check.
    locked_fields:
        Portable or extension field names that callers may not override.
    provider:
        Provider key, informational only.

    Raises
    ------
    ValueError
        If a locked field name belongs to neither tier.
    """

    def __init__(
        self,
        extension_type: Optional[Type[ProviderExtension]] = None,
        *,
        locked_fields: Iterable[str] = (),
        provider: Optional[str] = None,
    ) -> None:
        self._extension_type = extension_type
        self._locked: FrozenSet[str] = frozenset(locked_fields)
        self._provider = provider or (extension_type.provider if extension_type else "generic")
        known = set(PORTABLE_FIELDS) | set(extension_type.model_fields if extension_type else ())
        unknown = sorted(self._locked - known)
        if unknown:
            raise ValueError(f"unknown locked option fields for {self._provider}: {', '.join(unknown)}")

    @property
    def provider(self) -> str:
        return self._provider

    @property
    def extension_type(self) -> Optional[Type[ProviderExtension]]:
        return self._extension_type

    @property
    def locked_fields(self) -> FrozenSet[str]:
        return self._locked

    def merge(self, runtime: Optional[ModelOptions], defaults: ModelOptions) -> ModelOptions:
        """Return the effective options for one call."""
        if runtime is None:
            return defaults.detached()
        values: Dict[str, Any] = {}
        for name in PORTABLE_FIELDS:
            default_value = getattr(defaults, name)
            if name in self._locked:
                values[name] = copy_containers(default_value)
            elif name in DEEP_MERGED:
                values[name] = merge_context(getattr(runtime, name), default_value)
            elif name in REPLACED_COLLECTIONS:
                values[name] = merge_value(getattr(runtime, name), default_value)
            else:
                runtime_value = getattr(runtime, name)
                values[name] = default_value if runtime_value is None else runtime_value
        values["extension"] = self._merge_extension(runtime, defaults)
        return defaults.model_copy(update=values)

    def _merge_extension(self, runtime: ModelOptions, defaults: ModelOptions) -> Optional[ProviderExtension]:
        base = defaults.extension
        ext_type = self._extension_type or (type(base) if base is not None else None)
        if ext_type is None or not runtime.carries(ext_type):
            return base.detached() if base is not None else None
        if base is None:
            base = ext_type()
        elif not isinstance(base, ext_type):
            return base.detached()
        incoming = runtime.extension
        values: Dict[str, Any] = {}
        for name in ext_type.model_fields:
            default_value = getattr(base, name)
            if name in self._locked:
                values[name] = copy_containers(default_value)
            else:
                values[name] = merge_value(getattr(incoming, name), default_value)
        return base.model_copy(update=values)


def merge_options(
    runtime: Optional[ModelOptions],
    defaults: ModelOptions,
    *,
    extension_type: Optional[Type[ProviderExtension]] = None,
    locked_fields: Iterable[str] = (),
) -> ModelOptions:
    """Merge ``runtime`` over ``defaults`` with a one-off :class:`OptionsMerger`."""
    return OptionsMerger(extension_type, locked_fields=locked_fields).merge(runtime, defaults)


__all__ = ["OptionsMerger", "merge_options", "merge_context", "merge_value"]
