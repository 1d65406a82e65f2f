"""Invocation facade: resolve options, then call the provider.

``ModelInvoker`` holds a provider's default options for its lifetime, merges
each call's runtime options over them with the provider's ``OptionsMerger``
and forwards the payload plus the effective options to an
``InvocationClient``. It performs no transport work itself.
"""
from __future__ import annotations

from typing import Any

from ..errors import ProviderError, wrap_exception
from ..interfaces import InvocationClient
from ..logging import LogContext, get_logger, log_event
from ..options import ModelOptions, OptionsMerger
from .request_context import RequestContext


class ModelInvoker:
    """Bind a client, its default options and its merge policy together."""

    def __init__(self, client: InvocationClient, defaults: ModelOptions, merger: OptionsMerger) -> None:
        self._client = client
        self._defaults = defaults.detached()
        self._merger = merger
        self._logger = get_logger(f"providers.{merger.provider}")

    @property
    def provider_name(self) -> str:
        return getattr(self._client, "provider_name", self._merger.provider)

    @property
    def defaults(self) -> ModelOptions:
        """A copy of the stored default options."""
        return self._defaults.detached()

    @property
    def merger(self) -> OptionsMerger:
        return self._merger

    def resolve(self, context: RequestContext) -> ModelOptions:
        """Return the effective options for ``context``."""
        effective = self._merger.merge(context.options, self._defaults)
        ext_type = self._merger.extension_type
        log_event(
            self._logger,
            "options.resolved",
            LogContext(provider=self.provider_name, model=effective.model),
            runtime_supplied=context.options is not None,
            extension_matched=bool(ext_type and context.carries_extension(ext_type)),
            locked=sorted(self._merger.locked_fields) or None,
        )
        return effective

    def call(self, context: RequestContext) -> Any:
        """Resolve options and invoke the client.

        Raises
        ------
        ProviderError
            Client failures, passed through or wrapped.
        """
        effective = self.resolve(context)
        try:
            return self._client.invoke(
                prompt=context.prompt,
                instructions=list(context.instructions),
                options=effective,
            )
        except ProviderError:
            raise
        except Exception as exc:
            raise wrap_exception(exc, provider=self.provider_name, model=effective.model) from exc


__all__ = ["ModelInvoker"]
