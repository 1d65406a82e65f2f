"""Invocation facade (request context + options-resolving invoker)."""

from .model_invoker import ModelInvoker
from .request_context import RequestContext

__all__ = ["ModelInvoker", "RequestContext"]
