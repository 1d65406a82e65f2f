"""
OpenAI provider package.

Exports:
- OpenAiChatExtension: OpenAI-specific option tier
- merge_openai_chat_options / default_openai_chat_options
- openai_chat_invoker: ModelInvoker preset for chat clients
"""

from typing import Optional

from ..base.interfaces import InvocationClient
from ..base.invocation import ModelInvoker
from ..base.options import ModelOptions
from .options import (
    OPENAI_CHAT_MERGER,
    OPENAI_LOCKED_FIELDS,
    OpenAiChatExtension,
    default_openai_chat_options,
    merge_openai_chat_options,
)


def openai_chat_invoker(client: InvocationClient, defaults: Optional[ModelOptions] = None) -> ModelInvoker:
    """Return a ``ModelInvoker`` using OpenAI's merge policy and defaults."""
    return ModelInvoker(
        client, default_openai_chat_options() if defaults is None else defaults, OPENAI_CHAT_MERGER
    )


__all__ = [
    "OpenAiChatExtension",
    "OPENAI_LOCKED_FIELDS",
    "OPENAI_CHAT_MERGER",
    "merge_openai_chat_options",
    "default_openai_chat_options",
    "openai_chat_invoker",
]
