"""OpenAI chat option tier.

``OpenAiChatExtension`` carries the chat-completions knobs that have no
portable counterpart. OpenAI has no policy-locked fields: every portable and
extension field can be overridden per call.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, FrozenSet, List, Literal, Optional

from pydantic import Field

from ..base.options import ModelOptions, OptionsMerger, ProviderExtension, options_from_config

PROVIDER = "openai"


class OpenAiChatExtension(ProviderExtension):
    """OpenAI-only chat completion parameters.

    Attributes:
        logit_bias: Token id (as string) to bias value in [-100, 100].
        logprobs: Return log probabilities of output tokens.
        top_logprobs: Number of most likely tokens to return per position.
        max_completion_tokens: Upper bound including reasoning tokens.
        n: Number of choices to generate.
        response_format: Response format object (e.g. ``{"type": "json_object"}``).
        user: End-user identifier for abuse monitoring.
        parallel_tool_calls: Allow parallel function calling.
        modalities: Output modalities (``"text"``, ``"audio"``).
        stream_usage: Include token usage in the final stream chunk.
    """

    provider: ClassVar[str] = PROVIDER

    logit_bias: Optional[Dict[str, int]] = None
    logprobs: Optional[bool] = None
    top_logprobs: Optional[int] = Field(default=None, ge=0, le=20)
    max_completion_tokens: Optional[int] = Field(default=None, gt=0)
    n: Optional[int] = Field(default=None, ge=1)
    response_format: Optional[Dict[str, Any]] = None
    user: Optional[str] = None
    parallel_tool_calls: Optional[bool] = None
    modalities: Optional[List[Literal["text", "audio"]]] = None
    stream_usage: Optional[bool] = None


OPENAI_LOCKED_FIELDS: FrozenSet[str] = frozenset()

OPENAI_CHAT_MERGER = OptionsMerger(OpenAiChatExtension, locked_fields=OPENAI_LOCKED_FIELDS)


def merge_openai_chat_options(runtime: Optional[ModelOptions], defaults: ModelOptions) -> ModelOptions:
    """Merge per-call chat options over the OpenAI defaults."""
    return OPENAI_CHAT_MERGER.merge(runtime, defaults)


def default_openai_chat_options(overrides: Optional[Dict[str, Any]] = None) -> ModelOptions:
    """Return the configured OpenAI default options (``openai`` config section)."""
    return options_from_config(PROVIDER, OpenAiChatExtension, overrides)


__all__ = [
    "OpenAiChatExtension",
    "OPENAI_LOCKED_FIELDS",
    "OPENAI_CHAT_MERGER",
    "merge_openai_chat_options",
    "default_openai_chat_options",
]
