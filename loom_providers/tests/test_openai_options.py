"""OpenAI chat option tier and defaults."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from loom_providers.base.options import ModelOptions
from loom_providers.openai import (
    OPENAI_LOCKED_FIELDS,
    OpenAiChatExtension,
    default_openai_chat_options,
    merge_openai_chat_options,
)


def test_no_fields_are_locked():
    assert not OPENAI_LOCKED_FIELDS


def test_every_field_overridable():
    defaults = ModelOptions(
        model="gpt-4o-mini",
        seed=1,
        temperature=0.7,
        extension=OpenAiChatExtension(n=1, user="svc", logprobs=False),
    )
    runtime = ModelOptions(seed=2, extension=OpenAiChatExtension(logprobs=True, top_logprobs=3))
    merged = merge_openai_chat_options(runtime, defaults)
    assert merged.seed == 2
    assert merged.temperature == 0.7
    assert merged.extension == OpenAiChatExtension(n=1, user="svc", logprobs=True, top_logprobs=3)


def test_configured_defaults():
    opts = default_openai_chat_options()
    assert opts.model == "gpt-4o-mini"
    assert opts.temperature == 0.7
    assert opts.extension == OpenAiChatExtension()


def test_env_model_override(monkeypatch):
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4.1")
    assert default_openai_chat_options().model == "gpt-4.1"


def test_unknown_option_key_rejected():
    with pytest.raises(ValidationError):
        default_openai_chat_options({"bogus": 1})


def test_top_logprobs_bounds():
    with pytest.raises(ValidationError):
        OpenAiChatExtension(top_logprobs=21)
