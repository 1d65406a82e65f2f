"""Merge engine behavior shared by every provider.

Covers the runtime-absent identity, field-level precedence, wholesale
collection replacement, deep-merged tool context, extension capability
gating and input immutability.
"""
from __future__ import annotations

import threading

import pytest

from loom_providers.base.options import (
    ModelOptions,
    OptionsMerger,
    merge_context,
    merge_options,
    merge_value,
)
from loom_providers.openai import OpenAiChatExtension
from loom_providers.stabilityai import StabilityImageExtension


@pytest.fixture()
def defaults() -> ModelOptions:
    return ModelOptions(
        model="base-model",
        temperature=0.2,
        max_tokens=256,
        stop=["a", "b"],
        http_headers={"X-Team": "core"},
        tool_context={"tenant": "acme", "user": {"id": "1", "tier": "pro"}},
    )


def test_merge_without_runtime_returns_equal_copy(defaults):
    merged = merge_options(None, defaults)
    assert merged == defaults  # nosec B101
    assert merged is not defaults  # nosec B101
    assert merged.tool_context is not defaults.tool_context  # nosec B101


def test_runtime_value_wins_and_absent_fields_fall_back(defaults):
    merged = merge_options(ModelOptions(temperature=0.9), defaults)
    assert merged.temperature == 0.9  # nosec B101
    assert merged.max_tokens == 256  # nosec B101
    assert merged.model == "base-model"  # nosec B101


def test_collections_are_replaced_wholesale(defaults):
    runtime = ModelOptions(stop=["c"], http_headers={"X-Trace": "t1"})
    merged = merge_options(runtime, defaults)
    assert merged.stop == ["c"]
    assert merged.http_headers == {"X-Trace": "t1"}


def test_empty_runtime_collection_still_replaces(defaults):
    merged = merge_options(ModelOptions(stop=[]), defaults)
    assert merged.stop == []


def test_tool_context_is_deep_merged(defaults):
    runtime = ModelOptions(tool_context={"tenant": "globex", "user": {"id": "9"}, "trace": True})
    merged = merge_options(runtime, defaults)
    assert merged.tool_context == {
        "tenant": "globex",
        "user": {"id": "9", "tier": "pro"},
        "trace": True,
    }


def test_merge_does_not_mutate_or_alias_inputs(defaults):
    runtime = ModelOptions(tool_context={"user": {"id": "9"}}, stop=["z"])
    before_runtime = runtime.model_dump()
    before_defaults = defaults.model_dump()

    merged = merge_options(runtime, defaults)
    merged.tool_context["user"]["id"] = "changed"
    merged.stop.append("more")

    assert runtime.model_dump() == before_runtime
    assert defaults.model_dump() == before_defaults


def test_extension_merged_with_precedence_when_runtime_carries_it():
    defaults = ModelOptions(extension=OpenAiChatExtension(n=1, user="svc"))
    runtime = ModelOptions(extension=OpenAiChatExtension(n=3))
    merged = merge_options(runtime, defaults, extension_type=OpenAiChatExtension)
    assert merged.extension == OpenAiChatExtension(n=3, user="svc")


def test_extension_type_inferred_from_defaults():
    defaults = ModelOptions(extension=OpenAiChatExtension(n=1))
    merged = merge_options(ModelOptions(extension=OpenAiChatExtension(n=2)), defaults)
    assert merged.extension.n == 2  # type: ignore[union-attr]


def test_portable_runtime_leaves_extension_untouched():
    ext = StabilityImageExtension(width=512, height=512, clip_guidance_preset="FAST_BLUE")
    defaults = ModelOptions(model="sd", extension=ext)
    merged = merge_options(ModelOptions(model="sdxl"), defaults, extension_type=StabilityImageExtension)
    assert merged.model == "sdxl"
    assert merged.extension == ext
    assert merged.extension is not ext


def test_foreign_extension_is_ignored():
    ext = StabilityImageExtension(width=512)
    defaults = ModelOptions(extension=ext)
    runtime = ModelOptions(extension=OpenAiChatExtension(n=4))
    merged = merge_options(runtime, defaults, extension_type=StabilityImageExtension)
    assert merged.extension == ext


def test_runtime_extension_without_default_extension():
    merged = merge_options(
        ModelOptions(extension=OpenAiChatExtension(user="u1")),
        ModelOptions(model="m"),
        extension_type=OpenAiChatExtension,
    )
    assert merged.extension == OpenAiChatExtension(user="u1")


def test_locked_fields_ignore_runtime_values():
    merger = OptionsMerger(OpenAiChatExtension, locked_fields={"seed", "user"})
    defaults = ModelOptions(seed=7, extension=OpenAiChatExtension(user="svc", n=1))
    runtime = ModelOptions(seed=42, extension=OpenAiChatExtension(user="attacker", n=2))
    merged = merger.merge(runtime, defaults)
    assert merged.seed == 7
    assert merged.extension.user == "svc"  # type: ignore[union-attr]
    assert merged.extension.n == 2  # type: ignore[union-attr]


def test_unknown_locked_field_rejected():
    with pytest.raises(ValueError, match="not_a_field"):
        OptionsMerger(StabilityImageExtension, locked_fields={"not_a_field"})


def test_merger_reports_provider_from_extension():
    assert OptionsMerger(StabilityImageExtension).provider == "stabilityai"
    assert OptionsMerger().provider == "generic"


def test_merge_value_copies():
    default = {"a": [1]}
    out = merge_value(None, default)
    assert out == default and out is not default
    assert merge_value(0, 5) == 0


def test_merge_context_handles_missing_sides():
    assert merge_context(None, None) is None
    assert merge_context({"a": 1}, None) == {"a": 1}
    assert merge_context(None, {"b": 2}) == {"b": 2}
    assert merge_context({"a": {"x": 1}}, {"a": "flat"}) == {"a": {"x": 1}}


def test_uncopyable_context_values_are_shared_not_copied():
    runtime_lock = threading.Lock()
    default_lock = threading.Lock()
    runtime = ModelOptions(tool_context={"lock": runtime_lock})
    defaults = ModelOptions(model="m", tool_context={"tenant": "acme", "guard": default_lock})

    merged = merge_options(runtime, defaults)
    assert merged.tool_context == {"tenant": "acme", "guard": default_lock, "lock": runtime_lock}  # nosec B101
    assert merged.tool_context["lock"] is runtime_lock  # nosec B101
    assert merged.tool_context["guard"] is default_lock  # nosec B101

    identity = merge_options(None, defaults)
    assert identity.tool_context["guard"] is default_lock  # nosec B101


def test_leaf_objects_keep_identity_while_containers_are_fresh(defaults):
    class _Service:
        pass

    svc = _Service()
    callback = lambda payload: payload  # noqa: E731
    runtime = ModelOptions(
        tool_context={"svc": svc, "user": {"handle": svc}},
        tools=[{"name": "echo", "fn": callback}],
    )

    merged = merge_options(runtime, defaults)
    assert merged.tool_context["svc"] is svc
    assert merged.tool_context["user"]["handle"] is svc
    assert merged.tool_context["user"]["tier"] == "pro"
    assert merged.tools[0]["fn"] is callback  # type: ignore[index]
    assert merged.tool_context is not runtime.tool_context
    assert merged.tools is not runtime.tools
    assert merged.tools[0] is not runtime.tools[0]  # type: ignore[index]


def test_locked_and_extension_values_share_leaves():
    bias = {"50256": -100}
    merger = OptionsMerger(OpenAiChatExtension, locked_fields={"tool_context"})
    svc = object()
    defaults = ModelOptions(tool_context={"svc": svc}, extension=OpenAiChatExtension(logit_bias=bias))
    merged = merger.merge(ModelOptions(tool_context={"svc": "ignored"}), defaults)
    assert merged.tool_context["svc"] is svc
    assert merged.extension.logit_bias == bias  # type: ignore[union-attr]
    assert merged.extension.logit_bias is not defaults.extension.logit_bias  # type: ignore[union-attr]


def test_detached_copies_containers_only():
    svc = object()
    opts = ModelOptions(tool_context={"svc": svc}, extension=OpenAiChatExtension(modalities=["text"]))
    copy = opts.detached()
    assert copy == opts
    assert copy.tool_context is not opts.tool_context
    assert copy.tool_context["svc"] is svc
    assert copy.extension.modalities is not opts.extension.modalities  # type: ignore[union-attr]
