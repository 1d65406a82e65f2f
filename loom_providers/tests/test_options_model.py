"""Unit tests for the tiered ``ModelOptions`` value type."""

from __future__ import annotations

from typing import Optional

import pytest
from pydantic import ValidationError

from loom_providers.base.options import PORTABLE_FIELDS, ModelOptions, ProviderExtension
from loom_providers.openai import OpenAiChatExtension
from loom_providers.stabilityai import StabilityImageExtension


def test_portable_fields_match_model_options_fields():
    assert set(ModelOptions.model_fields) - {"extension"} == set(PORTABLE_FIELDS)


def test_options_are_frozen():
    opts = ModelOptions(temperature=0.2)
    with pytest.raises(ValidationError):
        opts.temperature = 0.5  # type: ignore[misc]


def test_out_of_range_values_rejected():
    with pytest.raises(ValidationError):
        ModelOptions(temperature=3.5)
    with pytest.raises(ValidationError):
        ModelOptions(max_tokens=0)


def test_unknown_field_rejected():
    with pytest.raises(ValidationError):
        ModelOptions(cfg_scale=7)  # type: ignore[call-arg]


def test_carries_checks_extension_type():
    opts = ModelOptions(extension=OpenAiChatExtension(n=2))
    assert opts.carries(OpenAiChatExtension)
    assert not opts.carries(StabilityImageExtension)
    assert not ModelOptions().carries(OpenAiChatExtension)


def test_extension_keeps_its_concrete_type():
    opts = ModelOptions(extension=StabilityImageExtension(width=1024))
    assert isinstance(opts.extension, StabilityImageExtension)
    dumped = opts.model_dump()
    assert dumped["extension"]["width"] == 1024


def test_portable_strips_extension_without_touching_original():
    opts = ModelOptions(model="m", extension=OpenAiChatExtension(user="u"))
    portable = opts.portable()
    assert portable.extension is None
    assert portable.model == "m"
    assert opts.extension is not None


def test_get_reads_both_tiers_and_hides_unsupported_portable_fields():
    opts = ModelOptions(
        temperature=0.5,
        seed=3,
        extension=StabilityImageExtension(width=768),
    )
    assert opts.get("temperature") is None
    assert opts.get("seed") == 3
    assert opts.get("width") == 768
    with pytest.raises(KeyError):
        opts.get("does_not_exist")


def test_to_params_flattens_present_values():
    opts = ModelOptions(
        model="gpt-4o",
        temperature=0.1,
        extension=OpenAiChatExtension(n=2, user="svc"),
    )
    assert opts.to_params() == {"model": "gpt-4o", "temperature": 0.1, "n": 2, "user": "svc"}


def test_extension_may_not_shadow_portable_fields():
    with pytest.raises(TypeError):

        class _Shadowing(ProviderExtension):
            temperature: Optional[float] = None


def test_extension_fields_must_be_optional():
    with pytest.raises(TypeError):

        class _Required(ProviderExtension):
            guidance: float


def test_stability_dimensions_must_be_multiples_of_64():
    with pytest.raises(ValidationError):
        StabilityImageExtension(width=500)
    assert StabilityImageExtension(width=576).width == 576
