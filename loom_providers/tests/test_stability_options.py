"""Stability AI option policy: locked sampler-class fields, gated extension."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from loom_providers.base.options import ModelOptions
from loom_providers.openai import OpenAiChatExtension
from loom_providers.stabilityai import (
    STABILITY_LOCKED_FIELDS,
    StabilityImageExtension,
    default_stability_image_options,
    merge_stability_image_options,
)


@pytest.fixture()
def defaults() -> ModelOptions:
    return ModelOptions(
        model="stable-diffusion-v1-6",
        seed=7,
        extension=StabilityImageExtension(
            n=1,
            width=512,
            height=512,
            cfg_scale=7.0,
            steps=30,
            sampler="K_DPMPP_2M",
            style_preset="photographic",
            clip_guidance_preset="FAST_BLUE",
        ),
    )


def test_locked_fields_cover_sampler_class_settings():
    assert STABILITY_LOCKED_FIELDS == {"cfg_scale", "sampler", "seed", "steps", "style_preset"}  # nosec B101


def test_runtime_seed_is_ignored(defaults):
    merged = merge_stability_image_options(ModelOptions(seed=42), defaults)
    assert merged.seed == 7  # nosec B101


def test_extension_runtime_values_merge_except_locked(defaults):
    runtime = ModelOptions(
        seed=42,
        extension=StabilityImageExtension(
            width=1024,
            height=768,
            n=2,
            clip_guidance_preset="SLOW",
            cfg_scale=20.0,
            steps=50,
            sampler="K_EULER",
            style_preset="anime",
        ),
    )
    merged = merge_stability_image_options(runtime, defaults)
    ext = merged.extension
    assert isinstance(ext, StabilityImageExtension)  # nosec B101
    assert (ext.width, ext.height, ext.n) == (1024, 768, 2)  # nosec B101
    assert ext.clip_guidance_preset == "SLOW"  # nosec B101
    assert ext.cfg_scale == 7.0  # nosec B101
    assert ext.steps == 30  # nosec B101
    assert ext.sampler == "K_DPMPP_2M"  # nosec B101
    assert ext.style_preset == "photographic"  # nosec B101
    assert merged.seed == 7  # nosec B101


def test_portable_only_runtime_keeps_default_extension(defaults):
    merged = merge_stability_image_options(ModelOptions(model="sdxl-1.0"), defaults)
    assert merged.model == "sdxl-1.0"
    assert merged.extension == defaults.extension


def test_other_provider_extension_keeps_default_extension(defaults):
    merged = merge_stability_image_options(ModelOptions(extension=OpenAiChatExtension(n=5)), defaults)
    assert merged.extension == defaults.extension


def test_text_knobs_read_as_absent(defaults):
    merged = merge_stability_image_options(ModelOptions(temperature=0.4, stop=["x"]), defaults)
    assert merged.get("temperature") is None
    assert merged.get("stop") is None
    params = merged.to_params()
    assert "temperature" not in params
    assert params["width"] == 512


def test_configured_defaults():
    opts = default_stability_image_options()
    ext = opts.extension
    assert opts.model == "stable-diffusion-v1-6"
    assert isinstance(ext, StabilityImageExtension)
    assert (ext.width, ext.height, ext.n) == (512, 512, 1)
    assert ext.cfg_scale == 7.0 and ext.steps == 30
    assert ext.response_format == "application/json"


def test_configured_defaults_accept_overrides():
    opts = default_stability_image_options({"style_preset": "anime", "seed": 11})
    assert opts.seed == 11
    assert opts.extension.style_preset == "anime"  # type: ignore[union-attr]


@pytest.mark.parametrize(
    "field,value",
    [("steps", 5), ("cfg_scale", 40.0), ("n", 11), ("sampler", "K_FOO"), ("height", 100)],
)
def test_out_of_range_extension_values_rejected(field, value):
    with pytest.raises(ValidationError):
        StabilityImageExtension(**{field: value})
