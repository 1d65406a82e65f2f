"""Stability AI image generation option tier.

Sampler-class tuning is provider policy, not per-call policy: guidance scale
(``cfg_scale``), ``sampler``, ``seed``, ``steps`` and ``style_preset`` are
always taken from the model's default options, even when a caller passes
``StabilityImageExtension`` values or a portable ``seed``. The remaining
extension fields (size, sample count, response format, CLIP guidance preset)
follow normal runtime-over-default precedence.

Text-generation portable knobs (temperature, top-p, penalties, stop, tools)
are accepted on the option set but read as absent for this provider.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, FrozenSet, Literal, Optional

from pydantic import Field, field_validator

from ..base.options import ModelOptions, OptionsMerger, ProviderExtension, options_from_config

PROVIDER = "stabilityai"

Sampler = Literal[
    "DDIM",
    "DDPM",
    "K_DPMPP_2M",
    "K_DPMPP_2S_ANCESTRAL",
    "K_DPM_2",
    "K_DPM_2_ANCESTRAL",
    "K_EULER",
    "K_EULER_ANCESTRAL",
    "K_HEUN",
    "K_LMS",
]

ClipGuidancePreset = Literal["FAST_BLUE", "FAST_GREEN", "NONE", "SIMPLE", "SLOW", "SLOWER", "SLOWEST"]

StylePreset = Literal[
    "3d-model",
    "analog-film",
    "anime",
    "cinematic",
    "comic-book",
    "digital-art",
    "enhance",
    "fantasy-art",
    "isometric",
    "line-art",
    "low-poly",
    "modeling-compound",
    "neon-punk",
    "origami",
    "photographic",
    "pixel-art",
    "tile-texture",
]


class StabilityImageExtension(ProviderExtension):
    """Stability AI text-to-image parameters.

    Attributes:
        n: Number of images to generate (1-10).
        width: Image width in pixels, a multiple of 64 (>= 128).
        height: Image height in pixels, a multiple of 64 (>= 128).
        response_format: Accept header value (``application/json`` or ``image/png``).
        cfg_scale: How strictly the diffusion follows the prompt (0-35).
        clip_guidance_preset: CLIP guidance preset.
        sampler: Diffusion sampler.
        steps: Number of diffusion steps (10-50).
        style_preset: Style preset guiding the image model.
    """

    provider: ClassVar[str] = PROVIDER
    unsupported_portable: ClassVar[FrozenSet[str]] = frozenset(
        {
            "temperature",
            "top_p",
            "max_tokens",
            "stop",
            "frequency_penalty",
            "presence_penalty",
            "tools",
            "tool_choice",
        }
    )

    n: Optional[int] = Field(default=None, ge=1, le=10)
    width: Optional[int] = Field(default=None, ge=128)
    height: Optional[int] = Field(default=None, ge=128)
    response_format: Optional[Literal["application/json", "image/png"]] = None
    cfg_scale: Optional[float] = Field(default=None, ge=0.0, le=35.0)
    clip_guidance_preset: Optional[ClipGuidancePreset] = None
    sampler: Optional[Sampler] = None
    steps: Optional[int] = Field(default=None, ge=10, le=50)
    style_preset: Optional[StylePreset] = None

    @field_validator("width", "height")
    @classmethod
    def _multiple_of_64(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value % 64:
            raise ValueError("image dimensions must be multiples of 64")
        return value


STABILITY_LOCKED_FIELDS: FrozenSet[str] = frozenset({"cfg_scale", "sampler", "seed", "steps", "style_preset"})

STABILITY_IMAGE_MERGER = OptionsMerger(StabilityImageExtension, locked_fields=STABILITY_LOCKED_FIELDS)


def merge_stability_image_options(runtime: Optional[ModelOptions], defaults: ModelOptions) -> ModelOptions:
    """Merge per-call image options over the Stability AI defaults."""
    return STABILITY_IMAGE_MERGER.merge(runtime, defaults)


def default_stability_image_options(overrides: Optional[Dict[str, Any]] = None) -> ModelOptions:
    """Return the configured Stability AI default options (``stabilityai`` config section)."""
    return options_from_config(PROVIDER, StabilityImageExtension, overrides)


__all__ = [
    "StabilityImageExtension",
    "STABILITY_LOCKED_FIELDS",
    "STABILITY_IMAGE_MERGER",
    "merge_stability_image_options",
    "default_stability_image_options",
]
