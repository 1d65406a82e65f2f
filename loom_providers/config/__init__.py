"""Unified configuration layer for providers.

Goals
-----
* Centralize defaults (models, hosts, pull loop settings, default options).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) named by
       ``LOOM_PROVIDERS_CONFIG_FILE``
    3. Environment variables (e.g. ``OLLAMA_HOST``, ``OLLAMA_PULL_DELAY_MS``)
    4. In-code overrides passed to the helper (``None`` values ignored)
* Provide a single call site: ``get_provider_config(provider)``.

Environment Variable Conventions
--------------------------------
``<PROVIDER>_<FIELD>`` for every field in ``ENV_FIELDS``, upper-cased,
e.g. ``OLLAMA_PULL_MAX_ATTEMPTS`` or ``OPENAI_MODEL``. Values arrive as
strings; consumers coerce them.

External Config File
--------------------
JSON is tried first, then YAML. Structure example::

    ollama:
      host: http://gpu-box:11434
      pull_delay_ms: 2000
      pull_max_attempts: 120
    stabilityai:
      options:
        cfg_scale: 9
        style_preset: photographic

The ``options`` mapping of a provider seeds its default option set (see
``loom_providers.base.options.options_from_config``).
"""
from __future__ import annotations

import json
from copy import deepcopy
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    PROVIDERS_CONFIG_FILE_ENV,
    OLLAMA_DEFAULT_HOST,
    OLLAMA_DEFAULT_MODEL,
    OLLAMA_PULL_DELAY_MS,
    OLLAMA_PULL_MAX_ATTEMPTS,
    OLLAMA_PULL_MAX_DURATION_SECONDS,
    OLLAMA_PULL_SUCCESS_STATUS,
    OPENAI_DEFAULT_MODEL,
    OPENAI_DEFAULT_TEMPERATURE,
    STABILITYAI_DEFAULT_CFG_SCALE,
    STABILITYAI_DEFAULT_HEIGHT,
    STABILITYAI_DEFAULT_MODEL,
    STABILITYAI_DEFAULT_RESPONSE_FORMAT,
    STABILITYAI_DEFAULT_SAMPLES,
    STABILITYAI_DEFAULT_STEPS,
    STABILITYAI_DEFAULT_WIDTH,
)


# -------------------- Defaults --------------------

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "ollama": {
        "model": OLLAMA_DEFAULT_MODEL,
        "host": OLLAMA_DEFAULT_HOST,
        "pull_delay_ms": OLLAMA_PULL_DELAY_MS,
        "pull_success_status": OLLAMA_PULL_SUCCESS_STATUS,
        "pull_max_attempts": OLLAMA_PULL_MAX_ATTEMPTS,
        "pull_max_duration_seconds": OLLAMA_PULL_MAX_DURATION_SECONDS,
    },
    "openai": {
        "model": OPENAI_DEFAULT_MODEL,
        "options": {"temperature": OPENAI_DEFAULT_TEMPERATURE},
    },
    "stabilityai": {
        "model": STABILITYAI_DEFAULT_MODEL,
        "options": {
            "n": STABILITYAI_DEFAULT_SAMPLES,
            "width": STABILITYAI_DEFAULT_WIDTH,
            "height": STABILITYAI_DEFAULT_HEIGHT,
            "response_format": STABILITYAI_DEFAULT_RESPONSE_FORMAT,
            "cfg_scale": STABILITYAI_DEFAULT_CFG_SCALE,
            "steps": STABILITYAI_DEFAULT_STEPS,
        },
    },
}


ENV_FIELDS = (
    "model",
    "host",
    "base_url",
    "pull_delay_ms",
    "pull_success_status",
    "pull_max_attempts",
    "pull_max_duration_seconds",
)


_FILE_CACHE: Optional[Dict[str, Any]] = None


def _parse_config_text(text: str) -> Dict[str, Any]:
    """Parse JSON, falling back to YAML; non-mapping documents yield ``{}``."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    return data if isinstance(data, dict) else {}


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(PROVIDERS_CONFIG_FILE_ENV)
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    _FILE_CACHE = _parse_config_text(Path(path).read_text(encoding="utf-8"))
    return _FILE_CACHE


def reset_config_cache() -> None:
    """Forget the cached config file so the next lookup re-reads it."""
    global _FILE_CACHE
    _FILE_CACHE = None


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field in ENV_FIELDS:
        val = os.getenv(f"{prefix}_{field.upper()}")
        if val is not None:
            out[field] = val
    return out


def _merge_sections(base: Dict[str, Any], layer: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay ``layer`` on ``base``; the ``options`` mapping merges per key."""
    merged = dict(base)
    for key, value in layer.items():
        if key == "options" and isinstance(value, dict) and isinstance(merged.get("options"), dict):
            merged["options"] = {**merged["options"], **value}
        else:
            merged[key] = value
    return merged


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = deepcopy(DEFAULTS.get(name, {}))

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg = _merge_sections(cfg, file_cfg)

    cfg = _merge_sections(cfg, _env_overrides(name))

    if overrides:
        cfg = _merge_sections(cfg, {k: v for k, v in overrides.items() if v is not None})

    return cfg


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


__all__ = [
    "get_provider_config",
    "get_model",
    "reset_config_cache",
    "DEFAULTS",
    "ENV_FIELDS",
]
