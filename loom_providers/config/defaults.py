"""loom_providers.config.defaults
==============================

Central place for small, stable default values used across the package.
They can be overridden through the layered configuration in
``loom_providers.config`` (config file, environment variables, in-code
overrides) but provide sensible fallbacks for local development and tests.

This module intentionally avoids importing from other provider packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Configuration sources ----
# Environment variable naming an optional JSON/YAML config file.
PROVIDERS_CONFIG_FILE_ENV = "LOOM_PROVIDERS_CONFIG_FILE"


# ---- Ollama (local daemon) ----
OLLAMA_DEFAULT_MODEL = "llama3.2"
OLLAMA_DEFAULT_HOST = "http://localhost:11434"
# Pause between pull requests while waiting for a model to finish downloading.
OLLAMA_PULL_DELAY_MS = 5000
# Status token Ollama reports once a pull has completed.
OLLAMA_PULL_SUCCESS_STATUS = "success"
# Pull loop ceilings; ``None`` keeps polling until the success token arrives.
OLLAMA_PULL_MAX_ATTEMPTS = None
OLLAMA_PULL_MAX_DURATION_SECONDS = None


# ---- OpenAI chat ----
OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
OPENAI_DEFAULT_TEMPERATURE = 0.7


# ---- Stability AI image generation ----
STABILITYAI_DEFAULT_MODEL = "stable-diffusion-v1-6"
STABILITYAI_DEFAULT_WIDTH = 512
STABILITYAI_DEFAULT_HEIGHT = 512
STABILITYAI_DEFAULT_SAMPLES = 1
STABILITYAI_DEFAULT_CFG_SCALE = 7.0
STABILITYAI_DEFAULT_STEPS = 30
STABILITYAI_DEFAULT_RESPONSE_FORMAT = "application/json"


__all__ = [
    "PROVIDERS_CONFIG_FILE_ENV",
    "OLLAMA_DEFAULT_MODEL",
    "OLLAMA_DEFAULT_HOST",
    "OLLAMA_PULL_DELAY_MS",
    "OLLAMA_PULL_SUCCESS_STATUS",
    "OLLAMA_PULL_MAX_ATTEMPTS",
    "OLLAMA_PULL_MAX_DURATION_SECONDS",
    "OPENAI_DEFAULT_MODEL",
    "OPENAI_DEFAULT_TEMPERATURE",
    "STABILITYAI_DEFAULT_MODEL",
    "STABILITYAI_DEFAULT_WIDTH",
    "STABILITYAI_DEFAULT_HEIGHT",
    "STABILITYAI_DEFAULT_SAMPLES",
    "STABILITYAI_DEFAULT_CFG_SCALE",
    "STABILITYAI_DEFAULT_STEPS",
    "STABILITYAI_DEFAULT_RESPONSE_FORMAT",
]
