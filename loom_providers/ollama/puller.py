"""Ollama model puller preset.

Builds a :class:`ModelPuller` from the ``ollama`` configuration section so
the pull delay, success token and loop ceilings can be tuned through the
config file or environment (``OLLAMA_PULL_DELAY_MS``,
``OLLAMA_PULL_MAX_ATTEMPTS``, ``OLLAMA_PULL_MAX_DURATION_SECONDS``,
``OLLAMA_PULL_SUCCESS_STATUS``) without touching call sites.
"""

from __future__ import annotations

from typing import Any, Optional

from ..base.interfaces import ModelProvisioningClient
from ..base.provisioning import ModelPuller
from ..config import get_provider_config
from ..config.defaults import OLLAMA_PULL_DELAY_MS, OLLAMA_PULL_SUCCESS_STATUS

PROVIDER = "ollama"


def _coerce_non_empty_str(candidate: Any, fallback: str) -> str:
    """Return ``candidate`` stripped, or ``fallback`` when missing or blank."""
    if candidate is None:
        return fallback
    coerced = str(candidate).strip()
    return coerced or fallback


def _coerce_optional_int(candidate: Any, field: str) -> Optional[int]:
    """Parse an optional integer setting; blank strings read as unset.

    Raises ``ValueError`` naming ``field`` when the value is not an integer.
    """
    if candidate is None or (isinstance(candidate, str) and not candidate.strip()):
        return None
    try:
        return int(candidate)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"ollama.{field} must be an integer, got {candidate!r}") from exc


def _coerce_optional_float(candidate: Any, field: str) -> Optional[float]:
    """Parse an optional float setting; blank strings read as unset."""
    if candidate is None or (isinstance(candidate, str) and not candidate.strip()):
        return None
    try:
        return float(candidate)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"ollama.{field} must be a number, got {candidate!r}") from exc


def create_ollama_puller(client: ModelProvisioningClient, **overrides: Any) -> ModelPuller:
    """Return a ``ModelPuller`` configured from the ``ollama`` section.

    Parameters
    ----------
    client:
        Provisioning client talking to the Ollama daemon.
    **overrides:
        In-code overrides for ``pull_delay_ms``, ``pull_success_status``,
        ``pull_max_attempts`` and ``pull_max_duration_seconds``; ``None``
        values are ignored.
    """
    cfg = get_provider_config(PROVIDER, overrides=overrides)
    delay = _coerce_optional_int(cfg.get("pull_delay_ms"), "pull_delay_ms")
    return ModelPuller(
        client,
        pull_delay_ms=OLLAMA_PULL_DELAY_MS if delay is None else delay,
        success_status=_coerce_non_empty_str(cfg.get("pull_success_status"), OLLAMA_PULL_SUCCESS_STATUS),
        max_attempts=_coerce_optional_int(cfg.get("pull_max_attempts"), "pull_max_attempts"),
        max_duration_seconds=_coerce_optional_float(cfg.get("pull_max_duration_seconds"), "pull_max_duration_seconds"),
    )


__all__ = ["create_ollama_puller"]
