"""Remote model provisioning (presence checks, removal, pull loop)."""

from .model_puller import DEFAULT_PULL_DELAY_MS, DEFAULT_SUCCESS_STATUS, ModelPuller

__all__ = ["ModelPuller", "DEFAULT_PULL_DELAY_MS", "DEFAULT_SUCCESS_STATUS"]
