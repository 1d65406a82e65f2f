"""
Provider-agnostic DTOs exchanged with provisioning collaborators.

Re-exports the one-class-per-file implementations under
``loom_providers.base.models_parts``.
"""

from .models_parts.model_summary import ModelSummary
from .models_parts.pull_progress import PullProgress
from .models_parts.delete_result import DeleteResult

__all__ = [
    "ModelSummary",
    "PullProgress",
    "DeleteResult",
]
