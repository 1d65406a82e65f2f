"""Models parts package.

Prefer importing from ``loom_providers.base.models``.
"""

from .model_summary import ModelSummary
from .pull_progress import PullProgress
from .delete_result import DeleteResult

__all__ = [
    "ModelSummary",
    "PullProgress",
    "DeleteResult",
]
