"""
RequestContext: what a caller hands the invocation facade for one call.

Carries the optional runtime options and the payload (prompt text plus an
instruction list). The capability check tells whether the runtime options
carry a given provider's extension tier.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Type

from ..options import ModelOptions, ProviderExtension


@dataclass(frozen=True)
class RequestContext:
    """Per-call request data.

    Attributes:
        options: Runtime options, or ``None`` when the caller set nothing.
        prompt: Primary prompt text.
        instructions: Additional ordered instructions (e.g. image text prompts).
    """

    options: Optional[ModelOptions] = None
    prompt: str = ""
    instructions: List[str] = field(default_factory=list)

    def carries_extension(self, extension_type: Type[ProviderExtension]) -> bool:
        """Return whether the runtime options match ``extension_type``."""
        return self.options is not None and self.options.carries(extension_type)


__all__ = ["RequestContext"]
