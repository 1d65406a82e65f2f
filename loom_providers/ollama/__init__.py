"""Ollama provider package.

Exports:
- create_ollama_puller: ModelPuller preset driven by the ``ollama`` config section
"""

from .puller import create_ollama_puller

__all__ = ["create_ollama_puller"]
