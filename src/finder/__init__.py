"""Artifact finder orchestration.

- cache.py: thread-safe per-coordinate resolution cache
- resolver.py: ArtifactFinder, the resolve pipeline and its result types
"""

from .cache import ResolutionCache, make_key  # noqa: F401
from .resolver import ArtifactFinder, ResolutionResult, ResolutionStatus  # noqa: F401

__all__ = [
    "ArtifactFinder",
    "ResolutionCache",
    "ResolutionResult",
    "ResolutionStatus",
    "make_key",
]
