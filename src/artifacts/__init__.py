"""Artifact coordinates and the nuspec tag patterns that declare them."""

from .models import Artifact  # noqa: F401
from .tags import extract_artifact, extract_artifacts  # noqa: F401

__all__ = ["Artifact", "extract_artifact", "extract_artifacts"]
