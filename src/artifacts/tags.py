"""Tag pattern extraction: turn nuspec tags into artifact coordinates.

Two tag shapes are recognized, tried in order:

- ``artifact_versioned=<group>:<artifactId>:<version>``
- ``artifact=<group>:<artifactId>:<version>``

The group may be empty. The artifact id is captured lazily up to the next
colon and everything after it is the version, so extra colons end up in
the group.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from .models import Artifact

_ARTIFACT_VERSIONED_RE = re.compile(
    r"artifact_versioned=(?P<group>.+)?:(?P<artifact>.+?):(?P<version>.+)\s?"
)
_ARTIFACT_RE = re.compile(
    r"artifact=(?P<group>.+)?:(?P<artifact>.+?):(?P<version>.+)\s?"
)

TAG_PATTERNS = (_ARTIFACT_VERSIONED_RE, _ARTIFACT_RE)


def extract_artifact(tag_text: str) -> Optional[Artifact]:
    """Parse a single tag into an Artifact.

    Returns None for tags matching neither shape; those are ordinary
    nuspec tags (``android``, ``xamarin``, ...) and are not reported.
    """
    if not tag_text:
        return None

    for pattern in TAG_PATTERNS:
        match = pattern.match(tag_text)
        if match:
            return Artifact(
                artifact_id=match.group("artifact"),
                group_id=match.group("group") or "",
                version=match.group("version").rstrip(),
            )
    return None


def extract_artifacts(tags: Iterable[str]) -> List[Artifact]:
    """Extract every recognizable artifact from ``tags``, keeping order."""
    artifacts: List[Artifact] = []
    for tag in tags:
        artifact = extract_artifact(tag)
        if artifact is not None:
            artifacts.append(artifact)
    return artifacts
