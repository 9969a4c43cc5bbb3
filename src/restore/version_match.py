"""Semantic version equality for restore index lookups.

NuGet writes versions in normalized form (``1.0.0``) while callers may
pass short forms (``1.0``) or four-part legacy versions (``1.0.0.1``).
The fourth part is kept as a separate revision and the rest is coerced
with semantic_version. Prerelease labels compare case-insensitively as
NuGet does; build metadata must be identical.
"""
from __future__ import annotations

import re
from typing import Optional, Tuple

import semantic_version

_REVISION_RE = re.compile(r"^(\d+\.\d+\.\d+)\.(\d+)(?=$|[-+])")

VersionKey = Tuple[int, int, int, int, Tuple[str, ...], Tuple[str, ...]]


def _split_revision(version: str) -> Tuple[str, int]:
    """Split a four-part NuGet version into its semver part and revision."""
    match = _REVISION_RE.match(version)
    if not match:
        return version, 0
    return match.group(1) + version[match.end():], int(match.group(2))


def parse_version(version: str) -> Optional[Tuple[semantic_version.Version, int]]:
    """Coerce a NuGet version string into ``(semantic version, revision)``, or None.

    The fourth component of legacy versions is kept as the revision;
    NuGet treats ``1.2.3.0`` as ``1.2.3``.
    """
    if not version or not version.strip():
        return None
    text, revision = _split_revision(version.strip())
    try:
        return semantic_version.Version.coerce(text), revision
    except ValueError:
        return None


def _version_key(parsed: Tuple[semantic_version.Version, int]) -> VersionKey:
    ver, revision = parsed
    return (
        ver.major,
        ver.minor,
        ver.patch,
        revision,
        tuple(part.lower() for part in (ver.prerelease or ())),
        tuple(ver.build or ()),
    )


def versions_equal(left: str, right: str) -> bool:
    """Return True if two version strings denote the same version.

    Strings that are not versions at all fall back to case-insensitive
    comparison.
    """
    left_ver = parse_version(left)
    right_ver = parse_version(right)
    if left_ver is None or right_ver is None:
        return (left or "").strip().lower() == (right or "").strip().lower()
    return _version_key(left_ver) == _version_key(right_ver)
