"""Data models for the restore index (project.assets.json)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from constants import Constants

from .version_match import versions_equal


@dataclass
class PackageRecord:
    """One library entry of the restore index."""
    name: str
    version: str
    type: str
    path: str  # relative to a package folder root
    files: List[str] = field(default_factory=list)

    @property
    def is_package(self) -> bool:
        """True for NuGet packages; project references carry no payload."""
        return self.type.lower() == Constants.LIBRARY_TYPE_PACKAGE


@dataclass
class RestoreIndex:
    """Parsed restore index: package folder roots and library records."""
    path: str
    package_folders: List[str]
    libraries: List[PackageRecord]
    _by_name: Dict[str, List[PackageRecord]] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        for record in self.libraries:
            self._by_name.setdefault(record.name.lower(), []).append(record)

    def package_folder_roots(self) -> List[str]:
        """Return package folder roots in declaration order."""
        return list(self.package_folders)

    def get_library(self, name: str, version: str) -> Optional[PackageRecord]:
        """Find the library record for ``name`` at a semantically equal ``version``.

        Project references are returned too; they list no manifest, so
        they resolve to no artifacts rather than to a missing package.

        Returns:
            The first matching record or None if not present
        """
        for record in self._by_name.get(name.lower(), []):
            if versions_equal(record.version, version):
                return record
        return None

    def coordinates(self) -> List[Tuple[str, str]]:
        """Return ``(name, version)`` for every package library, in index order."""
        return [(r.name, r.version) for r in self.libraries if r.is_package]
