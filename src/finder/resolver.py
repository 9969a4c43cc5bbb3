"""Artifact finder: resolve the Java artifacts a restored NuGet package declares.

The pipeline for one coordinate is restore index lookup, then a nuspec
tag scan under every package folder root, then tag pattern extraction.
Results are memoized per coordinate for the lifetime of the finder.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from artifacts import Artifact, extract_artifacts
from common.logging_utils import Timer, extra_context, is_debug_enabled
from constants import Constants, _load_yaml_config, apply_config
from errors import IndexLoadError, ManifestCorruptError
from nuspec import scan_payload
from restore import PackageRecord, RestoreIndex, load_restore_index

from .cache import ResolutionCache, make_key

module_logger = logging.getLogger(__name__)


class ResolutionStatus(Enum):
    """Outcome of a single resolution."""
    RESOLVED = "resolved"
    NOT_FOUND = "not_found"
    MANIFEST_CORRUPT = "manifest_corrupt"


@dataclass
class ResolutionResult:
    """Resolution outcome for one package coordinate."""
    name: str
    version: str
    status: ResolutionStatus
    artifacts: List[Artifact] = field(default_factory=list)
    error: Optional[str] = None
    cached: bool = False

    @property
    def ok(self) -> bool:
        return self.status == ResolutionStatus.RESOLVED


class ArtifactFinder:
    """Resolves and memoizes nuspec-declared artifacts per package coordinate.

    One finder is built per build session from its restore index and
    shared by every caller; it is safe to use from multiple threads.
    """

    def __init__(
        self,
        index: RestoreIndex,
        cache: Optional[ResolutionCache[Tuple[Artifact, ...]]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the finder.

        Args:
            index: Loaded restore index.
            cache: Resolution cache; a fresh one is created if omitted.
            logger: Diagnostics sink; defaults to this module's logger.
        """
        self.index = index
        self.cache: ResolutionCache[Tuple[Artifact, ...]] = (
            cache if cache is not None else ResolutionCache()
        )
        self.log = logger or module_logger

    @classmethod
    def from_lockfile(
        cls,
        path: str,
        logger: Optional[logging.Logger] = None,
        config_path: Optional[str] = None,
    ) -> "ArtifactFinder":
        """Build a finder from the restore index at ``path``.

        The YAML config (``config_path``, ``JAVAFINDER_CONFIG`` or the
        default locations) is applied first, so its ``finder`` section
        governs manifest discovery for this session.

        A directory ``path`` (a project's ``obj`` folder) is searched for
        the restore index file name.

        Raises:
            IndexLoadError: the index cannot be loaded; no finder is usable.
        """
        log = logger or module_logger
        apply_config(_load_yaml_config(config_path))
        if os.path.isdir(path):
            path = os.path.join(path, Constants.RESTORE_INDEX_FILE)
        try:
            index = load_restore_index(path)
        except IndexLoadError as e:
            log.error("%s", e.message)
            raise
        return cls(index, logger=log)

    def resolve(self, name: str, version: str) -> ResolutionResult:
        """Resolve the artifacts declared by package ``name`` at ``version``.

        Never raises for per-package problems: a missing package or a
        corrupt manifest is reported in the returned result and is not
        cached, so a later call retries.
        """
        self.log.info("===== entering resolve(library: %s, version: %s) =====", name, version)
        key = make_key(name, version)

        cached = self.cache.get(key)
        if cached is not None:
            return ResolutionResult(name, version, ResolutionStatus.RESOLVED, list(cached), cached=True)

        try:
            found, hit = self.cache.get_or_compute(key, lambda: self._compute(key, name, version))
        except ManifestCorruptError as e:
            self.log.error("%s", e.message)
            return ResolutionResult(name, version, ResolutionStatus.MANIFEST_CORRUPT, error=e.message)

        if found is None:
            self.log.error(
                "Could not find NuGet package '%s' version '%s' in lock file. "
                "Ensure NuGet Restore has run since this <PackageReference> was added.",
                name, version,
            )
            return ResolutionResult(
                name, version, ResolutionStatus.NOT_FOUND,
                error=f"Package '{name}' version '{version}' not found in restore index",
            )
        return ResolutionResult(name, version, ResolutionStatus.RESOLVED, list(found), cached=hit)

    def find_artifacts(self, name: str, version: str) -> List[Artifact]:
        """Return just the artifacts for a coordinate; empty on any failure."""
        return self.resolve(name, version).artifacts

    def _compute(self, key: str, name: str, version: str) -> Optional[Tuple[Artifact, ...]]:
        package = self.index.get_library(name, version)
        if package is None:
            return None

        with Timer() as t:
            artifacts = self._scan_folders(package)

        self.log.info("===== Found %d java libs in pack %s =====", len(artifacts), key)
        for artifact in artifacts:
            self.log.info("===== java lib: %s =====", artifact.id)
        if is_debug_enabled(self.log):
            self.log.debug("Resolved package", extra=extra_context(
                event="function_exit", component="finder", action="resolve",
                target=key, outcome="resolved", count=len(artifacts),
                duration_ms=t.duration_ms(),
            ))
        return tuple(artifacts)

    def _scan_folders(self, package: PackageRecord) -> List[Artifact]:
        artifacts: List[Artifact] = []
        for folder in self.index.package_folder_roots():
            self.log.info("===== folder: %s =====", folder)
            artifacts.extend(extract_artifacts(scan_payload(package, folder)))
        return artifacts
