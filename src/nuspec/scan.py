"""Manifest tag scanner: locate a package's nuspec under a folder root and read its tags."""
from __future__ import annotations

import logging
import os
from typing import Iterable, List, Optional

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled
from restore.models import PackageRecord

from . import reader

logger = logging.getLogger(__name__)


def find_manifest(files: Iterable[str]) -> Optional[str]:
    """Return the first file list entry with the manifest extension.

    Args:
        files: Package-relative file paths in restore index order

    Returns:
        The matching entry or None if the package ships no manifest
    """
    extension = Constants.MANIFEST_EXTENSION.lower()
    for entry in files:
        if entry.lower().endswith(extension):
            return entry
    return None


def scan_payload(package: PackageRecord, folder_root: str) -> List[str]:
    """Scan one package payload under ``folder_root`` for nuspec tags.

    A package without a manifest entry, or whose manifest is missing on
    disk under this root, has no metadata and yields an empty list.

    Raises:
        ManifestCorruptError: the manifest exists but cannot be parsed.
    """
    manifest = find_manifest(package.files)
    if manifest is None:
        if is_debug_enabled(logger):
            logger.debug("No manifest listed", extra=extra_context(
                event="decision", component="scan", action="find_manifest",
                target=package.name, outcome="absent"
            ))
        return []

    manifest_path = os.path.join(folder_root, package.path, manifest)
    if not os.path.isfile(manifest_path):
        if is_debug_enabled(logger):
            logger.debug("Manifest not on disk", extra=extra_context(
                event="decision", component="scan", action="scan_payload",
                target=manifest_path, outcome="missing"
            ))
        return []

    return reader.read_tags(manifest_path)
