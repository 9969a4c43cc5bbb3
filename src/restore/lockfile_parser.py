"""Restore index parser for project.assets.json.

Reads the two sections the finder needs:

- ``packageFolders``: package folder roots, in declaration order
- ``libraries``: ``"Name/Version"`` keys mapping to ``type``, ``path``
  and the ordered ``files`` list of each restored library
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List

from errors import IndexLoadError

from .models import PackageRecord, RestoreIndex

logger = logging.getLogger(__name__)


def _split_library_key(key: str) -> tuple:
    """Split ``"Name/Version"`` on the last slash."""
    if "/" not in key:
        raise ValueError(f"library key '{key}' is not of the form Name/Version")
    name, version = key.rsplit("/", 1)
    if not name or not version:
        raise ValueError(f"library key '{key}' is not of the form Name/Version")
    return name, version


def _parse_libraries(data: Dict[str, Any]) -> List[PackageRecord]:
    libraries = data.get("libraries", {})
    if not isinstance(libraries, dict):
        raise ValueError("'libraries' must be an object")

    records: List[PackageRecord] = []
    for key, info in libraries.items():
        if not isinstance(info, dict):
            raise ValueError(f"library '{key}' must be an object")
        name, version = _split_library_key(key)
        files = info.get("files", [])
        if not isinstance(files, list):
            raise ValueError(f"library '{key}' has a non-list 'files' entry")
        records.append(
            PackageRecord(
                name=name,
                version=version,
                type=str(info.get("type", "")),
                # Project references may omit path; packages default to lowercase id/version
                path=str(info.get("path") or f"{name.lower()}/{version.lower()}"),
                files=[str(f) for f in files],
            )
        )
    return records


def _parse_package_folders(data: Dict[str, Any]) -> List[str]:
    folders = data.get("packageFolders", {})
    if not isinstance(folders, dict):
        raise ValueError("'packageFolders' must be an object")
    # json preserves object key order, which is the restore's search order
    return list(folders.keys())


def load_restore_index(path: str) -> RestoreIndex:
    """Load and parse the restore index at ``path``.

    Args:
        path: Path to project.assets.json

    Returns:
        RestoreIndex

    Raises:
        IndexLoadError: the file is missing, unreadable or malformed
    """
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("top level must be an object")
        index = RestoreIndex(
            path=path,
            package_folders=_parse_package_folders(data),
            libraries=_parse_libraries(data),
        )
    except (OSError, json.JSONDecodeError, ValueError) as e:
        raise IndexLoadError(f"Couldn't load restore index {path}: {e}", path=path) from e

    logger.debug(
        "Loaded restore index %s: %d libraries, %d package folders",
        path, len(index.libraries), len(index.package_folders),
    )
    return index
