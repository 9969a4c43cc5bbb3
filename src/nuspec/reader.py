"""Nuspec manifest reader: pull metadata and tags out of a .nuspec file."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import List, Optional

from constants import Constants
from errors import ManifestCorruptError

logger = logging.getLogger(__name__)


@dataclass
class NuspecMetadata:
    """The subset of nuspec ``<metadata>`` the finder cares about."""
    id: Optional[str]
    version: Optional[str]
    tags: List[str] = field(default_factory=list)


def _parse_root(path: str) -> ET.Element:
    """Parse ``path`` and return its root with namespaces stripped.

    Raises:
        ManifestCorruptError: the file cannot be read, is not well-formed
            XML, or is not a nuspec document.
    """
    try:
        tree = ET.parse(path)
    except ET.ParseError as e:
        raise ManifestCorruptError(f"Couldn't parse nuspec file {path}: {e}", path=path) from e
    except OSError as e:
        raise ManifestCorruptError(f"Couldn't read nuspec file {path}: {e}", path=path) from e

    root = tree.getroot()
    # Remove namespace for easier parsing
    for elem in root.iter():
        if '}' in elem.tag:
            elem.tag = elem.tag.split('}')[1]

    if root.tag != "package":
        raise ManifestCorruptError(
            f"Unexpected root element <{root.tag}> in nuspec file {path}", path=path
        )
    return root


def _split_tags(text: Optional[str]) -> List[str]:
    """Split the raw tags field on single separators, as NuGet writes it."""
    if not text:
        return []
    return text.strip().split(Constants.TAG_SEPARATOR)


def read_metadata(path: str) -> NuspecMetadata:
    """Read id, version and tags from the nuspec at ``path``.

    Args:
        path: Absolute path to the .nuspec file

    Returns:
        NuspecMetadata; fields absent from the manifest are None/empty
    """
    root = _parse_root(path)
    metadata = root.find("metadata")
    if metadata is None:
        raise ManifestCorruptError(f"Missing <metadata> in nuspec file {path}", path=path)

    return NuspecMetadata(
        id=metadata.findtext("id"),
        version=metadata.findtext("version"),
        tags=_split_tags(metadata.findtext("tags")),
    )


def read_tags(path: str) -> List[str]:
    """Return the ordered tag list declared in the nuspec at ``path``."""
    tags = read_metadata(path).tags
    logger.debug("Read %d tags from %s", len(tags), path)
    return tags
