"""Nuspec manifest support.

- reader.py: parse a .nuspec file and expose its metadata and tags
- scan.py: locate a package's nuspec under a package folder root
"""

from .reader import NuspecMetadata, read_metadata, read_tags  # noqa: F401
from .scan import find_manifest, scan_payload  # noqa: F401

__all__ = [
    "NuspecMetadata",
    "read_metadata",
    "read_tags",
    "find_manifest",
    "scan_payload",
]
