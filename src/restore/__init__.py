"""Restore index support.

- lockfile_parser.py: load project.assets.json into a RestoreIndex
- models.py: RestoreIndex and PackageRecord, including library lookup
- version_match.py: semantic version equality used by lookups
"""

from .lockfile_parser import load_restore_index  # noqa: F401
from .models import PackageRecord, RestoreIndex  # noqa: F401
from .version_match import versions_equal  # noqa: F401

__all__ = ["load_restore_index", "PackageRecord", "RestoreIndex", "versions_equal"]
