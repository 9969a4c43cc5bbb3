"""Error types raised at the restore-index and manifest boundaries."""

from typing import Optional


class FinderError(Exception):
    """Base class for artifact finder errors."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path


class IndexLoadError(FinderError):
    """The restore index could not be read or parsed. Fatal for the finder."""


class ManifestCorruptError(FinderError):
    """A package manifest exists on disk but is not well-formed."""
