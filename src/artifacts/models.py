"""Data model for Java/Android artifact coordinates declared by NuGet packages."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Artifact:
    """A Maven-style coordinate discovered in a package's nuspec tags."""
    artifact_id: str
    group_id: str
    version: str

    @property
    def id(self) -> str:
        """Artifact id, the short name used in diagnostics."""
        return self.artifact_id

    @property
    def coordinate(self) -> str:
        """Return ``group:artifact:version``."""
        return f"{self.group_id}:{self.artifact_id}:{self.version}"

    def __str__(self) -> str:
        return self.coordinate
