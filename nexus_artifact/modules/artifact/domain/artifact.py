"""Domain objects for artifact coordinates."""

from __future__ import annotations

from dataclasses import dataclass, replace

from nexus_artifact.exceptions import MalformedCoordinate

from .constants import LATEST_VERSION


@dataclass(frozen=True)
class ArtifactCoordinates:
    """Represents a Maven/Nexus artifact coordinate.

    The string form is ``group:artifact:version:extension``; a version of
    ``latest`` (any case) asks the repository for the newest release.
    """

    group_id: str
    artifact_id: str
    version: str
    extension: str

    @classmethod
    def parse(cls, location: str) -> "ArtifactCoordinates":
        fields = [field.strip() for field in location.split(":")]
        if len(fields) != 4 or not all(_is_safe_segment(field) for field in fields):
            raise MalformedCoordinate(location)
        group_id, artifact_id, version, extension = fields
        return cls(
            group_id=group_id,
            artifact_id=artifact_id,
            version=version,
            extension=extension,
        )

    @property
    def is_latest(self) -> bool:
        return self.version.casefold() == LATEST_VERSION

    @property
    def file_name(self) -> str:
        return f"{self.artifact_id}-{self.version}.{self.extension}"

    def with_version(self, version: str) -> "ArtifactCoordinates":
        return replace(self, version=version)

    def __str__(self) -> str:
        return ":".join((self.group_id, self.artifact_id, self.version, self.extension))


def _is_safe_segment(value: str) -> bool:
    # fields end up in a local file name
    return bool(value) and value not in (".", "..") and not any(sep in value for sep in "/\\")
