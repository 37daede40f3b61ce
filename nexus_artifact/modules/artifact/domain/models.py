"""Dataclasses describing repository config, nodes and pulled files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from nexus_artifact.exceptions import InvalidRepositoryConfig


def _optional_str(payload: Mapping[str, Any], key: str) -> Optional[str]:
    value = payload.get(key)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


@dataclass(frozen=True)
class NodeIdentity:
    """The machine a recipe runs on and the environment it belongs to."""

    name: str
    environment: str


@dataclass
class RepositoryConfig:
    """Connection settings for one Nexus server, selected per environment."""

    url: str
    repository: str
    username: Optional[str] = None
    password: Optional[str] = None
    environment: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_mapping(
        cls,
        payload: Mapping[str, Any],
        *,
        repository_key: str,
        environment: Optional[str] = None,
    ) -> "RepositoryConfig":
        url = _optional_str(payload, "url")
        if not url:
            raise InvalidRepositoryConfig(repository_key, "url")
        repository = _optional_str(payload, "repository")
        if not repository:
            raise InvalidRepositoryConfig(repository_key, "repository")
        return cls(
            url=url,
            repository=repository,
            username=_optional_str(payload, "username"),
            password=_optional_str(payload, "password"),
            environment=environment,
            raw=dict(payload),
        )

    @property
    def auth(self) -> Optional[tuple[str, str]]:
        if self.username and self.password:
            return (self.username, self.password)
        return None


@dataclass
class ArtifactFileInfo:
    """Metadata of an artifact written to disk."""

    file_name: str
    file_path: Path
    version: str
    size: int
    sha1: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "file_name": self.file_name,
            "file_path": str(self.file_path),
            "version": self.version,
            "size": self.size,
            "sha1": self.sha1,
        }
