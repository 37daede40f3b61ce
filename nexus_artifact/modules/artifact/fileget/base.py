"""Repository client capability used by the resolvers."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Protocol, Union

from nexus_artifact.modules.artifact.domain import ArtifactFileInfo, RepositoryConfig


class RepositoryRemote(Protocol):
    def get_artifact_info(self, coordinate: str) -> str:  # pragma: no cover - interface
        ...

    def pull_artifact(
        self, coordinate: str, destination_dir: Union[str, Path]
    ) -> ArtifactFileInfo:  # pragma: no cover - interface
        ...

    def close(self) -> None:  # pragma: no cover - interface
        ...


# create(config, verify_tls) -> remote
RemoteFactory = Callable[[RepositoryConfig, bool], RepositoryRemote]
