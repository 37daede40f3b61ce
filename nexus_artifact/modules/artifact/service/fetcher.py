"""Download artifact files through the repository client."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import httpx

from nexus_artifact.exceptions import NexusError, RemoteFetchFailure
from nexus_artifact.modules.artifact.domain import (
    ArtifactCoordinates,
    ArtifactFileInfo,
    RepositoryConfig,
)
from nexus_artifact.modules.artifact.fileget import RemoteFactory


class ArtifactFetcher:
    def __init__(self, remote_factory: RemoteFactory) -> None:
        self.remote_factory = remote_factory
        self.log = logging.getLogger(self.__class__.__name__)

    def fetch(
        self,
        coordinate: str,
        config: RepositoryConfig,
        destination_dir: Union[str, Path],
        verify: bool = True,
    ) -> ArtifactFileInfo:
        """Pull ``coordinate`` into an existing ``destination_dir``."""
        ArtifactCoordinates.parse(coordinate)
        remote = self.remote_factory(config, verify)
        try:
            info = remote.pull_artifact(coordinate, destination_dir)
        except (httpx.HTTPError, NexusError, OSError) as exc:
            raise RemoteFetchFailure(coordinate, str(exc)) from exc
        finally:
            remote.close()
        self.log.info("Fetched %s -> %s (%d bytes)", coordinate, info.file_path, info.size)
        return info
