"""Recipe-facing helpers for resolving, fetching and tracking artifacts."""

from __future__ import annotations

import logging
from pathlib import Path, PurePath
from typing import Optional, Union

from nexus_artifact.modules.artifact.domain import (
    ArtifactCoordinates,
    ArtifactFileInfo,
    NodeIdentity,
)
from nexus_artifact.modules.artifact.domain.constants import NEXUS_DBI
from nexus_artifact.modules.artifact.fileget import RemoteFactory
from nexus_artifact.modules.artifact.platform import FileOps
from .config_resolver import ConfigResolver
from .deployment_state import DeploymentStateReader
from .download_url import download_url_for
from .fetcher import ArtifactFetcher
from .version_resolver import VersionResolver

log = logging.getLogger(__name__)


class ArtifactService:
    """Bundle the resolvers behind the calls a deployment recipe makes.

    Repository config is loaded fresh on every call that needs it and never
    for a literal version lookup.
    """

    def __init__(
        self,
        config_resolver: ConfigResolver,
        remote_factory: RemoteFactory,
        file_ops: FileOps,
        *,
        repository_key: str = NEXUS_DBI,
    ) -> None:
        self.config_resolver = config_resolver
        self.file_ops = file_ops
        self.repository_key = repository_key
        self.version_resolver = VersionResolver(remote_factory)
        self.fetcher = ArtifactFetcher(remote_factory)
        self.state_reader = DeploymentStateReader(file_ops)

    # ------------------------------------------------------------------ Nexus helpers
    def get_actual_version(
        self,
        node: Union[NodeIdentity, str],
        artifact_location: str,
        ssl_verify: bool = True,
    ) -> str:
        """Return the version ``latest`` resolves to, or the literal version.

        ``get_actual_version(node, "com.myartifact:my-artifact:latest:tgz")`` -> ``"2.0.5"``
        ``get_actual_version(node, "com.myartifact:my-artifact:1.0.1:tgz")`` -> ``"1.0.1"``
        """
        coords = ArtifactCoordinates.parse(artifact_location)
        if not coords.is_latest:
            return coords.version
        if not ssl_verify:
            log.warning("TLS verification disabled while resolving %s", artifact_location)
        config = self.config_resolver.resolve(node, self.repository_key)
        return self.version_resolver.resolve(artifact_location, config, ssl_verify)

    def retrieve_from_nexus(
        self,
        node: Union[NodeIdentity, str],
        source: str,
        destination_dir: Union[str, Path],
        ssl_verify: bool = True,
    ) -> ArtifactFileInfo:
        ArtifactCoordinates.parse(source)
        config = self.config_resolver.resolve(node, self.repository_key)
        return self.fetcher.fetch(source, config, destination_dir, ssl_verify)

    def artifact_download_url_for(self, node: Union[NodeIdentity, str], source: str) -> str:
        ArtifactCoordinates.parse(source)
        config = self.config_resolver.resolve(node, self.repository_key)
        return download_url_for(source, config)

    # ------------------------------------------------------------------ deployment state
    def get_current_deployed_version(self, deploy_to_dir: Union[str, Path]) -> Optional[str]:
        """``get_current_deployed_version("/opt/my_deploy_dir")`` -> ``"2.0.65"``."""
        return self.state_reader.current_version(deploy_to_dir)

    # ------------------------------------------------------------------ file helpers
    def is_symlink(self, path: Union[str, Path]) -> bool:
        return self.file_ops.is_symlink(path)

    def readlink(self, path: Union[str, Path]) -> PurePath:
        return self.file_ops.resolve_symlink(path)

    def copy_command_for(self, source: Union[str, Path], destination: Union[str, Path]) -> str:
        return self.file_ops.build_copy_command(source, destination)
