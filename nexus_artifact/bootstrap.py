"""Wire the artifact services once per process."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from typing import Optional

from nexus_artifact.modules.artifact.fileget import NexusRemote, RemoteFactory
from nexus_artifact.modules.artifact.platform import FileOps, detect_file_ops
from nexus_artifact.modules.artifact.secrets import SecretStore
from nexus_artifact.modules.artifact.secrets.factory import build_secret_store
from nexus_artifact.modules.artifact.service import ArtifactService, ConfigResolver
from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Container that wires plain-Python services with shared settings.

    The secret store strategy and the platform file operations are picked
    here and injected; nothing downstream inspects the platform or the
    execution mode again.
    """

    settings: Settings
    secret_store: Optional[SecretStore] = None
    remote_factory: Optional[RemoteFactory] = None
    file_ops: Optional[FileOps] = None
    config_resolver: ConfigResolver = field(init=False)
    artifact_service: ArtifactService = field(init=False)

    def __post_init__(self) -> None:
        if self.secret_store is None:
            self.secret_store = build_secret_store(self.settings)
        if self.remote_factory is None:
            self.remote_factory = partial(NexusRemote.create, timeout=self.settings.nexus_timeout)
        if self.file_ops is None:
            self.file_ops = detect_file_ops()
        self.config_resolver = ConfigResolver(self.secret_store)
        self.artifact_service = ArtifactService(
            self.config_resolver,
            self.remote_factory,
            self.file_ops,
        )
        log.info(
            "Artifact services ready mode=%s platform=%s",
            self.settings.execution_mode.value,
            self.file_ops.name,
        )
