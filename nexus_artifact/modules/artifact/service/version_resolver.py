"""Resolve the ``latest`` version alias against the repository."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

import httpx

from nexus_artifact.exceptions import NexusError, RemoteResolutionFailure
from nexus_artifact.modules.artifact.domain import ArtifactCoordinates, RepositoryConfig
from nexus_artifact.modules.artifact.fileget import RemoteFactory


class VersionResolver:
    def __init__(self, remote_factory: RemoteFactory) -> None:
        self.remote_factory = remote_factory
        self.log = logging.getLogger(self.__class__.__name__)

    def resolve(self, coordinate: str, config: RepositoryConfig, verify: bool = True) -> str:
        """Return the concrete version for ``coordinate``.

        Literal versions come back untouched without contacting the server.
        For ``latest`` the first ``version`` element of the artifact info
        document is returned.
        """
        coords = ArtifactCoordinates.parse(coordinate)
        if not coords.is_latest:
            return coords.version

        remote = self.remote_factory(config, verify)
        try:
            document = remote.get_artifact_info(coordinate)
            root = ET.fromstring(document)
        except (httpx.HTTPError, NexusError, ET.ParseError) as exc:
            raise RemoteResolutionFailure(coordinate, str(exc)) from exc
        finally:
            remote.close()

        element = root if root.tag == "version" else root.find(".//version")
        if element is None or not (element.text or "").strip():
            raise RemoteResolutionFailure(coordinate, "no version element in artifact info")
        version = element.text.strip()
        self.log.info("Resolved %s to version %s", coordinate, version)
        return version
