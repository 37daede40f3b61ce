"""HTTP client to interact with a Nexus 2 repository."""

from __future__ import annotations

import logging
import os
import time
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, Optional, Union

import httpx

from nexus_artifact.exceptions import ArtifactNotFound, NexusError
from nexus_artifact.modules.artifact.domain import (
    ArtifactCoordinates,
    ArtifactFileInfo,
    RepositoryConfig,
)
from nexus_artifact.modules.artifact.domain.constants import REDIRECT_PATH, RESOLVE_PATH

PROGRESS_STEP_BYTES = 5 * 1024 * 1024


class NexusRemote:
    """Resolve and download artifacts through the Nexus REST service."""

    def __init__(
        self,
        config: RepositoryConfig,
        *,
        verify: bool = True,
        timeout: float = 30,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.config = config
        self.base_url = config.url.rstrip("/")
        self.repository = config.repository
        self.log = logging.getLogger(self.__class__.__name__)
        self._client = client or httpx.Client(
            timeout=timeout,
            verify=verify,
            auth=config.auth,
            follow_redirects=True,
        )

    @classmethod
    def create(
        cls, config: RepositoryConfig, verify: bool = True, *, timeout: float = 30
    ) -> "NexusRemote":
        return cls(config, verify=verify, timeout=timeout)

    def _query(self, coords: ArtifactCoordinates) -> Dict[str, str]:
        return {
            "g": coords.group_id,
            "a": coords.artifact_id,
            "v": coords.version,
            "e": coords.extension,
            "r": self.repository,
        }

    def get_artifact_info(self, coordinate: Union[str, ArtifactCoordinates]) -> str:
        """Return the artifact resolution XML document for ``coordinate``."""
        coords = _as_coordinates(coordinate)
        resp = self._client.get(
            f"{self.base_url}{RESOLVE_PATH}",
            params=self._query(coords),
            headers={"Accept": "application/xml"},
        )
        if resp.status_code == 404:
            raise ArtifactNotFound(str(coords))
        if resp.status_code != 200:
            raise NexusError(
                f"Nexus returned HTTP {resp.status_code} resolving {coords}",
                resp.status_code,
            )
        return resp.text

    def pull_artifact(
        self,
        coordinate: Union[str, ArtifactCoordinates],
        destination_dir: Union[str, Path],
    ) -> ArtifactFileInfo:
        """Write the artifact into ``destination_dir`` and describe the file."""
        coords = _as_coordinates(coordinate)
        try:
            info = ET.fromstring(self.get_artifact_info(coords))
        except ET.ParseError as exc:
            raise NexusError(f"Unreadable resolve document for {coords}: {exc}") from exc
        version = coords.version
        if coords.is_latest:
            version = _element_text(info, "version") or version
        coords = coords.with_version(version)
        sha1 = _element_text(info, "sha1")

        directory = Path(destination_dir).expanduser().absolute()
        target = directory / coords.file_name
        if target.parent != directory:
            raise NexusError(f"Refusing to write {coords.file_name} outside {directory}")
        partial = target.with_name(f"{target.name}.part")
        self.log.info("Downloading artifact %s repository=%s -> %s", coords, self.repository, target)
        start_time = time.time()
        downloaded = 0
        next_bytes_logged = PROGRESS_STEP_BYTES
        with self._client.stream("GET", f"{self.base_url}{REDIRECT_PATH}", params=self._query(coords)) as response:
            if response.status_code == 404:
                raise ArtifactNotFound(str(coords))
            response.raise_for_status()
            try:
                with open(partial, "wb") as fh:
                    for chunk in response.iter_bytes(65536):
                        if not chunk:
                            continue
                        fh.write(chunk)
                        downloaded += len(chunk)
                        if downloaded >= next_bytes_logged:
                            self.log.info("Download progress %s %d bytes", coords, downloaded)
                            next_bytes_logged += PROGRESS_STEP_BYTES
                os.replace(partial, target)
            except Exception:
                partial.unlink(missing_ok=True)
                raise
        elapsed = max(time.time() - start_time, 1e-3)
        self.log.info(
            "Downloaded artifact %s -> %s (%d bytes, %.2f MB/s, %.2fs)",
            coords,
            target,
            downloaded,
            (downloaded / 1024 / 1024) / elapsed,
            elapsed,
        )
        return ArtifactFileInfo(
            file_name=coords.file_name,
            file_path=target,
            version=version,
            size=target.stat().st_size,
            sha1=sha1,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "NexusRemote":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _as_coordinates(coordinate: Union[str, ArtifactCoordinates]) -> ArtifactCoordinates:
    if isinstance(coordinate, ArtifactCoordinates):
        return coordinate
    return ArtifactCoordinates.parse(coordinate)


def _element_text(root: ET.Element, tag: str) -> Optional[str]:
    element = root if root.tag == tag else root.find(f".//{tag}")
    if element is None or element.text is None:
        return None
    return element.text.strip() or None
