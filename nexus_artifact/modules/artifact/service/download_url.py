"""Build direct download links to the Nexus redirect service."""

from __future__ import annotations

import re
from urllib.parse import urlencode, urlsplit, urlunsplit

from nexus_artifact.modules.artifact.domain import ArtifactCoordinates, RepositoryConfig
from nexus_artifact.modules.artifact.domain.constants import REDIRECT_PATH

_DEFAULT_PORTS = {"http": 80, "https": 443}


def download_url_for(coordinate: str, config: RepositoryConfig) -> str:
    """Return the redirect URL for ``coordinate``; ``latest`` is passed through as is."""
    coords = ArtifactCoordinates.parse(coordinate)
    base = urlsplit(config.url)
    scheme = "https" if re.search("https", base.scheme or "") else "http"
    netloc = base.hostname or ""
    if base.port and base.port != _DEFAULT_PORTS[scheme]:
        netloc = f"{netloc}:{base.port}"
    query = urlencode(
        [
            ("g", coords.group_id),
            ("a", coords.artifact_id),
            ("v", coords.version),
            ("e", coords.extension),
            ("r", config.repository),
        ]
    )
    return urlunsplit((scheme, netloc, REDIRECT_PATH, query, ""))
