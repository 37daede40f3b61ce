from .config_resolver import ConfigResolver
from .deployment_state import DeploymentStateReader
from .download_url import download_url_for
from .fetcher import ArtifactFetcher
from .manager import ArtifactService
from .version_resolver import VersionResolver

__all__ = [
    "ArtifactFetcher",
    "ArtifactService",
    "ConfigResolver",
    "DeploymentStateReader",
    "VersionResolver",
    "download_url_for",
]
