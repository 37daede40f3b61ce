from .artifact import ArtifactCoordinates
from .models import ArtifactFileInfo, NodeIdentity, RepositoryConfig

__all__ = [
    "ArtifactCoordinates",
    "ArtifactFileInfo",
    "NodeIdentity",
    "RepositoryConfig",
]
