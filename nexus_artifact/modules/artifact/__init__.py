"""Artifact module exports."""

from .service import ArtifactService
from .controller import router as artifact_router

__all__ = ["ArtifactService", "artifact_router"]
