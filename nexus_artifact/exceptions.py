"""Exception definitions for artifact resolution."""

from __future__ import annotations

from typing import Optional


class ArtifactError(Exception):
    """Base exception for nexus-artifact."""

    def __init__(self, message: str, error_code: Optional[str] = None) -> None:
        super().__init__(message)
        self.error_code = error_code


class ConfigNotFound(ArtifactError):
    """The secret store has no item for the repository key."""

    def __init__(self, repository_key: str) -> None:
        super().__init__(f"Repository config '{repository_key}' not found", "NA001")
        self.repository_key = repository_key


class EnvironmentConfigNotFound(ArtifactError):
    """The config item has neither the environment nor the '*' entry."""

    def __init__(self, repository_key: str, environment: str) -> None:
        super().__init__(
            f"Repository config '{repository_key}' has no entry for environment "
            f"'{environment}' and no '*' fallback",
            "NA002",
        )
        self.repository_key = repository_key
        self.environment = environment


class InvalidRepositoryConfig(ArtifactError):
    def __init__(self, repository_key: str, missing: str) -> None:
        super().__init__(
            f"Repository config '{repository_key}' is missing required key '{missing}'",
            "NA003",
        )
        self.repository_key = repository_key
        self.missing = missing


class SecretStoreError(ArtifactError):
    """A secret store item exists but cannot be read or decrypted."""

    def __init__(self, message: str) -> None:
        super().__init__(message, "NA004")


class MalformedCoordinate(ArtifactError):
    def __init__(self, coordinate: str) -> None:
        super().__init__(
            f"Malformed artifact coordinate '{coordinate}': expected "
            "'group:artifact:version:extension'",
            "NA005",
        )
        self.coordinate = coordinate


class RemoteResolutionFailure(ArtifactError):
    """Resolving the 'latest' alias against the repository failed."""

    def __init__(self, coordinate: str, reason: str) -> None:
        super().__init__(f"Unable to resolve version of '{coordinate}': {reason}", "NA006")
        self.coordinate = coordinate


class RemoteFetchFailure(ArtifactError):
    """Pulling artifact bytes to the local filesystem failed."""

    def __init__(self, coordinate: str, reason: str) -> None:
        super().__init__(f"Unable to fetch '{coordinate}': {reason}", "NA007")
        self.coordinate = coordinate


class LinkResolutionFailure(ArtifactError):
    """The 'current' link exists but cannot be resolved."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot resolve link '{path}': {reason}", "NA008")
        self.path = path


class NexusError(ArtifactError):
    """Unexpected response from the Nexus server."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message, "NA009")
        self.status_code = status_code


class ArtifactNotFound(NexusError):
    def __init__(self, coordinate: str) -> None:
        super().__init__(f"Artifact '{coordinate}' not found in Nexus", 404)
        self.coordinate = coordinate
