import pytest

from nexus_artifact.modules.artifact.domain import RepositoryConfig


@pytest.fixture
def nexus_config() -> RepositoryConfig:
    return RepositoryConfig(
        url="https://nexus.example.com:8081",
        repository="releases",
        username="deployer",
        password="s3cret",
        environment="*",
    )


@pytest.fixture
def nexus_item() -> dict:
    return {
        "id": "nexus",
        "staging": {"url": "http://staging-nexus:8081", "repository": "staging-releases"},
        "*": {"url": "https://nexus.example.com:8081", "repository": "releases"},
    }
