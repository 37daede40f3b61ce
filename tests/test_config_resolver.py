import pytest

from nexus_artifact.exceptions import (
    ConfigNotFound,
    EnvironmentConfigNotFound,
    InvalidRepositoryConfig,
)
from nexus_artifact.modules.artifact.domain import NodeIdentity
from nexus_artifact.modules.artifact.service import ConfigResolver

from stubs import RecordingStore


def test_environment_entry_wins(nexus_item):
    store = RecordingStore({"nexus": nexus_item})
    resolver = ConfigResolver(store)

    config = resolver.resolve(NodeIdentity(name="web-1", environment="staging"))

    assert config.url == "http://staging-nexus:8081"
    assert config.repository == "staging-releases"
    assert config.environment == "staging"
    assert store.loads == [("artifact", "nexus")]


def test_wildcard_fallback(nexus_item):
    resolver = ConfigResolver(RecordingStore({"nexus": nexus_item}))

    config = resolver.resolve("production")

    assert config.url == "https://nexus.example.com:8081"
    assert config.environment == "*"


def test_missing_environment_and_wildcard(nexus_item):
    del nexus_item["*"]
    resolver = ConfigResolver(RecordingStore({"nexus": nexus_item}))

    with pytest.raises(EnvironmentConfigNotFound) as excinfo:
        resolver.resolve("production")

    assert excinfo.value.repository_key == "nexus"
    assert excinfo.value.environment == "production"


def test_missing_item_propagates():
    resolver = ConfigResolver(RecordingStore({}))

    with pytest.raises(ConfigNotFound) as excinfo:
        resolver.resolve("staging", "nexus")
    assert excinfo.value.repository_key == "nexus"


def test_custom_repository_key(nexus_item):
    store = RecordingStore({"nexus-mirror": nexus_item})

    ConfigResolver(store).resolve("staging", "nexus-mirror")

    assert store.loads == [("artifact", "nexus-mirror")]


def test_entry_without_url_is_invalid():
    store = RecordingStore({"nexus": {"*": {"repository": "releases"}}})

    with pytest.raises(InvalidRepositoryConfig) as excinfo:
        ConfigResolver(store).resolve("staging")
    assert excinfo.value.missing == "url"


def test_config_is_reloaded_on_every_call(nexus_item):
    store = RecordingStore({"nexus": nexus_item})
    resolver = ConfigResolver(store)

    resolver.resolve("staging")
    resolver.resolve("staging")

    assert len(store.loads) == 2


def test_scalar_item_fields_are_not_environments(nexus_item):
    resolver = ConfigResolver(RecordingStore({"nexus": nexus_item}))

    config = resolver.resolve("id")

    assert config.environment == "*"
    assert config.repository == "releases"


def test_scalar_wildcard_is_not_a_fallback():
    store = RecordingStore({"nexus": {"id": "nexus", "*": "releases"}})

    with pytest.raises(EnvironmentConfigNotFound):
        ConfigResolver(store).resolve("staging")


def test_empty_environment_entry_is_selected(nexus_item):
    nexus_item["staging"] = {}
    resolver = ConfigResolver(RecordingStore({"nexus": nexus_item}))

    with pytest.raises(InvalidRepositoryConfig) as excinfo:
        resolver.resolve("staging")
    assert excinfo.value.missing == "url"
