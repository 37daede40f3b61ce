import json

import httpx
import pytest
from cryptography.fernet import Fernet

from nexus_artifact.exceptions import ConfigNotFound, SecretStoreError
from nexus_artifact.modules.artifact.secrets import (
    EncryptedDataBagStore,
    ExecutionMode,
    LocalDataBagStore,
)
from nexus_artifact.modules.artifact.secrets.factory import build_secret_store
from nexus_artifact.settings import Settings


def build_settings(tmp_path, **overrides) -> Settings:
    defaults = {"data_bag_path": str(tmp_path / "data_bags")}
    defaults.update(overrides)
    return Settings(_env_file=None, **defaults)


def write_item(root, bag, item, payload) -> None:
    bag_dir = root / bag
    bag_dir.mkdir(parents=True, exist_ok=True)
    (bag_dir / f"{item}.json").write_text(json.dumps(payload), encoding="utf-8")


def encrypt_item(key: bytes, payload: dict) -> dict:
    fernet = Fernet(key)
    return {
        name: value if name == "id" else fernet.encrypt(json.dumps(value).encode()).decode()
        for name, value in payload.items()
    }


def test_local_store_reads_json_item(tmp_path, nexus_item):
    write_item(tmp_path, "artifact", "nexus", nexus_item)

    assert LocalDataBagStore(tmp_path).load("artifact", "nexus") == nexus_item


def test_local_store_missing_item(tmp_path):
    with pytest.raises(ConfigNotFound) as excinfo:
        LocalDataBagStore(tmp_path).load("artifact", "nexus")
    assert excinfo.value.repository_key == "nexus"


def test_local_store_rejects_non_object(tmp_path):
    write_item(tmp_path, "artifact", "nexus", ["not", "a", "map"])

    with pytest.raises(SecretStoreError):
        LocalDataBagStore(tmp_path).load("artifact", "nexus")


def test_encrypted_store_decrypts_values(nexus_item):
    key = Fernet.generate_key()

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/data/artifact/nexus"
        assert request.headers["Authorization"] == "Bearer t0ken"
        return httpx.Response(200, json=encrypt_item(key, nexus_item))

    client = httpx.Client(transport=httpx.MockTransport(handler))
    store = EncryptedDataBagStore("https://config.example.com/", key, token="t0ken", client=client)

    assert store.load("artifact", "nexus") == nexus_item


def test_encrypted_store_missing_item():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"error": "not found"})

    client = httpx.Client(transport=httpx.MockTransport(handler))
    store = EncryptedDataBagStore("https://config.example.com", Fernet.generate_key(), client=client)

    with pytest.raises(ConfigNotFound):
        store.load("artifact", "nexus")


def test_encrypted_store_wrong_secret(nexus_item):
    payload = encrypt_item(Fernet.generate_key(), nexus_item)

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    store = EncryptedDataBagStore("https://config.example.com", Fernet.generate_key(), client=client)

    with pytest.raises(SecretStoreError):
        store.load("artifact", "nexus")


def test_encrypted_store_server_error_propagates():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    store = EncryptedDataBagStore("https://config.example.com", Fernet.generate_key(), client=client)

    with pytest.raises(httpx.HTTPStatusError):
        store.load("artifact", "nexus")


def test_factory_standalone(tmp_path):
    store = build_secret_store(build_settings(tmp_path))

    assert isinstance(store, LocalDataBagStore)
    assert store.root == tmp_path / "data_bags"


def test_factory_managed(tmp_path):
    secret_file = tmp_path / "secret"
    secret_file.write_text(Fernet.generate_key().decode() + "\n", encoding="utf-8")
    settings = build_settings(
        tmp_path,
        execution_mode=ExecutionMode.MANAGED,
        config_server_url="https://config.example.com",
        encrypted_data_bag_secret=str(secret_file),
    )

    assert isinstance(build_secret_store(settings), EncryptedDataBagStore)


def test_factory_managed_requires_server(tmp_path):
    settings = build_settings(tmp_path, execution_mode="managed")

    with pytest.raises(RuntimeError):
        build_secret_store(settings)
