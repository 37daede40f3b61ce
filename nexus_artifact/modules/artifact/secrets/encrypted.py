"""Encrypted data bag items served by the central config server."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import httpx
from cryptography.fernet import Fernet, InvalidToken

from nexus_artifact.exceptions import ConfigNotFound, SecretStoreError


def load_secret(path: Union[str, Path]) -> bytes:
    """Read a Fernet key from a secret file."""
    secret = Path(path).read_text(encoding="utf-8").strip()
    if not secret:
        raise SecretStoreError(f"Encrypted data bag secret {path} is empty")
    return secret.encode()


class EncryptedDataBagStore:
    """Managed-mode store.

    Items are fetched from ``<server>/data/<bag>/<item>``. Every value except
    ``id`` is a Fernet token wrapping a JSON document, so nested maps survive
    the round trip.
    """

    def __init__(
        self,
        server_url: str,
        secret: bytes,
        *,
        token: Optional[str] = None,
        timeout: float = 30,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.server_url = server_url.rstrip("/")
        self._fernet = Fernet(secret)
        self.log = logging.getLogger(self.__class__.__name__)
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._headers = headers
        self._client = client or httpx.Client(timeout=timeout, verify=True)

    def load(self, bag: str, item: str) -> Dict[str, Any]:
        url = f"{self.server_url}/data/{bag}/{item}"
        self.log.info("Loading encrypted data bag item %s/%s from %s", bag, item, self.server_url)
        resp = self._client.get(url, headers=self._headers)
        if resp.status_code == 404:
            raise ConfigNotFound(item)
        resp.raise_for_status()
        payload = resp.json()
        if not isinstance(payload, dict):
            raise SecretStoreError(f"Data bag item {bag}/{item} must be a JSON object")
        return {key: self._decrypt(bag, item, key, value) for key, value in payload.items()}

    def _decrypt(self, bag: str, item: str, key: str, value: Any) -> Any:
        if key == "id":
            return value
        if not isinstance(value, str):
            raise SecretStoreError(f"Value {bag}/{item}[{key}] is not an encrypted string")
        try:
            plaintext = self._fernet.decrypt(value.encode())
        except InvalidToken as exc:
            raise SecretStoreError(
                f"Unable to decrypt {bag}/{item}[{key}]; check the data bag secret"
            ) from exc
        return json.loads(plaintext.decode("utf-8"))

    def close(self) -> None:
        self._client.close()
