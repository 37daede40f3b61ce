"""Pick the secret store matching the process execution mode."""

from __future__ import annotations

import logging

from nexus_artifact.settings import Settings

from .base import ExecutionMode, SecretStore
from .encrypted import EncryptedDataBagStore, load_secret
from .local import LocalDataBagStore

log = logging.getLogger(__name__)


def build_secret_store(settings: Settings) -> SecretStore:
    """Return the store for ``settings.execution_mode``; called once at startup."""
    mode = ExecutionMode(settings.execution_mode)
    if mode is ExecutionMode.STANDALONE:
        log.info("Standalone mode: reading data bags from %s", settings.data_bag_path)
        return LocalDataBagStore(settings.data_bag_path)

    if not settings.config_server_url:
        raise RuntimeError("ARTIFACT_CONFIG_SERVER_URL is required in managed mode")
    if not settings.encrypted_data_bag_secret:
        raise RuntimeError("ARTIFACT_ENCRYPTED_DATA_BAG_SECRET is required in managed mode")
    log.info("Managed mode: reading encrypted data bags from %s", settings.config_server_url)
    return EncryptedDataBagStore(
        settings.config_server_url,
        load_secret(settings.encrypted_data_bag_secret),
        token=settings.config_server_token,
        timeout=settings.config_server_timeout,
    )
