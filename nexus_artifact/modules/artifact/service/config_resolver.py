"""Select the per-environment repository config from the secret store."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

from nexus_artifact.exceptions import EnvironmentConfigNotFound
from nexus_artifact.modules.artifact.domain import NodeIdentity, RepositoryConfig
from nexus_artifact.modules.artifact.domain.constants import (
    DATA_BAG,
    NEXUS_DBI,
    WILDCARD_ENVIRONMENT,
)
from nexus_artifact.modules.artifact.secrets import SecretStore


class ConfigResolver:
    """Load the repository item and pick the node environment's entry.

    The store is fixed at construction; whether it reads plain or encrypted
    items is decided by whoever builds it, never at lookup time.
    """

    def __init__(self, store: SecretStore, *, bag: str = DATA_BAG) -> None:
        self.store = store
        self.bag = bag
        self.log = logging.getLogger(self.__class__.__name__)

    def resolve(
        self,
        node: Union[NodeIdentity, str],
        repository_key: str = NEXUS_DBI,
    ) -> RepositoryConfig:
        environment = node.environment if isinstance(node, NodeIdentity) else node
        item = self.store.load(self.bag, repository_key)

        selected = environment
        entry = _entry(item, environment)
        if entry is None:
            selected = WILDCARD_ENVIRONMENT
            entry = _entry(item, WILDCARD_ENVIRONMENT)
        if entry is None:
            raise EnvironmentConfigNotFound(repository_key, environment)

        self.log.debug(
            "Using %s config entry '%s' for environment %s", repository_key, selected, environment
        )
        return RepositoryConfig.from_mapping(
            entry,
            repository_key=repository_key,
            environment=selected,
        )


def _entry(item: Mapping[str, Any], key: str) -> Optional[Mapping[str, Any]]:
    # scalar fields such as "id" are item metadata, not environments
    value = item.get(key)
    return value if isinstance(value, Mapping) else None
