"""Plain data bag items stored as JSON files on the local disk."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from nexus_artifact.exceptions import ConfigNotFound, SecretStoreError


class LocalDataBagStore:
    """Standalone-mode store reading ``<root>/<bag>/<item>.json``."""

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root)
        self.log = logging.getLogger(self.__class__.__name__)

    def item_path(self, bag: str, item: str) -> Path:
        return self.root / bag / f"{item}.json"

    def load(self, bag: str, item: str) -> Dict[str, Any]:
        path = self.item_path(bag, item)
        if not path.is_file():
            self.log.warning("Data bag item %s/%s not found under %s", bag, item, self.root)
            raise ConfigNotFound(item)
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise SecretStoreError(f"Unable to read data bag item {path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise SecretStoreError(f"Data bag item {path} must contain a JSON object")
        self.log.debug("Loaded data bag item %s/%s from %s", bag, item, path)
        return payload
