"""Secret store interface and execution modes."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Protocol


class ExecutionMode(str, Enum):
    """How the process was launched; decides where config items come from."""

    MANAGED = "managed"
    STANDALONE = "standalone"


class SecretStore(Protocol):
    """Key/value item store holding repository credentials."""

    def load(self, bag: str, item: str) -> Dict[str, Any]:  # pragma: no cover - interface
        ...
