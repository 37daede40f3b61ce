from .base import ExecutionMode, SecretStore
from .encrypted import EncryptedDataBagStore
from .local import LocalDataBagStore

__all__ = [
    "EncryptedDataBagStore",
    "ExecutionMode",
    "LocalDataBagStore",
    "SecretStore",
]
