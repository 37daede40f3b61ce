"""Platform specific file operations, chosen once per process."""

from __future__ import annotations

import logging
import os

from .base import FileOps
from .posix import PosixFileOps
from .windows import WindowsFileOps

log = logging.getLogger(__name__)


def detect_file_ops(os_name: str = os.name) -> FileOps:
    """Return the implementation for the running platform."""
    ops: FileOps = WindowsFileOps() if os_name == "nt" else PosixFileOps()
    log.debug("Using %s file operations", ops.name)
    return ops


__all__ = ["FileOps", "PosixFileOps", "WindowsFileOps", "detect_file_ops"]
