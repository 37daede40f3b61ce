"""Filesystem operations whose behaviour differs between platforms."""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import Protocol, Union

PathLike = Union[str, "os.PathLike[str]"]


class FileOps(Protocol):
    """Symlink handling and copy commands for one platform family."""

    name: str

    def is_symlink(self, path: PathLike) -> bool:  # pragma: no cover - interface
        ...

    def resolve_symlink(self, path: PathLike) -> PurePath:  # pragma: no cover - interface
        ...

    def build_copy_command(self, source: PathLike, destination: PathLike) -> str:  # pragma: no cover - interface
        ...
