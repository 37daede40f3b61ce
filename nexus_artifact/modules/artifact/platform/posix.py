"""POSIX implementation of the platform file operations."""

from __future__ import annotations

import os
import shlex
from pathlib import PurePosixPath

from .base import PathLike


class PosixFileOps:
    name = "posix"

    def is_symlink(self, path: PathLike) -> bool:
        return os.path.islink(path)

    def resolve_symlink(self, path: PathLike) -> PurePosixPath:
        return PurePosixPath(os.readlink(path))

    def build_copy_command(self, source: PathLike, destination: PathLike) -> str:
        return f"cp -r {shlex.quote(os.fspath(source))} {shlex.quote(os.fspath(destination))}"
