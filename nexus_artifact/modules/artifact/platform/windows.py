"""Windows implementation of the platform file operations.

Deployments on Windows usually point ``current`` at the version directory
with a directory junction rather than a true symlink. Both are reparse
points, so they are detected through the file attributes returned by
``os.lstat``. Reading junctions may need an elevated process; that is
left to the operator.
"""

from __future__ import annotations

import os
import stat
from pathlib import PureWindowsPath

from .base import PathLike

_NT_PREFIXES = ("\\\\?\\", "\\??\\")


class WindowsFileOps:
    name = "windows"

    def is_symlink(self, path: PathLike) -> bool:
        if os.path.islink(path):
            return True
        try:
            st = os.lstat(path)
        except FileNotFoundError:
            return False
        attributes = getattr(st, "st_file_attributes", 0)
        return bool(attributes & stat.FILE_ATTRIBUTE_REPARSE_POINT)

    def resolve_symlink(self, path: PathLike) -> PureWindowsPath:
        target = os.readlink(path)
        for prefix in _NT_PREFIXES:
            if target.startswith(prefix):
                target = target[len(prefix):]
                break
        return PureWindowsPath(target)

    def build_copy_command(self, source: PathLike, destination: PathLike) -> str:
        command = f'copy "{os.fspath(source)}" "{os.fspath(destination)}"'
        return command.replace("/", "\\")
