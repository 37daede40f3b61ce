import os
import stat
from pathlib import PurePosixPath, PureWindowsPath

import pytest

from nexus_artifact.modules.artifact.platform import (
    PosixFileOps,
    WindowsFileOps,
    detect_file_ops,
)


def test_detect_file_ops():
    assert isinstance(detect_file_ops("posix"), PosixFileOps)
    assert isinstance(detect_file_ops("nt"), WindowsFileOps)


def test_posix_copy_command():
    assert PosixFileOps().build_copy_command("/a", "/b") == "cp -r /a /b"


def test_posix_copy_command_quotes_spaces():
    command = PosixFileOps().build_copy_command("/opt/my app", "/srv/dest")

    assert command == "cp -r '/opt/my app' /srv/dest"


def test_windows_copy_command_uses_native_separators():
    command = WindowsFileOps().build_copy_command("C:/artifacts/app.zip", "D:/deploy/app")

    assert command == 'copy "C:\\artifacts\\app.zip" "D:\\deploy\\app"'


@pytest.mark.skipif(os.name == "nt", reason="POSIX symlinks")
def test_posix_symlink_detection_and_resolution(tmp_path):
    target = tmp_path / "1.0.0"
    target.mkdir()
    link = tmp_path / "current"
    link.symlink_to(target, target_is_directory=True)
    ops = PosixFileOps()

    assert ops.is_symlink(link)
    assert not ops.is_symlink(target)
    assert not ops.is_symlink(tmp_path / "missing")
    assert ops.resolve_symlink(link) == PurePosixPath(str(target))


def test_windows_junction_detected_by_reparse_attribute(tmp_path, monkeypatch):
    junction = tmp_path / "current"
    junction.mkdir()

    class FakeStat:
        st_file_attributes = stat.FILE_ATTRIBUTE_REPARSE_POINT | stat.FILE_ATTRIBUTE_DIRECTORY

    monkeypatch.setattr(os.path, "islink", lambda path: False)
    monkeypatch.setattr(os, "lstat", lambda path: FakeStat())

    assert WindowsFileOps().is_symlink(junction)


def test_windows_plain_directory_is_not_a_link(tmp_path, monkeypatch):
    class FakeStat:
        st_file_attributes = stat.FILE_ATTRIBUTE_DIRECTORY

    monkeypatch.setattr(os.path, "islink", lambda path: False)
    monkeypatch.setattr(os, "lstat", lambda path: FakeStat())

    assert not WindowsFileOps().is_symlink(tmp_path)


def test_windows_missing_path_is_not_a_link(tmp_path):
    assert not WindowsFileOps().is_symlink(tmp_path / "missing")


def test_windows_resolve_strips_nt_prefix(monkeypatch):
    monkeypatch.setattr(os, "readlink", lambda path: "\\\\?\\D:\\apps\\billing\\2.0.65")

    target = WindowsFileOps().resolve_symlink("D:/apps/billing/current")

    assert target == PureWindowsPath("D:\\apps\\billing\\2.0.65")
    assert target.name == "2.0.65"
