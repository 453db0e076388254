"""Directory listing and recursive file operations used by the panels."""

from __future__ import annotations

import contextlib
import os
import shutil
import stat
from dataclasses import dataclass

MAX_FILES = 256
PARENT = ".."


@dataclass(frozen=True, slots=True)
class FileEntry:
    """One row of a panel listing."""

    name: str
    is_dir: bool


def _is_dir(path: str) -> bool:
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except OSError:
        return False


def get_directory_contents(path: str) -> list[FileEntry]:
    """List ``path``, led by a ``..`` entry unless it is the root.

    An unreadable directory gives an empty list. At most ``MAX_FILES``
    entries are returned, the ``..`` entry included.
    """
    try:
        iterator = os.scandir(path)
    except OSError:
        return []

    entries: list[FileEntry] = []
    if path != "/":
        entries.append(FileEntry(PARENT, True))

    with iterator:
        for dirent in iterator:
            if len(entries) >= MAX_FILES:
                break
            entries.append(FileEntry(dirent.name, _is_dir(os.path.join(path, dirent.name))))
    return entries


def _children(path: str) -> list[str]:
    with os.scandir(path) as iterator:
        return [dirent.name for dirent in iterator]


def remove_entity(path: str) -> None:
    """Delete a file, or a directory with everything below it.

    Failures on items inside a directory are skipped; the call raises
    ``OSError`` if ``path`` itself cannot be removed. Symbolic links are
    removed, never followed.
    """
    info = os.lstat(path)
    if not stat.S_ISDIR(info.st_mode):
        os.unlink(path)
        return
    for name in _children(path):
        with contextlib.suppress(OSError):
            remove_entity(os.path.join(path, name))
    os.rmdir(path)


def rename_entity(old_path: str, new_path: str) -> None:
    """Rename ``old_path`` to ``new_path``; raises ``OSError`` on failure."""
    os.rename(old_path, new_path)


def copy_entity(src_path: str, dest_path: str) -> None:
    """Copy a file, or a directory tree, to ``dest_path``.

    An existing destination directory is merged into; failures on items
    inside a directory are skipped. Raises ``OSError`` if the source
    cannot be read or a file cannot be written.
    """
    info = os.stat(src_path)
    if stat.S_ISDIR(info.st_mode):
        with contextlib.suppress(FileExistsError):
            os.mkdir(dest_path, stat.S_IMODE(info.st_mode))
        for name in _children(src_path):
            with contextlib.suppress(OSError):
                copy_entity(os.path.join(src_path, name), os.path.join(dest_path, name))
        return

    if os.path.exists(dest_path) and os.path.samefile(src_path, dest_path):
        raise shutil.SameFileError(f"{src_path!r} and {dest_path!r} are the same file")
    with open(src_path, "rb") as src, open(dest_path, "wb") as dest:
        shutil.copyfileobj(src, dest)


def move_entity(src_path: str, dest_path: str) -> None:
    """Move ``src_path`` to ``dest_path``, copying across file systems."""
    try:
        os.rename(src_path, dest_path)
        return
    except OSError:
        pass
    copy_entity(src_path, dest_path)
    with contextlib.suppress(OSError):
        remove_entity(src_path)