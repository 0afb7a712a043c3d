"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
import shutil
from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def calculate_directory_size(path: Path) -> int:
    """Recursively sum the sizes of everything below ``path``.

    Symlinks are never followed: a link contributes its own ``lstat`` size
    and linked directories are not descended into.

    Args:
        path: Directory to measure.

    Returns:
        int: Total size in bytes, or 0 when ``path`` is not a directory.

    Raises:
        OSError: If an entry cannot be listed or stat'ed mid-walk.
    """
    if not path.is_dir():
        return 0

    total_size = 0
    with os.scandir(path) as entries:
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                total_size += calculate_directory_size(Path(entry.path))
            else:
                total_size += entry.stat(follow_symlinks=False).st_size
    return total_size


def list_subdirectories(directory: Path) -> list[Path]:
    """Return the immediate subdirectories of ``directory`` sorted by name."""

    if not directory.is_dir():
        return []

    with os.scandir(directory) as entries:
        subdirectories = [
            Path(entry.path) for entry in entries if entry.is_dir(follow_symlinks=False)
        ]
    return sorted(subdirectories, key=lambda candidate: candidate.name)


def remove_tree(directory: Path) -> None:
    """Delete ``directory`` and everything below it."""

    shutil.rmtree(directory)


def clear_directory(directory: Path) -> None:
    """Delete everything below ``directory`` but keep ``directory`` itself.

    ``directory`` may be a symlink; entries are removed from its resolved
    target while nested symlinks are unlinked, never followed.
    """
    with os.scandir(directory) as entries:
        children = list(entries)

    for entry in children:
        if entry.is_dir(follow_symlinks=False):
            shutil.rmtree(entry.path)
        else:
            os.unlink(entry.path)


__all__ = [
    "calculate_directory_size",
    "clear_directory",
    "ensure_directory",
    "list_subdirectories",
    "remove_tree",
]
