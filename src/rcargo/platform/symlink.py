"""Where: platform/symlink.py
What: Platform-specific primitives for creating and removing directory symlinks.
Why: Give the link manager one interface regardless of operating system.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Protocol, final, runtime_checkable

from rcargo.platform.logging import logger


@runtime_checkable
class DirectorySymlinker(Protocol):
    """Create and remove symlinks that point at directories."""

    def create(self, target: Path, link: Path) -> bool:
        """Create ``link`` pointing at ``target``; return False if unsupported."""
        ...

    def remove(self, link: Path) -> None:
        """Remove the symlink at ``link`` without touching its target."""
        ...


@final
class PosixDirectorySymlinker:
    """Symlinks via ``symlink(2)``."""

    def create(self, target: Path, link: Path) -> bool:
        os.symlink(target, link)
        return True

    def remove(self, link: Path) -> None:
        link.unlink()


@final
class WindowsDirectorySymlinker:
    """Directory symlinks on Windows need the directory flag and ``rmdir``."""

    def create(self, target: Path, link: Path) -> bool:
        os.symlink(target, link, target_is_directory=True)
        return True

    def remove(self, link: Path) -> None:
        os.rmdir(link)


@final
class UnsupportedDirectorySymlinker:
    """Fallback for platforms without symlink support."""

    def __init__(self, platform: str) -> None:
        self._platform = platform

    def create(self, target: Path, link: Path) -> bool:
        logger.warning(
            "Symlinks are not supported on %s; not linking %s to %s",
            self._platform,
            link,
            target,
        )
        return False

    def remove(self, link: Path) -> None:
        logger.warning(
            "Symlinks are not supported on %s; leaving %s in place",
            self._platform,
            link,
        )


def select_symlinker(platform: str | None = None) -> DirectorySymlinker:
    """Pick the symlink implementation for ``platform`` (defaults to this one)."""

    current = platform if platform is not None else sys.platform
    if current.startswith("win"):
        return WindowsDirectorySymlinker()
    if current.startswith(("linux", "darwin", "freebsd", "openbsd", "netbsd", "cygwin")):
        return PosixDirectorySymlinker()
    return UnsupportedDirectorySymlinker(current)


__all__ = [
    "DirectorySymlinker",
    "PosixDirectorySymlinker",
    "UnsupportedDirectorySymlinker",
    "WindowsDirectorySymlinker",
    "select_symlinker",
]
