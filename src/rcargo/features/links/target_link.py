"""
Summary: Create or refresh the project's symlink to its redirected target directory.
Why: Let IDEs find build output while never overwriting user files.
"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from rcargo.config.settings import Settings
from rcargo.platform.logging import logger
from rcargo.platform.symlink import DirectorySymlinker, select_symlinker


class LinkStatus(str, Enum):
    """What happened to the link path."""

    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
    DISABLED = "disabled"
    OCCUPIED = "occupied"
    UNKNOWN_TYPE = "unknown_type"
    UNSUPPORTED = "unsupported"
    FAILED = "failed"


_SUCCESS_STATUSES = frozenset(
    {LinkStatus.CREATED, LinkStatus.UPDATED, LinkStatus.UNCHANGED, LinkStatus.DISABLED}
)


@dataclass(slots=True, frozen=True)
class LinkResult:
    """Outcome of a symlink refresh; failures are carried as warnings."""

    status: LinkStatus
    target: Path
    link_path: Path | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.status in _SUCCESS_STATUSES


def _warn(warnings: list[str], message: str, link_path: Path, event: str) -> None:
    warnings.append(message)
    logger.warning("%s", message, extra={"event": event, "path": link_path})


def _create_link(
    symlinker: DirectorySymlinker,
    target_dir: Path,
    link_path: Path,
    status: LinkStatus,
    warnings: list[str],
) -> LinkResult:
    try:
        created = symlinker.create(target_dir, link_path)
    except OSError as e:
        _warn(warnings, f"Could not create target symlink: {e}", link_path, "link.failed")
        return LinkResult(LinkStatus.FAILED, target_dir, link_path, warnings)

    if not created:
        return LinkResult(LinkStatus.UNSUPPORTED, target_dir, link_path, warnings)

    logger.info(
        "Target symlink %s -> %s",
        status.value,
        target_dir,
        extra={"event": f"link.{status.value}", "path": link_path},
    )
    return LinkResult(status, target_dir, link_path, warnings)


def create_target_symlink(
    project_path: Path,
    target_dir: Path,
    settings: Settings,
    symlinker: DirectorySymlinker | None = None,
) -> LinkResult:
    """Point ``<project_path>/<link name>`` at ``target_dir``.

    Args:
        project_path: Project directory that receives the link.
        target_dir: Redirected cargo target directory.
        settings: Supplies the link name and the opt-out flag.
        symlinker: Platform primitive; selected automatically when omitted.

    Returns:
        LinkResult: Never raises for link problems; see ``status`` and ``warnings``.
    """
    if settings.no_target_link:
        logger.debug("Target symlink disabled by configuration")
        return LinkResult(LinkStatus.DISABLED, target_dir)

    link_path = project_path / settings.target_link_name
    linker = symlinker or select_symlinker()
    warnings: list[str] = []

    try:
        link_stat = os.lstat(link_path)
    except FileNotFoundError:
        return _create_link(linker, target_dir, link_path, LinkStatus.CREATED, warnings)
    except OSError as e:
        _warn(warnings, f"Could not inspect {link_path}: {e}", link_path, "link.failed")
        return _create_link(linker, target_dir, link_path, LinkStatus.CREATED, warnings)

    mode = link_stat.st_mode
    if stat.S_ISLNK(mode):
        try:
            current_target: Path | None = Path(os.readlink(link_path))
        except OSError as e:
            current_target = None
            logger.debug("Could not read symlink %s: %s", link_path, e)

        if current_target == target_dir:
            logger.debug("Target symlink already points at %s", target_dir)
            return LinkResult(LinkStatus.UNCHANGED, target_dir, link_path, warnings)

        try:
            linker.remove(link_path)
        except OSError as e:
            _warn(
                warnings,
                f"Could not remove stale target symlink: {e}",
                link_path,
                "link.failed",
            )
        return _create_link(linker, target_dir, link_path, LinkStatus.UPDATED, warnings)

    if stat.S_ISREG(mode) or stat.S_ISDIR(mode):
        kind = "directory" if stat.S_ISDIR(mode) else "file"
        _warn(
            warnings,
            f"A {kind} named '{settings.target_link_name}' already exists; not creating target symlink",
            link_path,
            "link.skipped",
        )
        return LinkResult(LinkStatus.OCCUPIED, target_dir, link_path, warnings)

    _warn(
        warnings,
        f"'{settings.target_link_name}' has an unsupported file type; not creating target symlink",
        link_path,
        "link.skipped",
    )
    return LinkResult(LinkStatus.UNKNOWN_TYPE, target_dir, link_path, warnings)


__all__ = ["LinkResult", "LinkStatus", "create_target_symlink"]
