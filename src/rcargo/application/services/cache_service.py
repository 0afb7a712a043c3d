"""src/rcargo/application/services/cache_service.py
What: Measure and delete cached target directories under the target root.
Why: Keep size/purge rules independent from prompts and console rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import final

from rcargo.config.settings import Settings
from rcargo.features.project import ProjectIdentifier
from rcargo.platform.filesystem import (
    calculate_directory_size,
    clear_directory,
    ensure_directory,
    list_subdirectories,
    remove_tree,
)
from rcargo.platform.logging import logger


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """One project's cached target directory."""

    name: str
    path: Path
    size: int


@dataclass(frozen=True, slots=True)
class CacheOverview:
    """Every cached target directory below the target root."""

    root: Path
    exists: bool
    entries: tuple[CacheEntry, ...] = ()

    @property
    def total_size(self) -> int:
        return sum(entry.size for entry in self.entries)


@dataclass(frozen=True, slots=True)
class ProjectCacheStatus:
    """Cache state of the current project; ``size`` is None when nothing is cached."""

    project: ProjectIdentifier
    path: Path
    size: int | None

    @property
    def cached(self) -> bool:
        return self.size is not None


class PurgeScope(str, Enum):
    """What a purge deletes."""

    PROJECT = "project"
    ALL = "all"


@dataclass(frozen=True, slots=True)
class PurgePlan:
    """A measured, not yet executed purge."""

    scope: PurgeScope
    path: Path
    exists: bool
    size: int = 0
    project: ProjectIdentifier | None = None


@final
class TargetCacheService:
    """Size and purge operations over ``settings.target_root``."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    @property
    def target_root(self) -> Path:
        return self._settings.target_root

    def project_cache_dir(self, project: ProjectIdentifier) -> Path:
        return self._settings.project_target_dir(project.identifier())

    def project_status(self, project_path: Path) -> ProjectCacheStatus:
        """Measure the cache directory belonging to ``project_path``."""

        project = ProjectIdentifier.from_path(project_path)
        cache_dir = self.project_cache_dir(project)
        size = calculate_directory_size(cache_dir) if cache_dir.exists() else None
        return ProjectCacheStatus(project=project, path=cache_dir, size=size)

    def overview(self) -> CacheOverview:
        """Measure every immediate subdirectory of the target root."""

        root = self.target_root
        if not root.exists():
            return CacheOverview(root=root, exists=False)

        entries = tuple(
            CacheEntry(name=directory.name, path=directory, size=calculate_directory_size(directory))
            for directory in list_subdirectories(root)
        )
        return CacheOverview(root=root, exists=True, entries=entries)

    def plan_project_purge(self, project_path: Path) -> PurgePlan:
        """Describe the purge of ``project_path``'s cache directory."""

        project = ProjectIdentifier.from_path(project_path)
        cache_dir = self.project_cache_dir(project)
        if not cache_dir.exists():
            return PurgePlan(PurgeScope.PROJECT, cache_dir, exists=False, project=project)

        return PurgePlan(
            PurgeScope.PROJECT,
            cache_dir,
            exists=True,
            size=calculate_directory_size(cache_dir),
            project=project,
        )

    def plan_full_purge(self) -> PurgePlan:
        """Describe the purge of the whole target root."""

        root = self.target_root
        if not root.exists():
            return PurgePlan(PurgeScope.ALL, root, exists=False)
        return PurgePlan(PurgeScope.ALL, root, exists=True, size=calculate_directory_size(root))

    def execute_purge(self, plan: PurgePlan) -> None:
        """Delete what ``plan`` describes; the target root is left in place empty.

        Raises:
            OSError: If deletion or recreation fails.
        """
        if not plan.exists:
            return

        if plan.scope is PurgeScope.ALL and plan.path.is_symlink():
            clear_directory(plan.path)
        else:
            remove_tree(plan.path)
            if plan.scope is PurgeScope.ALL:
                _ = ensure_directory(plan.path)
        logger.debug("Purged %s (%d bytes)", plan.path, plan.size)


__all__ = [
    "CacheEntry",
    "CacheOverview",
    "ProjectCacheStatus",
    "PurgePlan",
    "PurgeScope",
    "TargetCacheService",
]
