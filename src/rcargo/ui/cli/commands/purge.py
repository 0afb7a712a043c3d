"""src/rcargo/ui/cli/commands/purge.py
What: Delete the current project's cache, or the whole target root, after confirmation.
Why: Reclaim fast storage without touching project directories.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import final

from rich.console import Console

from rcargo.application.services.cache_service import TargetCacheService
from rcargo.config.settings import Settings
from rcargo.ui.cli.args.options import PurgeArgs
from rcargo.ui.cli.display.cache_report import CacheReportDisplay


@final
class PurgeCommand:
    """Execute ``rcargo purge [--all] [--yes]``."""

    def __init__(
        self,
        args: PurgeArgs,
        settings: Settings,
        *,
        cwd_provider: Callable[[], Path] | None = None,
        console: Console | None = None,
    ) -> None:
        self._args = args
        self._service = TargetCacheService(settings)
        self._cwd_provider = cwd_provider or Path.cwd
        self._display = CacheReportDisplay(console)

    def execute(self) -> int:
        """Purge and return the exit code; a declined prompt still exits 0.

        Raises:
            OSError: If measuring or deleting the cache fails.
        """
        if self._args.purge_all:
            plan = self._service.plan_full_purge()
        else:
            plan = self._service.plan_project_purge(self._cwd_provider())

        if not plan.exists:
            self._display.show_nothing_to_purge(plan)
            return 0

        if not self._args.assume_yes and not self._display.confirm_purge(plan):
            self._display.show_purge_cancelled()
            return 0

        self._service.execute_purge(plan)
        self._display.show_purged(plan)
        return 0
