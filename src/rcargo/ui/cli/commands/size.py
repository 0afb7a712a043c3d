"""src/rcargo/ui/cli/commands/size.py
What: Report the current project's cache size, or every cached project.
Why: Show how much fast storage each project occupies.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import final

from rich.console import Console

from rcargo.application.services.cache_service import TargetCacheService
from rcargo.config.settings import Settings
from rcargo.features.project import is_rust_project
from rcargo.ui.cli.args.options import SizeArgs
from rcargo.ui.cli.display.cache_report import CacheReportDisplay


@final
class SizeCommand:
    """Execute ``rcargo size [--all]``."""

    def __init__(
        self,
        args: SizeArgs,
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
        """Print sizes and return the exit code.

        Raises:
            OSError: If the working directory or a cache entry cannot be read.
        """
        if not self._args.show_all:
            project_path = self._cwd_provider()
            if is_rust_project(project_path):
                self._display.show_project_status(self._service.project_status(project_path))
                return 0

        self._display.show_overview(self._service.overview())
        return 0
