"""src/rcargo/ui/cli/display/cache_report.py
What: Render cache sizes, purge confirmations and purge outcomes.
Why: Keep console wording in one place for the size and purge commands.
"""

from __future__ import annotations

from typing import final

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from rcargo.application.services.cache_service import (
    CacheOverview,
    ProjectCacheStatus,
    PurgePlan,
    PurgeScope,
)
from rcargo.shared.size_format import format_size

_YES_ANSWERS = frozenset({"y", "yes"})


@final
class CacheReportDisplay:
    """Console rendering for ``size`` and ``purge``."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(soft_wrap=True)

    def show_project_status(self, status: ProjectCacheStatus) -> None:
        name = escape(status.project.name)
        if status.size is None:
            self._console.print(f"Current project '{name}' has no cached target directory")
            return
        self._console.print(
            f"Current project '{name}' target size: [bold]{format_size(status.size)}[/bold]"
        )

    def show_overview(self, overview: CacheOverview) -> None:
        if not overview.exists:
            self._console.print("[yellow]No cached target directories found[/yellow]")
            return

        self._console.print("All cached project target directories:")
        table = Table(
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Project", style="bold")
        table.add_column("Size", justify="right")
        for entry in overview.entries:
            table.add_row(Text(entry.name), format_size(entry.size))

        self._console.print(table)
        self._console.print(f"Total cache size: [bold]{format_size(overview.total_size)}[/bold]")

    def confirm_purge(self, plan: PurgePlan) -> bool:
        """Ask before deleting; anything but ``y``/``yes`` declines."""

        size = format_size(plan.size)
        if plan.scope is PurgeScope.ALL:
            question = f"Are you sure you want to purge ALL cached target directories ({size})?"
        else:
            question = (
                f"Are you sure you want to purge project '{escape(self._project_name(plan))}' "
                f"cache ({size})?"
            )

        try:
            answer = self._console.input(f"{question} (y/N): ")
        except EOFError:
            return False
        return answer.strip().lower() in _YES_ANSWERS

    def show_purge_cancelled(self) -> None:
        self._console.print("Purge cancelled.")

    def show_nothing_to_purge(self, plan: PurgePlan) -> None:
        if plan.scope is PurgeScope.ALL:
            self._console.print("[yellow]No cached target directories found to purge[/yellow]")
            return
        self._console.print(
            f"Current project '{escape(self._project_name(plan))}' "
            "has no cached target directory to purge"
        )

    def show_purged(self, plan: PurgePlan) -> None:
        size = format_size(plan.size)
        if plan.scope is PurgeScope.ALL:
            self._console.print(f"[green]Purged all cached target directories (freed {size})[/green]")
            return
        self._console.print(
            f"[green]Purged current project '{escape(self._project_name(plan))}' "
            f"cache (freed {size})[/green]"
        )

    @staticmethod
    def _project_name(plan: PurgePlan) -> str:
        return plan.project.name if plan.project is not None else plan.path.name


__all__ = ["CacheReportDisplay"]
