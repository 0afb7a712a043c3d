"""Print rcargo's version followed by cargo's."""

from __future__ import annotations

from typing import final

from rich.console import Console

from rcargo import __version__
from rcargo.features.build import CargoRunner
from rcargo.platform.logging import logger


@final
class VersionCommand:
    """Execute ``rcargo --version``; cargo failures are warnings only."""

    def __init__(self, runner: CargoRunner, *, console: Console | None = None) -> None:
        self._runner = runner
        self._console = console or Console(soft_wrap=True)

    def execute(self) -> int:
        self._console.print(f"rcargo {__version__}", markup=False, highlight=False)

        query = self._runner.query_version()
        if query.output is not None:
            self._console.print(query.output, end="", markup=False, highlight=False)
        else:
            logger.warning("%s", query.error, extra={"event": "cargo.version.failed"})
        return 0
