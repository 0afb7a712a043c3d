"""src/rcargo/ui/cli/commands/cargo.py
What: Forward arguments to cargo, redirecting the target directory for builds.
Why: Give each project its own target directory under the shared root.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import final

from rich.console import Console

from rcargo.config.settings import Settings
from rcargo.features.build import CargoRunner, is_required_target_dir
from rcargo.features.links import create_target_symlink
from rcargo.features.project import ProjectIdentifier
from rcargo.platform.symlink import DirectorySymlinker
from rcargo.ui.cli.args.options import CargoArgs


@final
class CargoCommand:
    """Run cargo either directly or with ``CARGO_TARGET_DIR`` redirected."""

    def __init__(
        self,
        args: CargoArgs,
        settings: Settings,
        runner: CargoRunner,
        *,
        cwd_provider: Callable[[], Path] | None = None,
        symlinker: DirectorySymlinker | None = None,
        console: Console | None = None,
    ) -> None:
        self._args = args
        self._settings = settings
        self._runner = runner
        self._cwd_provider = cwd_provider or Path.cwd
        self._symlinker = symlinker
        self._console = console or Console(soft_wrap=True)

    def execute(self) -> int:
        """Run cargo and return its exit code.

        Raises:
            CargoLaunchError: If cargo cannot be started.
            OSError: If the working directory cannot be determined.
        """
        cargo_args = self._args.cargo_args
        if not is_required_target_dir(cargo_args):
            return self._runner.run(cargo_args)

        project_path = self._cwd_provider()
        project = ProjectIdentifier.from_path(project_path)
        target_dir = self._settings.project_target_dir(project.identifier())

        self._console.print(
            f"RCargo: Target directory redirected to: {target_dir}",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )

        exit_code = self._runner.run(cargo_args, target_dir=target_dir)
        if exit_code != 0:
            return exit_code

        # Link problems are reported as warnings and never change the exit code.
        _ = create_target_symlink(project_path, target_dir, self._settings, self._symlinker)
        return 0
