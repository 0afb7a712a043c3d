"""
Summary: Spawn cargo directly or with a redirected target directory.
Why: Centralise environment overrides and exit-code mapping for child processes.
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final, final

from rcargo.platform.logging import logger
from rcargo.shared.errors import CargoLaunchError

CARGO_TARGET_DIR_ENV: Final[str] = "CARGO_TARGET_DIR"
SIGNAL_EXIT_CODE: Final[int] = 1


def exit_code_from_returncode(returncode: int) -> int:
    """Map a ``subprocess`` return code to a process exit code.

    Negative codes mean the child was killed by a signal.
    """
    if returncode < 0:
        return SIGNAL_EXIT_CODE
    return returncode


@dataclass(frozen=True, slots=True)
class VersionQuery:
    """Outcome of asking cargo for its version."""

    output: str | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@final
class CargoRunner:
    """Run the wrapped cargo executable with inherited stdio."""

    def __init__(self, program: str = "cargo") -> None:
        self.program = program

    def run(self, args: Sequence[str], *, target_dir: Path | None = None) -> int:
        """Run cargo with ``args`` and return its exit code.

        Args:
            args: Arguments passed through to cargo unchanged.
            target_dir: When given, exported as ``CARGO_TARGET_DIR``.

        Returns:
            int: Cargo's exit code, or 1 if it was killed by a signal.

        Raises:
            CargoLaunchError: If the executable cannot be started.
        """
        env: dict[str, str] | None = None
        if target_dir is not None:
            env = dict(os.environ)
            env[CARGO_TARGET_DIR_ENV] = str(target_dir)

        command = [self.program, *args]
        logger.debug("Running %s", " ".join(command))
        try:
            completed = subprocess.run(command, env=env, check=False)
        except OSError as e:
            raise CargoLaunchError(self.program, str(e)) from e

        return exit_code_from_returncode(completed.returncode)

    def query_version(self) -> VersionQuery:
        """Return cargo's ``--version`` output; failures are reported, not raised."""

        try:
            completed = subprocess.run(
                [self.program, "--version"],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            return VersionQuery(
                output=None,
                error=f"Failed to execute {self.program} --version: {e}",
            )

        if completed.returncode != 0:
            return VersionQuery(output=None, error=f"Failed to get {self.program} version")
        return VersionQuery(output=completed.stdout)


__all__ = [
    "CARGO_TARGET_DIR_ENV",
    "CargoRunner",
    "VersionQuery",
    "exit_code_from_returncode",
]
