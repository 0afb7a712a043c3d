"""Command line argument options."""

from dataclasses import dataclass, field
from typing import Literal, final


@final
@dataclass(slots=True)
class SizeArgs:
    """Command line arguments for the ``size`` subcommand."""

    command: Literal["size"]
    show_all: bool


@final
@dataclass(slots=True)
class PurgeArgs:
    """Command line arguments for the ``purge`` subcommand."""

    command: Literal["purge"]
    purge_all: bool
    assume_yes: bool


@final
@dataclass(slots=True)
class VersionArgs:
    """``-V`` / ``--version``."""

    command: Literal["version"]


@final
@dataclass(slots=True)
class CargoArgs:
    """Anything else: opaque arguments forwarded to cargo."""

    command: Literal["cargo"]
    cargo_args: list[str] = field(default_factory=list)


CLIArgs = SizeArgs | PurgeArgs | VersionArgs | CargoArgs

__all__ = ["CargoArgs", "CLIArgs", "PurgeArgs", "SizeArgs", "VersionArgs"]
