"""Command execution package for CLI."""

from rcargo.ui.cli.commands.cargo import CargoCommand
from rcargo.ui.cli.commands.purge import PurgeCommand
from rcargo.ui.cli.commands.size import SizeCommand
from rcargo.ui.cli.commands.version import VersionCommand

__all__ = [
    "CargoCommand",
    "PurgeCommand",
    "SizeCommand",
    "VersionCommand",
]
