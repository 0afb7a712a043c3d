"""Command line argument handling package."""

from rcargo.ui.cli.args.parser import ArgumentParser
from rcargo.ui.cli.args.options import CargoArgs, CLIArgs, PurgeArgs, SizeArgs, VersionArgs

__all__ = ["ArgumentParser", "CargoArgs", "CLIArgs", "PurgeArgs", "SizeArgs", "VersionArgs"]
