"""Command line argument parser."""

import argparse
import sys
from collections.abc import Sequence
from typing import Final, final

from rcargo.ui.cli.args.options import CargoArgs, CLIArgs, PurgeArgs, SizeArgs, VersionArgs

RCARGO_SUBCOMMANDS: Final[frozenset[str]] = frozenset({"size", "purge"})
VERSION_FLAGS: Final[frozenset[str]] = frozenset({"-V", "--version"})
HELP_FLAGS: Final[frozenset[str]] = frozenset({"-h", "--help"})

# Leading arguments that rcargo handles itself; anything else goes to cargo.
_OWN_LEADING_ARGS: Final[frozenset[str]] = RCARGO_SUBCOMMANDS | VERSION_FLAGS | HELP_FLAGS


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser for rcargo's own options.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="rcargo",
            description=(
                "A wrapper for Rust's cargo to use a per-project target directory "
                "on a fast storage."
            ),
            epilog="Any other arguments are passed to cargo unchanged, e.g. `rcargo build --release`.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "-V",
            "--version",
            action="store_true",
            dest="show_version",
            help="Show rcargo and cargo version information",
        )

        subparsers = parser.add_subparsers(dest="command")

        size_parser = subparsers.add_parser("size", help="Show target directory sizes")
        _ = size_parser.add_argument(
            "-a",
            "--all",
            action="store_true",
            help="Show all cached project target sizes",
        )

        purge_parser = subparsers.add_parser("purge", help="Purge cached target directories")
        _ = purge_parser.add_argument(
            "-a",
            "--all",
            action="store_true",
            help="Purge all cached project target directories",
        )
        _ = purge_parser.add_argument(
            "-y",
            "--yes",
            action="store_true",
            help="Skip confirmation prompt",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: rcargo's own command, or the cargo pass-through arguments.

        Raises:
            SystemExit: On ``--help`` or invalid rcargo options.
        """
        argv = list(sys.argv[1:] if args_list is None else args_list)
        if not argv or argv[0] not in _OWN_LEADING_ARGS:
            return CargoArgs(command="cargo", cargo_args=argv)

        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(argv)

        if parsed_args.show_version:
            return VersionArgs(command="version")

        command: str | None = parsed_args.command
        if command == "size":
            return SizeArgs(command="size", show_all=bool(parsed_args.all))

        if command == "purge":
            return PurgeArgs(
                command="purge",
                purge_all=bool(parsed_args.all),
                assume_yes=bool(parsed_args.yes),
            )

        parser.error("expected a subcommand or cargo arguments")


__all__ = ["ArgumentParser", "RCARGO_SUBCOMMANDS"]
