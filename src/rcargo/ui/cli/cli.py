"""Command line interface for rcargo."""

from collections.abc import Sequence
from typing import final

from rcargo.config.settings import Settings
from rcargo.features.build import CargoRunner
from rcargo.platform.logging import logger, setup_logger
from rcargo.shared.errors import RcargoError
from rcargo.ui.cli.args import ArgumentParser
from rcargo.ui.cli.args.options import CargoArgs, CLIArgs, PurgeArgs, SizeArgs
from rcargo.ui.cli.commands import CargoCommand, PurgeCommand, SizeCommand, VersionCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: Sequence[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Process exit code.
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            settings = Settings.load()
            _ = setup_logger(log_file=settings.log_file)

            return CommandProcessor._dispatch(args, settings)

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            return 130
        except (RcargoError, OSError) as e:
            logger.error("%s", e)
            return 1
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            return 1

    @staticmethod
    def _dispatch(args: CLIArgs, settings: Settings) -> int:
        runner = CargoRunner(settings.cargo_program)

        if isinstance(args, SizeArgs):
            return SizeCommand(args, settings).execute()

        if isinstance(args, PurgeArgs):
            return PurgeCommand(args, settings).execute()

        if isinstance(args, CargoArgs):
            return CargoCommand(args, settings, runner).execute()

        return VersionCommand(runner).execute()


def main() -> int:
    """Main entry point.

    Returns:
        int: Exit code of rcargo, or of cargo when it ran.
    """
    return CommandProcessor.process_command()
