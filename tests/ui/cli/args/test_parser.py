"""Tests for command line argument parser."""

from argparse import Namespace

import pytest

from rcargo.ui.cli.args import ArgumentParser, CargoArgs, PurgeArgs, SizeArgs, VersionArgs


def test_create_parser() -> None:
    """Argument parser should expose rcargo's own subcommands and options."""

    parser = ArgumentParser.create_parser()

    size_args: Namespace = parser.parse_args(["size", "--all"])
    assert size_args.command == "size"
    assert size_args.all

    purge_args: Namespace = parser.parse_args(["purge", "-a", "-y"])
    assert purge_args.command == "purge"
    assert purge_args.all and purge_args.yes

    version_args: Namespace = parser.parse_args(["-V"])
    assert version_args.show_version


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["size"], SizeArgs(command="size", show_all=False)),
        (["size", "-a"], SizeArgs(command="size", show_all=True)),
        (["size", "--all"], SizeArgs(command="size", show_all=True)),
        (["purge"], PurgeArgs(command="purge", purge_all=False, assume_yes=False)),
        (["purge", "--all"], PurgeArgs(command="purge", purge_all=True, assume_yes=False)),
        (["purge", "-y"], PurgeArgs(command="purge", purge_all=False, assume_yes=True)),
        (
            ["purge", "--all", "--yes"],
            PurgeArgs(command="purge", purge_all=True, assume_yes=True),
        ),
        (["-V"], VersionArgs(command="version")),
        (["--version"], VersionArgs(command="version")),
    ],
)
def test_process_args_own_commands(argv: list[str], expected: object) -> None:
    assert ArgumentParser.process_args(argv) == expected


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["build"],
        ["build", "--release", "-j", "4"],
        ["--release", "build"],
        ["test", "--", "--nocapture"],
        ["run", "--", "size"],
        ["build", "--version"],
    ],
)
def test_process_args_forwards_everything_else(argv: list[str]) -> None:
    args = ArgumentParser.process_args(argv)

    assert isinstance(args, CargoArgs)
    assert args.cargo_args == argv


def test_help_exits_without_forwarding(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _ = ArgumentParser.process_args(["--help"])

    assert exc_info.value.code == 0
    assert "rcargo" in capsys.readouterr().out


def test_invalid_own_option_exits_with_usage_error() -> None:
    with pytest.raises(SystemExit) as exc_info:
        _ = ArgumentParser.process_args(["size", "--bogus"])

    assert exc_info.value.code == 2
