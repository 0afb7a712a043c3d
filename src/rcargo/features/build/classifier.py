"""
Summary: Decide whether a cargo invocation needs a redirected target directory.
Why: Skip redirection for commands that never write build output.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

# Any argument equal to one of these disables redirection, wherever it appears.
NON_BUILD_TOKENS: Final[frozenset[str]] = frozenset(
    {
        "-h",
        "--help",
        "-V",
        "--version",
        "--list",
        "search",
        "login",
        "logout",
        "owner",
        "yank",
        "publish",
        "cache",
    }
)

# Only checked in subcommand position.
NON_BUILD_SUBCOMMANDS: Final[frozenset[str]] = frozenset(
    {
        "help",
        "version",
        "new",
        "init",
        "locate-project",
        "verify-project",
    }
)


def _first_subcommand(args: Sequence[str]) -> str | None:
    """Return the first argument that is not a flag."""

    for arg in args:
        if not arg.startswith("-"):
            return arg
    return None


def is_required_target_dir(args: Sequence[str]) -> bool:
    """Return True when ``args`` describe a cargo run that writes build output.

    This is a flat token scan, not an argument grammar: a flag value that
    happens to equal a listed token is treated like the token itself.
    """
    if not args:
        return False

    if any(arg in NON_BUILD_TOKENS for arg in args):
        return False

    subcommand = _first_subcommand(args)
    if subcommand is not None and subcommand in NON_BUILD_SUBCOMMANDS:
        return False

    return True


__all__ = ["NON_BUILD_SUBCOMMANDS", "NON_BUILD_TOKENS", "is_required_target_dir"]
