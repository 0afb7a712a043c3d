"""Exception types raised by rcargo library code."""

from __future__ import annotations


class RcargoError(Exception):
    """Base class for failures that abort an rcargo invocation."""


class ConfigError(RcargoError):
    """Raised when the configuration file cannot be read or is invalid."""


class CargoLaunchError(RcargoError):
    """Raised when the cargo executable cannot be started."""

    def __init__(self, program: str, reason: str) -> None:
        super().__init__(f"Failed to execute {program}: {reason}")
        self.program = program
        self.reason = reason


__all__ = ["CargoLaunchError", "ConfigError", "RcargoError"]
