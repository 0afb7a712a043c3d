"""Shared helpers used across feature and UI layers."""

from rcargo.shared.errors import CargoLaunchError, ConfigError, RcargoError
from rcargo.shared.size_format import format_size

__all__ = ["CargoLaunchError", "ConfigError", "RcargoError", "format_size"]
