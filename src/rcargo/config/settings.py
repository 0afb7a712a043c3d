"""Where: src/rcargo/config/settings.py
What: Runtime settings resolved once from the environment and an optional TOML file.
Why: Thread one immutable value through commands instead of process-wide state.
Assumptions: - Environment variables always win over the config file.
Trade-offs: - Only value types are validated; paths are not checked for existence.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

from rcargo.config.paths import default_config_path
from rcargo.platform.logging import logger
from rcargo.shared.errors import ConfigError


DEFAULT_TARGET_DIR: Final[Path] = Path("/tmp/rcargo_targets")
DEFAULT_TARGET_LINK_NAME: Final[str] = "target"
DEFAULT_CARGO_PROGRAM: Final[str] = "cargo"

ENV_TARGET_DIR: Final[str] = "RCARGO_TARGET_DIR"
ENV_NO_TARGET_LINK: Final[str] = "RCARGO_NO_TARGET_LINK"
ENV_TARGET_LINK_NAME: Final[str] = "RCARGO_TARGET_LINK_NAME"
ENV_LOG_FILE: Final[str] = "RCARGO_LOG_FILE"

# Accepted keys in config.toml and their expected value types.
_CONFIG_SCHEMA: Final[dict[str, type]] = {
    "target_dir": str,
    "no_target_link": bool,
    "target_link_name": str,
    "cargo": str,
    "log_file": str,
}


def is_truthy(value: str | None) -> bool:
    """Return True for ``"1"`` or a case-insensitive ``"true"``."""

    if value is None:
        return False
    return value == "1" or value.lower() == "true"


def _non_empty(value: str | None) -> str | None:
    if value is None or value == "":
        return None
    return value


def _read_config_file(path: Path) -> dict[str, Any]:
    """Load recognised keys from ``path``; a missing file yields ``{}``.

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML, or a
            recognised key has the wrong type.
    """
    if not path.is_file():
        return {}

    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Failed to load configuration from {path}: {e}") from e

    values: dict[str, Any] = {}
    for key, value in raw.items():
        expected = _CONFIG_SCHEMA.get(key)
        if expected is None:
            logger.debug("Ignoring unknown configuration key %r in %s", key, path)
            continue
        if not isinstance(value, expected):
            raise ConfigError(
                f"Configuration key '{key}' in {path} must be of type {expected.__name__}"
            )
        values[key] = value

    logger.debug("Configuration loaded from %s", path)
    return values


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable per-invocation settings."""

    # Root directory holding one target directory per project
    target_root: Path = DEFAULT_TARGET_DIR

    # Convenience symlink inside the project directory
    no_target_link: bool = False
    target_link_name: str = DEFAULT_TARGET_LINK_NAME

    # Wrapped build tool
    cargo_program: str = DEFAULT_CARGO_PROGRAM

    # Optional log file; console-only when None
    log_file: Path | None = None

    def project_target_dir(self, identifier: str) -> Path:
        """Return the cache directory for a project identifier."""

        return self.target_root / identifier

    @classmethod
    def load(
        cls,
        env: Mapping[str, str] | None = None,
        config_file: Path | None = None,
    ) -> "Settings":
        """Resolve settings from ``env`` (default ``os.environ``) and the config file.

        Args:
            env: Environment mapping to read overrides from.
            config_file: Explicit config file; defaults to ``default_config_path``.

        Returns:
            Settings: Resolved settings.

        Raises:
            ConfigError: If the config file exists but is invalid.
        """
        mapping = env if env is not None else os.environ
        path = config_file if config_file is not None else default_config_path(mapping)
        file_values = _read_config_file(path)

        target_dir = _non_empty(mapping.get(ENV_TARGET_DIR)) or _non_empty(
            file_values.get("target_dir")
        )
        target_root = Path(target_dir).expanduser() if target_dir else DEFAULT_TARGET_DIR

        if ENV_NO_TARGET_LINK in mapping:
            no_target_link = is_truthy(mapping[ENV_NO_TARGET_LINK])
        else:
            no_target_link = bool(file_values.get("no_target_link", False))

        target_link_name = (
            _non_empty(mapping.get(ENV_TARGET_LINK_NAME))
            or _non_empty(file_values.get("target_link_name"))
            or DEFAULT_TARGET_LINK_NAME
        )

        cargo_program = _non_empty(file_values.get("cargo")) or DEFAULT_CARGO_PROGRAM

        log_file_value = _non_empty(mapping.get(ENV_LOG_FILE)) or _non_empty(
            file_values.get("log_file")
        )
        log_file = Path(log_file_value).expanduser() if log_file_value else None

        return cls(
            target_root=target_root,
            no_target_link=no_target_link,
            target_link_name=target_link_name,
            cargo_program=cargo_program,
            log_file=log_file,
        )


__all__ = [
    "DEFAULT_CARGO_PROGRAM",
    "DEFAULT_TARGET_DIR",
    "DEFAULT_TARGET_LINK_NAME",
    "ENV_LOG_FILE",
    "ENV_NO_TARGET_LINK",
    "ENV_TARGET_DIR",
    "ENV_TARGET_LINK_NAME",
    "Settings",
    "is_truthy",
]
