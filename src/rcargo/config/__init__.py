"""Configuration package for rcargo."""

from rcargo.config.settings import (
    DEFAULT_TARGET_DIR,
    DEFAULT_TARGET_LINK_NAME,
    Settings,
)

__all__ = ["DEFAULT_TARGET_DIR", "DEFAULT_TARGET_LINK_NAME", "Settings"]
