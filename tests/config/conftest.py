"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write a TOML config file and return its path."""

    def _write(content: str) -> Path:
        config_file = tmp_path / "rcargo" / "config.toml"
        config_file.parent.mkdir(parents=True, exist_ok=True)
        _ = config_file.write_text(content, encoding="utf-8")
        return config_file

    return _write
