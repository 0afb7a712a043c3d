"""Shared pytest fixtures for rcargo tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from rcargo.config.settings import Settings

_RCARGO_ENV_VARS = (
    "RCARGO_TARGET_DIR",
    "RCARGO_NO_TARGET_LINK",
    "RCARGO_TARGET_LINK_NAME",
    "RCARGO_LOG_FILE",
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the user's environment and config file out of every test."""

    for name in _RCARGO_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("RCARGO_CONFIG", str(tmp_path / "no-such-config.toml"))


@pytest.fixture
def target_root(tmp_path: Path) -> Path:
    """Target root location; not created up front."""

    return tmp_path / "targets"


@pytest.fixture
def settings(target_root: Path) -> Settings:
    """Settings pointing at the temporary target root."""

    return Settings(target_root=target_root)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A minimal cargo project named ``demo``."""

    project = tmp_path / "workspace" / "demo-dir"
    project.mkdir(parents=True)
    _ = (project / "Cargo.toml").write_text(
        '[package]\nname = "demo"\nversion = "0.1.0"\n', encoding="utf-8"
    )
    return project
