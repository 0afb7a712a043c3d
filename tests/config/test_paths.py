"""Tests for configuration path resolution helpers."""

from pathlib import Path

import pytest

from rcargo.config.paths import default_config_path, resolve_overridable_path


def test_config_path_prefers_explicit_env(tmp_path: Path) -> None:
    custom = tmp_path / "custom.toml"

    assert default_config_path({"RCARGO_CONFIG": str(custom)}) == custom.resolve()


def test_config_path_uses_xdg_config_home(tmp_path: Path) -> None:
    env = {"XDG_CONFIG_HOME": str(tmp_path / "xdg")}

    assert default_config_path(env) == (tmp_path / "xdg" / "rcargo" / "config.toml").resolve()


def test_config_path_defaults_to_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    expected = (tmp_path / ".config" / "rcargo" / "config.toml").resolve()
    assert default_config_path({}) == expected


def test_blank_env_value_falls_back_to_default(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=None,
        env={"SOME_VAR": "   "},
        env_var="SOME_VAR",
        default_factory=lambda: tmp_path / "default",
    )

    assert resolved == (tmp_path / "default").resolve()


def test_explicit_path_wins(tmp_path: Path) -> None:
    resolved = resolve_overridable_path(
        explicit_path=tmp_path / "explicit",
        env={"SOME_VAR": str(tmp_path / "env")},
        env_var="SOME_VAR",
        default_factory=lambda: tmp_path / "default",
    )

    assert resolved == (tmp_path / "explicit").resolve()
