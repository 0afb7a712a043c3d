"""
Summary: Tests for spawning cargo with and without redirection.
Why: Exit codes and environment overrides must pass through faithfully.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from rcargo.features.build import CargoRunner
from rcargo.features.build.runner import CARGO_TARGET_DIR_ENV, exit_code_from_returncode
from rcargo.shared.errors import CargoLaunchError


def _completed(returncode: int, stdout: str = "") -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=["cargo"], returncode=returncode, stdout=stdout)


def test_run_passes_arguments_without_env_override(mocker: MockerFixture) -> None:
    run_mock = mocker.patch("rcargo.features.build.runner.subprocess.run", return_value=_completed(0))

    exit_code = CargoRunner().run(["search", "serde"])

    assert exit_code == 0
    run_mock.assert_called_once_with(["cargo", "search", "serde"], env=None, check=False)


def test_run_exports_target_dir(mocker: MockerFixture, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KEEP_ME", "1")
    run_mock = mocker.patch("rcargo.features.build.runner.subprocess.run", return_value=_completed(0))

    _ = CargoRunner("my-cargo").run(["build"], target_dir=Path("/fast/demo-abc1234"))

    command = run_mock.call_args.args[0]
    env = run_mock.call_args.kwargs["env"]
    assert command == ["my-cargo", "build"]
    assert env[CARGO_TARGET_DIR_ENV] == "/fast/demo-abc1234"
    assert env["KEEP_ME"] == "1"


def test_run_propagates_exit_code(mocker: MockerFixture) -> None:
    _ = mocker.patch("rcargo.features.build.runner.subprocess.run", return_value=_completed(101))

    assert CargoRunner().run(["build"]) == 101


def test_run_maps_signal_termination_to_one(mocker: MockerFixture) -> None:
    _ = mocker.patch("rcargo.features.build.runner.subprocess.run", return_value=_completed(-9))

    assert CargoRunner().run(["build"]) == 1


def test_run_raises_launch_error_when_cargo_missing(mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "rcargo.features.build.runner.subprocess.run",
        side_effect=FileNotFoundError("No such file or directory"),
    )

    with pytest.raises(CargoLaunchError, match="Failed to execute cargo"):
        _ = CargoRunner().run(["build"])


@pytest.mark.parametrize("returncode, expected", [(0, 0), (2, 2), (-2, 1), (-15, 1)])
def test_exit_code_from_returncode(returncode: int, expected: int) -> None:
    assert exit_code_from_returncode(returncode) == expected


def test_query_version_success(mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "rcargo.features.build.runner.subprocess.run",
        return_value=_completed(0, "cargo 1.80.0 (376290515 2024-07-16)\n"),
    )

    query = CargoRunner().query_version()

    assert query.ok
    assert query.output == "cargo 1.80.0 (376290515 2024-07-16)\n"


def test_query_version_reports_non_zero_exit(mocker: MockerFixture) -> None:
    _ = mocker.patch("rcargo.features.build.runner.subprocess.run", return_value=_completed(1))

    query = CargoRunner().query_version()

    assert not query.ok
    assert query.output is None
    assert query.error == "Failed to get cargo version"


def test_query_version_reports_spawn_failure(mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "rcargo.features.build.runner.subprocess.run",
        side_effect=PermissionError("denied"),
    )

    query = CargoRunner().query_version()

    assert not query.ok
    assert query.error is not None
    assert "Failed to execute cargo --version" in query.error
