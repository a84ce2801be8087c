# tests/unit/test_process.py
import subprocess
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from oscqwatch.errors import ExitCode, LaunchError
from oscqwatch.process import ProcessLauncher


@pytest.fixture
def executable(tmp_path: Path) -> Path:
    exe = tmp_path / "giggletech_oscq"
    exe.write_text("")
    return exe


def test_launch_spawns_without_arguments(executable: Path, mocker: MockerFixture):
    mock_proc = mocker.Mock(pid=4321)
    mock_popen = mocker.patch("subprocess.Popen", return_value=mock_proc)

    proc = ProcessLauncher(executable).launch()

    assert proc is mock_proc
    mock_popen.assert_called_once_with([str(executable)])
    mock_proc.wait.assert_not_called()


def test_launch_missing_executable(tmp_path: Path, mocker: MockerFixture):
    mock_popen = mocker.patch("subprocess.Popen")

    with pytest.raises(LaunchError, match="Executable not found") as excinfo:
        ProcessLauncher(tmp_path / "missing.exe").launch()

    assert excinfo.value.exit_code == ExitCode.LAUNCH_ERROR
    mock_popen.assert_not_called()


def test_launch_spawn_failure(executable: Path, mocker: MockerFixture):
    mocker.patch("subprocess.Popen", side_effect=PermissionError("Permission denied"))

    with pytest.raises(LaunchError, match="Permission denied"):
        ProcessLauncher(executable).launch()


def test_terminate_kills_and_reaps(executable: Path, mocker: MockerFixture):
    mock_proc = mocker.Mock(pid=4321)

    ProcessLauncher(executable).terminate(mock_proc)

    mock_proc.kill.assert_called_once()
    mock_proc.wait.assert_called_once()


def test_terminate_ignores_kill_failure(executable: Path, mocker: MockerFixture):
    mock_proc = mocker.Mock(pid=4321)
    mock_proc.kill.side_effect = ProcessLookupError("No such process")

    ProcessLauncher(executable).terminate(mock_proc)

    mock_proc.wait.assert_not_called()


def test_terminate_ignores_reap_timeout(executable: Path, mocker: MockerFixture):
    mock_proc = mocker.Mock(pid=4321)
    mock_proc.wait.side_effect = subprocess.TimeoutExpired("giggletech_oscq", 5.0)

    ProcessLauncher(executable).terminate(mock_proc)

    mock_proc.kill.assert_called_once()


def test_terminate_without_process_is_noop(executable: Path):
    ProcessLauncher(executable).terminate(None)
