# tests/e2e/test_supervisor_flow.py
import socket
import stat
import sys
from pathlib import Path

import pytest

from mock_control_server import MockControlServer
from oscqwatch.control import ControlClient
from oscqwatch.process import ProcessLauncher
from oscqwatch.supervisor import State, Supervisor

pytestmark = [
    pytest.mark.e2e,
    pytest.mark.skipif(sys.platform == "win32", reason="uses a POSIX shell script as the helper"),
]


@pytest.fixture
def helper(tmp_path: Path) -> Path:
    exe = tmp_path / "giggletech_oscq"
    exe.write_text("#!/bin/sh\nexec sleep 60\n")
    exe.chmod(exe.stat().st_mode | stat.S_IXUSR)
    return exe


@pytest.fixture
def dead_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_discovers_port_after_start(helper: Path):
    sleeps = []
    launcher = ProcessLauncher(helper)

    with MockControlServer(assign_port=7000) as server, ControlClient(server.port, timeout=2.0) as client:
        supervisor = Supervisor(client, launcher, interval=0.5, sleep=sleeps.append)
        try:
            assert supervisor.discover_udp_port() == 7000
            assert supervisor.handle.poll() is None
        finally:
            launcher.terminate(supervisor.handle)

    assert server.state["requests"] == ["/port_udp", "/start", "/port_udp"]
    assert sleeps == [0.5]
    assert supervisor.state == State.DONE


def test_unreachable_server_restarts_helper(helper: Path, dead_port: int):
    launcher = ProcessLauncher(helper)

    with ControlClient(dead_port, timeout=2.0) as client:
        supervisor = Supervisor(client, launcher, interval=0.5, sleep=lambda _: None)
        supervisor.start()
        first = supervisor.handle
        try:
            assert supervisor.step() is None
            second = supervisor.handle

            assert second is not first
            assert first.poll() is not None
            assert second.poll() is None
        finally:
            launcher.terminate(supervisor.handle)
