# src/oscqwatch/supervisor.py
"""The supervisory loop that keeps the helper service alive.

Each iteration polls '/port_udp' once and reacts to the outcome:

- the control server is unreachable: kill the helper and launch a new one;
- the port is 0: ask the service to start with '/start';
- the port is set: hand it to the caller.

Between iterations the loop sleeps for a fixed interval. There is never more
than one request in flight and never more than one live child process.
"""

import logging
import subprocess
import time
from enum import Enum
from typing import Callable, Optional

from .control import ControlClient
from .errors import ControlUnreachableError, LaunchError, StartRequestError
from .process import ProcessLauncher

logger = logging.getLogger(__name__)


class State(str, Enum):
    POLLING = "polling"
    STARTING = "starting"
    REPORTING = "reporting"
    RESTARTING = "restarting"
    DONE = "done"


class Supervisor:
    """Launches the helper, polls it and restarts it when it stops answering."""

    def __init__(
        self,
        client: ControlClient,
        launcher: ProcessLauncher,
        interval: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.client = client
        self.launcher = launcher
        self.interval = interval
        self.state = State.POLLING
        self._sleep = sleep
        self._proc: Optional[subprocess.Popen] = None
        self._started = False

    @property
    def handle(self) -> Optional[subprocess.Popen]:
        """The currently supervised process, if any."""
        return self._proc

    def start(self) -> None:
        """
        Launch the helper for the first time.

        Raises:
            LaunchError: If the executable cannot be spawned.
        """
        self._proc = self.launcher.launch()
        self._started = True
        self.state = State.POLLING

    def _restart(self) -> None:
        self.state = State.RESTARTING
        self.launcher.terminate(self._proc)
        self._proc = None
        try:
            self._proc = self.launcher.launch()
        except LaunchError as e:
            # Retried on the next failed poll.
            logger.error("Failed to restart helper: %s", e)

    def step(self) -> Optional[int]:
        """
        Run one poll and react to it.

        Returns:
            The UDP port if the service reported one, otherwise None.
        """
        self.state = State.POLLING
        try:
            port = self.client.get_udp_port()
        except ControlUnreachableError as e:
            logger.warning("Failed to retrieve UDP port, restarting helper: %s", e)
            self._restart()
            return None

        if port == 0:
            self.state = State.STARTING
            logger.info("UDP port is 0, sending start command...")
            try:
                self.client.request_start()
            except StartRequestError as e:
                logger.warning("Failed to start server: %s", e)
            return None

        return port

    def discover_udp_port(self) -> int:
        """Supervise until the service reports a UDP port, then return it."""
        if not self._started:
            self.start()

        while True:
            port = self.step()
            if port is not None:
                self.state = State.DONE
                logger.info("UDP port: %d", port)
                return port
            self._sleep(self.interval)

    def run_forever(self, on_port: Optional[Callable[[int], None]] = None) -> None:
        """Supervise indefinitely, reporting the UDP port on every cycle."""
        if not self._started:
            self.start()

        while True:
            port = self.step()
            if port is not None:
                self.state = State.REPORTING
                logger.info("UDP port: %d", port)
                if on_port is not None:
                    on_port(port)
            self._sleep(self.interval)
