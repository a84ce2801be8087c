# src/oscqwatch/process.py
"""Spawns and terminates the supervised helper executable."""

import logging
import subprocess
from pathlib import Path
from typing import Optional

from .errors import LaunchError

logger = logging.getLogger(__name__)

REAP_TIMEOUT = 5.0


class ProcessLauncher:
    """Launches the helper executable as a detached child process."""

    def __init__(self, executable: Path):
        self.executable = Path(executable)

    def launch(self) -> subprocess.Popen:
        """
        Start the executable with no arguments and return immediately.

        Raises:
            LaunchError: If the executable is missing or cannot be spawned.
        """
        if not self.executable.is_file():
            raise LaunchError(f"Executable not found at '{self.executable}'.")

        try:
            proc = subprocess.Popen([str(self.executable)])
        except OSError as e:
            raise LaunchError(f"Failed to start '{self.executable}': {e}") from e

        logger.info("Started %s (PID: %s)", self.executable.name, proc.pid)
        return proc

    def terminate(self, proc: Optional[subprocess.Popen]) -> None:
        """Kill the process and reap it. Best effort: failures are only logged."""
        if proc is None:
            return

        logger.info("Stopping %s (PID: %s)...", self.executable.name, proc.pid)
        try:
            proc.kill()
        except OSError as e:
            logger.debug("Could not kill PID %s: %s", proc.pid, e)
            return

        try:
            proc.wait(timeout=REAP_TIMEOUT)
        except subprocess.TimeoutExpired:
            logger.debug("PID %s did not exit within %.1fs", proc.pid, REAP_TIMEOUT)
