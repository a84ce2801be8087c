# src/oscqwatch/control.py
"""Client for the helper service's local control HTTP server."""

import logging
import re
from typing import Type

import httpx

from .errors import ControlRequestError, ControlUnreachableError, StartRequestError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0

_PORT_RE = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -2**31
_INT32_MAX = 2**31 - 1


def parse_port(body: str) -> int:
    """
    Parse a port number from a response body.

    Surrounding whitespace is ignored. Anything that is not an ASCII signed
    32-bit integer is read as 0, the same value the service reports before
    it is started.
    """
    text = body.strip()
    if not _PORT_RE.fullmatch(text):
        return 0
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        return 0
    return value


class ControlClient:
    """Issues the GET commands understood by the helper's control server."""

    def __init__(self, http_port: int, timeout: float = DEFAULT_TIMEOUT):
        self.http_port = http_port
        self.base_url = f"http://localhost:{http_port}"
        self._client = httpx.Client(base_url=self.base_url, timeout=timeout)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self._client.close()

    def _fetch_text(self, path: str) -> str:
        try:
            response = self._client.get(path)
            return response.text
        except httpx.RequestError as e:
            raise ControlUnreachableError(
                f"Control server unreachable at {self.base_url}{path}: {e}"
            ) from e

    def _command(self, path: str, error: Type[ControlRequestError] = ControlRequestError) -> None:
        try:
            response = self._client.get(path)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise error(
                f"'{path}' returned HTTP {e.response.status_code}: {e.response.text.strip()}"
            ) from e
        except httpx.RequestError as e:
            raise error(f"Failed to send '{path}' to {self.base_url}: {e}") from e

    def get_udp_port(self) -> int:
        """
        Ask the service for its current UDP port.

        Returns:
            The port, or 0 if the service has not assigned one yet.

        Raises:
            ControlUnreachableError: If the request could not be completed.
        """
        return parse_port(self._fetch_text("/port_udp"))

    def get_tcp_port(self) -> int:
        """Ask the service for its current OSCQuery TCP port (0 if not started)."""
        return parse_port(self._fetch_text("/port_tcp"))

    def get_info(self) -> str:
        """Return the service's human-readable status text."""
        return self._fetch_text("/info").strip()

    def request_start(self) -> None:
        """
        Tell the service to start its OSCQuery endpoint and pick a UDP port.

        Raises:
            StartRequestError: On a non-2xx status or transport failure.
        """
        self._command("/start", StartRequestError)
        logger.debug("Start command accepted by %s", self.base_url)

    def request_stop(self) -> None:
        """Tell the service to stop and exit."""
        self._command("/stop")
