# src/oscqwatch/errors.py
"""Typed exceptions and exit codes for the watchdog."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Enumeration for application exit codes."""
    OK = 0
    UNKNOWN_ERROR = 1
    CONFIG_ERROR = 10
    LAUNCH_ERROR = 11
    CONTROL_UNREACHABLE = 12
    CONTROL_REQUEST_FAILED = 13


class WatchdogError(Exception):
    """Base exception for all watchdog errors."""
    def __init__(self, message: str, exit_code: ExitCode = ExitCode.UNKNOWN_ERROR):
        super().__init__(message)
        self.exit_code = exit_code

    def __str__(self) -> str:
        return f"[{self.exit_code.name}] {super().__str__()}"


class ConfigError(WatchdogError):
    """Exception for configuration loading or validation errors."""
    def __init__(self, message: str):
        super().__init__(message, ExitCode.CONFIG_ERROR)


class LaunchError(WatchdogError):
    """Exception raised when the supervised executable cannot be spawned."""
    def __init__(self, message: str):
        super().__init__(message, ExitCode.LAUNCH_ERROR)


class ControlUnreachableError(WatchdogError):
    """The control HTTP server could not be reached at all."""
    def __init__(self, message: str):
        super().__init__(message, ExitCode.CONTROL_UNREACHABLE)


class ControlRequestError(WatchdogError):
    """A command sent to the control HTTP server did not succeed."""
    def __init__(self, message: str):
        super().__init__(message, ExitCode.CONTROL_REQUEST_FAILED)


class StartRequestError(ControlRequestError):
    """The '/start' command failed or returned a non-success status."""
