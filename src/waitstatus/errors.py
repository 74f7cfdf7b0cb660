"""Custom exception types for the waitstatus package.

The decoder functions never raise; these cover the layers around them.
"""


class WaitStatusError(Exception):
    """Base exception for all waitstatus errors."""

    pass


class ConfigError(WaitStatusError):
    """Raised when configuration loading, validation, or saving fails."""

    pass


class LayoutError(WaitStatusError):
    """Raised when a wait-status layout name is not recognised."""

    pass


class RunnerError(WaitStatusError):
    """Raised when a command cannot be started or waited for."""

    pass
