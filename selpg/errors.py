"""
Exception types raised by selpg.

Every error carries the process exit code the command line interface should
terminate with, so lower layers never call `sys.exit` themselves.
"""

from . import config


class SelpgError(Exception):
    """Base class for all selpg failures."""

    def __init__(self, message: str, exit_code: int = config.EXIT_FAILURE):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class ConfigurationError(SelpgError):
    """Raised when the selection parameters fail validation."""
    pass


class InputError(SelpgError):
    """Raised when the input source cannot be opened or read."""
    pass


class ConsumerError(SelpgError):
    """Raised when the consumer process cannot be started or fed."""
    pass
