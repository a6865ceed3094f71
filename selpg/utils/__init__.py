"""
Utility modules for selpg.
"""

from .cli_common import setup_logging, BaseArgumentParser, configure_logging_level

__all__ = [
    'setup_logging', 'BaseArgumentParser', 'configure_logging_level'
]
