"""
selpg - select a range of pages from a text stream.

Pages are either fixed runs of lines or form-feed delimited chunks. The
selected pages are printed or piped into an external consumer command.
"""

from .errors import SelpgError, ConfigurationError, InputError, ConsumerError
from .settings import SelectionConfig, validate_config
from .selector import PageSelector
from .stats import SelectionStats

__version__ = "1.0.0"

__all__ = [
    'SelpgError', 'ConfigurationError', 'InputError', 'ConsumerError',
    'SelectionConfig', 'validate_config',
    'PageSelector', 'SelectionStats'
]
