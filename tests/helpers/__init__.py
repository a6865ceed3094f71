"""
Test helpers package for selpg.

Provides utilities and helper functions for testing.
"""

from .selection_helpers import (
    RecordingSink,
    make_config,
    run_main,
)

__all__ = [
    'RecordingSink',
    'make_config',
    'run_main',
]
