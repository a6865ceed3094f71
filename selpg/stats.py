"""
Selection statistics tracking module.

This module provides a dedicated class for tracking what a selection run
read and forwarded, separating this concern from the selection loop.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Set


@dataclass
class SelectionStats:
    """
    Tracks statistics for one selection run.

    Units are lines in line-count mode and chunks in form-feed mode.
    """
    units_read: int = 0
    units_forwarded: int = 0
    pages_forwarded: Set[int] = field(default_factory=set)
    stopped_early: bool = False

    def add_unit(self, page: int, forwarded: bool) -> None:
        """
        Record one unit read from the input.

        Args:
            page: Page index the unit belongs to
            forwarded: Whether the unit was sent to the sink
        """
        self.units_read += 1
        if forwarded:
            self.units_forwarded += 1
            self.pages_forwarded.add(page)

    @property
    def first_page(self) -> Optional[int]:
        return min(self.pages_forwarded) if self.pages_forwarded else None

    @property
    def last_page(self) -> Optional[int]:
        return max(self.pages_forwarded) if self.pages_forwarded else None

    def get_summary(self) -> Dict[str, Any]:
        """
        Get a summary of the run.

        Returns:
            Dictionary with counts and the forwarded page span
        """
        return {
            'units_read': self.units_read,
            'units_forwarded': self.units_forwarded,
            'pages_forwarded': len(self.pages_forwarded),
            'first_page': self.first_page,
            'last_page': self.last_page,
            'stopped_early': self.stopped_early,
        }
