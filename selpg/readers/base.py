"""
Base interface for paged readers.
"""

from abc import ABC, abstractmethod
from typing import Iterator, TextIO, Tuple

from ..errors import InputError

PagedUnit = Tuple[int, str]


class PageReader(ABC):
    """
    Abstract base class for page boundary strategies.

    A reader turns a text stream into a lazy sequence of `(page_index, unit)`
    pairs. The sequence can be consumed once; re-reading requires reopening
    the source.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream

    def pages(self) -> Iterator[PagedUnit]:
        """
        Iterate `(page_index, unit)` pairs in input order.

        Raises:
            InputError: If the underlying stream fails while reading.
        """
        try:
            yield from self._iter_units()
        except (OSError, UnicodeDecodeError) as e:
            raise InputError(f"read byte from file fail: {e}") from e

    @abstractmethod
    def _iter_units(self) -> Iterator[PagedUnit]:
        """
        Produce units tagged with the page they belong to.

        Returns:
            Iterator of `(page_index, unit)` pairs
        """
        pass

    @abstractmethod
    def get_mode_name(self) -> str:
        """
        Get the name of this boundary strategy.

        Returns:
            String identifier for this strategy
        """
        pass
