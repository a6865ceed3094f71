"""
Paged readers.

A paged reader turns a text stream into `(page_index, unit)` pairs using one
of two page boundary strategies.
"""

from typing import TextIO

from ..settings import SelectionConfig
from .base import PageReader, PagedUnit
from .form_feed import FormFeedPageReader
from .line_count import LineCountPageReader
from .source import open_input


def create_page_reader(stream: TextIO, selection: SelectionConfig) -> PageReader:
    """
    Create the reader matching the configured page boundaries.

    Args:
        stream: Text stream to read from
        selection: Validated selection parameters

    Returns:
        A FormFeedPageReader in form-feed mode, otherwise a LineCountPageReader
    """
    if selection.form_feed:
        return FormFeedPageReader(stream)
    return LineCountPageReader(stream, selection.page_length)


__all__ = [
    'PageReader', 'PagedUnit',
    'LineCountPageReader', 'FormFeedPageReader',
    'create_page_reader', 'open_input'
]
