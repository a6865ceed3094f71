"""
Form-feed page boundaries.

Each chunk of text up to and including a form feed character is one page.
The stream is read in fixed-size blocks, so a single very long page never
has to fit in one read.
"""

from __future__ import annotations

from typing import Iterator, TextIO

from .. import config
from .base import PageReader, PagedUnit


class FormFeedPageReader(PageReader):
    """
    Splits the stream on form feeds.

    Chunks are yielded unmodified, delimiter included. Text after the last
    form feed is yielded as a final page when it is not empty.
    """

    def __init__(self, stream: TextIO, block_size: int = config.READ_BLOCK_SIZE,
                 delimiter: str = config.FORM_FEED):
        super().__init__(stream)
        if block_size < 1:
            raise ValueError("block_size must be >= 1")
        self.block_size = block_size
        self.delimiter = delimiter

    def _iter_units(self) -> Iterator[PagedUnit]:
        page = 0
        pending = ""
        while True:
            block = self.stream.read(self.block_size)
            if not block:
                break
            pending += block
            start = 0
            while True:
                end = pending.find(self.delimiter, start)
                if end == -1:
                    break
                end += len(self.delimiter)
                yield page, pending[start:end]
                page += 1
                start = end
            pending = pending[start:]

        if pending:
            yield page, pending

    def get_mode_name(self) -> str:
        return "form-feed"
