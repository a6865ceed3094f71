"""
Line-count page boundaries.

Every `page_length` consecutive lines form one page.
"""

from typing import Iterator, TextIO

from .base import PageReader, PagedUnit


class LineCountPageReader(PageReader):
    """Assigns each line the page `count // page_length`, counted before the line."""

    def __init__(self, stream: TextIO, page_length: int):
        super().__init__(stream)
        if page_length < 1:
            raise ValueError("page_length must be >= 1")
        self.page_length = page_length

    def _iter_units(self) -> Iterator[PagedUnit]:
        count = 0
        for line in self.stream:
            yield count // self.page_length, _strip_line_ending(line)
            count += 1

    def get_mode_name(self) -> str:
        return "line-count"


def _strip_line_ending(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line
