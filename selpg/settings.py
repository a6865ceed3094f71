"""
Selection parameters.

This module holds the validated configuration record handed to the page
selector, together with the validation rules applied to raw command-line
values before any input is read.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from . import config
from .errors import ConfigurationError


@dataclass(frozen=True)
class SelectionConfig:
    """Validated page selection parameters, 0-based page numbers."""

    start_page: int
    end_page: int
    page_length: int = config.DEFAULT_PAGE_LENGTH
    form_feed: bool = False
    input_path: str = ""
    consumer: str = ""

    @property
    def reads_stdin(self) -> bool:
        return not self.input_path

    @property
    def uses_consumer(self) -> bool:
        return bool(self.consumer)

    @property
    def page_count(self) -> int:
        """Number of pages in the requested range."""
        return self.end_page - self.start_page + 1


def validate_config(
    start_page: int,
    end_page: int,
    page_length: int = config.DEFAULT_PAGE_LENGTH,
    form_feed: bool = False,
    input_path: str | None = None,
    consumer: str | None = None,
) -> SelectionConfig:
    """
    Validate raw selection parameters and build a SelectionConfig.

    Rules are checked in order and the first failure wins:
    - start or end page unset -> exit code 1
    - start page negative or above MAX_PAGE -> exit code 1
    - end page negative, above MAX_PAGE or below start page -> exit code 2
    - page length below 1 or above MAX_PAGE -> exit code 3

    Args:
        start_page: First page to select, or UNSET_PAGE.
        end_page: Last page to select, or UNSET_PAGE.
        page_length: Lines per page in line-count mode.
        form_feed: Whether pages are delimited by form feeds.
        input_path: Input file, empty or None for standard input.
        consumer: Consumer name or command, empty or None for the console.

    Returns:
        The validated configuration.

    Raises:
        ConfigurationError: If any rule fails.
    """
    if start_page == config.UNSET_PAGE or end_page == config.UNSET_PAGE:
        raise ConfigurationError("not enough arguments", config.EXIT_FAILURE)

    if start_page < 0 or start_page > config.MAX_PAGE:
        raise ConfigurationError("startPage is not valid", config.EXIT_FAILURE)

    if end_page < 0 or end_page > config.MAX_PAGE or end_page < start_page:
        raise ConfigurationError("endPage is not valid", config.EXIT_BAD_END_PAGE)

    if page_length < 1 or page_length > config.MAX_PAGE:
        raise ConfigurationError("page length is out of range", config.EXIT_BAD_PAGE_LENGTH)

    path = os.path.expanduser(input_path) if input_path else ""

    return SelectionConfig(
        start_page=start_page,
        end_page=end_page,
        page_length=page_length,
        form_feed=form_feed,
        input_path=path,
        consumer=(consumer or "").strip(),
    )
