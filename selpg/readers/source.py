"""
Input source handling.
"""

from __future__ import annotations

import io
import logging
import sys
from contextlib import contextmanager
from typing import Iterator, TextIO

from .. import config
from ..errors import InputError
from ..settings import SelectionConfig

logger = logging.getLogger(__name__)


@contextmanager
def open_input(selection: SelectionConfig) -> Iterator[TextIO]:
    """
    Open the configured input as a text stream.

    Named files and standard input are both read without newline
    translation, and undecodable bytes are kept with `ENCODING_ERRORS`.
    Named files are closed on exit; standard input is left open.

    Raises:
        InputError: If the named file cannot be opened.
    """
    if selection.reads_stdin:
        logger.debug("Reading from standard input")
        with _open_stdin() as stream:
            yield stream
        return

    try:
        stream = open(
            selection.input_path,
            encoding=config.DEFAULT_ENCODING,
            errors=config.ENCODING_ERRORS,
            newline="\n",
        )
    except OSError as e:
        raise InputError(f"error happen in opening file: {selection.input_path}: {e.strerror or e}") from e

    logger.debug(f"Reading from {selection.input_path}")
    with stream:
        yield stream


@contextmanager
def _open_stdin() -> Iterator[TextIO]:
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        # Already a plain text stream, e.g. replaced in-process.
        yield sys.stdin
        return

    stream = io.TextIOWrapper(
        buffer,
        encoding=config.DEFAULT_ENCODING,
        errors=config.ENCODING_ERRORS,
        newline="\n",
    )
    try:
        yield stream
    finally:
        # Release the wrapper without closing the process's stdin.
        stream.detach()
