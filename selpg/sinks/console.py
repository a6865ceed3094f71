"""
Console output sink.
"""

from __future__ import annotations

import sys
from typing import TextIO

from .. import config
from .base import OutputSink


class ConsoleSink(OutputSink):
    """
    Writes each unit to standard output, or to the given stream.

    When the stream exposes a binary buffer, units are encoded with
    `ENCODING_ERRORS` and written there, so bytes kept from undecodable input
    are restored exactly.
    """

    def __init__(self, stream: TextIO | None = None,
                 encoding: str = config.DEFAULT_ENCODING,
                 errors: str = config.ENCODING_ERRORS):
        self._stream = stream
        self.encoding = encoding
        self.errors = errors
        self._text_flushed = False

    @property
    def stream(self) -> TextIO:
        # Resolved per call so a replaced sys.stdout is honoured.
        return self._stream if self._stream is not None else sys.stdout

    def write(self, unit: str) -> None:
        stream = self.stream
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            stream.write(unit + "\n")
            return

        if not self._text_flushed:
            # Earlier text writes must land before our bytes.
            stream.flush()
            self._text_flushed = True
        buffer.write((unit + "\n").encode(self.encoding, self.errors))

    def finish(self) -> None:
        stream = self.stream
        stream.flush()
        buffer = getattr(stream, "buffer", None)
        if buffer is not None:
            buffer.flush()

    def get_sink_name(self) -> str:
        return "console"
