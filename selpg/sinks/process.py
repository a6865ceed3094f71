"""
External consumer process sink.

The consumer is started before any input is read. Selected units are
streamed into its standard input while its standard output goes straight to
ours. Closing the pipe signals end of input, after which the consumer is
awaited.
"""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
import sys
from typing import IO, Sequence

from .. import config
from ..errors import ConsumerError
from .base import OutputSink


def resolve_consumer_command(consumer: str) -> list[str]:
    """
    Resolve a `-d` value to the argv of the consumer process.

    Names listed in `config.CONSUMER_COMMANDS` map to their command; any
    other value is split with shell quoting rules.

    Args:
        consumer: Consumer name or command line

    Returns:
        Non-empty argv list

    Raises:
        ConsumerError: If the value is empty or cannot be split
    """
    name = (consumer or "").strip()
    if name in config.CONSUMER_COMMANDS:
        return list(config.CONSUMER_COMMANDS[name])

    try:
        argv = shlex.split(name)
    except ValueError as e:
        raise ConsumerError(f"invalid consumer command '{consumer}': {e}") from e

    if not argv:
        raise ConsumerError("no consumer command given")
    return argv


class ExternalProcessSink(OutputSink):
    """
    Pipes units into a consumer process.

    Requires the consumer executable to be available in PATH.
    """

    def __init__(self, argv: Sequence[str], stdout: IO | None = None,
                 encoding: str = config.DEFAULT_ENCODING,
                 errors: str = config.ENCODING_ERRORS):
        if not argv:
            raise ValueError("argv must not be empty")
        self.argv = list(argv)
        self.stdout = stdout
        self.encoding = encoding
        self.errors = errors
        self.returncode: int | None = None
        self._process: subprocess.Popen | None = None
        self._closed = False
        self.logger = logging.getLogger(__name__)

    def start(self) -> "ExternalProcessSink":
        """
        Spawn the consumer with a pipe on its standard input.

        Raises:
            ConsumerError: If the executable is missing or cannot be started
        """
        if self._process is not None:
            return self

        executable = shutil.which(self.argv[0])
        if not executable:
            raise ConsumerError(f"error happen in pipe: consumer '{self.argv[0]}' not found in PATH")

        # Anything we printed so far must precede the consumer's output.
        sys.stdout.flush()

        try:
            self._process = subprocess.Popen(
                [executable] + self.argv[1:],
                stdin=subprocess.PIPE,
                stdout=self.stdout,
                text=True,
                encoding=self.encoding,
                errors=self.errors,
            )
        except OSError as e:
            raise ConsumerError(f"error happen in pipe: {e}") from e

        if self._process.stdin is None:
            raise ConsumerError("error happen in pipe: consumer has no input stream")

        self.logger.debug(f"Started consumer {self.argv} (pid {self._process.pid})")
        return self

    def write(self, unit: str) -> None:
        if self._process is None:
            raise ConsumerError("consumer process was not started")
        if self._closed:
            raise ConsumerError("consumer input is already closed")

        try:
            self._process.stdin.write(unit + "\n")
        except BrokenPipeError as e:
            self._abandon()
            raise ConsumerError(f"error happen in pipe: consumer '{self.argv[0]}' stopped reading") from e

    def finish(self) -> None:
        if self._process is None or self._closed:
            return

        self._closed = True
        try:
            self._process.stdin.close()
        except BrokenPipeError:
            self.logger.debug("Consumer closed its input before we did")

        self.returncode = self._process.wait()
        if self.returncode != 0:
            self.logger.warning(f"Consumer {self.argv} exited with status {self.returncode}")
        else:
            self.logger.debug(f"Consumer {self.argv} finished")

    def _abandon(self) -> None:
        self._closed = True
        try:
            self._process.stdin.close()
        except BrokenPipeError:
            pass
        self.returncode = self._process.wait()

    def get_sink_name(self) -> str:
        return "process"
