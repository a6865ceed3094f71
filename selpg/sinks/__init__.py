"""
Output sinks.

Selected units go either to the console or into the standard input of an
external consumer process, depending on the configuration.
"""

from ..settings import SelectionConfig
from .base import OutputSink
from .console import ConsoleSink
from .process import ExternalProcessSink, resolve_consumer_command


def create_sink(selection: SelectionConfig) -> OutputSink:
    """
    Create the sink matching the configuration.

    A consumer process is spawned immediately, before any input is read.

    Args:
        selection: Validated selection parameters

    Returns:
        A started ExternalProcessSink when a consumer is configured,
        otherwise a ConsoleSink

    Raises:
        ConsumerError: If the consumer cannot be resolved or started
    """
    if selection.uses_consumer:
        return ExternalProcessSink(resolve_consumer_command(selection.consumer)).start()
    return ConsoleSink()


__all__ = [
    'OutputSink', 'ConsoleSink', 'ExternalProcessSink',
    'resolve_consumer_command', 'create_sink'
]
