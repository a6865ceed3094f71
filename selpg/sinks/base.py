"""
Base interface for output sinks.
"""

from abc import ABC, abstractmethod


class OutputSink(ABC):
    """Abstract destination for selected units."""

    @abstractmethod
    def write(self, unit: str) -> None:
        """
        Emit one selected unit followed by a newline.

        Args:
            unit: A line or a form-feed chunk
        """
        pass

    @abstractmethod
    def finish(self) -> None:
        """Flush pending output and release the destination. Safe to call twice."""
        pass

    @abstractmethod
    def get_sink_name(self) -> str:
        """
        Get the name of this sink.

        Returns:
            String identifier for this sink
        """
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.finish()
