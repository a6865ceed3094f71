"""
Page selection.

This module forwards the units of an inclusive page range from a paged
reader to an output sink.
"""

import logging

from .readers import PageReader
from .settings import SelectionConfig
from .sinks import OutputSink
from .stats import SelectionStats


class PageSelector:
    """
    Copies the units of pages `start_page..end_page` from a reader to a sink.

    Once a unit past the end page is seen the selector stops consuming input,
    unless `drain_input` is set, in which case the rest of the input is read
    and discarded. Draining keeps upstream producers on a pipe from being cut
    off mid-write.
    """

    def __init__(self, selection: SelectionConfig, drain_input: bool = False):
        self.selection = selection
        self.drain_input = drain_input
        self.logger = logging.getLogger(__name__)

    def in_range(self, page: int) -> bool:
        return self.selection.start_page <= page <= self.selection.end_page

    def run(self, reader: PageReader, sink: OutputSink) -> SelectionStats:
        """
        Forward the selected units in input order.

        The sink is not finished here; the caller owns its lifecycle.

        Args:
            reader: Source of `(page_index, unit)` pairs
            sink: Destination for selected units

        Returns:
            Statistics for the run

        Raises:
            InputError: If reading fails
            ConsumerError: If the sink's consumer stops accepting input
        """
        stats = SelectionStats()
        end_page = self.selection.end_page

        self.logger.debug(
            f"Selecting pages {self.selection.start_page}-{end_page} "
            f"({reader.get_mode_name()} -> {sink.get_sink_name()})"
        )

        for page, unit in reader.pages():
            if page > end_page and not self.drain_input:
                stats.units_read += 1
                stats.stopped_early = True
                break

            forward = self.in_range(page)
            if forward:
                sink.write(unit)
            stats.add_unit(page, forward)

        summary = stats.get_summary()
        self.logger.info(
            f"Forwarded {summary['units_forwarded']} of {summary['units_read']} units "
            f"from {summary['pages_forwarded']} pages"
            + (" (stopped early)" if stats.stopped_early else "")
        )
        if summary['pages_forwarded'] < self.selection.page_count:
            self.logger.info(
                f"Input ended before page {end_page}; "
                f"last page forwarded: {summary['last_page']}"
            )
        return stats
