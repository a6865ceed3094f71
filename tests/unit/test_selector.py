"""
Unit tests for the page selector.
"""

import io
import pytest
import os
import sys
from unittest.mock import Mock

# Add project root to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from selpg.errors import ConsumerError
from selpg.readers import FormFeedPageReader, LineCountPageReader
from selpg.selector import PageSelector
from helpers import RecordingSink, make_config


class CountingStream(io.StringIO):
    """StringIO that records how many lines were pulled from it."""

    def __init__(self, text):
        super().__init__(text)
        self.lines_read = 0

    def __next__(self):
        line = super().__next__()
        self.lines_read += 1
        return line


class TestPageSelector:
    """Test cases for PageSelector."""

    def setup_method(self):
        """Setup test fixtures before each test method."""
        self.sink = RecordingSink()

    def select_lines(self, text, drain_input=False, **kwargs):
        selection = make_config(**kwargs)
        reader = LineCountPageReader(io.StringIO(text), selection.page_length)
        return PageSelector(selection, drain_input=drain_input).run(reader, self.sink)

    def test_line_count_pages_one_and_two(self, ten_lines):
        """Pages 1-2 of three-line pages are lines 3 through 8."""
        self.select_lines("\n".join(ten_lines) + "\n", start_page=1, end_page=2, page_length=3)
        assert self.sink.units == ten_lines[3:9]

    def test_whole_input_when_range_covers_it(self, ten_lines):
        stats = self.select_lines("\n".join(ten_lines), start_page=0, end_page=5, page_length=4)
        assert self.sink.units == ten_lines
        assert stats.units_forwarded == 10
        assert not stats.stopped_early

    def test_range_beyond_input_is_empty(self, ten_lines):
        """Asking for pages past the end is not an error."""
        stats = self.select_lines("\n".join(ten_lines), start_page=4, end_page=9, page_length=3)
        assert self.sink.units == []
        assert stats.units_read == 10
        assert stats.first_page is None

    def test_distinct_pages_bounded_by_range(self):
        text = "".join(f"{i}\n" for i in range(100))
        for start, end in [(0, 0), (2, 5), (7, 40)]:
            self.sink = RecordingSink()
            stats = self.select_lines(text, start_page=start, end_page=end, page_length=3)
            assert len(stats.pages_forwarded) <= end - start + 1
            assert all(start <= page <= end for page in stats.pages_forwarded)

    def test_stops_early_without_drain(self):
        """A file source stops being read once past the end page."""
        stream = CountingStream("".join(f"{i}\n" for i in range(50)))
        selection = make_config(start_page=0, end_page=1, page_length=2)
        stats = PageSelector(selection).run(LineCountPageReader(stream, 2), self.sink)

        assert self.sink.units == ["0", "1", "2", "3"]
        assert stats.stopped_early
        assert stream.lines_read == 5

    def test_drain_reads_everything(self):
        """Standard input is read to the end even after the range is done."""
        stream = CountingStream("".join(f"{i}\n" for i in range(50)))
        selection = make_config(start_page=0, end_page=1, page_length=2)
        stats = PageSelector(selection, drain_input=True).run(LineCountPageReader(stream, 2), self.sink)

        assert self.sink.units == ["0", "1", "2", "3"]
        assert not stats.stopped_early
        assert stats.units_read == 50
        assert stream.lines_read == 50

    def test_form_feed_first_three_chunks(self, form_feed_chunks):
        selection = make_config(start_page=0, end_page=2, form_feed=True)
        reader = FormFeedPageReader(io.StringIO("".join(form_feed_chunks)))
        PageSelector(selection).run(reader, self.sink)

        assert self.sink.units == form_feed_chunks[:3]

    def test_form_feed_skips_pages_before_start(self, form_feed_chunks):
        """Chunks are selected by their position, not by iteration count."""
        selection = make_config(start_page=3, end_page=9, form_feed=True)
        reader = FormFeedPageReader(io.StringIO("".join(form_feed_chunks)))
        stats = PageSelector(selection).run(reader, self.sink)

        assert self.sink.units == form_feed_chunks[3:]
        assert stats.pages_forwarded == {3, 4}

    def test_idempotent(self, ten_lines):
        text = "\n".join(ten_lines)
        self.select_lines(text, start_page=1, end_page=1, page_length=4)
        first = list(self.sink.units)
        self.sink = RecordingSink()
        self.select_lines(text, start_page=1, end_page=1, page_length=4)
        assert self.sink.units == first

    def test_selector_does_not_finish_sink(self):
        self.select_lines("a\nb\n", start_page=0, end_page=0)
        assert self.sink.finish_calls == 0

    def test_sink_errors_propagate(self):
        sink = Mock()
        sink.write.side_effect = ConsumerError("error happen in pipe")
        sink.get_sink_name.return_value = "mock"
        selection = make_config(start_page=0, end_page=0)

        with pytest.raises(ConsumerError):
            PageSelector(selection).run(LineCountPageReader(io.StringIO("a\n"), 1), sink)

    def test_in_range(self):
        selector = PageSelector(make_config(start_page=2, end_page=4))
        assert [selector.in_range(p) for p in range(6)] == [False, False, True, True, True, False]
