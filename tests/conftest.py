"""
Pytest configuration and fixtures for selpg tests.
"""

import pytest
import os
import sys
import tempfile
import shutil
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def ten_lines():
    """Ten short lines, 'line 0' through 'line 9'."""
    return [f"line {i}" for i in range(10)]


@pytest.fixture
def ten_line_file(temp_dir, ten_lines):
    """A file holding the ten sample lines."""
    file_path = os.path.join(temp_dir, "ten_lines.txt")
    with open(file_path, 'w', encoding='utf-8', newline='\n') as f:
        f.write("\n".join(ten_lines) + "\n")
    return file_path


@pytest.fixture
def form_feed_chunks():
    """Five form-feed terminated chunks, each spanning two lines."""
    return [f"chunk {i} top\nchunk {i} bottom\n\f" for i in range(5)]


@pytest.fixture
def form_feed_file(temp_dir, form_feed_chunks):
    """A file holding the five form-feed chunks."""
    file_path = os.path.join(temp_dir, "form_feed.txt")
    with open(file_path, 'w', encoding='utf-8', newline='\n') as f:
        f.write("".join(form_feed_chunks))
    return file_path
