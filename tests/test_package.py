"""
Tests for package metadata.
"""

import trivia_toolkit


def test_copyright_names_this_project():
    assert "trivia_toolkit" in trivia_toolkit.__copyright__
    assert "MIT" in trivia_toolkit.__copyright__


def test_version_read_from_pyproject():
    assert trivia_toolkit.__version__ == "0.3.1"
