"""Tests for excerpt extraction."""

import pytest

from fenced_matter.excerpt import extract_excerpt


def test_extract_excerpt():
    """Test the excerpt is the text before the first separator line."""
    content = "Excerpt text\n---\nMore body"
    assert extract_excerpt(content) == "Excerpt text"
    # The separator and the rest stay in content
    assert content == "Excerpt text\n---\nMore body"


def test_extract_excerpt_multiline():
    """Test a multi-line excerpt keeps its inner newlines."""
    assert extract_excerpt("foo\nbar\nbaz\n---\ncontent") == "foo\nbar\nbaz"


def test_extract_excerpt_missing_separator():
    """Test that no separator means no excerpt."""
    assert extract_excerpt("Just a body\nwith lines") is None
    assert extract_excerpt("") is None


def test_extract_excerpt_custom_separator():
    """Test a custom separator independent of the front matter delimiter."""
    content = "foo\nbar\nbaz\n<!-- endexcerpt -->\ncontent"
    assert extract_excerpt(content, "<!-- endexcerpt -->") == "foo\nbar\nbaz"
    assert extract_excerpt(content) is None


def test_extract_excerpt_separator_must_be_whole_line():
    """Test that a separator embedded in a line is ignored."""
    assert extract_excerpt("foo\n---bar\nbaz") is None
    assert extract_excerpt("a --- b\nc") is None


def test_extract_excerpt_first_separator_wins():
    """Test that only the first separator line is used."""
    assert extract_excerpt("one\n---\ntwo\n---\nthree") == "one"


def test_extract_excerpt_separator_on_first_line():
    """Test an empty excerpt when content starts with the separator."""
    assert extract_excerpt("---\nrest") == ""


def test_extract_excerpt_keeps_author_blank_lines():
    """Test that only one trailing newline is removed."""
    assert extract_excerpt("Intro\n\n---\nBody") == "Intro\n"


def test_extract_excerpt_crlf():
    """Test Windows line endings around the separator."""
    assert extract_excerpt("Intro\r\n---\r\nBody") == "Intro"


def test_extract_excerpt_empty_separator():
    """Test that an empty separator is rejected."""
    with pytest.raises(ValueError):
        extract_excerpt("text", "")
