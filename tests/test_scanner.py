"""Tests for front matter boundary detection."""

import pytest

from fenced_matter.exceptions import UnterminatedBlockError
from fenced_matter.scanner import Matter, scan


def test_scan_without_front_matter():
    """Test that input without an opening fence is returned untouched."""
    text = "No front matter here"
    matter, content = scan(text)
    assert matter == Matter(raw="", tag="")
    assert content == text


def test_scan_basic_block():
    """Test splitting a simple YAML block from the body."""
    matter, content = scan("---\ntitle: Hello\n---\nBody text")
    assert matter.raw == "title: Hello"
    assert matter.tag == ""
    assert not matter.unclosed
    assert content == "Body text"


def test_scan_markdown_document():
    """Test stripping front matter from a Markdown document."""
    text = """---
title: Test Document
author: Test Author
---

# Header 1

Content here.
"""
    matter, content = scan(text)
    assert matter.raw == "title: Test Document\nauthor: Test Author"
    assert content.strip().startswith("# Header 1")
    assert "title: Test Document" not in content
    # Only the fence line's own newline is consumed
    assert content.startswith("\n# Header 1")


@pytest.mark.parametrize(
    "text,tag",
    [
        ('---json\n{"a":1}\n---\nBody', "json"),
        ('---JSON\n{"a":1}\n---\nBody', "json"),
        ("---toml\na = 1\n---\nBody", "toml"),
        ("---yml2\na: 1\n---\nBody", "yml2"),
    ],
)
def test_scan_language_tag(text, tag):
    """Test that the tag after the opening fence is read and lowercased."""
    matter, content = scan(text)
    assert matter.tag == tag
    assert content == "Body"


@pytest.mark.parametrize(
    "text",
    [
        "--- yaml\na: 1\n---\nBody",
        "--- true\n---",
        "--- 233\n---",
        "---x-y\na: 1\n---\nBody",
        "-----------name--------------value\nfoo",
        "\n---\na: 1\n---\nBody",
        "text\n---\na: 1\n---\n",
        "---",
        "",
    ],
)
def test_scan_rejects_non_fence_first_line(text):
    """Test lines that only look like an opening fence."""
    matter, content = scan(text)
    assert matter.raw == ""
    assert matter.tag == ""
    assert content == text


def test_scan_unterminated_block_is_ignored():
    """Test that a block without a closing fence counts as no front matter."""
    text = "---\ntitle: Draft\nBody without closing fence"
    matter, content = scan(text)
    assert matter == Matter(unclosed=True)
    assert matter.raw == ""
    assert content == text


def test_scan_unterminated_block_strict():
    """Test that strict mode reports an unclosed block."""
    with pytest.raises(UnterminatedBlockError) as exc_info:
        scan("---\ntitle: Draft\nBody", strict=True)
    assert exc_info.value.delimiter == "---"


def test_scan_strict_without_block():
    """Test that strict mode does not complain when there is no block at all."""
    matter, content = scan("Just text", strict=True)
    assert matter == Matter()
    assert content == "Just text"


def test_scan_closing_fence_at_end_of_input():
    """Test a closing fence without a trailing newline."""
    matter, content = scan("---\nabc: xyz\n---")
    assert matter.raw == "abc: xyz"
    assert content == ""


def test_scan_keeps_blank_lines_inside_block():
    """Test that author-intended blank lines in the block survive."""
    matter, _ = scan("---\n\na: 1\n\n---\nX")
    assert matter.raw == "\na: 1\n"


@pytest.mark.parametrize(
    "text",
    [
        "---\n---\nThis is content",
        "---\n\n---\nThis is content",
        "---\n\n\n\n\n\n---\nThis is content",
        "---\n  \t\n---\nThis is content",
    ],
)
def test_scan_empty_block(text):
    """Test that an empty or blank block yields empty raw text but is still removed."""
    matter, content = scan(text)
    assert matter.raw == ""
    assert content == "This is content"


def test_scan_crlf_line_endings():
    """Test Windows line endings."""
    matter, content = scan("---\r\ntitle: Hi\r\n---\r\nBody\r\n")
    assert matter.raw == "title: Hi"
    assert content == "Body\r\n"


def test_scan_trailing_blanks_on_fences():
    """Test that trailing spaces and tabs on fence lines are tolerated."""
    matter, content = scan("---  \na: 1\n---\t\nBody")
    assert matter.raw == "a: 1"
    assert content == "Body"


def test_scan_delimiter_inside_value():
    """Test that a delimiter inside a quoted value does not close the block."""
    matter, content = scan('---\nname: "troublesome --- value"\n---\nhere is some content\n')
    assert matter.raw == 'name: "troublesome --- value"'
    assert content == "here is some content\n"


def test_scan_rogue_delimiters_stay_in_content():
    """Test that only the first closing fence ends the block."""
    matter, content = scan("---\nname: bar\n---\n---\n---")
    assert matter.raw == "name: bar"
    assert content == "---\n---"


def test_scan_custom_delimiter():
    """Test a custom fence marker."""
    matter, content = scan("---\nabc: xyz\n---", delimiter="~~~")
    assert matter.raw == ""
    assert content == "---\nabc: xyz\n---"

    matter, content = scan("~~~\nabc: xyz\n~~~\nBody", delimiter="~~~")
    assert matter.raw == "abc: xyz"
    assert content == "Body"

    matter, _ = scan("\nabc: xyz\n~~~", delimiter="~~~")
    assert matter.raw == ""


def test_scan_regex_characters_in_delimiter():
    """Test that delimiters are matched literally."""
    matter, content = scan("+++\ntitle = 'x'\n+++\nBody", delimiter="+++")
    assert matter.raw == "title = 'x'"
    assert content == "Body"

    matter, _ = scan("...\na: 1\n...\n", delimiter="+++")
    assert matter.raw == ""


def test_scan_byte_order_mark():
    """Test that a leading BOM does not hide the opening fence."""
    matter, content = scan("\ufeff---\na: 1\n---\nBody")
    assert matter.raw == "a: 1"
    assert content == "Body"


def test_scan_reconstructs_original():
    """Test that fences, tag, raw text and content rebuild the input."""
    text = '---json\n{\n  "a": 1\n}\n---\nFirst line\n\nSecond line\n'
    matter, content = scan(text)
    rebuilt = "---" + matter.tag + "\n" + matter.raw + "\n" + "---" + "\n" + content
    assert rebuilt == text


def test_scan_empty_delimiter():
    """Test that an empty delimiter is rejected."""
    with pytest.raises(ValueError):
        scan("---\na: 1\n---\n", delimiter="")
