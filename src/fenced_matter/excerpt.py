"""Excerpt extraction from document content."""

import re
from typing import Optional

from fenced_matter.utils.text import strip_one_newline


def extract_excerpt(content: str, separator: str = "---") -> Optional[str]:
    """Return the text before the first separator line, if any.

    The separator line must consist of the separator alone (trailing blanks
    allowed). Content is only read, never modified.

    Args:
        content: Document body after the front matter block
        separator: Excerpt separator line

    Returns:
        Excerpt without the newline that ends it, or None if no separator
    """
    if not separator:
        raise ValueError("excerpt separator must be a non-empty string")

    pattern = re.compile(r"^" + re.escape(separator) + r"[ \t]*\r?$", re.MULTILINE)
    match = pattern.search(content)
    if match is None:
        return None

    return strip_one_newline(content[: match.start()])
