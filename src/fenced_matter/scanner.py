"""Front matter boundary detection.

The scanner only looks at strings: it finds the fence lines, the optional
language tag and the text in between, and never decodes anything.
"""

import re
from dataclasses import dataclass
from typing import Pattern, Tuple

from fenced_matter.exceptions import UnterminatedBlockError
from fenced_matter.utils.logging import get_logger
from fenced_matter.utils.text import strip_one_newline

logger = get_logger(__name__)

BOM = "\ufeff"


@dataclass(frozen=True)
class Matter:
    """Raw front matter block and its lowercase language tag.

    ``unclosed`` is set when the opening fence was found but never closed.
    """

    raw: str = ""
    tag: str = ""
    unclosed: bool = False


def _opening_pattern(delimiter: str) -> Pattern[str]:
    # "---" or "---json", optional trailing blanks, optional CR from CRLF input
    return re.compile(re.escape(delimiter) + r"([A-Za-z0-9]*)[ \t]*\r?")


def _closing_pattern(delimiter: str) -> Pattern[str]:
    return re.compile(re.escape(delimiter) + r"[ \t]*\r?")


def scan(text: str, delimiter: str = "---", strict: bool = False) -> Tuple[Matter, str]:
    """Split a document into its front matter block and the remaining content.

    The first line must be the delimiter, optionally followed directly by an
    alphanumeric tag (``---json``). The block ends at the first later line
    that is exactly the delimiter. Text between the fence lines is returned
    verbatim minus the line terminator that belongs to the closing fence;
    content starts right after the closing fence line.

    A missing opening fence, or an opening fence that is never closed, yields
    an empty Matter and the unchanged input as content. In the second case
    the Matter is flagged ``unclosed``.

    Args:
        text: Full document
        delimiter: Fence marker
        strict: Raise instead of ignoring an unterminated block

    Returns:
        Tuple of (matter, content)

    Raises:
        ValueError: If delimiter is empty
        UnterminatedBlockError: In strict mode, for an unclosed block
    """
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")

    body = text[len(BOM):] if text.startswith(BOM) else text

    first_end = body.find("\n")
    first_line = body if first_end == -1 else body[:first_end]
    opening = _opening_pattern(delimiter).fullmatch(first_line)
    if opening is None:
        return Matter(), text

    tag = opening.group(1).lower()
    closing = _closing_pattern(delimiter)

    if first_end != -1:
        start = first_end + 1
        pos = start
        while True:
            newline = body.find("\n", pos)
            line_end = len(body) if newline == -1 else newline
            if closing.fullmatch(body[pos:line_end]):
                raw = strip_one_newline(body[start:pos])
                content = "" if newline == -1 else body[newline + 1 :]
                if not raw.strip():
                    raw = ""
                logger.debug(
                    f"Found front matter block (tag={tag or '<default>'}, {len(raw)} chars)"
                )
                return Matter(raw=raw, tag=tag), content
            if newline == -1:
                break
            pos = newline + 1

    if strict:
        raise UnterminatedBlockError(delimiter)

    logger.debug(f"Opening fence {delimiter!r} is never closed; treating input as content")
    return Matter(unclosed=True), text
