"""Exception types raised while parsing front matter."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from fenced_matter.parser import ParseResult


class FrontMatterError(Exception):
    """Base class for fenced_matter errors.

    When the parser gets far enough to split the document, ``result`` holds a
    ParseResult with ``data=None`` and everything computed before the failure,
    so callers can still use the body.
    """

    def __init__(self, message: str, result: Optional["ParseResult"] = None) -> None:
        super().__init__(message)
        self.result = result

    @property
    def content(self) -> Optional[str]:
        return self.result.content if self.result is not None else None

    @property
    def excerpt(self) -> Optional[str]:
        return self.result.excerpt if self.result is not None else None

    @property
    def matter(self) -> Optional[str]:
        return self.result.matter if self.result is not None else None


class UnknownEngineError(FrontMatterError):
    """Raised when a block is tagged with a language no engine is registered for."""

    def __init__(self, tag: str, result: Optional["ParseResult"] = None) -> None:
        super().__init__(f"no engine registered for tag {tag!r}", result)
        self.tag = tag


class DecodeFailureError(FrontMatterError):
    """Raised when an engine rejects the front matter as malformed."""

    def __init__(
        self, tag: str, message: str, result: Optional["ParseResult"] = None
    ) -> None:
        super().__init__(f"failed to decode {tag} front matter: {message}", result)
        self.tag = tag
        self.reason = message


class UnterminatedBlockError(FrontMatterError):
    """Raised in strict mode when an opening fence has no closing fence."""

    def __init__(self, delimiter: str, result: Optional["ParseResult"] = None) -> None:
        super().__init__(f"front matter opened with {delimiter!r} is never closed", result)
        self.delimiter = delimiter
