"""Front matter parser: scan, excerpt, dispatch, decode, assemble."""

import dataclasses
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Mapping, Optional, TypeVar, Union

from fenced_matter.engines import Engine, FunctionEngine
from fenced_matter.exceptions import (
    DecodeFailureError,
    UnknownEngineError,
    UnterminatedBlockError,
)
from fenced_matter.excerpt import extract_excerpt
from fenced_matter.registry import EngineRegistry, default_registry
from fenced_matter.scanner import Matter, scan
from fenced_matter.utils.logging import get_logger
from fenced_matter.value import Value

logger = get_logger(__name__)

T = TypeVar("T")

ENV_PREFIX = "FENCED_MATTER_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _env_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


@dataclass(frozen=True)
class MatterOptions:
    """Parser configuration.

    Attributes:
        delimiter: Front matter fence marker
        excerpt_delimiter: Excerpt separator line; None means same as delimiter
        default_tag: Engine tag used when the opening fence carries no tag
        excerpt: Whether to extract an excerpt at all
        strict: Raise UnterminatedBlockError for an unclosed block
    """

    delimiter: str = "---"
    excerpt_delimiter: Optional[str] = None
    default_tag: str = "yaml"
    excerpt: bool = True
    strict: bool = False

    def __post_init__(self) -> None:
        if not self.delimiter:
            raise ValueError("delimiter must be a non-empty string")
        if self.excerpt_delimiter is not None and not self.excerpt_delimiter:
            raise ValueError("excerpt_delimiter must be a non-empty string or None")
        if not self.default_tag:
            raise ValueError("default_tag must be a non-empty string")

    @property
    def effective_excerpt_delimiter(self) -> str:
        return self.excerpt_delimiter or self.delimiter

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MatterOptions":
        """Build options from FENCED_MATTER_* environment variables.

        Unset variables keep their defaults.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            MatterOptions instance
        """
        env = os.environ if environ is None else environ
        kwargs: Dict[str, Any] = {}

        for field in ("delimiter", "excerpt_delimiter", "default_tag"):
            key = ENV_PREFIX + field.upper()
            if key in env:
                kwargs[field] = env[key]

        for field in ("excerpt", "strict"):
            key = ENV_PREFIX + field.upper()
            if key in env:
                kwargs[field] = _env_bool(key, env[key])

        return cls(**kwargs)


@dataclass
class ParseResult:
    """Outcome of parsing one document.

    ``data`` is None when no front matter block was found (``matter == ""``).
    A block that decodes to null also gives ``data is None``; use
    ``has_matter`` to tell the two apart.
    """

    data: Optional[Value]
    content: str
    excerpt: Optional[str]
    matter: str
    orig: str

    @property
    def has_matter(self) -> bool:
        return self.matter != ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "data": self.data,
            "content": self.content,
            "excerpt": self.excerpt,
            "matter": self.matter,
            "orig": self.orig,
        }


@dataclass
class StructResult(Generic[T]):
    """ParseResult whose data was used to construct an object of type T."""

    data: T
    content: str
    excerpt: Optional[str]
    matter: str
    orig: str


class FrontMatterParser:
    """Parse front matter with a configurable delimiter and engine registry.

    A parser owns its registry. Engines registered on one parser are not
    visible to others unless the same registry is passed to both.
    """

    def __init__(
        self,
        options: Optional[MatterOptions] = None,
        registry: Optional[EngineRegistry] = None,
    ) -> None:
        """Initialize the parser.

        Args:
            options: Parser configuration (defaults to MatterOptions())
            registry: Engine registry (defaults to a fresh default_registry())
        """
        self.options = options or MatterOptions()
        self.registry = registry if registry is not None else default_registry()

    def register(self, tag: str, engine: Union[Engine, Callable[[str], Any]]) -> None:
        """Register an engine (or a plain ``str -> object`` loader) for a tag.

        Registering an existing tag replaces its engine.
        """
        if not hasattr(engine, "decode") and callable(engine):
            engine = FunctionEngine(tag.lower(), engine)
        self.registry.register(tag, engine)

    def parse(self, text: Union[str, bytes]) -> ParseResult:
        """Parse a document.

        Args:
            text: Document as str, or UTF-8 encoded bytes

        Returns:
            ParseResult

        Raises:
            UnknownEngineError: If the block's tag has no registered engine
            DecodeFailureError: If the engine rejects the block
            UnterminatedBlockError: In strict mode, for an unclosed block
        """
        if isinstance(text, bytes):
            text = text.decode("utf-8")

        options = self.options
        matter, content = scan(text, options.delimiter)

        # the unclosed opening fence must not be taken for an excerpt separator
        excerpt = None
        if options.excerpt and not matter.unclosed:
            excerpt = extract_excerpt(content, options.effective_excerpt_delimiter)

        result = ParseResult(
            data=None,
            content=content,
            excerpt=excerpt,
            matter=matter.raw,
            orig=text,
        )

        if matter.unclosed and options.strict:
            raise UnterminatedBlockError(options.delimiter, result=result)

        if not matter.raw and not matter.tag:
            return result

        result.data = self._decode(matter, result)
        return result

    def _decode(self, matter: Matter, partial: ParseResult) -> Value:
        tag = matter.tag or self.options.default_tag.lower()
        engine = self.registry.resolve(tag)
        if engine is None:
            logger.debug(f"No engine for tag '{tag}'")
            raise UnknownEngineError(tag, result=partial)

        # empty blocks are never handed to an engine, but their tag is still checked
        if not matter.raw:
            return None

        logger.debug(f"Decoding front matter with {engine!r} (tag={tag})")
        try:
            return engine.decode(matter.raw)
        except Exception as e:
            logger.warning(f"Failed to decode {tag} front matter: {e}")
            raise DecodeFailureError(tag, str(e), result=partial) from e

    def parse_with_struct(
        self, text: Union[str, bytes], cls: Callable[..., T]
    ) -> Optional[StructResult[T]]:
        """Parse a document and build ``cls(**data)`` from its front matter.

        Works with dataclasses and any class taking its fields as keywords.
        Unknown keys are dropped for dataclasses.

        Args:
            text: Document to parse
            cls: Type (or factory) to construct

        Returns:
            StructResult, or None if there is no front matter, the data is not
            a mapping, or construction fails

        Raises:
            UnknownEngineError: If the block's tag has no registered engine
            DecodeFailureError: If the engine rejects the block
        """
        result = self.parse(text)
        if not isinstance(result.data, dict):
            return None

        kwargs = result.data
        if dataclasses.is_dataclass(cls):
            names = {f.name for f in dataclasses.fields(cls) if f.init}
            kwargs = {key: value for key, value in kwargs.items() if key in names}

        try:
            data = cls(**kwargs)
        except (TypeError, ValueError) as e:
            logger.debug(f"Could not build {getattr(cls, '__name__', cls)} from front matter: {e}")
            return None

        return StructResult(
            data=data,
            content=result.content,
            excerpt=result.excerpt,
            matter=result.matter,
            orig=result.orig,
        )


def parse(
    text: Union[str, bytes],
    registry: Optional[EngineRegistry] = None,
    **options: Any,
) -> ParseResult:
    """Parse a document with a one-off parser.

    Args:
        text: Document to parse
        registry: Engine registry (defaults to the built-in engines)
        **options: MatterOptions fields

    Returns:
        ParseResult
    """
    return FrontMatterParser(MatterOptions(**options), registry).parse(text)


def parse_with_struct(
    text: Union[str, bytes],
    cls: Callable[..., T],
    registry: Optional[EngineRegistry] = None,
    **options: Any,
) -> Optional[StructResult[T]]:
    """Module-level shortcut for FrontMatterParser.parse_with_struct."""
    return FrontMatterParser(MatterOptions(**options), registry).parse_with_struct(text, cls)
