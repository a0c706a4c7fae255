"""Registry mapping front matter tags to engines."""

import re
import threading
from typing import Dict, List, Optional

from fenced_matter.engines import Engine, JsonEngine, TomlEngine, YamlEngine
from fenced_matter.utils.logging import get_logger

logger = get_logger(__name__)

# Tags must be producible by the scanner, which only reads [A-Za-z0-9]* after a fence.
_TAG_PATTERN = re.compile(r"[A-Za-z0-9]+")


def _normalize_tag(tag: str) -> str:
    if not _TAG_PATTERN.fullmatch(tag):
        raise ValueError(f"invalid engine tag {tag!r}: expected a non-empty alphanumeric string")
    return tag.lower()


class EngineRegistry:
    """Thread-safe mapping from lowercase tag to Engine.

    Each registry is independent; parsers own one, so tests and callers can
    build isolated registries. Registration and lookup share a lock, so
    engines may be registered while other threads are parsing.
    """

    def __init__(self, engines: Optional[Dict[str, Engine]] = None) -> None:
        """Initialize the registry.

        Args:
            engines: Optional initial tag -> engine mapping
        """
        self._engines: Dict[str, Engine] = {}
        self._lock = threading.RLock()
        for tag, engine in (engines or {}).items():
            self.register(tag, engine)

    def register(self, tag: str, engine: Engine) -> None:
        """Register an engine for a tag.

        Tags are case-insensitive. Registering a tag that already has an
        engine replaces it: the last registration wins.

        Args:
            tag: Alphanumeric tag, e.g. "yaml" or "ini"
            engine: Object with a ``decode(text)`` method

        Raises:
            ValueError: If the tag is empty or not alphanumeric
            TypeError: If engine does not provide ``decode``
        """
        key = _normalize_tag(tag)
        if not callable(getattr(engine, "decode", None)):
            raise TypeError(f"engine for tag {key!r} has no callable decode()")

        with self._lock:
            if key in self._engines:
                logger.debug(f"Replacing engine for tag '{key}'")
            self._engines[key] = engine

    def unregister(self, tag: str) -> Optional[Engine]:
        """Remove the engine for a tag and return it, or None if absent."""
        with self._lock:
            return self._engines.pop(tag.lower(), None)

    def resolve(self, tag: str) -> Optional[Engine]:
        """Look up the engine for a tag.

        Args:
            tag: Tag as written after the opening fence (any case)

        Returns:
            The registered engine, or None
        """
        with self._lock:
            return self._engines.get(tag.lower())

    def tags(self) -> List[str]:
        """Registered tags, sorted."""
        with self._lock:
            return sorted(self._engines)

    def copy(self) -> "EngineRegistry":
        """Snapshot of the registry that can be mutated independently."""
        with self._lock:
            return EngineRegistry(dict(self._engines))

    def __contains__(self, tag: object) -> bool:
        if not isinstance(tag, str):
            return False
        return self.resolve(tag) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._engines)


def default_registry() -> EngineRegistry:
    """Create a registry pre-populated with the built-in engines."""
    yaml_engine = YamlEngine()
    return EngineRegistry(
        {
            "yaml": yaml_engine,
            "yml": yaml_engine,
            "json": JsonEngine(),
            "toml": TomlEngine(),
        }
    )
