"""JSON engine backed by the standard library."""

import json
from typing import Any, Dict, List, Tuple

from fenced_matter.value import Value, to_value


def _unique_pairs(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    """Build an object, rejecting repeated keys instead of keeping the last."""
    obj: Dict[str, Any] = {}
    for key, value in pairs:
        if key in obj:
            raise ValueError(f"duplicate key: {key!r}")
        obj[key] = value
    return obj


class JsonEngine:
    """Decode JSON front matter with ``json.loads``."""

    name = "json"

    def decode(self, text: str) -> Value:
        return to_value(json.loads(text, object_pairs_hook=_unique_pairs))

    def __repr__(self) -> str:
        return "JsonEngine()"
