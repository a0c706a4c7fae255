"""TOML engine backed by the standard library."""

import tomllib

from fenced_matter.value import Value, to_value


class TomlEngine:
    """Decode TOML front matter with ``tomllib.loads``.

    Integers and floats stay distinct; offset/local date-times are
    normalized to ISO-8601 strings.
    """

    name = "toml"

    def decode(self, text: str) -> Value:
        return to_value(tomllib.loads(text))

    def __repr__(self) -> str:
        return "TomlEngine()"
