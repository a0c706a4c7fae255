"""YAML engine backed by PyYAML."""

import yaml

from fenced_matter.value import Value, to_value


class YamlEngine:
    """Decode YAML front matter with ``yaml.safe_load``.

    Timestamps come back from PyYAML as date/datetime objects and are
    normalized to ISO-8601 strings. A block holding only comments decodes
    to None.
    """

    name = "yaml"

    def decode(self, text: str) -> Value:
        return to_value(yaml.safe_load(text))

    def __repr__(self) -> str:
        return "YamlEngine()"
