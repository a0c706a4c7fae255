"""Built-in front matter engines."""

from fenced_matter.engines.base import Engine, FunctionEngine
from fenced_matter.engines.json_engine import JsonEngine
from fenced_matter.engines.toml_engine import TomlEngine
from fenced_matter.engines.yaml_engine import YamlEngine

__all__ = ["Engine", "FunctionEngine", "JsonEngine", "TomlEngine", "YamlEngine"]
