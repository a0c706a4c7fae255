"""Extract and decode front matter from text documents."""

import logging

from fenced_matter.engines import Engine, FunctionEngine, JsonEngine, TomlEngine, YamlEngine
from fenced_matter.exceptions import (
    DecodeFailureError,
    FrontMatterError,
    UnknownEngineError,
    UnterminatedBlockError,
)
from fenced_matter.excerpt import extract_excerpt
from fenced_matter.parser import (
    FrontMatterParser,
    MatterOptions,
    ParseResult,
    StructResult,
    parse,
    parse_with_struct,
)
from fenced_matter.registry import EngineRegistry, default_registry
from fenced_matter.scanner import Matter, scan
from fenced_matter.utils.logging import LOGGER_NAME
from fenced_matter.value import Value, to_value

__version__ = "0.1.0"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

__all__ = [
    "DecodeFailureError",
    "Engine",
    "EngineRegistry",
    "FrontMatterError",
    "FrontMatterParser",
    "FunctionEngine",
    "JsonEngine",
    "Matter",
    "MatterOptions",
    "ParseResult",
    "StructResult",
    "TomlEngine",
    "UnknownEngineError",
    "UnterminatedBlockError",
    "Value",
    "YamlEngine",
    "default_registry",
    "extract_excerpt",
    "parse",
    "parse_with_struct",
    "scan",
    "to_value",
]
