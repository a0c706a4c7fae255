"""Engine interface and a callable adapter for custom formats."""

from typing import Any, Callable, Protocol, runtime_checkable

from fenced_matter.value import Value, to_value


@runtime_checkable
class Engine(Protocol):
    """Decodes raw front matter of one format into a Value.

    Implementations are stateless and raise on malformed input; the parser
    turns any exception into a DecodeFailureError.
    """

    name: str

    def decode(self, text: str) -> Value:
        ...


class FunctionEngine:
    """Wrap a plain ``str -> object`` callable as an Engine.

    The callable's output is normalized with to_value, so loaders that
    return dicts, lists or other plain objects can be registered directly.
    """

    def __init__(self, name: str, func: Callable[[str], Any]) -> None:
        self.name = name
        self._func = func

    def decode(self, text: str) -> Value:
        return to_value(self._func(text))

    def __repr__(self) -> str:
        return f"FunctionEngine(name={self.name!r})"
