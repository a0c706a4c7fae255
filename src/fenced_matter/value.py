"""Decoder-agnostic representation of parsed front matter.

Every engine hands its library's native output to ``to_value`` so the rest
of the package only ever sees plain ``None``/``bool``/``int``/``float``/
``str``/``list``/``dict`` trees.
"""

import datetime
from typing import Any, Dict, List, Set, Tuple, Union

Value = Union[None, bool, int, float, str, List["Value"], Dict[str, "Value"]]

_SCALARS = (bool, int, float, str)

# Upper bound on the number of nodes a tree would have with every shared
# node written out in full. YAML anchors let a few hundred bytes describe
# billions of nodes.
MAX_NODES = 1_000_000


def _key_to_str(key: Any) -> str:
    """Convert a mapping key to its string form.

    YAML allows non-string keys such as ``1: one`` or ``true: yes``.
    """
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, (int, float)):
        return str(key)
    if isinstance(key, (datetime.date, datetime.time)):
        return key.isoformat()
    raise TypeError(f"unsupported mapping key type: {type(key).__name__}")


def to_value(obj: Any, max_nodes: int = MAX_NODES) -> Value:
    """Normalize a decoder's native output into a Value tree.

    Containers that the decoder shares (YAML anchors and aliases) are
    converted once and stay shared in the returned tree.

    Args:
        obj: Object returned by a format library (yaml, json, tomllib, ...)
        max_nodes: Limit on the fully expanded node count

    Returns:
        A fresh Value tree

    Raises:
        TypeError: If obj contains a type with no Value counterpart
        ValueError: If two mapping keys collide after string conversion,
            a container contains itself, or the expanded tree has more
            than max_nodes nodes
    """
    memo: Dict[int, Tuple[Value, int]] = {}
    active: Set[int] = set()

    def convert(node: Any) -> Tuple[Value, int]:
        if node is None or isinstance(node, _SCALARS):
            return node, 1

        # datetime is a subclass of date, both expose isoformat()
        if isinstance(node, (datetime.date, datetime.time)):
            return node.isoformat(), 1

        if not isinstance(node, (list, tuple, dict)):
            raise TypeError(f"unsupported value type: {type(node).__name__}")

        node_id = id(node)
        if node_id in memo:
            return memo[node_id]
        if node_id in active:
            raise ValueError("recursive reference in front matter")

        active.add(node_id)
        size = 1
        if isinstance(node, dict):
            mapping: Dict[str, Value] = {}
            for key, item in node.items():
                str_key = _key_to_str(key)
                if str_key in mapping:
                    raise ValueError(f"duplicate key after normalization: {str_key!r}")
                mapping[str_key], item_size = convert(item)
                size += item_size
            value: Value = mapping
        else:
            items: List[Value] = []
            for item in node:
                item_value, item_size = convert(item)
                items.append(item_value)
                size += item_size
            value = items
        active.discard(node_id)

        if size > max_nodes:
            raise ValueError(f"front matter expands to more than {max_nodes} values")

        memo[node_id] = (value, size)
        return value, size

    return convert(obj)[0]
