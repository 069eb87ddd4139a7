from __future__ import annotations
import math
from typing import Any, Iterator, List, Tuple

from pyrsistent import PMap, PVector

# Reference to the text a node was parsed from
SOURCE_KEY = "__source__"
# Source range of the node a substituted node replaced
SLOT_KEY = "__slot__"

# Fields that describe where a node came from rather than what it is
META_KEYS = frozenset({"loc", "range", SLOT_KEY, SOURCE_KEY})


def is_node(value: Any) -> bool:
    return isinstance(value, PMap) and "type" in value


def span(node: PMap):
    return node.get(SLOT_KEY) or node.get("range")


def detach(node: PMap) -> PMap:
    """Forget where a node was parsed from, once its content no longer matches that text."""
    return node.discard("range").discard("loc").discard(SOURCE_KEY)


def _position(value: Any) -> float:
    if is_node(value):
        s = span(value)
        return s[0] if s else math.inf
    if isinstance(value, PVector):
        return min((_position(v) for v in value), default=math.inf)
    return math.inf


def node_fields(node: PMap) -> List[Tuple[str, Any]]:
    """Fields of `node` that hold nodes or node vectors, in source order."""
    fields = []
    for key, value in node.items():
        if key in META_KEYS:
            continue
        if is_node(value) or (isinstance(value, PVector) and any(is_node(v) for v in value)):
            fields.append((key, value))
    fields.sort(key=lambda kv: (_position(kv[1]), kv[0]))
    return fields


def child_nodes(node: PMap) -> Iterator[Tuple[Tuple[Any, ...], PMap]]:
    """Yield (relative keypath, child) for every direct child node."""
    for key, value in node_fields(node):
        if isinstance(value, PVector):
            for i, item in enumerate(value):
                if is_node(item):
                    yield (key, i), item
        else:
            yield (key,), value
