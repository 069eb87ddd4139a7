from __future__ import annotations
from typing import Any, Hashable, Iterable, List, Tuple

# Path from a tree root to a node, read with pyrsistent.get_in and written
# with PMap.transform
Keypath = Tuple[Any, ...]


def duplicated_values(values: Iterable[Hashable]) -> List[Hashable]:
    seen, dupes = set(), []
    for v in values:
        if v in seen and v not in dupes:
            dupes.append(v)
        seen.add(v)
    return dupes
