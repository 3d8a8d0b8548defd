"""
List helpers
"""

from typing import Any, Hashable, Iterable, List


def _identity(item: Any) -> Hashable:
    """A hashable key that includes the type of the item and of everything inside it."""
    if isinstance(item, dict):
        return dict, frozenset((_identity(k), _identity(v)) for k, v in item.items())
    if isinstance(item, (list, tuple)):
        return type(item), tuple(_identity(i) for i in item)
    return type(item), item


def distinct(items: Iterable[Any]) -> List[Any]:
    """
    Return a new list without duplicates, keeping first occurrences in order.

    Items of different types never collapse (1, 1.0 and True are kept apart),
    also inside mappings and lists loaded from YAML, so {"a": 1} and
    {"a": True} are both kept. Items that still cannot be hashed are compared
    by type and equality.
    """
    seen = set()
    unhashable: List[Any] = []
    result = []

    for item in items:
        try:
            key = _identity(item)
            if key in seen:
                continue
            seen.add(key)
        except TypeError:
            if any(type(other) is type(item) and other == item for other in unhashable):
                continue
            unhashable.append(item)
        result.append(item)

    return result
