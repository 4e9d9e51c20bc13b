"""
Type predicates for plain data trees.

Plain mappings are dicts, ordered sequences are lists and tuples.
Everything else is an opaque leaf.
"""
from typing import Any


class FrozenDict(dict):
    def _ro(self, *a, **k):
        raise TypeError("FrozenDict is read-only")
    __setitem__ = __delitem__ = clear = pop = popitem = setdefault = update = _ro
    __ior__ = _ro

    def __repr__(self):
        return f"FrozenDict({dict.__repr__(self)})"

    def __reduce__(self):
        return (type(self), (dict(self),))


class FrozenList(list):
    def _ro(self, *a, **k):
        raise TypeError("FrozenList is read-only")
    __setitem__ = __delitem__ = append = extend = insert = pop = remove = _ro
    clear = reverse = sort = __iadd__ = __imul__ = _ro

    def __repr__(self):
        return f"FrozenList({list.__repr__(self)})"

    def __reduce__(self):
        return (type(self), (list(self),))


def is_object_literal(value: Any) -> bool:
    return isinstance(value, dict)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_container(value: Any) -> bool:
    return isinstance(value, (dict, list, tuple))


def is_frozen(value: Any) -> bool:
    """
    True for FrozenDict/FrozenList and for leaf values.
    Tuples are not frozen since they may still hold mutable nodes.
    """
    if isinstance(value, (FrozenDict, FrozenList)):
        return True
    return not is_container(value)
