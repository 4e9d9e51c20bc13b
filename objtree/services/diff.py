"""Structural equality and diff utilities."""
import json
from numbers import Number
from typing import Any, Optional

from deepdiff import DeepDiff

from objtree.core.types import is_array, is_container


def _kind(value: Any) -> type:
    # bool is an int subclass but never equals a number here
    if isinstance(value, bool):
        return bool
    if isinstance(value, Number):
        return Number
    return type(value)


def _leaf_equals(one: Any, other: Any) -> bool:
    if _kind(one) is not _kind(other):
        return False
    if isinstance(one, (str, bytes, Number)):
        return one == other
    return False


def equals(one: Any, other: Any) -> bool:
    if one is other:
        return True
    if one is None or other is None:
        return False
    if not is_container(one) or not is_container(other):
        return not is_container(one) and not is_container(other) and _leaf_equals(one, other)
    if is_array(one) != is_array(other):
        return False

    if is_array(one):
        if len(one) != len(other):
            return False
        return all(equals(a, b) for a, b in zip(one, other))

    if len(one) != len(other) or any(key not in other for key in one):
        return False
    return all(equals(one[key], other[key]) for key in sorted(one, key=str))


def distinct(base: Optional[dict], target: Optional[dict]) -> dict:
    """
    Return the keys of target whose value differs from base.

    Keys only present in base are not considered. Values are taken whole,
    this is not a deep diff (see compute_diff for that).
    """
    result: dict = {}
    if base is None or target is None:
        return result

    for key, target_value in target.items():
        if key not in base or not equals(base[key], target_value):
            result[key] = target_value
    return result


def compute_diff(before: Any, after: Any, ignore_order: bool = True) -> dict:
    """Return a serialisable deep diff between two trees."""
    diff = DeepDiff(before, after, ignore_order=ignore_order)
    return json.loads(diff.to_json()) if diff else {}
