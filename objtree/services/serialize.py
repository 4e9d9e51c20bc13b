"""Circular-safe JSON serialization and defaulted lookups."""
import json
import logging
from typing import Any, Callable, Optional, TypeVar

from objtree.core.config import get_settings
from objtree.core.types import is_array, is_object_literal

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def _break_cycles(value: Any, seen: set[int], marker: str) -> Any:
    if is_object_literal(value) or is_array(value):
        if id(value) in seen:
            logger.debug("safe_stringify: replacing repeated %s with marker", type(value).__name__)
            return marker
        seen.add(id(value))
        if is_object_literal(value):
            return {key: _break_cycles(item, seen, marker) for key, item in value.items()}
        return [_break_cycles(item, seen, marker) for item in value]
    return value


def safe_stringify(obj: Any, indent: Optional[int] = None) -> str:
    """
    json.dumps with every already visited dict or list replaced by a marker.

    Visited nodes are tracked for the whole call, so a node referenced twice
    is written once and marked the second time, even without a cycle.
    """
    settings = get_settings()
    if indent is None:
        indent = settings.stringify_indent
    tree = _break_cycles(obj, set(), settings.circular_marker)
    return json.dumps(
        tree,
        indent=indent,
        ensure_ascii=settings.stringify_ensure_ascii,
        separators=None if indent is not None else (",", ":"),
    )


def get_or_default(obj: T, fn: Callable[[T], Optional[R]], default: Optional[R] = None) -> Optional[R]:
    result = fn(obj)
    return default if result is None else result
