"""Deep clone, deep freeze and change-aware cloning of plain data trees."""
import logging
from collections import deque
from typing import Any, Callable, Optional

from objtree.core.types import (
    FrozenDict,
    FrozenList,
    is_array,
    is_frozen,
    is_object_literal,
)
from objtree.errors import RecursiveStructureError

logger = logging.getLogger(__name__)


def deep_clone(obj: Any) -> Any:
    """
    Recreate every dict, list and tuple reachable from obj.
    Other values (compiled patterns, datetimes, ...) are shared by reference.
    Cyclic input ends in RecursionError.
    """
    if isinstance(obj, dict):
        return {key: deep_clone(value) for key, value in obj.items()}
    if isinstance(obj, tuple):
        return tuple(deep_clone(value) for value in obj)
    if isinstance(obj, list):
        return [deep_clone(value) for value in obj]
    return obj


def _shell(node: Any) -> Any:
    return FrozenDict() if is_object_literal(node) else FrozenList()


def deep_freeze(obj: Any) -> Any:
    """
    Return a read-only copy of obj. The input itself is not modified.
    Already frozen input is returned as it is.

    Nodes are visited breadth-first from the root. Already frozen nodes are
    kept as they are, and every distinct node is frozen once, so shared and
    cyclic references survive and the walk terminates.
    """
    if is_frozen(obj):
        return obj

    frozen: dict[int, Any] = {id(obj): _shell(obj)}
    queue = deque([obj])
    while queue:
        node = queue.popleft()
        items = node.items() if is_object_literal(node) else enumerate(node)
        values = []
        for key, prop in items:
            if not is_frozen(prop):
                if id(prop) not in frozen:
                    frozen[id(prop)] = _shell(prop)
                    queue.append(prop)
                prop = frozen[id(prop)]
            values.append((key, prop))

        shell = frozen[id(node)]
        if isinstance(shell, FrozenDict):
            dict.update(shell, values)
        else:
            list.extend(shell, (value for _, value in values))

    logger.debug("deep_freeze: froze %d node(s)", len(frozen))
    return frozen[id(obj)]


def clone_and_change(obj: Any, changer: Callable[[Any], Optional[Any]]) -> Any:
    """
    Deep copy obj, letting changer replace any node.

    changer sees every node root first, depth-first. A non-None return value
    is used verbatim and not descended into.
    """
    return _clone_and_change(obj, changer, set())


def _clone_and_change(obj: Any, changer: Callable[[Any], Optional[Any]], encountered: set[int]) -> Any:
    if obj is None:
        return obj

    changed = changer(obj)
    if changed is not None:
        return changed

    if is_array(obj):
        return [_clone_and_change(value, changer, encountered) for value in obj]

    if is_object_literal(obj):
        if id(obj) in encountered:
            logger.debug("clone_and_change: cycle through %s", type(obj).__name__)
            raise RecursiveStructureError()
        encountered.add(id(obj))
        result = {key: _clone_and_change(value, changer, encountered) for key, value in obj.items()}
        encountered.discard(id(obj))
        return result

    return obj

