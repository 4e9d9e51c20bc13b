"""Mixin and shallow assignment between plain mappings."""
from typing import Any, Optional

from objtree.core.types import is_object_literal
from objtree.services.clone import deep_clone


def mixin(destination: Any, source: Any, overwrite: bool = True) -> Any:
    """
    Copy every key of source into destination and return destination.

    Nested mappings on both sides are merged recursively. With overwrite=False
    keys already in destination are left untouched. If destination is not a
    mapping, source is returned as-is.
    """
    if not is_object_literal(destination):
        return source

    if is_object_literal(source):
        for key, value in source.items():
            if key in destination:
                if overwrite:
                    if is_object_literal(destination[key]) and is_object_literal(value):
                        mixin(destination[key], value, overwrite)
                    else:
                        destination[key] = value
            else:
                destination[key] = value
    return destination


def assign(destination: dict, *sources: Optional[dict]) -> dict:
    for source in sources:
        if source is None:
            continue
        for key, value in source.items():
            destination[key] = value
    return destination


def apply_patch(base: dict, patch: dict) -> dict:
    """Recursively merge patch into a copy of base."""
    return mixin(deep_clone(base), patch)
