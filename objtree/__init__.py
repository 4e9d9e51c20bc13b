"""Helpers for cloning, freezing, comparing, merging and diffing plain data trees."""
from objtree.core.types import FrozenDict, FrozenList, is_array, is_frozen, is_object_literal
from objtree.core.log import configure_logging
from objtree.errors import ObjtreeError, RecursiveStructureError
from objtree.services.clone import clone_and_change, deep_clone, deep_freeze
from objtree.services.diff import compute_diff, distinct, equals
from objtree.services.keywords import KeywordMatcher, array_to_hash, create_keyword_matcher
from objtree.services.merge import apply_patch, assign, mixin
from objtree.services.serialize import get_or_default, safe_stringify

__version__ = "0.1.0"
