import json
from dataclasses import dataclass
from typing import Any, Iterable


def _hash_key(value: Any) -> str:
    # true/false/null spelled as in JSON
    if value is None or isinstance(value, bool):
        return json.dumps(value)
    return str(value)


def array_to_hash(values: Iterable[Any]) -> dict[str, bool]:
    return {_hash_key(value): True for value in values}


@dataclass(frozen=True)
class KeywordMatcher:
    """Membership test against a fixed word set, optionally case-insensitive."""

    words: frozenset[str]
    case_insensitive: bool = False

    def matches(self, word: str) -> bool:
        if self.case_insensitive:
            word = word.lower()
        return word in self.words

    __call__ = matches

    def __contains__(self, word: str) -> bool:
        return self.matches(word)


def create_keyword_matcher(words: Iterable[str], case_insensitive: bool = False) -> KeywordMatcher:
    if case_insensitive:
        words = [word.lower() for word in words]
    return KeywordMatcher(frozenset(array_to_hash(words)), case_insensitive)
