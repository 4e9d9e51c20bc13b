"""Tests for equals, distinct and compute_diff."""
import math

from objtree.services.diff import compute_diff, distinct, equals


def test_equals_sequences():
    assert equals([1, 2, 3], [1, 2, 3]) is True
    assert equals([1, 2], [2, 1]) is False
    assert equals([1, 2], [1, 2, 3]) is False
    assert equals([1, [2, "x"]], (1, [2, "x"])) is True


def test_equals_mappings_ignore_key_order():
    assert equals({"a": 1, "b": 2}, {"b": 2, "a": 1}) is True
    assert equals({"a": 1}, {"a": 1, "b": 2}) is False
    assert equals({"a": {"b": [1]}}, {"a": {"b": [2]}}) is False


def test_equals_identity_and_none():
    value = {"a": 1}
    assert equals(value, value) is True
    assert equals(None, None) is True
    assert equals(None, {}) is False
    assert equals([], None) is False


def test_equals_type_mismatches():
    assert equals([], {}) is False
    assert equals({"a": 1}, [("a", 1)]) is False
    assert equals("1", 1) is False
    assert equals(True, 1) is False
    assert equals(1, 1.0) is True


def test_equals_opaque_leaves_need_identity():
    class Point:
        def __eq__(self, other):
            return True

    p = Point()
    assert equals(p, p) is True
    assert equals(Point(), Point()) is False
    assert equals(math.nan, float("nan")) is False


def test_distinct_reports_changed_and_new_keys():
    assert distinct({"a": 1, "b": 2}, {"a": 1, "b": 3, "c": 4}) == {"b": 3, "c": 4}


def test_distinct_ignores_base_only_keys_and_takes_values_whole():
    target = {"cfg": {"x": 1, "y": 3}}
    result = distinct({"cfg": {"x": 1, "y": 2}, "gone": True}, target)
    assert result == {"cfg": {"x": 1, "y": 3}}
    assert result["cfg"] is target["cfg"]


def test_distinct_missing_inputs():
    assert distinct(None, {"a": 1}) == {}
    assert distinct({"a": 1}, None) == {}
    assert distinct({}, {"a": 1}) == {"a": 1}


def test_compute_diff_detects_change():
    diff = compute_diff({"servers": ["8.8.8.8"]}, {"servers": ["1.1.1.1"]})
    assert diff  # non-empty


def test_compute_diff_empty_when_equal():
    cfg = {"servers": ["8.8.8.8"]}
    assert compute_diff(cfg, cfg) == {}
    assert compute_diff([1, 2], [2, 1]) == {}
    assert compute_diff([1, 2], [2, 1], ignore_order=False) != {}


def test_distinct_reports_keys_newly_set_to_none():
    assert distinct({}, {"a": None}) == {"a": None}
    assert distinct({"a": None}, {"a": None}) == {}
    assert distinct({"a": 1}, {"a": None}) == {"a": None}


def test_equals_keys_with_same_string_form():
    assert equals({1: "a", "1": "b"}, {"1": "b", 1: "a"}) is True
    assert equals({1: "a", "1": "b"}, {1: "b", "1": "a"}) is False
    assert equals({1: "a"}, {"1": "a"}) is False
