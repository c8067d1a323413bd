#!/usr/bin/env python3
"""
YAMLQUILL MODEL SUITE
---------------------
Value variants, native conversion and comment-tree lookups.

Author: YamlQuill Team
Date: 2026-10-18
"""

import os
import sys
from collections import OrderedDict

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from yamlquill.core.models import (
    Mapping,
    Scalar,
    Sequence,
    from_native,
    normalize_comments,
)
from yamlquill.emitting.comments import format_comment, sub_comments


def test_from_native_builds_explicit_variants():
    value = from_native({"a": [1, (2, 3)], "b": "x"})
    assert isinstance(value, Mapping)
    key, items = value.entries[0]
    assert key == "a"
    assert items == Sequence((Scalar(1), Sequence((Scalar(2), Scalar(3)))))
    assert value.entries[1] == ("b", Scalar("x"))


def test_from_native_keeps_order_and_passes_values_through():
    ordered = OrderedDict([("z", 1), ("a", 2)])
    assert [k for k, _ in from_native(ordered).children()] == ["z", "a"]
    existing = Sequence((Scalar(1),))
    assert from_native(existing) is existing


def test_index_keyed_dict_is_still_a_mapping():
    assert isinstance(from_native({0: "a", 1: "b"}), Mapping)


def test_children_and_emptiness():
    seq = Sequence((Scalar("a"), Scalar("b")))
    assert list(seq.children()) == [(0, Scalar("a")), (1, Scalar("b"))]
    assert Sequence().is_empty() and Mapping().is_empty()
    assert not Scalar(None).is_empty()


def test_duplicate_mapping_keys_rejected():
    with pytest.raises(ValueError):
        Mapping((("a", Scalar(1)), ("a", Scalar(2))))


@pytest.mark.parametrize("raw, expected", [
    (None, {}),
    ("note", {"#": "note"}),
    ({"a": "x"}, {"a": "x"}),
    (["first", None], {0: "first", 1: None}),
])
def test_normalize_comments(raw, expected):
    assert normalize_comments(raw) == expected


def test_format_comment():
    assert format_comment("", 4) == ""
    assert format_comment(None, 0) == ""
    assert format_comment("hello", 0) == "# hello\n"
    assert format_comment("one\ntwo", 2) == "  # one\n  # two\n"
    assert format_comment(42, 0) == "# 42\n"


def test_sub_comments_lookup():
    tree = {"a": "note", "b": {"#": "B", "c": "C"}, "2": "by string", "n": None}
    assert sub_comments(tree, "missing") == {}
    assert sub_comments(tree, "n") == {}
    assert sub_comments(tree, "a") == {"#": "note"}
    assert sub_comments(tree, "b") == {"#": "B", "c": "C"}
    assert sub_comments(tree, 2) == {"#": "by string"}


def test_sub_comments_returns_a_copy():
    tree = {"b": {"#": "B"}}
    sub_comments(tree, "b").pop("#")
    assert tree == {"b": {"#": "B"}}


def test_sub_comments_list_entry_is_indexed():
    tree = {"ports": ["HTTP", "HTTPS"], "name": ("not", "indexed")}
    assert sub_comments(tree, "ports") == {0: "HTTP", 1: "HTTPS"}
    assert sub_comments(tree, "name") == {0: "not", 1: "indexed"}
    assert sub_comments({"b": b"raw"}, "b") == {"#": b"raw"}
