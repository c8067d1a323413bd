#!/usr/bin/env python3
"""
YAMLQUILL CORE MODELS
---------------------
Defines the value tree handed to the Dumper and the comment tree that
rides alongside it. Containers are explicit variants: a Sequence is a
Sequence because it was built as one, never because of its key shape.

Author: YamlQuill Team
Date: 2026-10-18
"""

from dataclasses import dataclass
from collections import abc
from typing import Any, Dict, Iterator, Tuple, Union

# Reserved comment-tree key holding the comment of the node itself
SELF_COMMENT_KEY = "#"

@dataclass(frozen=True)
class Scalar:
    """
    A leaf value rendered by the inline encoder as-is.
    """
    value: Any

    def is_empty(self) -> bool:
        return False

@dataclass(frozen=True)
class Sequence:
    """
    An ordered list of child values, addressed by position.
    """
    items: Tuple["Value", ...] = ()

    def children(self) -> Iterator[Tuple[int, "Value"]]:
        return iter(enumerate(self.items))

    def is_empty(self) -> bool:
        return not self.items

@dataclass(frozen=True)
class Mapping:
    """
    An ordered list of (key, value) pairs. Keys are inline-renderable
    scalars and must be unique.
    """
    entries: Tuple[Tuple[Any, "Value"], ...] = ()

    def __post_init__(self):
        seen = set()
        for key, _ in self.entries:
            if key in seen:
                raise ValueError(f"Duplicate mapping key: {key!r}")
            seen.add(key)

    def children(self) -> Iterator[Tuple[Any, "Value"]]:
        return iter(self.entries)

    def is_empty(self) -> bool:
        return not self.entries

Value = Union[Scalar, Sequence, Mapping]

# Either a bare comment string or a nested tree of the same shape
CommentTree = Dict[Any, Union[str, "CommentTree"]]

def from_native(obj: Any) -> Value:
    """
    Builds a Value tree from plain Python data.

    dict-likes become Mappings (even when keyed 0..n-1), lists and tuples
    become Sequences, existing Values pass through, everything else is a Scalar.
    """
    if isinstance(obj, (Scalar, Sequence, Mapping)):
        return obj
    if isinstance(obj, abc.Mapping):
        return Mapping(tuple((key, from_native(value)) for key, value in obj.items()))
    if isinstance(obj, (list, tuple)):
        return Sequence(tuple(from_native(item) for item in obj))
    return Scalar(obj)

def normalize_comments(comments: Any) -> CommentTree:
    """Accepts None, a bare string, a list or a tree; always returns a tree."""
    if comments is None:
        return {}
    if isinstance(comments, abc.Mapping):
        return dict(comments)
    if isinstance(comments, abc.Sequence) and not isinstance(comments, (str, bytes)):
        return dict(enumerate(comments))
    return {SELF_COMMENT_KEY: comments}
