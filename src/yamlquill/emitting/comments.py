#!/usr/bin/env python3
"""
YAMLQUILL COMMENTS - The Annotator
----------------------------------
Formats human-readable notes as '#' lines and walks the comment tree
alongside the value tree. The comment tree is a best-effort overlay:
keys that match nothing in the value are simply never looked up.

Author: YamlQuill Team
Date: 2026-10-18
"""

from collections import abc
from typing import Any

from yamlquill.core.models import CommentTree, SELF_COMMENT_KEY

def format_comment(comment: Any, indent: int) -> str:
    """
    Converts a (possibly multi-line) comment into indented lines
    prefixed with '# '. An empty comment yields no lines at all.
    """
    text = "" if comment is None else str(comment)
    if not text:
        return ""

    prefix = " " * indent
    return "".join(f"{prefix}# {line}\n" for line in text.split("\n"))

def _is_indexed(entry: Any) -> bool:
    """A list of comments annotates sequence items by position."""
    return isinstance(entry, abc.Sequence) and not isinstance(entry, (str, bytes))

def sub_comments(comments: CommentTree, key: Any) -> CommentTree:
    """
    Looks up the comments that apply to the data at *key*.

    A bare string is shorthand for the child's own comment and comes back
    as {'#': text}. Nested trees are returned as a shallow copy so the
    caller may pop the self-comment without touching the original.
    """
    entry = comments.get(key)
    # JSON-sourced trees only have string keys, even for sequence items
    if entry is None and isinstance(key, int) and not isinstance(key, bool):
        entry = comments.get(str(key))

    if entry is None:
        return {}
    if isinstance(entry, abc.Mapping):
        return dict(entry)
    if _is_indexed(entry):
        return dict(enumerate(entry))
    return {SELF_COMMENT_KEY: entry}
