#!/usr/bin/env python3
"""
YAMLQUILL DUMPER - The Recursive Renderer
-----------------------------------------
Renders a value tree as block-style YAML. Containers above the inline
threshold expand into indented '-' / 'key:' blocks; everything at or below
it (and every scalar or empty container) is handed to the InlineEncoder.
Comments from the side-channel tree are emitted as '#' lines directly
above the node they describe.

Author: YamlQuill Team
Date: 2026-10-18
"""

import logging
from typing import Any, Optional

from yamlquill.core.models import (
    CommentTree,
    Mapping,
    Scalar,
    Value,
    SELF_COMMENT_KEY,
    from_native,
    normalize_comments,
)
from yamlquill.emitting.comments import format_comment, sub_comments
from yamlquill.emitting.inline import InlineEncoder

logger = logging.getLogger("yamlquill.dumper")

class Dumper:
    """
    Dumps Python data to YAML strings.

    The indentation step is the only instance state; every other option
    is passed per call, so one Dumper can serve concurrent renders.
    """

    def __init__(self, indentation: int = 4, encoder: Optional[InlineEncoder] = None):
        self.encoder = encoder or InlineEncoder()
        self.set_indentation(indentation)

    def set_indentation(self, num: Any) -> "Dumper":
        """
        Sets the amount of spaces used for each nesting level.
        Accepts anything int() accepts; negative steps are rejected.
        """
        step = int(num)
        if step < 0:
            raise ValueError(f"Indentation must be zero or positive, got {step}")
        self.indentation = step
        logger.debug(f"Indentation step set to {step}")
        return self

    def render(self, value: Any, inline: int = 0, indent: int = 0,
               strict_types: bool = False, allow_opaque_types: bool = False) -> str:
        """
        Dumps a value to YAML.

        Args:
            value: A Value tree or plain Python data.
            inline: The level where you switch to inline YAML.
            indent: The starting level of indentation, in spaces.
            strict_types: Raise UnsupportedTypeError on values YAML cannot
                represent (open files, sockets, functions...).
            allow_opaque_types: Render arbitrary objects as tagged mappings.
        """
        return self.render_commented(value, {}, inline, indent, strict_types, allow_opaque_types)

    def render_commented(self, value: Any, comments: Any, inline: int = 0, indent: int = 0,
                         strict_types: bool = False, allow_opaque_types: bool = False) -> str:
        """
        Dumps a value to a commented YAML structure.

        *comments* mirrors the shape of *value*: each key maps either to a
        comment string or to a nested tree whose own comment sits under '#'.
        """
        return self._render(
            from_native(value),
            normalize_comments(comments),
            inline,
            indent,
            strict_types,
            allow_opaque_types,
        )

    def _renders_inline(self, node: Value, inline: int) -> bool:
        return inline <= 0 or isinstance(node, Scalar) or node.is_empty()

    def _render(self, node: Value, comments: CommentTree, inline: int, indent: int,
                strict_types: bool, allow_opaque_types: bool) -> str:
        prefix = " " * indent

        # Only the top-level node reads its own comment here; children get
        # theirs emitted by the loop below, ahead of their head line.
        output = [format_comment(comments.get(SELF_COMMENT_KEY), indent)]

        if self._renders_inline(node, inline):
            output.append(prefix + self.encoder.encode(node, strict_types, allow_opaque_types))
            return "".join(output)

        is_a_hash = isinstance(node, Mapping)
        for key, child in node.children():
            will_be_inlined = self._renders_inline(child, inline - 1)
            child_comments = sub_comments(comments, key)
            comment = child_comments.pop(SELF_COMMENT_KEY, None)

            if is_a_hash:
                head = self.encoder.encode(key, strict_types, allow_opaque_types) + ":"
            else:
                head = "-"

            output.append(format_comment(comment, indent))
            output.append(prefix + head)
            output.append(" " if will_be_inlined else "\n")
            output.append(self._render(
                child,
                child_comments,
                inline - 1,
                0 if will_be_inlined else indent + self.indentation,
                strict_types,
                allow_opaque_types,
            ))
            if will_be_inlined:
                output.append("\n")

        return "".join(output)

def dump(value: Any, comments: Any = None, inline: int = 2, indent: int = 4,
         strict_types: bool = False, allow_opaque_types: bool = False) -> str:
    """
    One-shot helper: dumps *value* with an indent step of *indent* spaces,
    expanding the first *inline* levels as blocks.
    """
    return Dumper(indent).render_commented(
        value, comments, inline, 0, strict_types, allow_opaque_types
    )
