#!/usr/bin/env python3
"""
YAMLQUILL ERRORS
----------------
The single failure raised while rendering. It originates in the inline
encoder and travels unchanged through every level of the Dumper.

Author: YamlQuill Team
Date: 2026-10-18
"""

from typing import Any

class UnsupportedTypeError(TypeError):
    """
    Raised when a value has no YAML representation under the active
    type policy (strict types, opaque object support).
    """

    def __init__(self, value: Any, reason: str = ""):
        self.value = value
        message = f"Unsupported type for YAML output: {type(value).__name__}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
