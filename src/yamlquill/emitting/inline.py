#!/usr/bin/env python3
"""
YAMLQUILL INLINE ENCODER - Flow-Style Scalars & Shallow Containers
------------------------------------------------------------------
Turns a single value into one line of flow-style YAML. All quoting and
escaping is delegated to ruamel.yaml; this module only decides which
Python types are representable and how the result is framed.

Author: YamlQuill Team
Date: 2026-10-18
"""

import io
import base64
import sys
import types
import socket
import dataclasses
from collections import abc
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.representer import SafeRepresenter

from yamlquill.core.errors import UnsupportedTypeError
from yamlquill.core.models import Scalar, Sequence, Mapping

MAP_TAG = "tag:yaml.org,2002:map"
SEQ_TAG = "tag:yaml.org,2002:seq"
STR_TAG = "tag:yaml.org,2002:str"
OBJECT_TAG_PREFIX = "!python/object:"

LINE_BREAKS = ("\n", "\r", "\x85", "\u2028", "\u2029")
DOCUMENT_END = "\n..."

# Live handles and code objects: nothing in YAML can stand for them
RESOURCE_TYPES = (
    io.IOBase,
    socket.socket,
    type,
    types.ModuleType,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.GeneratorType,
    types.CoroutineType,
    types.AsyncGeneratorType,
)

class InlineRepresenter(SafeRepresenter):
    """
    SafeRepresenter that understands the Value variants and applies the
    strict/opaque type policy instead of failing on unknown types.
    """

    strict_types = False
    allow_opaque_types = False

    def ignore_aliases(self, data: Any) -> bool:
        # Anchors would leak '&id001' markers into single-line output
        return True

    def represent_str(self, data: str):
        if any(brk in data for brk in LINE_BREAKS):
            return self.represent_scalar(STR_TAG, data, style='"')
        return super().represent_str(data)

    def represent_scalar_node(self, data: Scalar):
        return self.represent_data(data.value)

    def represent_sequence_node(self, data: Sequence):
        return self.represent_sequence(SEQ_TAG, list(data.items), flow_style=True)

    def represent_mapping_node(self, data: Mapping):
        # A list of pairs keeps insertion order (no key sorting)
        return self.represent_mapping(MAP_TAG, list(data.entries), flow_style=True)

    def represent_ordered_dict(self, data: dict):
        return self.represent_mapping(MAP_TAG, list(data.items()), flow_style=True)

    def represent_bytes(self, data: bytes):
        encoded = base64.b64encode(data).decode("ascii")
        return self.represent_scalar("tag:yaml.org,2002:binary", encoded)

    def represent_int_subclass(self, data: int):
        return self.represent_int(int(data))

    def represent_float_subclass(self, data: float):
        return self.represent_float(float(data))

    def represent_str_subclass(self, data: str):
        # str() of a str-based enum member is its name, not its value
        return self.represent_str(str.__str__(data))

    def represent_tuple(self, data: tuple):
        return self.represent_sequence(SEQ_TAG, list(data), flow_style=True)

    def represent_unknown(self, data: Any):
        """Fallback for every type without a dedicated representer."""
        if isinstance(data, abc.Mapping):
            return self.represent_mapping(MAP_TAG, list(data.items()), flow_style=True)
        if isinstance(data, (abc.Set, abc.Sequence)) and not isinstance(data, (str, bytes)):
            return self.represent_sequence(SEQ_TAG, list(data), flow_style=True)

        if not isinstance(data, RESOURCE_TYPES) and _is_object_like(data):
            if self.allow_opaque_types:
                return self.represent_object(data)
            if self.strict_types:
                raise UnsupportedTypeError(data, "object support is disabled")
            return self.represent_none(None)

        if self.strict_types:
            raise UnsupportedTypeError(data, "no YAML representation")
        return self.represent_none(None)

    def represent_object(self, data: Any):
        cls = type(data)
        tag = f"{OBJECT_TAG_PREFIX}{cls.__module__}.{cls.__qualname__}"
        if dataclasses.is_dataclass(data):
            state = [(f.name, getattr(data, f.name)) for f in dataclasses.fields(data)]
        else:
            state = list(vars(data).items())
        return self.represent_mapping(tag, state, flow_style=True)

InlineRepresenter.add_representer(str, InlineRepresenter.represent_str)
InlineRepresenter.add_representer(dict, InlineRepresenter.represent_ordered_dict)
InlineRepresenter.add_representer(bytes, InlineRepresenter.represent_bytes)
InlineRepresenter.add_representer(tuple, InlineRepresenter.represent_tuple)
InlineRepresenter.add_representer(Scalar, InlineRepresenter.represent_scalar_node)
InlineRepresenter.add_representer(Sequence, InlineRepresenter.represent_sequence_node)
InlineRepresenter.add_representer(Mapping, InlineRepresenter.represent_mapping_node)
InlineRepresenter.add_representer(None, InlineRepresenter.represent_unknown)

# Exact-type lookup misses subclasses such as IntEnum members
InlineRepresenter.add_multi_representer(int, InlineRepresenter.represent_int_subclass)
InlineRepresenter.add_multi_representer(float, InlineRepresenter.represent_float_subclass)
InlineRepresenter.add_multi_representer(str, InlineRepresenter.represent_str_subclass)

def _is_object_like(data: Any) -> bool:
    return dataclasses.is_dataclass(data) or hasattr(data, "__dict__")

class InlineEncoder:
    """
    The Flow Writer: renders scalars, empty containers and (below the
    inline threshold) whole containers as a single line of YAML.
    """

    def _build_yaml(self, strict_types: bool, allow_opaque_types: bool) -> YAML:
        """
        One instance per call: ruamel.yaml keeps dump state on the instance.
        """
        yaml = YAML(typ="safe", pure=True)
        yaml.Representer = InlineRepresenter
        yaml.default_flow_style = True
        yaml.allow_unicode = True
        yaml.width = sys.maxsize
        yaml.representer.strict_types = strict_types
        yaml.representer.allow_opaque_types = allow_opaque_types
        return yaml

    def encode(self, value: Any, strict_types: bool = False,
               allow_opaque_types: bool = False) -> str:
        """
        Returns the flow-style text for *value* with no trailing line break.

        Plain scalars at the top level are followed by a document-end
        marker, which is dropped along with the final line break.
        """
        stream = io.StringIO()
        self._build_yaml(strict_types, allow_opaque_types).dump(value, stream)
        text = stream.getvalue().rstrip("\n")
        if text.endswith(DOCUMENT_END):
            text = text[:-len(DOCUMENT_END)].rstrip("\n")
        return text
