# topmark:header:start
#
#   project      : YamlCraft
#   file         : __init__.py
#   file_relpath : src/yamlcraft/encoding/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YAML encoding engine.

Build a tree of encoders with the scalar, container and wrapper constructors,
then call `render` (or `Encoder.render`) with an indentation width::

    from yamlcraft.encoding import int_, list_, render

    render(2, list_(int_, [1, 2, 3]))  # "- 1\\n- 2\\n- 3"
    render(0, list_(int_, [1, 2, 3]))  # "[1, 2, 3]"
"""

from __future__ import annotations

from yamlcraft.encoding.containers import dict_, list_, record
from yamlcraft.encoding.encoder import Encoder, render
from yamlcraft.encoding.errors import UnsupportedValueError
from yamlcraft.encoding.escaping import (
    double_quote,
    escape_key,
    escape_multiline_scalar,
    escape_scalar,
    needs_quoting,
    quote,
)
from yamlcraft.encoding.projection import AliasRef, Anchored, from_value
from yamlcraft.encoding.scalars import (
    bool_,
    escaped_string,
    float_,
    format_float,
    int_,
    multiline_string,
    null,
    quoted_string,
    string,
)
from yamlcraft.encoding.state import EncoderState, Layout, with_context
from yamlcraft.encoding.wrappers import alias, anchor, document

__all__ = [
    "AliasRef",
    "Anchored",
    "Encoder",
    "EncoderState",
    "Layout",
    "UnsupportedValueError",
    "alias",
    "anchor",
    "bool_",
    "dict_",
    "document",
    "double_quote",
    "escape_key",
    "escape_multiline_scalar",
    "escape_scalar",
    "escaped_string",
    "float_",
    "format_float",
    "from_value",
    "int_",
    "list_",
    "multiline_string",
    "needs_quoting",
    "null",
    "quote",
    "quoted_string",
    "record",
    "render",
    "string",
    "with_context",
]
