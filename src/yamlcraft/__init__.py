# topmark:header:start
#
#   project      : YamlCraft
#   file         : __init__.py
#   file_relpath : src/yamlcraft/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlCraft package.

YamlCraft renders in-memory value trees as YAML text. Callers compose encoders
for scalars, sequences, mappings, documents, anchors and aliases (see
`yamlcraft.encoding`), or project plain Python data with `yamlcraft.api.dumps`,
and choose the indentation width at render time: ``0`` for flow style, ``2`` or
more for block style.
"""

from __future__ import annotations

from yamlcraft.api import dumps, encode
from yamlcraft.config.model import MutableRenderConfig, RenderConfig
from yamlcraft.encoding import (
    AliasRef,
    Anchored,
    Encoder,
    UnsupportedValueError,
    alias,
    anchor,
    bool_,
    dict_,
    document,
    escape_key,
    escape_multiline_scalar,
    escape_scalar,
    float_,
    from_value,
    int_,
    list_,
    null,
    record,
    render,
    string,
)

__all__ = [
    "AliasRef",
    "Anchored",
    "Encoder",
    "MutableRenderConfig",
    "RenderConfig",
    "UnsupportedValueError",
    "alias",
    "anchor",
    "bool_",
    "dict_",
    "document",
    "dumps",
    "encode",
    "escape_key",
    "escape_multiline_scalar",
    "escape_scalar",
    "float_",
    "from_value",
    "int_",
    "list_",
    "null",
    "record",
    "render",
    "string",
]
