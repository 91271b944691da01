# topmark:header:start
#
#   project      : YamlCraft
#   file         : errors.py
#   file_relpath : src/yamlcraft/encoding/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while projecting native values onto encoders.

Rendering itself never fails; only the projection of arbitrary Python objects
can meet a value it has no YAML form for.
"""

from __future__ import annotations


class UnsupportedValueError(TypeError):
    """Raised when `from_value` meets a value it cannot encode.

    Attributes:
        value_type (type): Type of the offending value.
        path (str): JSONPath-like location of the value in the tree (``$`` is the root).
    """

    def __init__(self, value: object, path: str = "$", reason: str | None = None) -> None:
        self.value_type: type = type(value)
        self.path: str = path
        message: str = f"Cannot encode value of type {self.value_type.__name__!r} at {path}"
        super().__init__(f"{message}: {reason}" if reason else message)
