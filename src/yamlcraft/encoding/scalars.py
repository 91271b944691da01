# topmark:header:start
#
#   project      : YamlCraft
#   file         : scalars.py
#   file_relpath : src/yamlcraft/encoding/scalars.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scalar encoders.

Every scalar renders as a single-line `Layout.INLINE` fragment. When a scalar is
a mapping value the shared separator rule prefixes it with one space; scalars
never emit indentation themselves.

Float text is Python's shortest round-trip ``repr``. When ``repr`` produces an
exponent without a decimal point (``1e+16``), ``.0`` is inserted before the
exponent (``1.0e+16``) so YAML 1.1 loaders still resolve a float. Special values
render as ``.nan``, ``.inf`` and ``-.inf``.
"""

from __future__ import annotations

import math

from yamlcraft.encoding.encoder import Encoder
from yamlcraft.encoding.escaping import (
    escape_multiline_scalar,
    escape_scalar,
    quote,
)
from yamlcraft.encoding.state import EncoderState, Layout, with_context


def _inline(text: str) -> Encoder:
    """Return an encoder emitting the fixed inline fragment ``text``."""

    def _render(state: EncoderState) -> str:
        return with_context(Layout.INLINE, state, text)

    return Encoder(_render)


def format_float(value: float) -> str:
    """Return the canonical YAML text of a float.

    Args:
        value (float): The value to format.

    Returns:
        str: ``.nan``, ``.inf``, ``-.inf`` or the round-trip decimal text.
    """
    if math.isnan(value):
        return ".nan"
    if math.isinf(value):
        return ".inf" if value > 0 else "-.inf"
    text: str = repr(float(value))
    if "." not in text and "e" in text:
        text = text.replace("e", ".0e", 1)
    return text


def string(text: str) -> Encoder:
    """Encode ``text`` verbatim as a scalar.

    No escaping is performed; see `yamlcraft.encoding.escaping` for the helpers
    callers apply first. An empty string renders as an empty fragment.
    """
    return _inline(text)


def int_(value: int) -> Encoder:
    """Encode an integer in decimal form, including its sign."""
    return _inline(str(int(value)))


def float_(value: float) -> Encoder:
    """Encode a float using `format_float`."""
    return _inline(format_float(value))


def bool_(value: bool) -> Encoder:
    """Encode a boolean as lowercase ``true`` / ``false``."""
    return _inline("true" if value else "false")


def null() -> Encoder:
    """Encode the null scalar."""
    return _inline("null")


def quoted_string(text: str) -> Encoder:
    """Encode single-line ``text`` escaped with `escape_scalar` and double-quoted."""
    return string(quote(escape_scalar(text)))


def multiline_string(text: str) -> Encoder:
    """Encode multi-line ``text`` escaped with `escape_multiline_scalar`."""
    return string(escape_multiline_scalar(text))


def escaped_string(text: str) -> Encoder:
    """Encode ``text`` with the escaping helper matching its shape.

    Text containing a newline goes through `multiline_string`; anything else
    through `quoted_string`.
    """
    if "\n" in text:
        return multiline_string(text)
    return quoted_string(text)
