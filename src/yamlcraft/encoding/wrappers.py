# topmark:header:start
#
#   project      : YamlCraft
#   file         : wrappers.py
#   file_relpath : src/yamlcraft/encoding/wrappers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document markers, anchors and aliases.

Anchors and aliases carry no bookkeeping: the engine neither records anchor
names nor checks that an alias refers to an anchor rendered earlier in the same
document, and it performs no cycle detection. Callers must only alias names they
anchored before.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from yamlcraft.constants import (
    ALIAS_INDICATOR,
    ANCHOR_INDICATOR,
    DOCUMENT_END_MARKER,
    DOCUMENT_START_MARKER,
)
from yamlcraft.encoding.encoder import Encoder
from yamlcraft.encoding.state import EncoderState, Layout, with_context

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


def document(encoder: Encoder) -> Encoder:
    """Wrap ``encoder`` between the start (``---``) and end (``...``) document markers.

    The inner node renders in the caller's state, exactly as it would standalone.
    """

    def _render(state: EncoderState) -> str:
        return f"{DOCUMENT_START_MARKER}\n{encoder(state)}\n{DOCUMENT_END_MARKER}"

    return Encoder(_render)


def anchor(name: str, encode_value: Callable[[T], Encoder], value: T) -> Encoder:
    """Tag the rendering of ``value`` with the anchor ``&name``.

    The marker itself follows the inline separator rule. The value renders at the
    same column as a mapping value, so its own separator rule supplies the single
    space (inline values) or the newline and indentation (block values) between
    the marker and its text.

    Args:
        name (str): Anchor name, emitted verbatim.
        encode_value (Callable[[T], Encoder]): Builds the encoder of ``value``.
        value (T): The anchored value.

    Returns:
        Encoder: The anchored encoder.
    """
    inner: Encoder = encode_value(value)
    marker: str = f"{ANCHOR_INDICATOR}{name}"

    def _render(state: EncoderState) -> str:
        return with_context(Layout.INLINE, state, marker) + inner(state.as_mapping_value())

    return Encoder(_render)


def alias(name: str) -> Encoder:
    """Reference a previously anchored node as ``*name``.

    The text never depends on column or indentation; only the inline separator
    is applied when the alias is a mapping value.
    """
    text: str = f"{ALIAS_INDICATOR}{name}"

    def _render(state: EncoderState) -> str:
        return with_context(Layout.INLINE, state, text)

    return Encoder(_render)
