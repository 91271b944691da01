# topmark:header:start
#
#   project      : YamlCraft
#   file         : containers.py
#   file_relpath : src/yamlcraft/encoding/containers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sequence and mapping encoders.

Layout decisions per container:

- empty: inline ``[]`` / ``{}`` whatever the indentation width;
- ``indent == 0``: inline flow style, ``[a, b]`` / ``{k: v}``;
- ``indent > 0``: block style, one item or entry per line, lines after the first
  indented to the container's own ``column``.

Sequence items render one level deeper and never as mapping values. Mapping
values render one level deeper *as* mapping values, so each value picks its own
separator after ``key:`` (a space when inline, newline plus indentation when it
is itself a block).

Inputs are materialized when the encoder is built, so one-shot iterators can be
rendered any number of times.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from yamlcraft.constants import EMPTY_FLOW_MAPPING, EMPTY_FLOW_SEQUENCE
from yamlcraft.encoding.encoder import Encoder
from yamlcraft.encoding.state import EncoderState, Layout, with_context

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

# "- " occupies two of the indent columns; the rest is padding.
_DASH_WIDTH = 2


def list_(encode_item: Callable[[T], Encoder], items: Iterable[T]) -> Encoder:
    """Encode an ordered sequence.

    Args:
        encode_item (Callable[[T], Encoder]): Builds the encoder of one item.
        items (Iterable[T]): The items, in output order.

    Returns:
        Encoder: The sequence encoder.
    """
    encoders: tuple[Encoder, ...] = tuple(encode_item(item) for item in items)

    def _render(state: EncoderState) -> str:
        if not encoders:
            return with_context(Layout.INLINE, state, EMPTY_FLOW_SEQUENCE)

        child: EncoderState = state.nested(in_mapping=False)
        if state.flow:
            text: str = ", ".join(encoder(child) for encoder in encoders)
            return with_context(Layout.INLINE, state, f"[{text}]")

        padding: str = " " * (state.indent - _DASH_WIDTH)
        lines: list[str] = [f"- {padding}{encoder(child)}" for encoder in encoders]
        return with_context(Layout.BLOCK, state, state.line_break().join(lines))

    return Encoder(_render)


def record(pairs: Iterable[tuple[str, Encoder]]) -> Encoder:
    """Encode a mapping from already-stringified keys, preserving pair order.

    Keys are emitted verbatim; use `yamlcraft.encoding.escaping.escape_key` on keys
    that may contain ``:`` or spaces.

    Args:
        pairs (Iterable[tuple[str, Encoder]]): ``(key, value encoder)`` pairs in output order.

    Returns:
        Encoder: The mapping encoder.
    """
    entries: tuple[tuple[str, Encoder], ...] = tuple(pairs)

    def _render(state: EncoderState) -> str:
        if not entries:
            return with_context(Layout.INLINE, state, EMPTY_FLOW_MAPPING)

        child: EncoderState = state.nested(in_mapping=True)
        rendered: list[str] = [f"{key}:{encoder(child)}" for key, encoder in entries]
        if state.flow:
            return with_context(Layout.INLINE, state, "{" + ", ".join(rendered) + "}")
        return with_context(Layout.BLOCK, state, state.line_break().join(rendered))

    return Encoder(_render)


def dict_(
    key_to_string: Callable[[K], str],
    encode_value: Callable[[V], Encoder],
    mapping: Mapping[K, V],
) -> Encoder:
    """Encode an associative structure in its own iteration order.

    Args:
        key_to_string (Callable[[K], str]): Turns a key into its emitted text.
        encode_value (Callable[[V], Encoder]): Builds the encoder of one value.
        mapping (Mapping[K, V]): The structure to encode.

    Returns:
        Encoder: The mapping encoder.
    """
    return record((key_to_string(key), encode_value(value)) for key, value in mapping.items())
