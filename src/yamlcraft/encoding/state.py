# topmark:header:start
#
#   project      : YamlCraft
#   file         : state.py
#   file_relpath : src/yamlcraft/encoding/state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Traversal state and the shared separator rule.

Every encoder receives an `EncoderState` describing where its output lands:

- ``column``: the number of spaces already committed on the current line. It
  grows by ``indent`` each time rendering descends one nesting level.
- ``indent``: the per-level indentation width chosen once by the top-level
  render call. ``0`` means "always flow style".
- ``in_mapping``: whether the node is the value part of a mapping entry.

Encoders finish their text through `with_context`, the only place where the
separator between ``key:`` and a value is decided. A mapping value rendered
inline gets a single space; a mapping value rendered as a block starts on a
new line indented to ``column``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Layout(Enum):
    """Layout class of a finished fragment.

    Attributes:
        INLINE: Single-line text (scalars, empty containers, flow collections).
        BLOCK: Indentation-delimited text (non-empty containers with ``indent > 0``).
    """

    INLINE = "inline"
    BLOCK = "block"


@dataclass(frozen=True, slots=True)
class EncoderState:
    """Immutable traversal state threaded through recursive rendering.

    Invariant: ``column`` is a non-negative multiple of ``indent`` (always ``0``
    when ``indent == 0``).

    Attributes:
        column (int): Leading spaces already committed on the current output line.
        indent (int): Fixed per-level indentation width (``0`` selects flow style).
        in_mapping (bool): True when rendering the value part of a mapping entry.
    """

    column: int
    indent: int
    in_mapping: bool = False

    @classmethod
    def initial(cls, indent: int) -> EncoderState:
        """Return the state used by a top-level render call.

        Args:
            indent (int): Indentation width; must be non-negative.

        Returns:
            EncoderState: ``column=0``, ``in_mapping=False``.

        Raises:
            ValueError: If ``indent`` is negative.
        """
        if indent < 0:
            raise ValueError(f"indent width must be >= 0, got {indent}")
        return cls(column=0, indent=indent, in_mapping=False)

    @property
    def flow(self) -> bool:
        """Whether non-empty containers render in flow style."""
        return self.indent == 0

    def nested(self, *, in_mapping: bool) -> EncoderState:
        """Return the state for a child one nesting level deeper.

        Args:
            in_mapping (bool): Whether the child is a mapping value.

        Returns:
            EncoderState: A copy with ``column`` advanced by ``indent``.
        """
        return replace(self, column=self.column + self.indent, in_mapping=in_mapping)

    def as_mapping_value(self) -> EncoderState:
        """Return this state at the same column, flagged as a mapping value."""
        return replace(self, in_mapping=True)

    def line_break(self) -> str:
        """Return a newline followed by ``column`` spaces of indentation."""
        return "\n" + " " * self.column


def with_context(layout: Layout, state: EncoderState, text: str) -> str:
    """Prefix ``text`` with the separator required by its position.

    - inline, inside a mapping: one space;
    - block, inside a mapping: a newline then ``column`` spaces;
    - anything else (top level, sequence items): no prefix.

    Args:
        layout (Layout): Layout class of ``text``.
        state (EncoderState): State the fragment was rendered in.
        text (str): The rendered fragment.

    Returns:
        str: The fragment with its separator applied.
    """
    if not state.in_mapping:
        return text
    if layout is Layout.INLINE:
        return " " + text
    return state.line_break() + text
