# topmark:header:start
#
#   project      : YamlCraft
#   file         : encoder.py
#   file_relpath : src/yamlcraft/encoding/encoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The `Encoder` value type and the top-level `render` entry point.

An `Encoder` is deferred rendering: a function from `EncoderState` to a finished
text fragment. Encoders are immutable and hold no mutable captured state, so the
same encoder can be rendered any number of times, with different indentation
widths, from any number of threads.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from yamlcraft.config.logging import get_logger
from yamlcraft.encoding.state import EncoderState

logger = get_logger(__name__)

RenderFn = Callable[[EncoderState], str]


@dataclass(frozen=True, slots=True)
class Encoder:
    """Composable unit of deferred YAML rendering.

    Callers build encoders with the scalar, container and wrapper constructors
    and only ever invoke them; the wrapped function is an implementation detail.

    Attributes:
        fn (RenderFn): Function producing the fragment for a given state.
    """

    fn: RenderFn

    def __call__(self, state: EncoderState) -> str:
        """Render this encoder in ``state``."""
        return self.fn(state)

    def render(self, indent: int) -> str:
        """Render this encoder as a top-level node (see `render`)."""
        return render(indent, self)


def render(indent: int, encoder: Encoder) -> str:
    """Render ``encoder`` to YAML text.

    Args:
        indent (int): Indentation width per nesting level. ``0`` renders every
            non-empty container in flow style.
        encoder (Encoder): The node to render.

    Returns:
        str: The YAML text, without a trailing newline.

    Raises:
        ValueError: If ``indent`` is negative.
    """
    state: EncoderState = EncoderState.initial(indent)
    logger.trace("Rendering encoder with indent=%d", indent)
    return encoder(state)
