# topmark:header:start
#
#   project      : YamlCraft
#   file         : projection.py
#   file_relpath : src/yamlcraft/encoding/projection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Projection of native Python value trees onto encoders.

Parsers (``json``, ``tomlkit``, YAML loaders) hand back trees of plain Python
values. `from_value` walks such a tree and builds the matching encoder:

| Python value                      | Encoder                             |
| --------------------------------- | ----------------------------------- |
| ``None``                          | `null`                              |
| ``bool``                          | `bool_`                             |
| ``int``                           | `int_`                              |
| ``float``                         | `float_`                            |
| ``str``                           | `string`, double-quoted when needed |
| ``date`` / ``datetime`` / ``time``| ISO-8601 text, as a string          |
| ``Mapping``                       | `record` (keys stringified)         |
| ``list`` / ``tuple`` / sequences  | `list_`                             |
| `Anchored`                        | `anchor`                            |
| `AliasRef`                        | `alias`                             |
| `Encoder`                         | passed through                      |

Strings are emitted plain whenever `needs_quoting` allows it and as fully
escaped double-quoted scalars otherwise, so the rendered YAML loads back to the
original tree.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import date, time

from yamlcraft.config.logging import get_logger
from yamlcraft.constants import MAX_SIMPLE_KEY_LENGTH
from yamlcraft.encoding.containers import list_, record
from yamlcraft.encoding.encoder import Encoder
from yamlcraft.encoding.errors import UnsupportedValueError
from yamlcraft.encoding.escaping import double_quote, needs_quoting
from yamlcraft.encoding.scalars import bool_, float_, format_float, int_, null, string
from yamlcraft.encoding.wrappers import alias, anchor

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Anchored:
    """Value-tree node attaching the anchor ``name`` to ``value``.

    Attributes:
        name (str): Anchor name.
        value (object): The anchored subtree.
    """

    name: str
    value: object


@dataclass(frozen=True, slots=True)
class AliasRef:
    """Value-tree node referring to the anchor ``name``.

    Attributes:
        name (str): Name of a node anchored earlier in the same document.
    """

    name: str


def scalar_text(text: str) -> str:
    """Return ``text`` as plain scalar text, or double-quoted when plain is unsafe."""
    return double_quote(text) if needs_quoting(text) else text


def key_to_string(key: object, path: str = "$") -> str:
    """Return the emitted text of a mapping key.

    String keys follow `scalar_text`; ``None``, booleans and numbers use their
    scalar text so they load back with their type.

    Raises:
        UnsupportedValueError: If the key has no scalar form, or its emitted text
            is longer than YAML allows for an implicit key.
    """
    text: str = _key_text(key, path)
    if len(text) > MAX_SIMPLE_KEY_LENGTH:
        raise UnsupportedValueError(
            key,
            path,
            reason=f"key text is {len(text)} characters long "
            f"(implicit keys are limited to {MAX_SIMPLE_KEY_LENGTH})",
        )
    return text


def _key_text(key: object, path: str) -> str:
    if isinstance(key, str):
        return scalar_text(key)
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, int):
        return str(key)
    if isinstance(key, float):
        return format_float(key)
    raise UnsupportedValueError(key, path)


def from_value(value: object, *, sort_keys: bool = False) -> Encoder:
    """Build the encoder of a native Python value tree.

    Args:
        value (object): Root of the tree.
        sort_keys (bool): Order mapping entries by their key text instead of the
            mapping's iteration order.

    Returns:
        Encoder: The encoder of the whole tree.

    Raises:
        UnsupportedValueError: If the tree contains a value with no YAML form.
    """
    return _project(value, "$", sort_keys)


def _project(value: object, path: str, sort_keys: bool) -> Encoder:
    if isinstance(value, Encoder):
        return value
    if value is None:
        return null()
    if isinstance(value, bool):
        return bool_(value)
    if isinstance(value, int):
        return int_(value)
    if isinstance(value, float):
        return float_(value)
    if isinstance(value, str):
        return string(scalar_text(value))
    if isinstance(value, (date, time)):
        return string(scalar_text(value.isoformat()))
    if isinstance(value, Anchored):
        return anchor(value.name, lambda inner: _project(inner, path, sort_keys), value.value)
    if isinstance(value, AliasRef):
        return alias(value.name)
    if isinstance(value, Mapping):
        logger.trace("Projecting mapping of %d entries at %s", len(value), path)
        pairs: list[tuple[str, Encoder]] = [
            (key_to_string(key, path), _project(item, f"{path}.{key}", sort_keys))
            for key, item in value.items()
        ]
        if sort_keys:
            pairs.sort(key=lambda pair: pair[0])
        return record(pairs)
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        logger.trace("Projecting sequence of %d items at %s", len(value), path)
        return list_(
            lambda indexed: _project(indexed[1], f"{path}[{indexed[0]}]", sort_keys),
            enumerate(value),
        )
    raise UnsupportedValueError(value, path)
