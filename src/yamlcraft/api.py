# topmark:header:start
#
#   project      : YamlCraft
#   file         : api.py
#   file_relpath : src/yamlcraft/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public convenience API.

`encode` projects a native value tree onto an `Encoder`; `dumps` goes all the
way to YAML text using a `RenderConfig` plus per-call overrides::

    from yamlcraft.api import dumps

    dumps({"foo": 42, "bar": [1, 2]})
    # 'foo: 42\\nbar:\\n  - 1\\n  - 2'
    dumps({"foo": 42, "bar": [1, 2]}, indent=0)
    # '{foo: 42, bar: [1, 2]}'
"""

from __future__ import annotations

from yamlcraft.config.logging import get_logger
from yamlcraft.config.model import RenderConfig
from yamlcraft.encoding.encoder import Encoder, render
from yamlcraft.encoding.projection import from_value
from yamlcraft.encoding.wrappers import document as document_wrapper

logger = get_logger(__name__)


def encode(value: object, *, sort_keys: bool = False) -> Encoder:
    """Return the encoder of a native Python value tree (see `from_value`)."""
    return from_value(value, sort_keys=sort_keys)


def dumps(
    value: object,
    *,
    config: RenderConfig | None = None,
    indent: int | None = None,
    document: bool | None = None,
    sort_keys: bool | None = None,
) -> str:
    """Render a native Python value tree as YAML text.

    Keyword overrides take precedence over ``config``; ``None`` means "use the
    config value".

    Args:
        value (object): Root of the value tree, or an already-built `Encoder`.
        config (RenderConfig | None): Base options (runtime defaults when omitted).
        indent (int | None): Indentation width override.
        document (bool | None): Document-marker override.
        sort_keys (bool | None): Key-sorting override.

    Returns:
        str: The YAML text, without a trailing newline.

    Raises:
        UnsupportedValueError: If the tree contains a value with no YAML form.
        ValueError: If the effective indentation width is negative.
    """
    if indent is not None and indent < 0:
        raise ValueError(f"indent width must be >= 0, got {indent}")
    if config is None:
        config = RenderConfig()
    effective: RenderConfig = (
        config.thaw()
        .apply_overrides(indent=indent, document=document, sort_keys=sort_keys)
        .freeze()
    )
    logger.debug(
        "dumps: indent=%d document=%s sort_keys=%s",
        effective.indent,
        effective.document,
        effective.sort_keys,
    )

    encoder: Encoder = encode(value, sort_keys=effective.sort_keys)
    if effective.document:
        encoder = document_wrapper(encoder)
    return render(effective.indent, encoder)
