# topmark:header:start
#
#   project      : YamlCraft
#   file         : config_resolver.py
#   file_relpath : src/yamlcraft/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve a `RenderConfig` from Click parameters.

Resolution order (lowest to highest precedence):
  1. Runtime defaults.
  2. The nearest discovered ``yamlcraft.toml`` or ``pyproject.toml`` with a
     ``[tool.yamlcraft]`` table, searched upward from the anchor directory.
  3. Explicit config files passed via ``--config``, merged in order.
  4. CLI overrides (flags), applied last.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from yamlcraft.cli.errors import YamlcraftConfigError
from yamlcraft.config.logging import get_logger
from yamlcraft.config.model import MutableRenderConfig

if TYPE_CHECKING:
    from collections.abc import Sequence

    from yamlcraft.config.logging import YamlcraftLogger
    from yamlcraft.config.model import RenderConfig

logger: YamlcraftLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    anchor: Path | None,
    config_paths: Sequence[Path],
    indent: int | None = None,
    document: bool | None = None,
    sort_keys: bool | None = None,
) -> RenderConfig:
    """Build the effective `RenderConfig` for a CLI invocation.

    Args:
        anchor (Path | None): Input path used to anchor config discovery (its parent
            when it is a file); the current working directory when None.
        config_paths (Sequence[Path]): Explicit ``--config`` files.
        indent (int | None): ``--indent`` override.
        document (bool | None): ``--document/--no-document`` override.
        sort_keys (bool | None): ``--sort-keys/--no-sort-keys`` override.

    Returns:
        RenderConfig: The frozen effective config.

    Raises:
        YamlcraftConfigError: If an explicit config file does not exist.
    """
    for path in config_paths:
        if not path.is_file():
            raise YamlcraftConfigError(f"Config file not found: {path}")

    start: Path = anchor.parent if anchor is not None and anchor.is_file() else Path.cwd()
    draft: MutableRenderConfig = MutableRenderConfig.load_merged(
        start=start, extra_files=config_paths
    )
    draft.apply_overrides(indent=indent, document=document, sort_keys=sort_keys)
    logger.debug("Resolved render config: %s", draft)
    return draft.freeze()
