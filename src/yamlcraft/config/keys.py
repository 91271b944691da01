# topmark:header:start
#
#   project      : YamlCraft
#   file         : keys.py
#   file_relpath : src/yamlcraft/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for YamlCraft configuration.

These constants are the external configuration schema as it appears in
``yamlcraft.toml`` and in ``[tool.yamlcraft]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by YamlCraft configuration."""

    # [tool.yamlcraft] in pyproject.toml
    SECTION_TOOL: Final[str] = "tool"

    # [render]
    SECTION_RENDER: Final[str] = "render"

    KEY_INDENT: Final[str] = "indent"
    KEY_DOCUMENT: Final[str] = "document"
    KEY_SORT_KEYS: Final[str] = "sort_keys"
