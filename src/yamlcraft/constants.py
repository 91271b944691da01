# topmark:header:start
#
#   project      : YamlCraft
#   file         : constants.py
#   file_relpath : src/yamlcraft/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlCraft Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

YAMLCRAFT_VERSION: str = get_version("yamlcraft")

# Config file names, in discovery order:
YAMLCRAFT_TOML_NAME: Final[str] = "yamlcraft.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "yamlcraft"

# Environment variable consulted for the internal log level:
LOG_LEVEL_ENV_VAR: Final[str] = "YAMLCRAFT_LOG_LEVEL"

DEFAULT_INDENT: Final[int] = 2

DOCUMENT_START_MARKER: Final[str] = "---"
DOCUMENT_END_MARKER: Final[str] = "..."

ANCHOR_INDICATOR: Final[str] = "&"
ALIAS_INDICATOR: Final[str] = "*"

EMPTY_FLOW_SEQUENCE: Final[str] = "[]"
EMPTY_FLOW_MAPPING: Final[str] = "{}"

# YAML caps implicit (simple) mapping keys at 1024 characters
MAX_SIMPLE_KEY_LENGTH: Final[int] = 1024
