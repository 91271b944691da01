# topmark:header:start
#
#   project      : YamlCraft
#   file         : io.py
#   file_relpath : src/yamlcraft/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input handling for the YamlCraft CLI.

Reads the document to convert from a path or STDIN and parses it into a native
Python value tree with the parser selected by ``--from``.
"""

from __future__ import annotations

import json
import sys
from enum import Enum
from typing import TYPE_CHECKING

from tomlkit.exceptions import ParseError as TomlkitParseError

from yamlcraft.cli.errors import YamlcraftFileNotFoundError, YamlcraftInputError, YamlcraftIOError
from yamlcraft.config.io import parse_toml_text
from yamlcraft.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from yamlcraft.config.logging import YamlcraftLogger

logger: YamlcraftLogger = get_logger(__name__)

STDIN_MARKER: str = "-"


class InputFormat(str, Enum):
    """Input document formats accepted by ``yamlcraft render``."""

    AUTO = "auto"
    JSON = "json"
    TOML = "toml"


def is_stdin(path: Path | None) -> bool:
    """Return True when ``path`` designates STDIN (missing or ``-``)."""
    return path is None or str(path) == STDIN_MARKER


def read_input(path: Path | None) -> str:
    """Return the text of ``path``, or of STDIN when ``path`` is None or ``-``.

    Raises:
        YamlcraftFileNotFoundError: If ``path`` does not exist.
        YamlcraftIOError: If ``path`` cannot be read.
    """
    if path is None or is_stdin(path):
        logger.debug("Reading input from STDIN")
        return sys.stdin.read()

    if not path.exists():
        raise YamlcraftFileNotFoundError(f"No such file: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise YamlcraftIOError(f"Cannot read {path}: {exc}") from exc


def resolve_input_format(fmt: InputFormat, path: Path | None) -> InputFormat:
    """Resolve ``auto`` by file suffix: ``.toml`` is TOML, anything else JSON."""
    if fmt is not InputFormat.AUTO:
        return fmt
    if path is not None and not is_stdin(path) and path.suffix.lower() == ".toml":
        return InputFormat.TOML
    return InputFormat.JSON


def parse_input(text: str, fmt: InputFormat) -> object:
    """Parse ``text`` as ``fmt`` into a native Python value tree.

    Args:
        text (str): The document text.
        fmt (InputFormat): A concrete format (not ``AUTO``).

    Returns:
        object: The parsed value tree.

    Raises:
        YamlcraftInputError: If ``text`` is not a valid document of that format.
    """
    logger.debug("Parsing %d characters of %s input", len(text), fmt.value)
    if fmt is InputFormat.TOML:
        try:
            return parse_toml_text(text)
        except TomlkitParseError as exc:
            raise YamlcraftInputError(f"Invalid TOML input: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise YamlcraftInputError(f"Invalid JSON input: {exc}") from exc
