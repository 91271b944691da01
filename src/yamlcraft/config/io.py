# topmark:header:start
#
#   project      : YamlCraft
#   file         : io.py
#   file_relpath : src/yamlcraft/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O and value getters for YamlCraft configuration.

Parsing and rendering are done with `tomlkit`; parsed documents are unwrapped
into plain ``dict`` structures before any value is read.

Getters never raise on user mistakes: a value of the wrong type is logged and
the caller's default (or ``None``) is used instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from yamlcraft.config.keys import Toml
from yamlcraft.config.logging import get_logger
from yamlcraft.constants import DEFAULT_INDENT

if TYPE_CHECKING:
    from pathlib import Path

    from yamlcraft.config.logging import YamlcraftLogger

TomlTable = dict[str, Any]

logger: YamlcraftLogger = get_logger(__name__)


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Return True when ``obj`` is an unwrapped TOML table."""
    return isinstance(obj, dict)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return ``table[key]`` when it is a table, else a fresh empty dict."""
    sub: object = table.get(key)
    return sub if is_toml_table(sub) else {}


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Read an optional flag.

    Booleans are taken as they are and integers by truthiness. Any other value
    is logged at DEBUG level and read as unset.

    Args:
        table (TomlTable): Table holding the flag.
        key (str): Name of the flag.

    Returns:
        bool | None: The flag, or ``None`` when unset or unusable.
    """
    raw: object = table.get(key)
    if raw is None or isinstance(raw, bool):
        return raw
    if isinstance(raw, int):
        return raw != 0
    logger.debug("Ignoring non-boolean %s = %r", key, raw)
    return None


def get_int_value_or_none(table: TomlTable, key: str, *, where: str) -> int | None:
    """Read an optional integer, warning about values of any other type.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    raw: object = table.get(key)
    if raw is None:
        return None
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    logger.warning(
        "Ignoring %s.%s: expected an integer, got %s (%r)", where, key, type(raw).__name__, raw
    )
    return None


def load_defaults_dict() -> TomlTable:
    """Return a new table with YamlCraft's built-in render defaults."""
    return {
        Toml.SECTION_RENDER: {
            Toml.KEY_INDENT: DEFAULT_INDENT,
            Toml.KEY_DOCUMENT: False,
            Toml.KEY_SORT_KEYS: False,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Read a UTF-8 TOML file into plain Python values.

    Unreadable or malformed files are logged at ERROR level and read as an
    empty table, so a broken config file never aborts a render.

    Args:
        path (Path): ``yamlcraft.toml``, ``pyproject.toml`` or any TOML file.

    Returns:
        TomlTable: The file's top-level table.
    """
    try:
        return parse_toml_text(path.read_text(encoding="utf-8"))
    except OSError as exc:
        logger.error("Cannot read config file %s: %s", path, exc)
    except TomlkitParseError as exc:
        logger.error("Cannot parse config file %s: %s", path, exc)
    return {}


def parse_toml_text(text: str) -> TomlTable:
    """Parse TOML text into plain Python values.

    Raises:
        tomlkit.exceptions.ParseError: If ``text`` is not valid TOML.
    """
    unwrapped: object = tomlkit.parse(text).unwrap()
    return cast("TomlTable", unwrapped) if is_toml_table(unwrapped) else {}


def to_toml(toml_dict: TomlTable) -> str:
    """Render a table as TOML text, leaving out ``None`` values.

    TOML has no null, so unset keys (at the top level or one table down) are
    dropped.
    """
    cleaned: TomlTable = {}
    for name, value in toml_dict.items():
        if is_toml_table(value):
            cleaned[name] = {k: v for k, v in value.items() if v is not None}
        elif value is not None:
            cleaned[name] = value
    return tomlkit.dumps(cleaned)
