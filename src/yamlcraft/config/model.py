# topmark:header:start
#
#   project      : YamlCraft
#   file         : model.py
#   file_relpath : src/yamlcraft/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render configuration for YamlCraft.

Configuration follows an immutable/mutable split:

- `MutableRenderConfig` is the builder. It is filled from runtime defaults,
  discovered config files (``yamlcraft.toml`` or ``[tool.yamlcraft]`` in
  ``pyproject.toml``), extra config files and explicit overrides, in that order
  of increasing precedence. ``None`` fields mean "inherit".
- `RenderConfig` is the frozen snapshot handed to the encoder facade.

Use `RenderConfig.thaw` to obtain a builder from a snapshot and
`MutableRenderConfig.freeze` to return to an immutable snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from yamlcraft.config.io import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)
from yamlcraft.config.keys import Toml
from yamlcraft.config.logging import get_logger
from yamlcraft.constants import (
    DEFAULT_INDENT,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
    YAMLCRAFT_TOML_NAME,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from yamlcraft.config.io import TomlTable
    from yamlcraft.config.logging import YamlcraftLogger

logger: YamlcraftLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render options.

    Attributes:
        indent (int): Indentation width per nesting level; ``0`` selects flow style.
        document (bool): Whether to wrap output in ``---`` / ``...`` document markers.
        sort_keys (bool): Whether mappings are emitted in key order instead of
            iteration order.
        config_files (tuple[str, ...]): Config sources that contributed to this snapshot.
    """

    indent: int = DEFAULT_INDENT
    document: bool = False
    sort_keys: bool = False
    config_files: tuple[str, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Convert this config into a TOML-serializable dict."""
        return {
            Toml.SECTION_RENDER: {
                Toml.KEY_INDENT: self.indent,
                Toml.KEY_DOCUMENT: self.document,
                Toml.KEY_SORT_KEYS: self.sort_keys,
            },
        }

    def to_toml(self) -> str:
        """Render this config as a TOML document."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableRenderConfig:
        """Return a mutable copy of this frozen config."""
        return MutableRenderConfig(
            indent=self.indent,
            document=self.document,
            sort_keys=self.sort_keys,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableRenderConfig:
    """Mutable render configuration used while loading and merging sources.

    Attributes:
        indent (int | None): Indentation width, or ``None`` to inherit.
        document (bool | None): Document marker flag, or ``None`` to inherit.
        sort_keys (bool | None): Key sorting flag, or ``None`` to inherit.
        config_files (list[str]): Config sources merged so far.
    """

    indent: int | None = None
    document: bool | None = None
    sort_keys: bool | None = None
    config_files: list[str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> RenderConfig:
        """Sanitize this builder and freeze it into a `RenderConfig`.

        Fields still unset fall back to the runtime defaults.
        """
        self.sanitize()
        return RenderConfig(
            indent=DEFAULT_INDENT if self.indent is None else self.indent,
            document=bool(self.document),
            sort_keys=bool(self.sort_keys),
            config_files=tuple(self.config_files),
        )

    def sanitize(self) -> None:
        """Reset invalid values to "inherit" and warn about questionable ones."""
        if self.indent is not None and self.indent < 0:
            logger.warning(
                "Ignoring negative indent %d; using default %d", self.indent, DEFAULT_INDENT
            )
            self.indent = None
        elif self.indent == 1:
            logger.warning(
                "indent = 1 cannot align block sequence items under their '- ' marker; "
                "consider 0 (flow style) or >= 2"
            )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableRenderConfig:
        """Return a builder populated with YamlCraft's runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        config_file: Path | None = None,
    ) -> MutableRenderConfig:
        """Create a builder from a parsed YamlCraft TOML table.

        Args:
            data (TomlTable): The YamlCraft table (top level of ``yamlcraft.toml`` or
                ``[tool.yamlcraft]``).
            config_file (Path | None): Optional path of the source file, recorded in
                ``config_files``.

        Returns:
            MutableRenderConfig: The resulting builder; keys absent from ``data`` stay unset.
        """
        render_tbl: TomlTable = get_table_value(data, Toml.SECTION_RENDER)
        logger.trace("TOML [render]: %s", render_tbl)

        where: str = f"[{Toml.SECTION_RENDER}]"
        return cls(
            indent=get_int_value_or_none(render_tbl, Toml.KEY_INDENT, where=where),
            document=get_bool_value_or_none(render_tbl, Toml.KEY_DOCUMENT),
            sort_keys=get_bool_value_or_none(render_tbl, Toml.KEY_SORT_KEYS),
            config_files=[str(config_file)] if config_file else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableRenderConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``yamlcraft.toml`` and ``pyproject.toml``; for the latter the
        ``[tool.yamlcraft]`` section is extracted.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableRenderConfig | None: The builder, or None when a ``pyproject.toml``
                has no ``[tool.yamlcraft]`` section.
        """
        logger.debug("Creating MutableRenderConfig from TOML config: %s", path)

        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_tbl: TomlTable = get_table_value(toml_data, Toml.SECTION_TOOL)
            tool_section: TomlTable = get_table_value(tool_tbl, PYPROJECT_TOOL_SECTION)
            if not tool_section:
                logger.warning(
                    "[tool.%s] section missing or malformed in %s", PYPROJECT_TOOL_SECTION, path
                )
                return None
            toml_data = tool_section

        draft: MutableRenderConfig = cls.from_toml_dict(toml_data, config_file=path)
        logger.debug("Generated MutableRenderConfig: %s", draft)
        return draft

    @classmethod
    def discover_config_file(cls, start: Path) -> Path | None:
        """Return the nearest config file at or above ``start``.

        In each directory, ``yamlcraft.toml`` wins over ``pyproject.toml``; a
        ``pyproject.toml`` only counts when it has a ``[tool.yamlcraft]`` section.

        Args:
            start (Path): Directory (or file) to start from.

        Returns:
            Path | None: The discovered file, or None.
        """
        current: Path = start.resolve()
        if current.is_file():
            current = current.parent
        for directory in (current, *current.parents):
            candidate: Path = directory / YAMLCRAFT_TOML_NAME
            if candidate.is_file():
                logger.debug("Discovered config file: %s", candidate)
                return candidate
            pyproject: Path = directory / PYPROJECT_TOML_NAME
            if pyproject.is_file():
                tool_tbl: TomlTable = get_table_value(load_toml_dict(pyproject), Toml.SECTION_TOOL)
                if get_table_value(tool_tbl, PYPROJECT_TOOL_SECTION):
                    logger.debug("Discovered config file: %s", pyproject)
                    return pyproject
        return None

    @classmethod
    def load_merged(
        cls,
        start: Path | None = None,
        extra_files: Iterable[Path] = (),
    ) -> MutableRenderConfig:
        """Build a builder from defaults, the discovered config and extra files.

        Args:
            start (Path | None): Discovery start directory (defaults to the CWD).
            extra_files (Iterable[Path]): Explicit config files, applied last in order.

        Returns:
            MutableRenderConfig: The merged builder.
        """
        merged: MutableRenderConfig = cls.from_defaults()

        discovered: Path | None = cls.discover_config_file(start or Path.cwd())
        sources: list[Path] = [discovered] if discovered else []
        sources.extend(extra_files)

        for path in sources:
            draft: MutableRenderConfig | None = cls.from_toml_file(path)
            if draft is not None:
                merged = merged.merge_with(draft)
        return merged

    def merge_with(self, other: MutableRenderConfig) -> MutableRenderConfig:
        """Overlay ``other`` onto this builder; set fields in ``other`` win.

        Returns:
            MutableRenderConfig: This builder, for chaining.
        """
        if other.indent is not None:
            self.indent = other.indent
        if other.document is not None:
            self.document = other.document
        if other.sort_keys is not None:
            self.sort_keys = other.sort_keys
        self.config_files.extend(other.config_files)
        return self

    def apply_overrides(
        self,
        *,
        indent: int | None = None,
        document: bool | None = None,
        sort_keys: bool | None = None,
    ) -> MutableRenderConfig:
        """Apply explicit (CLI or API) overrides; ``None`` leaves a field untouched.

        Returns:
            MutableRenderConfig: This builder, for chaining.
        """
        return self.merge_with(
            MutableRenderConfig(indent=indent, document=document, sort_keys=sort_keys)
        )

    def to_toml(self) -> str:
        """Render the effective (frozen) view of this builder as TOML."""
        return self.freeze().to_toml()
