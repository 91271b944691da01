# topmark:header:start
#
#   project      : YamlCraft
#   file         : render.py
#   file_relpath : src/yamlcraft/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlCraft `render` command.

Converts a JSON or TOML document (from a file or STDIN) to YAML and prints it
on STDOUT. Render options come from config files and may be overridden with
flags.

Examples:
    yamlcraft render data.json
    cat data.json | yamlcraft render --indent 4
    yamlcraft render pyproject.toml --indent 0 --document
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from yamlcraft.api import dumps
from yamlcraft.cli.cli_types import EnumChoiceParam
from yamlcraft.cli.config_resolver import resolve_config_from_click
from yamlcraft.cli.errors import YamlcraftInputError
from yamlcraft.cli.io import (
    InputFormat,
    is_stdin,
    parse_input,
    read_input,
    resolve_input_format,
)
from yamlcraft.cli.options import config_file_option
from yamlcraft.config.logging import get_logger
from yamlcraft.encoding.errors import UnsupportedValueError

if TYPE_CHECKING:
    from yamlcraft.config.logging import YamlcraftLogger
    from yamlcraft.config.model import RenderConfig

logger: YamlcraftLogger = get_logger(__name__)


@click.command(
    name="render",
    help="Convert a JSON or TOML document to YAML (reads STDIN when PATH is '-' or omitted).",
)
@click.argument(
    "path",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path, allow_dash=True),
)
@click.option(
    "--from",
    "input_format",
    type=EnumChoiceParam(InputFormat),
    default=InputFormat.AUTO.value,
    show_default=True,
    help="Input format; 'auto' picks TOML for '.toml' files and JSON otherwise.",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    help="Indentation width; 0 selects flow style.",
)
@click.option(
    "--document/--no-document",
    default=None,
    help="Wrap the output in '---' / '...' document markers.",
)
@click.option(
    "--sort-keys/--no-sort-keys",
    default=None,
    help="Emit mapping entries in key order.",
)
@config_file_option
def render_command(
    *,
    path: Path | None,
    input_format: InputFormat,
    indent: int | None,
    document: bool | None,
    sort_keys: bool | None,
    config_files: tuple[Path, ...],
) -> None:
    """Render a JSON or TOML document as YAML.

    Args:
        path (Path | None): Input file; STDIN when None or ``-``.
        input_format (InputFormat): Parser selection.
        indent (int | None): Indentation override.
        document (bool | None): Document-marker override.
        sort_keys (bool | None): Key-sorting override.
        config_files (tuple[Path, ...]): Explicit config files.

    Raises:
        YamlcraftInputError: If the input cannot be parsed or has no YAML form.
    """
    config: RenderConfig = resolve_config_from_click(
        anchor=None if is_stdin(path) else path,
        config_paths=config_files,
        indent=indent,
        document=document,
        sort_keys=sort_keys,
    )

    text: str = read_input(path)
    fmt: InputFormat = resolve_input_format(input_format, path)
    value: object = parse_input(text, fmt)

    try:
        output: str = dumps(value, config=config)
    except UnsupportedValueError as exc:
        raise YamlcraftInputError(str(exc)) from exc

    logger.info("Rendered %d characters of YAML", len(output))
    click.echo(output)
