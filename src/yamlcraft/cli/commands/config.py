# topmark:header:start
#
#   project      : YamlCraft
#   file         : config.py
#   file_relpath : src/yamlcraft/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlCraft `config` command.

Prints the effective render configuration (defaults, discovered config file and
``--config`` files merged) as a TOML document that can be saved as
``yamlcraft.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from yamlcraft.cli.config_resolver import resolve_config_from_click
from yamlcraft.cli.options import config_file_option

if TYPE_CHECKING:
    from pathlib import Path

    from yamlcraft.config.model import RenderConfig


@click.command(
    name="config",
    help="Show the effective render configuration as TOML.",
)
@config_file_option
def config_command(*, config_files: tuple[Path, ...]) -> None:
    """Print the effective render configuration.

    Args:
        config_files (tuple[Path, ...]): Explicit config files, merged in order.
    """
    config: RenderConfig = resolve_config_from_click(anchor=None, config_paths=config_files)
    for source in config.config_files:
        click.echo(f"# source: {source}")
    click.echo(config.to_toml(), nl=False)
