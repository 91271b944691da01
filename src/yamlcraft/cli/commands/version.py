# topmark:header:start
#
#   project      : YamlCraft
#   file         : version.py
#   file_relpath : src/yamlcraft/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlCraft `version` command.

Prints the current YamlCraft version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from yamlcraft.constants import YAMLCRAFT_VERSION


@click.command(
    name="version",
    help="Show the current version of YamlCraft.",
)
def version_command() -> None:
    """Show the current version of YamlCraft."""
    click.echo(YAMLCRAFT_VERSION)
