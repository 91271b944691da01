# topmark:header:start
#
#   project      : YamlCraft
#   file         : __main__.py
#   file_relpath : src/yamlcraft/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running YamlCraft via ``python -m yamlcraft``.

It delegates directly to :func:`yamlcraft.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how YamlCraft is launched.

Examples:
    Render a JSON document as block-style YAML::

        python -m yamlcraft render data.json --indent 2
"""

from __future__ import annotations

from yamlcraft.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
