# topmark:header:start
#
#   project      : YamlCraft
#   file         : __init__.py
#   file_relpath : src/yamlcraft/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the YamlCraft CLI."""
