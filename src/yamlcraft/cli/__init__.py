# topmark:header:start
#
#   project      : YamlCraft
#   file         : __init__.py
#   file_relpath : src/yamlcraft/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for YamlCraft.

The CLI is a thin shell over `yamlcraft.api`: it reads JSON or TOML input,
resolves render options from config files and flags, and prints YAML.
"""
