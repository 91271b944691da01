# topmark:header:start
#
#   project      : YamlCraft
#   file         : errors.py
#   file_relpath : src/yamlcraft/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the YamlCraft CLI.

Raise these exceptions in CLI commands to signal errors with standardized
messages and exit codes. Click prints the message and exits with ``exit_code``.
"""

from __future__ import annotations

import click

from yamlcraft.cli.exit_codes import ExitCode


class YamlcraftError(click.ClickException):
    """Base class for all YamlCraft CLI errors."""

    exit_code = ExitCode.FAILURE


class YamlcraftUsageError(YamlcraftError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class YamlcraftInputError(YamlcraftError):
    """Error when the input cannot be parsed or contains values with no YAML form."""

    exit_code = ExitCode.INPUT_ERROR


class YamlcraftFileNotFoundError(YamlcraftError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class YamlcraftIOError(YamlcraftError):
    """Error when the input path exists but cannot be read."""

    exit_code = ExitCode.IO_ERROR


class YamlcraftConfigError(YamlcraftError):
    """Error for configuration errors (missing/invalid config file)."""

    exit_code = ExitCode.CONFIG_ERROR
