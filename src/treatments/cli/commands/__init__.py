"""CLI command implementations for the treatments application.

This package contains subcommands for the treatments CLI, including:
- validate: Validate a quote file
"""

from treatments.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
