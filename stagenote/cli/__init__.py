"""CLI entry point for stagenote.

Combines the default generate-and-commit command with the config
subcommand group.
"""

import typer

from stagenote.cli.config import config_app
from stagenote.cli.main import main_command

# Main application
app = typer.Typer(
    name="stagenote",
    help="stagenote: AI-generated commit messages for staged changes",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Set the main callback for default behavior
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
]
