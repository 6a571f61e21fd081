"""Shared utility functions for CLI commands."""

import logging

import typer

from stagenote.formatters import CommitMessage
from stagenote.pipeline import PipelineResult

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send library log records to stderr.

    Args:
        verbose: Show debug records instead of warnings only.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def display_message(message: CommitMessage) -> None:
    """Print the generated header and body."""
    typer.echo(f"Header: {message.header}")
    if message.has_body:
        typer.echo(f"Body: {message.body}")


def display_dry_run(result: PipelineResult) -> None:
    """Print the generated message and the command that would run."""
    typer.echo("")
    typer.echo("=== GENERATED COMMIT MESSAGE (DRY RUN) ===")
    display_message(result.message)
    typer.echo("")
    typer.echo("=== GIT COMMAND ===")
    typer.echo(result.command)
