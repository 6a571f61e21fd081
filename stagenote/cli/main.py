"""Main CLI command for generating and committing messages."""

from typing import Optional

import typer

from stagenote import __version__
from stagenote.config import ConfigError, load_config
from stagenote.formatters import CommitMessage
from stagenote.git import (
    CommitFailedError,
    NoDiffError,
    NoStagedFilesError,
)
from stagenote.global_config import GlobalConfigError
from stagenote.llm import GenerationError
from stagenote.pipeline import CommitPipeline, RunOptions
from stagenote.cli.utils import configure_logging, display_dry_run


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"stagenote {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-d",
        help="Show the generated message and git command without committing",
    ),
    max_diff_chars: Optional[int] = typer.Option(
        None,
        "--max-diff-chars",
        help="Maximum characters of the staged diff sent to the model",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Override the model identifier (default from OCO_MODEL or config)",
    ),
    api_url: Optional[str] = typer.Option(
        None,
        "--api-url",
        help="Override the generate endpoint URL (default from OCO_API_URL or config)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log request and parsing details to stderr",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate a commit message from staged changes and commit it."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    configure_logging(verbose)

    try:
        config = load_config(
            {"api_url": api_url, "model": model, "max_diff_chars": max_diff_chars}
        )
    except (ConfigError, GlobalConfigError) as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(1)

    options = RunOptions(dry_run=dry_run, max_diff_chars=max_diff_chars)
    pipeline = CommitPipeline(config, options)

    def on_inputs(files: list[str]) -> None:
        typer.echo(
            f"Generating commit message with {config.model} for {len(files)} staged file(s)...",
            err=True,
        )

    def on_message(message: CommitMessage) -> None:
        if not dry_run:
            typer.echo("Generated commit message:")
            typer.echo(message.render())
            typer.echo()

    try:
        result = pipeline.run(on_message=on_message, on_inputs=on_inputs)
    except (NoStagedFilesError, NoDiffError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except GenerationError as e:
        typer.echo(f"Error generating commit message: {e}", err=True)
        raise typer.Exit(1)
    except CommitFailedError as e:
        typer.echo(f"Commit failed: {e}", err=True)
        raise typer.Exit(1)

    if dry_run:
        display_dry_run(result)
        return

    if result.commit_output.strip():
        typer.echo(result.commit_output.rstrip())
    typer.echo("Commit created successfully!", err=True)
