"""CLI commands for global configuration management."""

import typer

from stagenote import global_config
from stagenote.config import ConfigError, ENV_VARS, load_config

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global stagenote configuration in ~/.stagenote/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration and where it comes from."""
    try:
        effective = load_config()
    except (ConfigError, global_config.GlobalConfigError) as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Config file: {global_config.get_config_file_path()}")
    if not global_config.is_configured():
        typer.echo("  (no config file, using environment and defaults)")
    typer.echo()
    for key in global_config.CONFIG_KEYS:
        value = getattr(effective, key)
        typer.echo(f"  {key}: {value}  (env: {ENV_VARS[key]})")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="api_url, model, timeout or max_diff_chars"),
    value: str = typer.Argument(..., help="Value to store"),
) -> None:
    """Store a configuration value in ~/.stagenote/config.yaml."""
    if key not in global_config.CONFIG_KEYS:
        typer.echo(f"Invalid key: {key}", err=True)
        typer.echo(f"Valid keys: {', '.join(global_config.CONFIG_KEYS)}")
        raise typer.Exit(1)

    try:
        # Validate through the same model used at runtime
        validated = load_config({key: value})
        global_config.set_config_value(key, getattr(validated, key))
    except (ConfigError, global_config.GlobalConfigError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ {key} set to {getattr(validated, key)}")


@config_app.command("unset")
def config_unset(
    key: str = typer.Argument(..., help="Key to remove"),
) -> None:
    """Remove a stored configuration value."""
    try:
        removed = global_config.unset_config_value(key)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not removed:
        typer.echo(f"{key} is not set.", err=True)
        raise typer.Exit(1)
    typer.echo(f"✓ Removed {key}")
