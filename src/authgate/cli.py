"""CLI entry point for authgate."""

from __future__ import annotations

import sys
from pathlib import Path

import click
import uvicorn

from authgate import __version__
from authgate.config import ConfigError, GatewayConfig, find_config, load_config
from authgate.logging import setup_logging


def resolve_config(config_path: Path | None) -> GatewayConfig:
    """Load the config file, falling back to defaults when none is found.

    Args:
        config_path: Explicit path, or None to search for authgate.yaml.

    Returns:
        Loaded configuration.

    Raises:
        ConfigError: If an explicit or discovered file is invalid.
    """
    if config_path is not None:
        return load_config(config_path)
    try:
        discovered = find_config()
    except ConfigError:
        return GatewayConfig()
    return load_config(discovered)


@click.group()
@click.version_option(version=__version__, prog_name="authgate")
def main() -> None:
    """authgate - session authentication gateway."""
    pass


@main.command()
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to authgate.yaml (auto-detected if not specified)",
)
@click.option("--host", default=None, help="Interface to bind (default: from config)")
@click.option("--port", type=int, default=None, help="Port to listen on (default: from config)")
@click.option(
    "--ttl",
    "ttl_seconds",
    type=int,
    default=None,
    help="Session lifetime in seconds (default: from config or 3600)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default: from config or INFO)",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for rotating log files",
)
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    ttl_seconds: int | None,
    log_level: str | None,
    log_dir: Path | None,
) -> None:
    """Run the gateway HTTP server."""
    from authgate.api.app import create_app  # noqa: PLC0415

    try:
        config = resolve_config(config_path)
        if host is not None:
            config.server.host = host
        if port is not None:
            config.server.port = port
        if ttl_seconds is not None:
            config.session.ttl_seconds = ttl_seconds
        if log_level is not None:
            config.logging.level = log_level
        if log_dir is not None:
            config.logging.dir = str(log_dir)
        config.validate()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    setup_logging(
        log_dir=config.logging.dir,
        level=config.logging.level,
        console=config.logging.console,
    )

    click.echo(f"authgate listening on http://{config.server.host}:{config.server.port}")
    uvicorn.run(
        create_app(config),
        host=config.server.host,
        port=config.server.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
