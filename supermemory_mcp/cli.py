"""CLI for Supermemory MCP server."""

import click

from supermemory_mcp.config import ConfigError, SupermemoryConfig, load_config


def _load_or_exit(config_file: str | None) -> SupermemoryConfig:
    """Load config, exiting with status 1 if it is missing or invalid."""
    try:
        return load_config(config_file)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


def config_option():
    """Decorator for --config option."""
    return click.option(
        "--config",
        "-c",
        default=None,
        type=click.Path(exists=False),
        help="Path to config file (auto-detects .supermemory-mcp.yaml)",
    )


@click.group()
def main():
    """Supermemory MCP - persistent user memory for AI assistants."""
    pass  # pragma: no cover


@main.command()
@config_option()
@click.option(
    "--transport",
    "-t",
    type=click.Choice(["stdio", "http"]),
    default="stdio",
    help="Transport type (default: stdio)",
)
@click.option(
    "--port",
    default=8000,
    help="Port for HTTP transport (default: 8000)",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Log Supermemory API calls with timings to stderr",
)
def serve(config: str | None, transport: str, port: int, debug: bool):
    """Start the Supermemory MCP server."""
    supermemory_config = _load_or_exit(config)

    from supermemory_mcp.debug import configure_debug_logging, enable_debug
    from supermemory_mcp.server import create_supermemory_server

    if debug:
        enable_debug()
        configure_debug_logging()

    server = create_supermemory_server(config=supermemory_config)

    if transport == "stdio":
        server.run(transport="stdio")
    else:
        server.run(transport="http", port=port)


@main.command()
@config_option()
def whoami(config: str | None):
    """Show the user ID memories are stored under."""
    supermemory_config = _load_or_exit(config)
    click.echo(supermemory_config.user_id)


if __name__ == "__main__":
    main()
