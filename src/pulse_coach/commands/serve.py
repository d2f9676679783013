"""Web server command."""

import click

from ..config import get_settings
from .base import ensure_initialized


@click.command()
@click.option("--host", help="Host to bind to (default from settings)")
@click.option("--port", "-p", type=int, help="Port to bind to (default from settings)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None, reload: bool):
    """Start the JSON API server.

    Examples:

        # Start on the configured host and port
        pulse-coach serve

        # Expose to network on a custom port
        pulse-coach serve --host 0.0.0.0 --port 3000
    """
    ensure_initialized(ctx)

    import uvicorn

    from ..web import create_app

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port

    click.echo()
    click.echo(click.style("Starting pulse-coach API server...", fg="green"))
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo(f"  Docs:    http://{host}:{port}/docs")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    uvicorn.run(
        create_app() if not reload else "pulse_coach.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
    )
