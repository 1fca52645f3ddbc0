"""Web server command."""

import click

from .base import ensure_initialized, get_settings


@click.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
@click.option("--port", "-p", default=8000, type=int, help="Port to bind to (default: 8000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Start the API server.

    Examples:

        # Start on default port (8000)
        forge-log serve

        # Expose to the network on a custom port
        forge-log serve --host 0.0.0.0 --port 5000

        # Development mode with auto-reload
        forge-log serve --reload
    """
    ensure_initialized(ctx)

    import uvicorn

    from ..web import create_app

    click.echo(click.style("Starting forge-log API...", fg="green"))
    click.echo(f"  Local:  http://{host}:{port}")
    click.echo(f"  Docs:   http://{host}:{port}/docs")
    click.echo()

    uvicorn.run(
        create_app(settings=get_settings(ctx)) if not reload else "forge_log.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
        log_level=get_settings(ctx).log_level.lower(),
    )
