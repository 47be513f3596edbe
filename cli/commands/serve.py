# cli/commands/serve.py
import click
import uvicorn

from core.config import get_settings

@click.command()
@click.option('--host', default=None, help='Interface to bind, defaults to SERVER_HOST')
@click.option('--port', default=None, type=int, help='Port to listen on, defaults to SERVER_PORT')
@click.option('--reload/--no-reload', default=False, help='Restart on code changes')
def serve(host: str, port: int, reload: bool):
    """Run the HTTP API

    Example:
        bookshelf serve
        bookshelf serve --port 9000 --reload
    """
    settings = get_settings()
    host = host or settings.server_host
    port = port or settings.server_port

    click.echo(click.style("Serving on ", fg='blue') +
              click.style(f"{host}:{port}", fg='cyan'))
    uvicorn.run(
        "api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        reload_dirs=["api", "core"] if reload else None
    )
