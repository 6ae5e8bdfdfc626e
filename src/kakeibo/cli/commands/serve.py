"""Run the HTTP API server."""

import logging

import click
import uvicorn

from kakeibo import config
from kakeibo.api.app import create_app, prepare_repository


logger = logging.getLogger(__name__)


@click.command("serve")
@click.option("--host", default=None, help="Bind address (default: KAKEIBO_HOST or 0.0.0.0)")
@click.option("--port", type=int, default=None, help="Bind port (default: KAKEIBO_PORT or 8080)")
@click.pass_context
def serve(ctx, host: str | None, port: int | None):
    """Serve the REST API."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    repository = ctx.obj["repository"]
    prepare_repository(repository)

    app = create_app(repository=repository)
    host = host or config.server_host()
    port = port or config.server_port()
    logger.info("server listening on http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port)


def register_commands(cli):
    """Register serve command with main CLI."""
    cli.add_command(serve)
