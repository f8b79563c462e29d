"""Serve command - run the StepSync server"""

import logging
from pathlib import Path

import click
import uvicorn

from stepsync_server.config import settings
from stepsync_server.main import create_app


@click.command()
@click.option('--host', default=None, help='Bind address (default: STEPSYNC_HOST or 0.0.0.0)')
@click.option('--port', type=int, default=None, help='Port (default: STEPSYNC_PORT or 4567)')
@click.option('--extended', is_flag=True, help='Add the arp and bass tracks')
@click.option('--debug', is_flag=True, help='Debug logging and error pages (default: STEPSYNC_DEBUG)')
@click.option('--static-dir', type=click.Path(file_okay=False), default=None,
              help='Directory holding the built client app')
@click.pass_context
def serve(ctx, host, port, extended, debug, static_dir):
    """Run the shared sequencer server

    Example:
        stepsync serve
        stepsync serve --port 8080 --extended
    """
    overrides = {}
    if host is not None:
        overrides['host'] = host
    if port is not None:
        overrides['port'] = port
    if extended:
        overrides['extended_tracks'] = True
    if debug:
        overrides['debug'] = True
    if static_dir is not None:
        overrides['static_dir'] = Path(static_dir)
    app_settings = settings.model_copy(update=overrides)

    verbose = app_settings.debug or ctx.obj['verbose']
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    ctx.obj['formatter'].info(
        f"Serving on {app_settings.host}:{app_settings.port} "
        f"({len(app_settings.track_ids)} tracks)"
    )
    uvicorn.run(
        create_app(app_settings),
        host=app_settings.host,
        port=app_settings.port,
        log_level="debug" if verbose else "info",
    )
