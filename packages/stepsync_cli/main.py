"""Main CLI entry point"""

import logging

import click
from rich.console import Console

from stepsync_cli.client import DEFAULT_URL
from stepsync_cli.commands.health import health
from stepsync_cli.commands.serve import serve
from stepsync_cli.commands.state import state
from stepsync_cli.utils.output import OutputFormatter


def setup_logging(debug: bool = False) -> None:
    """Configure logging"""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@click.group()
@click.option('--url', default=DEFAULT_URL, help='StepSync server URL')
@click.option('--timeout', default=10.0, help='Request timeout in seconds')
@click.option('--json', 'json_mode', is_flag=True, help='Output as JSON')
@click.option('--verbose', is_flag=True, help='Verbose output')
@click.pass_context
def cli(ctx, url: str, timeout: float, json_mode: bool, verbose: bool):
    """StepSync CLI - run and inspect a shared step sequencer

    Examples:
        stepsync serve --extended
        stepsync state
        stepsync --json health
    """
    setup_logging(debug=verbose)

    ctx.ensure_object(dict)
    ctx.obj['url'] = url
    ctx.obj['timeout'] = timeout
    ctx.obj['verbose'] = verbose

    console = Console()
    ctx.obj['console'] = console
    ctx.obj['formatter'] = OutputFormatter(json_mode=json_mode, console=console)


# Register commands
cli.add_command(serve)
cli.add_command(state)
cli.add_command(health)


if __name__ == '__main__':
    cli()
