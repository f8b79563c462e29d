"""State command - print the shared sequencer state"""

import asyncio

import click

from stepsync_cli.client import StepSyncClient
from stepsync_cli.exceptions import StepSyncClientError


@click.command()
@click.pass_context
def state(ctx):
    """Show tempo, transport and every track pattern

    Example:
        stepsync state
        stepsync --json state
    """
    formatter = ctx.obj['formatter']

    try:
        result = asyncio.run(_state_async(ctx.obj['url'], ctx.obj['timeout']))
    except StepSyncClientError as e:
        formatter.error("Failed to get state", str(e))
        raise click.Abort()

    formatter.state(result)


async def _state_async(url: str, timeout: float):
    """Get state asynchronously"""
    async with StepSyncClient(base_url=url, timeout=timeout) as client:
        return await client.get_state()
