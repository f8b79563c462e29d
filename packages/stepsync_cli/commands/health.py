"""Health command - server health check"""

import asyncio

import click

from stepsync_cli.client import StepSyncClient
from stepsync_cli.exceptions import StepSyncClientError


@click.command()
@click.pass_context
def health(ctx):
    """Check StepSync server status

    Example:
        stepsync health
        stepsync --json health
    """
    formatter = ctx.obj['formatter']

    try:
        result = asyncio.run(_health_async(ctx.obj['url'], ctx.obj['timeout']))
    except StepSyncClientError as e:
        formatter.error("Failed to get status", str(e))
        raise click.Abort()

    formatter.success("StepSync status", {
        "status": result.get("status"),
        "version": result.get("version"),
        "clients": result.get("clients"),
        "tracks": ", ".join(result.get("tracks", [])),
    })


async def _health_async(url: str, timeout: float):
    """Get health asynchronously"""
    async with StepSyncClient(base_url=url, timeout=timeout) as client:
        return await client.health()
