"""``resin run`` — run a previously built application locally."""

from __future__ import annotations

import asyncio
import sys
from typing import TYPE_CHECKING

import click

from resin_cli.cli_commands._output import console, print_error
from resin_cli.engine.models import EngineConfig
from resin_cli.errors import RunError

if TYPE_CHECKING:
    from resin_cli.runtime.orchestrator import RunOutcome


@click.command()
@click.argument("path", required=False, type=click.Path(file_okay=False))
@click.pass_obj
def run(config: EngineConfig | None, path: str | None) -> None:
    """Run your application locally (run `resin build` first).

    PATH is the project directory; it defaults to the current directory.
    Requires docker to be installed and running.
    """
    from resin_cli.engine.docker_engine import DockerEngine
    from resin_cli.runtime.orchestrator import RunOrchestrator

    async def _run() -> RunOutcome:
        async with DockerEngine(config or EngineConfig.from_env()) as engine:
            return await RunOrchestrator(engine, console).run(path)

    try:
        outcome = asyncio.run(_run())
    except RunError as exc:
        print_error(exc)
        sys.exit(1)

    if outcome.error is not None:
        print_error(outcome.error)
        sys.exit(1)
