"""Report connection details of a started container."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rich.console import Console

    from resin_cli.engine.client import ContainerEngine
    from resin_cli.engine.models import ContainerHandle, ContainerStatus


async def report(
    engine: ContainerEngine,
    handle: ContainerHandle,
    console: Console,
) -> ContainerStatus:
    """Inspect the started container and print how to reach it."""
    status = await engine.inspect_container(handle.id)

    console.print("[green]Started container[/green]")
    console.print(f"Id: {status.id}", highlight=False)
    console.print(f"Name: {status.name}", highlight=False)
    console.print(f"IP Address: {status.ip_address}", highlight=False)
    console.print()
    console.print(
        f"Use `docker logs {status.short_id}` to view logs, "
        f"or `docker stop {status.short_id}` to stop the container.",
        highlight=False,
        soft_wrap=True,
    )
    if status.ip_address:
        console.print(
            f"Visit http://{status.ip_address} if your container is running an http server.",
            highlight=False,
            soft_wrap=True,
        )
    return status
