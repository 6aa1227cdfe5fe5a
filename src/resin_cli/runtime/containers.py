"""Create and start emulated containers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resin_cli.engine.models import ContainerCreateSpec
from resin_cli.errors import DuplicateContainerError, EngineConflictError, MissingCommandError

if TYPE_CHECKING:
    from resin_cli.engine.client import ContainerEngine
    from resin_cli.engine.models import ContainerHandle

logger = logging.getLogger(__name__)


async def provision(engine: ContainerEngine, image_id: str, name: str) -> ContainerHandle:
    """Create a container named *name* that runs *image_id* under ARM emulation.

    The image's default command is handed to ``qemu-arm-static``; an image
    without one cannot be run and fails before anything is created.

    Raises:
        MissingCommandError: The image has no default command.
        DuplicateContainerError: A container called *name* already exists.
        EngineError: Any other engine failure.
    """
    info = await engine.inspect_image(image_id)
    if not info.command:
        raise MissingCommandError(image_id)

    spec = ContainerCreateSpec(image=image_id, name=name, command=info.command)
    logger.debug("Creating container %s from %s: %s", name, image_id, info.command)

    try:
        return await engine.create_container(spec)
    except EngineConflictError as exc:
        raise DuplicateContainerError(name) from exc


async def launch(engine: ContainerEngine, handle: ContainerHandle) -> ContainerHandle:
    """Start *handle* in privileged mode and hand it back."""
    logger.debug("Starting container %s", handle.id)
    await engine.start_container(handle.id, privileged=True)
    return handle
