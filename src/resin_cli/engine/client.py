"""The container engine operations ``run`` depends on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from resin_cli.engine.models import (
        ContainerCreateSpec,
        ContainerHandle,
        ContainerStatus,
        ImageInfo,
    )


@runtime_checkable
class ContainerEngine(Protocol):
    """Narrow view of a container engine.

    Implementations raise :class:`~resin_cli.errors.EngineError` for any
    engine-reported failure and :class:`~resin_cli.errors.EngineConflictError`
    when a container name is already taken.
    """

    async def inspect_image(self, image_id: str) -> ImageInfo:
        """Return the metadata of an image."""
        ...

    async def create_container(self, spec: ContainerCreateSpec) -> ContainerHandle:
        """Create (but do not start) a container."""
        ...

    async def start_container(self, container_id: str, *, privileged: bool = False) -> None:
        """Start a created container."""
        ...

    async def inspect_container(self, container_id: str) -> ContainerStatus:
        """Return a fresh status snapshot of a container."""
        ...
