"""Shared error types for ``resin run``."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ResinError(Exception):
    """Base error for all resin-cli failures."""


class RunError(ResinError):
    """A ``run`` step failed; the run stops at the first one."""


class ImageNotFoundError(RunError):
    """The ``.resin/image`` marker written by ``resin build`` is missing."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__("Could not find built image. Did you run `resin build`?")


class MissingCommandError(RunError):
    """The built image has no default command to run under emulation."""

    def __init__(self, image_id: str) -> None:
        self.image_id = image_id
        super().__init__(f"No CMD specified in image {image_id}")


class DuplicateContainerError(RunError):
    """A container with the derived name already exists."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"A container named {name} already exists. "
            f"Remove it with `docker rm {name}` and try again."
        )


class EngineError(RunError):
    """The container engine rejected a request or could not be reached."""

    def __init__(self, detail: str = "", status_code: int | None = None) -> None:
        self.detail = detail
        self.status_code = status_code
        msg = "Docker error"
        if status_code is not None:
            msg += f" (code: {status_code})"
        super().__init__(msg + (f": {detail}" if detail else ""))


class EngineConflictError(EngineError):
    """The engine reported that the requested name is already in use."""
