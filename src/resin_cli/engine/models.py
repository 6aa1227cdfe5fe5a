"""Data models exchanged with the container engine."""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_DOCKER_HOST = "unix:///var/run/docker.sock"

EMULATION_ENTRYPOINT = "qemu-arm-static"
EMULATION_ENV = "QEMU_EXECVE=1"


class EngineConfig(BaseModel):
    """Where and how to reach the container engine.

    ``host`` accepts the same forms as ``DOCKER_HOST``:

    - ``unix:///var/run/docker.sock`` (the default)
    - ``tcp://localhost:2375``
    - ``http://localhost:2375`` / ``https://localhost:2376``
    """

    host: str = Field(default=DEFAULT_DOCKER_HOST, description="Engine endpoint URL.")
    api_version: str | None = Field(
        default=None,
        description="Pin the Engine API version (e.g. '1.41'); unversioned paths when unset.",
    )
    timeout: float | None = Field(
        default=None,
        description="Transport timeout in seconds; the httpx default when unset.",
    )

    @classmethod
    def from_env(cls) -> EngineConfig:
        """Build a config from ``DOCKER_HOST`` / ``DOCKER_API_VERSION``."""
        return cls(
            host=os.getenv("DOCKER_HOST") or DEFAULT_DOCKER_HOST,
            api_version=os.getenv("DOCKER_API_VERSION") or None,
        )


class ImageInfo(BaseModel):
    """The parts of ``GET /images/{id}/json`` that ``run`` needs."""

    id: str
    command: list[str] | None = None

    @classmethod
    def from_engine(cls, data: dict[str, Any]) -> ImageInfo:
        config = data.get("Config") or {}
        return cls(id=data.get("Id") or "", command=config.get("Cmd"))


class ContainerCreateSpec(BaseModel):
    """Everything needed to create an emulated container.

    The image's own command is handed to the emulation binary, so a spec
    cannot be built without one.
    """

    image: str
    name: str
    command: list[str] = Field(..., min_length=1)
    entrypoint: list[str] = Field(default_factory=lambda: [EMULATION_ENTRYPOINT])
    env: list[str] = Field(default_factory=lambda: [EMULATION_ENV])
    tty: bool = False
    privileged: bool = True

    def to_engine_body(self) -> dict[str, Any]:
        """Render the ``POST /containers/create`` request body."""
        return {
            "Image": self.image,
            "Cmd": self.command,
            "Entrypoint": self.entrypoint,
            "Env": self.env,
            "Tty": self.tty,
            "HostConfig": {"Privileged": self.privileged},
        }


class ContainerHandle(BaseModel):
    """Reference to a container created by the engine."""

    id: str
    name: str = ""
    warnings: list[str] = Field(default_factory=list)


class ContainerStatus(BaseModel):
    """Snapshot of a started container, used for reporting."""

    id: str
    name: str
    ip_address: str = ""

    @property
    def short_id(self) -> str:
        return self.id[:6]

    @classmethod
    def from_engine(cls, data: dict[str, Any]) -> ContainerStatus:
        network = data.get("NetworkSettings") or {}
        return cls(
            id=data.get("Id") or "",
            name=(data.get("Name") or "").lstrip("/"),
            ip_address=network.get("IPAddress") or "",
        )
