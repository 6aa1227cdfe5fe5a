"""Container engine access: protocol, Docker client and models."""

from resin_cli.engine.client import ContainerEngine
from resin_cli.engine.docker_engine import DockerEngine
from resin_cli.engine.models import (
    ContainerCreateSpec,
    ContainerHandle,
    ContainerStatus,
    EngineConfig,
    ImageInfo,
)

__all__ = [
    "ContainerCreateSpec",
    "ContainerEngine",
    "ContainerHandle",
    "ContainerStatus",
    "DockerEngine",
    "EngineConfig",
    "ImageInfo",
]
