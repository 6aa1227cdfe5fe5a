"""Shared fixtures: a mocked container engine, a capturing console, a built project."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from rich.console import Console

from resin_cli.engine.models import ContainerHandle, ContainerStatus, ImageInfo

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

CONTAINER_ID = "4f2a9c81d0e7b3aa5c1d"


def _make_mock_engine(
    command: tuple[str, ...] | None = ("node", "app.js"),
    ip_address: str = "172.17.0.2",
) -> MagicMock:
    """Engine double whose four operations all succeed."""
    engine = MagicMock()
    engine.inspect_image = AsyncMock(
        return_value=ImageInfo(
            id="sha256:abc123",
            command=list(command) if command is not None else None,
        )
    )
    engine.create_container = AsyncMock(
        side_effect=lambda spec: ContainerHandle(id=CONTAINER_ID, name=spec.name)
    )
    engine.start_container = AsyncMock(return_value=None)
    engine.inspect_container = AsyncMock(
        return_value=ContainerStatus(id=CONTAINER_ID, name="resin_myapp", ip_address=ip_address)
    )
    return engine


@pytest.fixture
def make_engine() -> Callable[..., MagicMock]:
    return _make_mock_engine


@pytest.fixture
def engine() -> MagicMock:
    return _make_mock_engine()


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def output(console: Console) -> Callable[[], str]:
    """Return everything written to the ``console`` fixture so far."""

    def _read() -> str:
        file: Any = console.file
        return file.getvalue()

    return _read


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A ``myapp`` project that has been built."""
    root = tmp_path / "myapp"
    (root / ".resin").mkdir(parents=True)
    (root / ".resin" / "image").write_text("sha256:abc123\n", encoding="utf-8")
    return root
