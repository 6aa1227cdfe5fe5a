"""Tests for RunOrchestrator (engine mocked)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock

import pytest

from resin_cli.errors import (
    DuplicateContainerError,
    EngineConflictError,
    EngineError,
    ImageNotFoundError,
    MissingCommandError,
)
from resin_cli.runtime.orchestrator import RunOrchestrator, RunState

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console


class TestRunOrchestrator:
    async def test_end_to_end(
        self, engine: MagicMock, console: Console, output: Callable[[], str], project: Path
    ) -> None:
        outcome = await RunOrchestrator(engine, console).run(str(project))

        assert outcome.ok
        assert outcome.state is RunState.DONE
        assert outcome.error is None
        assert outcome.project == project
        assert outcome.image_id == "sha256:abc123"
        assert outcome.container_name == "resin_myapp"

        engine.create_container.assert_awaited_once()
        spec = engine.create_container.call_args.args[0]
        assert spec.name == "resin_myapp"
        assert spec.image == "sha256:abc123"
        engine.start_container.assert_awaited_once_with(outcome.handle.id, privileged=True)
        engine.inspect_container.assert_awaited_once()

        text = output()
        assert f"Id: {outcome.status.id}" in text
        assert "IP Address: 172.17.0.2" in text

    async def test_defaults_to_current_directory(
        self,
        engine: MagicMock,
        console: Console,
        project: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(project)

        outcome = await RunOrchestrator(engine, console).run()

        assert outcome.ok
        assert outcome.project.resolve() == project.resolve()
        assert outcome.container_name == "resin_myapp"

    async def test_symlinked_project_is_named_after_the_link(
        self, engine: MagicMock, console: Console, project: Path, tmp_path: Path
    ) -> None:
        link = tmp_path / "links" / "myapp"
        link.parent.mkdir()
        renamed = project.rename(tmp_path / "build-7f3a")
        link.symlink_to(renamed, target_is_directory=True)

        outcome = await RunOrchestrator(engine, console).run(str(link))

        assert outcome.ok
        assert outcome.project == link
        assert outcome.container_name == "resin_myapp"
        assert engine.create_container.call_args.args[0].name == "resin_myapp"

    async def test_missing_marker_touches_no_engine(
        self, engine: MagicMock, console: Console, output: Callable[[], str], tmp_path: Path
    ) -> None:
        outcome = await RunOrchestrator(engine, console).run(str(tmp_path))

        assert outcome.state is RunState.FAILED
        assert outcome.failed_state is RunState.LOCATING
        assert isinstance(outcome.error, ImageNotFoundError)
        engine.inspect_image.assert_not_awaited()
        engine.create_container.assert_not_awaited()
        assert output() == ""

    async def test_missing_command_stops_before_create(
        self,
        make_engine: Callable[..., MagicMock],
        console: Console,
        project: Path,
    ) -> None:
        engine = make_engine(command=None)

        outcome = await RunOrchestrator(engine, console).run(str(project))

        assert outcome.failed_state is RunState.PROVISIONING
        assert isinstance(outcome.error, MissingCommandError)
        engine.create_container.assert_not_awaited()
        engine.start_container.assert_not_awaited()

    async def test_duplicate_name_stops_before_start(
        self, engine: MagicMock, console: Console, project: Path
    ) -> None:
        engine.create_container = AsyncMock(side_effect=EngineConflictError("in use", status_code=409))

        outcome = await RunOrchestrator(engine, console).run(str(project))

        assert outcome.state is RunState.FAILED
        assert isinstance(outcome.error, DuplicateContainerError)
        assert outcome.error.name == "resin_myapp"
        engine.start_container.assert_not_awaited()
        engine.inspect_container.assert_not_awaited()

    async def test_start_failure_leaves_container_created(
        self, engine: MagicMock, console: Console, project: Path
    ) -> None:
        engine.start_container = AsyncMock(side_effect=EngineError("exec format error", status_code=500))

        outcome = await RunOrchestrator(engine, console).run(str(project))

        assert outcome.failed_state is RunState.LAUNCHING
        assert isinstance(outcome.error, EngineError)
        assert outcome.handle is not None
        engine.inspect_container.assert_not_awaited()

    async def test_report_failure_keeps_started_container(
        self, engine: MagicMock, console: Console, project: Path
    ) -> None:
        engine.inspect_container = AsyncMock(side_effect=EngineError("gone", status_code=404))

        outcome = await RunOrchestrator(engine, console).run(str(project))

        assert outcome.failed_state is RunState.REPORTING
        assert outcome.status is None
        engine.start_container.assert_awaited_once()

    async def test_unexpected_errors_propagate(
        self, engine: MagicMock, console: Console, project: Path
    ) -> None:
        engine.inspect_image = AsyncMock(side_effect=KeyError("Id"))

        with pytest.raises(KeyError):
            await RunOrchestrator(engine, console).run(str(project))

    async def test_runs_are_independent(
        self, engine: MagicMock, console: Console, project: Path, tmp_path: Path
    ) -> None:
        orchestrator = RunOrchestrator(engine, console)

        failed = await orchestrator.run(str(tmp_path / "unbuilt"))
        succeeded = await orchestrator.run(str(project))

        assert failed.state is RunState.FAILED
        assert succeeded.ok
        assert succeeded.error is None
        assert engine.create_container.await_count == 1
