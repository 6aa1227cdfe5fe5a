"""Run orchestration: locate, provision, launch, report.

Each step needs the previous step's result, so they run strictly in order
and the first :class:`~resin_cli.errors.RunError` ends the run.  Nothing is
rolled back: a container that was created before a later step failed is
left in the engine for the user to inspect.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from resin_cli.errors import RunError
from resin_cli.runtime.containers import launch, provision
from resin_cli.runtime.project import derive_name, locate_image
from resin_cli.runtime.reporter import report
from resin_cli.utils.telemetry import (
    ATTR_CONTAINER_ID,
    ATTR_CONTAINER_NAME,
    ATTR_IMAGE,
    ATTR_PROJECT,
    ATTR_RUN_STATE,
    get_tracer,
)

if TYPE_CHECKING:
    from rich.console import Console

    from resin_cli.engine.client import ContainerEngine
    from resin_cli.engine.models import ContainerHandle, ContainerStatus

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)


class RunState(str, Enum):
    """Where a run currently is."""

    IDLE = "idle"
    LOCATING = "locating"
    PROVISIONING = "provisioning"
    LAUNCHING = "launching"
    REPORTING = "reporting"
    DONE = "done"
    FAILED = "failed"


@dataclass
class RunOutcome:
    """Everything a single ``run`` produced, up to the point it stopped."""

    project: Path
    state: RunState = RunState.IDLE
    image_id: str | None = None
    container_name: str | None = None
    handle: ContainerHandle | None = None
    status: ContainerStatus | None = None
    error: RunError | None = None
    failed_state: RunState | None = None

    @property
    def ok(self) -> bool:
        return self.state is RunState.DONE


class RunOrchestrator:
    """Runs a previously built project in an emulated container.

    Usage::

        async with DockerEngine(EngineConfig.from_env()) as engine:
            outcome = await RunOrchestrator(engine, console).run("./myapp")
            if not outcome.ok:
                print(outcome.error)
    """

    def __init__(self, engine: ContainerEngine, console: Console) -> None:
        self.engine = engine
        self.console = console

    async def run(self, path: str | None = None) -> RunOutcome:
        """Run the project at *path* (default: the current directory).

        :class:`RunError` failures are captured in the returned outcome;
        anything else propagates.
        """
        outcome = RunOutcome(project=Path(os.path.abspath(path or ".")))

        with _tracer.start_as_current_span("resin.run") as span:
            span.set_attribute(ATTR_PROJECT, str(outcome.project))
            try:
                await self._run_steps(outcome)
            except RunError as exc:
                outcome.failed_state = outcome.state
                outcome.error = exc
                self._enter(outcome, RunState.FAILED)
                span.record_exception(exc)
            span.set_attribute(ATTR_RUN_STATE, outcome.state.value)

        return outcome

    async def _run_steps(self, outcome: RunOutcome) -> None:
        self._enter(outcome, RunState.LOCATING)
        with _tracer.start_as_current_span("resin.run.locate") as span:
            outcome.image_id = locate_image(outcome.project)
            outcome.container_name = derive_name(outcome.project)
            span.set_attribute(ATTR_IMAGE, outcome.image_id)
            span.set_attribute(ATTR_CONTAINER_NAME, outcome.container_name)

        self._enter(outcome, RunState.PROVISIONING)
        with _tracer.start_as_current_span("resin.run.provision") as span:
            handle = await provision(self.engine, outcome.image_id, outcome.container_name)
            outcome.handle = handle
            span.set_attribute(ATTR_CONTAINER_ID, handle.id)

        self._enter(outcome, RunState.LAUNCHING)
        with _tracer.start_as_current_span("resin.run.launch"):
            await launch(self.engine, handle)

        self._enter(outcome, RunState.REPORTING)
        with _tracer.start_as_current_span("resin.run.report"):
            outcome.status = await report(self.engine, handle, self.console)

        self._enter(outcome, RunState.DONE)

    @staticmethod
    def _enter(outcome: RunOutcome, state: RunState) -> None:
        logger.debug("run %s: %s -> %s", outcome.project, outcome.state.value, state.value)
        outcome.state = state
