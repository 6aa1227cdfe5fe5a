"""The ``run`` workflow: locate, provision, launch, report."""

from resin_cli.runtime.containers import launch, provision
from resin_cli.runtime.orchestrator import RunOrchestrator, RunOutcome, RunState
from resin_cli.runtime.project import derive_name, locate_image
from resin_cli.runtime.reporter import report

__all__ = [
    "RunOrchestrator",
    "RunOutcome",
    "RunState",
    "derive_name",
    "launch",
    "locate_image",
    "provision",
    "report",
]
