"""Run locally built resin applications under ARM emulation."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from resin_cli.runtime.orchestrator import RunOrchestrator as RunOrchestrator

_RUNTIME_EXPORTS = {
    "RunOrchestrator": "resin_cli.runtime.orchestrator",
}


def __getattr__(name: str) -> object:
    module_path = _RUNTIME_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'resin_cli' has no attribute {name!r}")
