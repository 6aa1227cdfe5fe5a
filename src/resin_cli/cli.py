"""resin CLI entrypoint."""

from __future__ import annotations

import logging

import click
from rich.logging import RichHandler

from resin_cli import __version__
from resin_cli.cli_commands._output import err_console
from resin_cli.engine.models import EngineConfig


@click.group()
@click.version_option(version=__version__, prog_name="resin")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option("--telemetry", is_flag=True, help="Export tracing spans to the console.")
@click.option(
    "--otlp-endpoint",
    envvar="OTEL_EXPORTER_OTLP_ENDPOINT",
    default=None,
    help="Export tracing spans to this OTLP/gRPC collector.",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, telemetry: bool, otlp_endpoint: str | None) -> None:
    """Run resin applications locally."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )

    if telemetry or otlp_endpoint:
        from resin_cli.utils.telemetry import enable_tracing

        try:
            enable_tracing(to_console=telemetry, otlp_endpoint=otlp_endpoint)
        except ImportError as exc:
            raise click.UsageError(str(exc)) from exc

    ctx.obj = EngineConfig.from_env()


# Register subcommands
from resin_cli.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
