"""Tracing for ``resin run``.

The orchestrator opens one span per step through :func:`get_tracer`. With
only ``opentelemetry-api`` installed those spans are no-ops; ``--telemetry``
and ``--otlp-endpoint`` call :func:`enable_tracing`, which needs the ``otel``
extra.
"""

from __future__ import annotations

from opentelemetry import trace

ATTR_PROJECT = "resin.project"
ATTR_IMAGE = "resin.image"
ATTR_CONTAINER_NAME = "resin.container.name"
ATTR_CONTAINER_ID = "resin.container.id"
ATTR_RUN_STATE = "resin.run.state"

SERVICE_NAME = "resin"


def get_tracer(name: str) -> trace.Tracer:
    return trace.get_tracer(name)


def enable_tracing(*, to_console: bool, otlp_endpoint: str | None = None) -> None:
    """Install an SDK tracer provider exporting ``resin`` spans.

    Spans go to stdout when *to_console* is set and to an OTLP/gRPC
    collector when *otlp_endpoint* is given.

    Raises:
        ImportError: The ``otel`` extra (or the OTLP exporter) is missing.
    """
    try:
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import (
            BatchSpanProcessor,
            ConsoleSpanExporter,
            SimpleSpanProcessor,
        )
    except ImportError as exc:
        raise ImportError(
            "Tracing needs opentelemetry-sdk: pip install resin-cli[otel]"
        ) from exc

    provider = TracerProvider(resource=Resource.create({"service.name": SERVICE_NAME}))
    if to_console:
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
    if otlp_endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
        except ImportError as exc:
            raise ImportError(
                "OTLP export needs opentelemetry-exporter-otlp: pip install resin-cli[otel]"
            ) from exc
        provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))

    trace.set_tracer_provider(provider)
