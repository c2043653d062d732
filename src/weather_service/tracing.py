# src/weather_service/tracing.py

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    SimpleSpanProcessor,
    ConsoleSpanExporter,
)


def configure_tracing(service_name: str = "weather-service") -> None:
    """
    Configure OpenTelemetry tracing with a console exporter.

    Spans are printed to stdout. Swap ConsoleSpanExporter for an OTLP
    exporter to ship them elsewhere; callers don't change.
    """
    # If there's already a provider, don't reconfigure
    if isinstance(trace.get_tracer_provider(), TracerProvider):
        return

    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    # SimpleSpanProcessor exports synchronously. BatchSpanProcessor's worker
    # thread can write to stdout after pytest has closed its capture file.
    provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
