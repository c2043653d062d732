# src/weather_service/logging_config.py

import logging
import sys
import os
from opentelemetry import trace


class TraceIdFilter(logging.Filter):
    """Stamp each record with the active OpenTelemetry trace and span ids.

    Records emitted outside a span get `-` for both.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        ctx = trace.get_current_span().get_span_context()
        if ctx.is_valid:
            record.trace_id = format(ctx.trace_id, "032x")
            record.span_id = format(ctx.span_id, "016x")
        else:
            record.trace_id = "-"
            record.span_id = "-"
        return True


class SafeFormatter(logging.Formatter):
    """Formatter that tolerates records which skipped TraceIdFilter."""

    def format(self, record):
        if not hasattr(record, "trace_id"):
            record.trace_id = "-"
        if not hasattr(record, "span_id"):
            record.span_id = "-"
        return super().format(record)


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [trace=%(trace_id)s span=%(span_id)s] - %(message)s"


def configure_logging():
    """
    Configure root logging to stdout.
    Level comes from LOG_LEVEL (default INFO).
    """
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(SafeFormatter(LOG_FORMAT))
    handler.addFilter(TraceIdFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # uvicorn logs every request line on its own
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
