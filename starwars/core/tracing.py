"""
OpenTelemetry Distributed Tracing Configuration

Architecture:
  App (OTel SDK) → OTLP/gRPC (4317) → Collector

Tracing is opt-in (`STARWARS_OTEL_ENABLED=true`). When disabled every
helper below is a no-op so request handling pays nothing for it.
"""

import logging

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from starwars.core.config import get_settings

logger = logging.getLogger(__name__)

_tracer_provider = None


def configure_tracing(
    service_name: str,
    service_version: str,
    environment: str = "dev",
) -> bool:
    """
    Install the global TracerProvider.

    Returns:
        bool: True when tracing was configured
    """
    global _tracer_provider

    settings = get_settings()
    if not settings.otel_enabled:
        logger.info("OpenTelemetry tracing disabled (STARWARS_OTEL_ENABLED=false)")
        return False

    # Lazy imports: the exporter pulls in grpc
    from opentelemetry import trace
    from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
    from opentelemetry.sdk.resources import Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import BatchSpanProcessor
    from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

    try:
        resource = Resource.create(
            {
                "service.name": service_name,
                "service.version": service_version,
                "deployment.environment": environment,
            }
        )
        _tracer_provider = TracerProvider(
            resource=resource,
            sampler=TraceIdRatioBased(settings.otel_sampling_rate),
        )
        _tracer_provider.add_span_processor(
            BatchSpanProcessor(
                OTLPSpanExporter(endpoint=settings.otel_exporter_endpoint, insecure=True),
                max_queue_size=2048,
                max_export_batch_size=512,
                schedule_delay_millis=1000,
            )
        )
        trace.set_tracer_provider(_tracer_provider)
    except Exception:
        logger.exception("Failed to configure tracing")
        return False

    logger.info(
        "OpenTelemetry tracing configured",
        extra={
            "service": service_name,
            "endpoint": settings.otel_exporter_endpoint,
            "sampling_rate": settings.otel_sampling_rate,
        },
    )
    return True


def instrument_fastapi(app: FastAPI) -> None:
    """FastAPI auto-instrumentation (one span per request)."""
    if not get_settings().otel_enabled:
        return

    from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

    FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ready,metrics")
    logger.info("FastAPI instrumentation enabled")


def instrument_sqlalchemy(engine: Engine) -> None:
    """SQLAlchemy auto-instrumentation (one span per statement)."""
    if not get_settings().otel_enabled:
        return

    from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor

    SQLAlchemyInstrumentor().instrument(engine=engine)
    logger.info("SQLAlchemy instrumentation enabled")


def shutdown_tracing() -> None:
    """Flush pending spans (graceful shutdown)."""
    global _tracer_provider

    if _tracer_provider is None:
        return
    try:
        _tracer_provider.shutdown()
        logger.info("OpenTelemetry tracing shutdown complete")
    except Exception:
        logger.exception("Error shutting down tracing")
    finally:
        _tracer_provider = None
