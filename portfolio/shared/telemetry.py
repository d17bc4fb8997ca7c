# portfolio/shared/telemetry.py
from typing import Optional

import structlog

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from portfolio import __version__
from portfolio.shared.config import Settings, settings

logger = structlog.get_logger()

# Health checks hit every few seconds; their spans are dropped.
EXCLUDED_URLS = "health/live,health/ready"

_provider: Optional[TracerProvider] = None

def build_tracer_provider(config: Settings = settings) -> TracerProvider:
    """
    TracerProvider exporting to `{OTEL_EXPORTER_OTLP_ENDPOINT}/v1/traces`.

    Sampling follows the parent span when there is one, otherwise keeps
    `OTEL_TRACES_SAMPLER_RATIO` of new traces.
    """
    resource = Resource.create(attributes={
        "service.name": config.OTEL_SERVICE_NAME,
        "deployment.environment": config.APP_ENV.value,
        "service.version": __version__,
    })
    sampler = ParentBased(TraceIdRatioBased(config.OTEL_TRACES_SAMPLER_RATIO))
    provider = TracerProvider(resource=resource, sampler=sampler)

    endpoint = config.OTEL_EXPORTER_OTLP_ENDPOINT.rstrip("/")
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{endpoint}/v1/traces")))

    if config.DEBUG:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    return provider

def setup_telemetry(config: Settings = settings) -> Optional[TracerProvider]:
    """
    Installs the global tracer provider once per process.
    Returns None (tracing off) without an OTLP endpoint.
    """
    global _provider

    if not config.OTEL_EXPORTER_OTLP_ENDPOINT:
        logger.info("telemetry_disabled", reason="no OTEL_EXPORTER_OTLP_ENDPOINT")
        return None

    if _provider is None:
        _provider = build_tracer_provider(config)
        trace.set_tracer_provider(_provider)
        logger.info(
            "telemetry_init",
            service=config.OTEL_SERVICE_NAME,
            endpoint=config.OTEL_EXPORTER_OTLP_ENDPOINT,
            sampler_ratio=config.OTEL_TRACES_SAMPLER_RATIO,
        )
    return _provider

def shutdown_telemetry() -> None:
    """Flushes pending spans; called from the application lifespan."""
    global _provider
    if _provider is not None:
        _provider.shutdown()
        _provider = None

def instrument_fastapi(app, config: Settings = settings) -> bool:
    """
    Auto-instruments the FastAPI application to trace incoming HTTP requests,
    health checks excluded.
    """
    if not config.OTEL_EXPORTER_OTLP_ENDPOINT:
        return False
    FastAPIInstrumentor.instrument_app(app, excluded_urls=EXCLUDED_URLS)
    return True

def get_tracer(name: str):
    return trace.get_tracer(name)
