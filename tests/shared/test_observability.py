# tests\shared\test_observability.py
import json
import logging

import pytest
import structlog
from fastapi import FastAPI
from opentelemetry.sdk.trace import TracerProvider

from portfolio.shared.config import Settings
from portfolio.shared.logging_config import configure_logging
from portfolio.shared.telemetry import build_tracer_provider, instrument_fastapi, setup_telemetry


@pytest.fixture
def restore_logging():
    """Puts the root logger back the way pytest set it up."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.contextvars.clear_contextvars()
    root.handlers[:] = handlers
    root.setLevel(level)


def json_lines(text):
    return [json.loads(line) for line in text.splitlines() if line.strip()]


class TestConfigureLogging:

    def test_stdlib_records_carry_request_context(self, capsys, restore_logging):
        """
        Scenario: uvicorn logs while a request is being handled.
        Expected: Its record is rendered like ours, with the bound request_id.
        """
        configure_logging(Settings(_env_file=None, LOG_FORMAT="json"))
        structlog.contextvars.bind_contextvars(request_id="req-42", path="/projects")

        logging.getLogger("uvicorn.error").warning("server busy")

        (line,) = json_lines(capsys.readouterr().out)
        assert line["event"] == "server busy"
        assert line["logger"] == "uvicorn.error"
        assert line["level"] == "warning"
        assert line["request_id"] == "req-42"
        assert line["path"] == "/projects"
        assert line["trace_id"] is None

    def test_structlog_events_share_the_handler(self, capsys, restore_logging):
        configure_logging(Settings(_env_file=None, LOG_FORMAT="json"))

        structlog.get_logger("portfolio.pages").info("page_built", posts=2)

        (line,) = json_lines(capsys.readouterr().out)
        assert line["event"] == "page_built"
        assert line["posts"] == 2
        assert "timestamp" in line

    def test_trace_ids_inside_a_span(self, capsys, restore_logging):
        configure_logging(Settings(_env_file=None, LOG_FORMAT="json"))
        tracer = TracerProvider().get_tracer(__name__)

        with tracer.start_as_current_span("render") as span:
            logging.getLogger("httpx").info("HTTP Request: GET /api/v1/projects")
            expected = format(span.get_span_context().trace_id, "032x")

        (line,) = json_lines(capsys.readouterr().out)
        assert line["trace_id"] == expected
        assert len(line["span_id"]) == 16

    def test_level_filters_records(self, capsys, restore_logging):
        configure_logging(Settings(_env_file=None, LOG_FORMAT="json", LOG_LEVEL="warning"))

        logging.getLogger("httpx").info("quiet")

        assert capsys.readouterr().out == ""

    def test_console_renderer(self, capsys, restore_logging):
        configure_logging(Settings(_env_file=None, LOG_FORMAT="console"))

        logging.getLogger("uvicorn.error").warning("server busy")

        out = capsys.readouterr().out
        assert "server busy" in out
        with pytest.raises(ValueError):
            json.loads(out)

    def test_reconfigure_replaces_handler(self, restore_logging):
        first = configure_logging(Settings(_env_file=None))
        second = configure_logging(Settings(_env_file=None))

        handlers = logging.getLogger().handlers
        assert second in handlers
        assert first not in handlers


class TestTelemetry:

    def test_disabled_without_endpoint(self, monkeypatch):
        monkeypatch.delenv("OTEL_EXPORTER_OTLP_ENDPOINT", raising=False)
        config = Settings(_env_file=None)

        assert setup_telemetry(config) is None
        assert instrument_fastapi(FastAPI(), config) is False

    def test_provider_resource_and_sampler(self):
        config = Settings(
            _env_file=None,
            APP_ENV="production",
            OTEL_EXPORTER_OTLP_ENDPOINT="http://collector:4318/",
            OTEL_TRACES_SAMPLER_RATIO=0.25,
        )

        provider = build_tracer_provider(config)
        try:
            attributes = provider.resource.attributes
            assert attributes["service.name"] == "portfolio-site"
            assert attributes["deployment.environment"] == "production"
            assert "TraceIdRatioBased{0.25}" in provider.sampler.get_description()
        finally:
            provider.shutdown()
