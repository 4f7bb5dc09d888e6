"""Tests for telemetry bootstrap helpers."""

from __future__ import annotations

from opentelemetry import trace
from opentelemetry.sdk.trace.sampling import ParentBased

from utils import telemetry


def test_setup_tracing_skips_without_endpoint(monkeypatch) -> None:
    """No collector endpoint means tracing is not initialised."""

    monkeypatch.delenv("OTEL_EXPORTER_OTLP_ENDPOINT", raising=False)
    monkeypatch.setenv("OTEL_TRACES_ENABLED", "1")
    telemetry._INITIALISED = False

    calls: list[object] = []

    def fake_set_tracer_provider(provider: object) -> None:
        calls.append(provider)

    monkeypatch.setattr(trace, "set_tracer_provider", fake_set_tracer_provider)

    telemetry.setup_tracing(force=True)

    assert calls == []
    assert telemetry._INITIALISED is False


def test_setup_tracing_respects_disable_flag(monkeypatch) -> None:
    monkeypatch.setenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://collector:4318/v1/traces")
    monkeypatch.setenv("OTEL_TRACES_ENABLED", "false")
    telemetry._INITIALISED = False
    calls: list[object] = []
    monkeypatch.setattr(trace, "set_tracer_provider", calls.append)

    telemetry.setup_tracing(force=True)

    assert calls == []
    assert telemetry._INITIALISED is False


def test_build_otlp_config_parses_environment(monkeypatch) -> None:
    monkeypatch.setenv("OTEL_EXPORTER_OTLP_ENDPOINT", " http://collector:4318/v1/traces ")
    monkeypatch.setenv("OTEL_EXPORTER_OTLP_HEADERS", "authorization=Bearer abc, x-team = sound ,broken")
    monkeypatch.setenv("OTEL_EXPORTER_OTLP_TIMEOUT", "7.5")
    monkeypatch.delenv("OTEL_EXPORTER_OTLP_CERTIFICATE", raising=False)

    config = telemetry.build_otlp_config()

    assert config is not None
    assert config.endpoint == "http://collector:4318/v1/traces"
    assert config.headers == {"authorization": "Bearer abc", "x-team": "sound"}
    assert config.timeout == 7
    assert config.certificate_file is None


def test_sampler_ratio_is_clamped(monkeypatch) -> None:
    assert telemetry._coerce_ratio("2.5", default=1.0) == 1.0
    assert telemetry._coerce_ratio("-1", default=1.0) == 0.0
    assert telemetry._coerce_ratio("nope", default=0.25) == 0.25


def test_resource_names_the_intake_service(monkeypatch) -> None:
    monkeypatch.delenv("OTEL_SERVICE_NAME", raising=False)
    monkeypatch.setenv("INTAKE_ENVIRONMENT", "staging")

    attributes = telemetry._build_resource().attributes

    assert attributes["service.name"] == "geluidsintake-app"
    assert attributes["service.namespace"] == telemetry.SERVICE_NAMESPACE
    assert attributes["deployment.environment"] == "staging"


def test_unknown_sampler_falls_back_to_parent_based(monkeypatch) -> None:
    monkeypatch.setenv("OTEL_TRACES_SAMPLER", "sometimes")
    monkeypatch.setenv("OTEL_TRACES_SAMPLER_ARG", "0.5")

    sampler = telemetry._build_sampler()

    assert isinstance(sampler, ParentBased)


def test_wizard_tracer_is_available_without_exporter() -> None:
    tracer = telemetry.get_wizard_tracer()

    with tracer.start_as_current_span("wizard.advance") as span:
        span.set_attribute("wizard.from_step", "main")
