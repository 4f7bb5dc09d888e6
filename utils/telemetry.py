"""OpenTelemetry tracing for the intake wizard.

Spans for wizard transitions are exported over OTLP/HTTP once
``OTEL_EXPORTER_OTLP_ENDPOINT`` is set. Without an endpoint the API's no-op
tracer stays in place and :func:`get_wizard_tracer` still works.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Callable, Mapping

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import (
    ALWAYS_OFF,
    ALWAYS_ON,
    ParentBased,
    Sampler,
    TraceIdRatioBased,
)

LOGGER = logging.getLogger("geluidsintake.telemetry")

WIZARD_TRACER_NAME = "geluidsintake.wizard"
SERVICE_NAMESPACE = "geluidsintake"
_DEFAULT_SERVICE_NAME = "geluidsintake-app"
_DISABLED_VALUES = frozenset({"0", "false", "off", "no"})

_INITIALISED = False

_SAMPLERS: Mapping[str, Callable[[float], Sampler]] = {
    "parentbased_traceidratio": lambda ratio: ParentBased(TraceIdRatioBased(ratio)),
    "traceidratio": TraceIdRatioBased,
    "always_on": lambda _ratio: ALWAYS_ON,
    "always_off": lambda _ratio: ALWAYS_OFF,
}


@dataclass(frozen=True)
class OtlpConfig:
    """Where and how intake spans are shipped."""

    endpoint: str
    headers: Mapping[str, str] | None = None
    timeout: int | None = None
    certificate_file: str | None = None


def _env(name: str) -> str:
    return os.getenv(name, "").strip()


def _parse_headers(raw: str) -> dict[str, str]:
    """``key=value`` pairs separated by commas; fragments without ``=`` are skipped."""

    pairs = (fragment.split("=", 1) for fragment in raw.split(",") if "=" in fragment)
    return {key.strip(): value.strip() for key, value in pairs if key.strip()}


def _coerce_ratio(raw: str, *, default: float) -> float:
    if not raw:
        return default
    try:
        return max(0.0, min(1.0, float(raw)))
    except ValueError:
        LOGGER.warning("Invalid OTEL_TRACES_SAMPLER_ARG '%s'; using %.2f", raw, default)
        return default


def _build_sampler() -> Sampler:
    name = _env("OTEL_TRACES_SAMPLER").lower() or "parentbased_traceidratio"
    ratio = _coerce_ratio(_env("OTEL_TRACES_SAMPLER_ARG"), default=1.0)
    factory = _SAMPLERS.get(name)
    if factory is None:
        LOGGER.warning("Unknown OTEL_TRACES_SAMPLER '%s'; sampling parent-based by ratio", name)
        factory = _SAMPLERS["parentbased_traceidratio"]
    return factory(ratio)


def _parse_timeout(raw: str) -> int | None:
    if not raw:
        return None
    try:
        return int(float(raw))
    except ValueError:
        LOGGER.warning("Invalid OTEL_EXPORTER_OTLP_TIMEOUT '%s'; ignoring", raw)
        return None


def build_otlp_config() -> OtlpConfig | None:
    """Read the exporter settings, or ``None`` when no endpoint is configured."""

    endpoint = _env("OTEL_EXPORTER_OTLP_ENDPOINT")
    if not endpoint:
        return None
    return OtlpConfig(
        endpoint=endpoint,
        headers=_parse_headers(_env("OTEL_EXPORTER_OTLP_HEADERS")) or None,
        timeout=_parse_timeout(_env("OTEL_EXPORTER_OTLP_TIMEOUT")),
        certificate_file=_env("OTEL_EXPORTER_OTLP_CERTIFICATE") or None,
    )


def _build_resource() -> Resource:
    attributes = {
        "service.name": _env("OTEL_SERVICE_NAME") or _DEFAULT_SERVICE_NAME,
        "service.namespace": SERVICE_NAMESPACE,
    }
    environment = _env("INTAKE_ENVIRONMENT")
    if environment:
        attributes["deployment.environment"] = environment
    return Resource.create(attributes)


def setup_tracing(*, force: bool = False) -> None:
    """Install the OTLP tracer provider once per process."""

    global _INITIALISED
    if _INITIALISED and not force:
        return
    if _env("OTEL_TRACES_ENABLED").lower() in _DISABLED_VALUES:
        LOGGER.info("Intake tracing disabled via OTEL_TRACES_ENABLED")
        return
    config = build_otlp_config()
    if config is None:
        LOGGER.debug("No OTLP endpoint configured; intake spans stay local")
        return

    protocol = _env("OTEL_EXPORTER_OTLP_PROTOCOL").lower()
    if protocol and protocol not in {"http", "http/protobuf"}:
        LOGGER.warning("Unsupported OTEL_EXPORTER_OTLP_PROTOCOL '%s'; exporting over http/protobuf", protocol)

    resource = _build_resource()
    provider = TracerProvider(resource=resource, sampler=_build_sampler())
    provider.add_span_processor(
        BatchSpanProcessor(
            OTLPSpanExporter(
                endpoint=config.endpoint,
                headers=dict(config.headers) if config.headers else None,
                timeout=config.timeout,
                certificate_file=config.certificate_file,
            )
        )
    )
    trace.set_tracer_provider(provider)
    _INITIALISED = True
    LOGGER.info("Exporting intake spans for '%s' to %s", resource.attributes["service.name"], config.endpoint)


def get_wizard_tracer() -> trace.Tracer:
    """Tracer used for ``wizard.advance`` and ``wizard.retreat`` spans."""

    return trace.get_tracer(WIZARD_TRACER_NAME)


__all__ = ["OtlpConfig", "WIZARD_TRACER_NAME", "build_otlp_config", "get_wizard_tracer", "setup_tracing"]
