"""Logging and tracing setup for the lottery API."""

from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Any

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from lottery.core.config import Settings

LOGGER_NAME = "lottery"

_active_provider: TracerProvider | None = None


def resolve_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its numeric value, INFO when unknown."""

    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def build_logging_config(settings: Settings) -> dict[str, Any]:
    level = resolve_level(settings.log_level)
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"plain": {"format": settings.log_format}},
        "handlers": {
            "console": {"class": "logging.StreamHandler", "formatter": "plain", "level": level},
        },
        "root": {"handlers": ["console"], "level": level},
    }


def configure_logging(settings: Settings) -> logging.Logger:
    dictConfig(build_logging_config(settings))
    logger = logging.getLogger(LOGGER_NAME)
    logger.info("Logging configured for %s (%s)", settings.app_name, settings.environment)
    return logger


def parse_headers(header_string: str | None) -> dict[str, str]:
    """Parse ``key=value`` pairs separated by commas, skipping malformed items."""

    if not header_string:
        return {}
    headers: dict[str, str] = {}
    for item in header_string.split(","):
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            continue
        headers[key.strip()] = value.strip()
    return headers


def build_span_exporter(settings: Settings) -> OTLPSpanExporter:
    options: dict[str, Any] = {}
    if settings.otel_exporter_otlp_endpoint:
        options["endpoint"] = settings.otel_exporter_otlp_endpoint
    headers = parse_headers(settings.otel_exporter_otlp_headers)
    if headers:
        options["headers"] = headers
    return OTLPSpanExporter(**options)


def init_tracer(settings: Settings) -> TracerProvider | None:
    """Install a tracer provider exporting spans over OTLP/HTTP.

    Returns ``None`` when tracing is disabled or a provider installed by an
    earlier call is still active; only the caller that received the
    provider shuts it down.
    """

    global _active_provider

    if not settings.otel_enabled or _active_provider is not None:
        return None

    provider = TracerProvider(resource=Resource.create({"service.name": settings.otel_service_name}))
    provider.add_span_processor(BatchSpanProcessor(build_span_exporter(settings)))
    trace.set_tracer_provider(provider)
    _active_provider = provider
    logging.getLogger(LOGGER_NAME).info("Tracing enabled for %s", settings.otel_service_name)
    return provider


def shutdown_tracer(provider: TracerProvider | None) -> None:
    global _active_provider

    if provider is None:
        return
    provider.shutdown()
    if provider is _active_provider:
        _active_provider = None
