from __future__ import annotations

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from libsearch import __version__
from libsearch.core.config import settings

# Probed by load balancers; not worth a trace each
UNTRACED_URLS = "health"


def init_otel(app) -> bool:
    """Trace inbound searches and the per-library catalog requests they fan out to.

    Each library fetch becomes a child span of the search, so a slow library
    shows up directly in the trace.
    """
    if not settings.otel_enabled:
        return False

    provider = TracerProvider(
        resource=Resource.create(
            {SERVICE_NAME: settings.api_name, SERVICE_VERSION: __version__}
        )
    )
    provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=settings.otel_otlp_endpoint or None))
    )
    trace.set_tracer_provider(provider)

    FastAPIInstrumentor.instrument_app(app, excluded_urls=UNTRACED_URLS)
    HTTPXClientInstrumentor().instrument(tracer_provider=provider)
    return True
