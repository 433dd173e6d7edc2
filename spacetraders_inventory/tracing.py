import logging

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from .__version__ import VERSION

logger = logging.getLogger(__name__)

SERVICE_NAME = "spacetraders-inventory"


def new_resource(environment: str = "demo") -> Resource:
    "describes this application in the traces"
    return Resource.create(
        {
            "service.name": SERVICE_NAME,
            "service.version": f"v{VERSION}",
            "environment": environment,
        }
    )


def configure_tracing(endpoint: str = None, environment: str = "demo") -> TracerProvider:
    """Installs the global tracer provider.

    Args:
        `endpoint` (str): Optional - OTLP/HTTP collector URL. Without one spans are created but not exported.
        `environment` (str): Optional - tag attached to every span. Defaults to "demo".

    Returns:
        The provider, so the caller can shut it down (and flush pending spans) on exit.
    """
    provider = TracerProvider(resource=new_resource(environment))
    if endpoint:
        provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint)))
        logger.info("Exporting traces to %s", endpoint)
    else:
        logger.info("No tracing endpoint configured, spans will not be exported")
    trace.set_tracer_provider(provider)
    return provider
