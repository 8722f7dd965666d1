"""OTel provider configuration for :mod:`otelproviders`.

Provides :func:`configure_providers`, which builds the tracer, meter and
logger providers over one shared resource and returns them as an
:class:`~otelproviders.providers.OtelProviders` bundle.
"""

from opentelemetry.sdk._logs import LoggerProvider
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor, LogRecordExporter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import (
    MetricExporter,
    MetricReader,
    PeriodicExportingMetricReader,
)
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SpanExporter

from .keys import SERVICE_NAME, SERVICE_VERSION
from .providers import OtelProviders


def configure_providers(
    service_name: str = "otelproviders",
    service_version: str = "",
    span_exporter: SpanExporter | None = None,
    metric_exporter: MetricExporter | None = None,
    log_exporter: LogRecordExporter | None = None,
) -> OtelProviders:
    """
    Configure the three OTel providers and bundle them.

    Creates TracerProvider, MeterProvider and LoggerProvider with the
    specified resource attributes and exporters.  Returns the bundle for
    explicit injection -- does NOT set global providers.  Processors and
    readers use the SDK's default batching and export intervals.

    Args:
        service_name: Service identifier for resource attributes.
        service_version: Service version for resource attributes.
        span_exporter: Optional span exporter
            (e.g., OTLPSpanExporter, ConsoleSpanExporter).
        metric_exporter: Optional metric exporter, polled by a
            PeriodicExportingMetricReader.  Without one the meter provider
            has no reader.
        log_exporter: Optional log exporter
            (e.g., OTLPLogExporter, ConsoleLogExporter).

    Returns:
        OtelProviders bundling the three providers.

    Example:
        >>> from opentelemetry.sdk.trace.export import ConsoleSpanExporter
        >>>
        >>> with configure_providers(
        ...     service_name="my-app",
        ...     span_exporter=ConsoleSpanExporter(),
        ... ) as providers:
        ...     tracer = providers.trace.get_tracer(__name__)
    """
    resource = Resource.create(
        {
            SERVICE_NAME: service_name,
            SERVICE_VERSION: service_version,
        }
    )

    tracer_provider = TracerProvider(resource=resource)
    if span_exporter:
        tracer_provider.add_span_processor(BatchSpanProcessor(span_exporter))

    readers: list[MetricReader] = []
    if metric_exporter:
        readers.append(PeriodicExportingMetricReader(metric_exporter))
    meter_provider = MeterProvider(resource=resource, metric_readers=readers)

    logger_provider = LoggerProvider(resource=resource)
    if log_exporter:
        logger_provider.add_log_record_processor(
            BatchLogRecordProcessor(log_exporter)
        )

    return OtelProviders(
        log=logger_provider,
        metric=meter_provider,
        trace=tracer_provider,
    )
