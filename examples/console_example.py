"""Run a traced, metered workload and shut the providers down on exit.

Spans go to the console; the teardown lines are printed by stdlib logging and
also routed into the logger provider before it is shut down.
"""

import logging

from opentelemetry.sdk._logs.export import ConsoleLogExporter
from opentelemetry.sdk.metrics.export import ConsoleMetricExporter
from opentelemetry.sdk.trace.export import ConsoleSpanExporter

from otelproviders import (
    attach_logging_handler,
    configure_providers,
    detach_logging_handler,
)


def main():
    logging.basicConfig(level=logging.INFO)

    providers = configure_providers(
        service_name="console-example",
        span_exporter=ConsoleSpanExporter(),
        metric_exporter=ConsoleMetricExporter(),
        log_exporter=ConsoleLogExporter(),
    )
    handler = attach_logging_handler(providers, level=logging.INFO)

    try:
        with providers:
            tracer = providers.trace.get_tracer(__name__)
            counter = providers.metric.get_meter(__name__).create_counter("example.iterations")

            for i in range(3):
                with tracer.start_as_current_span("iteration") as span:
                    span.set_attribute("iteration", i)
                    counter.add(1)
                    logging.getLogger(__name__).info("iteration %d done", i)
    finally:
        # the logger provider is shut down by now
        detach_logging_handler(handler)


if __name__ == "__main__":
    main()
