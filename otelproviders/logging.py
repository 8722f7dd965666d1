"""Route standard-library logging into a bundle's logger provider.

:func:`attach_logging_handler` installs an OTel ``LoggingHandler`` bound to
``providers.log`` so that records logged through :mod:`logging` -- including
the teardown lines from :mod:`otelproviders.providers` -- reach the OTel log
pipeline.  Because the logger provider is shut down last, the tracer and meter
teardown lines are still exported.
"""

import logging

try:
    from opentelemetry.instrumentation.logging.handler import LoggingHandler
except ImportError:
    # opentelemetry-instrumentation-logging releases before the handler moved
    # out of the SDK
    from opentelemetry.sdk._logs import LoggingHandler

from .providers import OtelProviders

# The SDK logs its own warnings (e.g. "already shutdown") through these
# loggers; feeding them back into the pipeline would recurse.
_SDK_LOGGER_PREFIX = "opentelemetry"


def _drop_sdk_records(record: logging.LogRecord) -> bool:
    return not record.name.startswith(_SDK_LOGGER_PREFIX)


def attach_logging_handler(
    providers: OtelProviders,
    level: int = logging.NOTSET,
    logger: logging.Logger | None = None,
) -> LoggingHandler:
    """Attach an OTel ``LoggingHandler`` for ``providers.log`` to a stdlib logger.

    Args:
        providers: Bundle whose logger provider receives the records.
        level: Minimum level handled (default: everything the logger passes).
        logger: Logger to attach to.  Defaults to the root logger.

    Returns:
        The installed handler, for :func:`detach_logging_handler`.

    Example:
        >>> handler = attach_logging_handler(providers, level=logging.INFO)
        >>> logging.getLogger("myapp").info("goes to the OTel log pipeline")
    """
    handler = LoggingHandler(level=level, logger_provider=providers.log)
    handler.addFilter(_drop_sdk_records)
    (logger or logging.getLogger()).addHandler(handler)
    return handler


def detach_logging_handler(
    handler: LoggingHandler,
    logger: logging.Logger | None = None,
) -> None:
    """Remove a handler installed by :func:`attach_logging_handler`."""
    (logger or logging.getLogger()).removeHandler(handler)
