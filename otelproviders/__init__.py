"""Convenience exports for the :mod:`otelproviders` package."""

from .config import configure_providers  # noqa: F401
from .keys import LOGGER, METER, SHUTDOWN_ORDER, TRACER  # noqa: F401
from .logging import attach_logging_handler, detach_logging_handler  # noqa: F401
from .mechanism import ProviderShutdownError  # noqa: F401
from .providers import OtelProviders  # noqa: F401

__all__ = [
    "OtelProviders",
    "ProviderShutdownError",

    # config
    "configure_providers",

    # logging
    "attach_logging_handler",
    "detach_logging_handler",

    # keys
    "TRACER",
    "METER",
    "LOGGER",
    "SHUTDOWN_ORDER",
]
