"""Attribute keys and provider-kind names shared across :mod:`otelproviders`."""

from typing import Literal

# Resource attributes
SERVICE_NAME = "service.name"
SERVICE_VERSION = "service.version"

# Provider kinds, as they appear in teardown log lines
PROVIDER_KIND = Literal["tracer", "meter", "logger"]

TRACER: PROVIDER_KIND = "tracer"
METER: PROVIDER_KIND = "meter"
LOGGER: PROVIDER_KIND = "logger"

# (attribute on OtelProviders, kind). Order is part of the public contract.
SHUTDOWN_ORDER: tuple[tuple[str, PROVIDER_KIND], ...] = (
    ("trace", TRACER),
    ("metric", METER),
    ("log", LOGGER),
)
