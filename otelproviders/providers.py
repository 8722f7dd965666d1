"""Bundle of the three OTel SDK providers with ordered teardown.

Provides :class:`OtelProviders`, which holds a logger, meter and tracer
provider and shuts them down together, either explicitly via
:meth:`OtelProviders.shutdown` or when a ``with`` block over the bundle exits.

Teardown order is tracer, then meter, then logger.  The logger provider goes
last so that the log lines produced by the first two steps can still be
captured by it (see :func:`otelproviders.logging.attach_logging_handler`).
"""

import logging
import threading

from opentelemetry.sdk._logs import LoggerProvider
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.trace import TracerProvider

from .keys import PROVIDER_KIND, SHUTDOWN_ORDER
from .mechanism import ProviderShutdownError

logger = logging.getLogger(__name__)


class OtelProviders:
    """Container for the OTel logger, meter and tracer providers.

    The bundle holds shared references: the providers may also be used
    elsewhere in the application until the bundle is shut down.  The three
    attributes are read-only once constructed.

    Teardown runs at most once per bundle.  Failures of individual providers
    are logged and collected, never raised.

    Example:
        >>> providers = OtelProviders(logger_provider, meter_provider, tracer_provider)
        >>> with providers:
        ...     run_application(providers)
        >>> providers.is_shut_down
        True
    """

    def __init__(
        self,
        log: LoggerProvider,
        metric: MeterProvider,
        trace: TracerProvider,
    ):
        """Bundle three already-initialized providers.

        Args:
            log: SDK logger provider for OTel logs.
            metric: SDK meter provider for OTel metrics.
            trace: SDK tracer provider for OTel traces.
        """
        self._log = log
        self._metric = metric
        self._trace = trace
        self._lock = threading.RLock()
        self._shut_down = False

    @property
    def log(self) -> LoggerProvider:
        return self._log

    @property
    def metric(self) -> MeterProvider:
        return self._metric

    @property
    def trace(self) -> TracerProvider:
        return self._trace

    @property
    def is_shut_down(self) -> bool:
        """True once teardown has started."""
        return self._shut_down

    def shutdown(self) -> list[ProviderShutdownError]:
        """Shut down the tracer, meter and logger providers, in that order.

        Each step is attempted regardless of how the previous ones went.  A
        success is logged at INFO, a failure at ERROR.  Calls after the first
        are no-ops, including a nested call from inside a provider's own
        shutdown on the same thread.

        Returns:
            The failures collected during this call, in teardown order.  Empty
            when every provider shut down cleanly or the bundle was already
            shut down.
        """
        with self._lock:
            if self._shut_down:
                logger.debug("providers already shut down, skipping.")
                return []
            self._shut_down = True

            errors: list[ProviderShutdownError] = []
            for attr, kind in SHUTDOWN_ORDER:
                error = _shutdown_provider(kind, getattr(self, attr))
                if error is not None:
                    errors.append(error)
            return errors

    def __enter__(self) -> "OtelProviders":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        self.shutdown()
        # let exceptions from the with-body propagate
        return False

    def __repr__(self) -> str:
        state = "shut down" if self._shut_down else "live"
        return (
            f"OtelProviders(log={self._log!r}, metric={self._metric!r}, "
            f"trace={self._trace!r}, state={state!r})"
        )


def _shutdown_provider(kind: PROVIDER_KIND, provider) -> ProviderShutdownError | None:
    """Shut down a single provider and log the outcome.

    The SDK providers report failure by raising.  A provider whose
    ``shutdown()`` returns ``False`` is treated as failed as well.
    """
    try:
        result = provider.shutdown()
    except Exception as exc:
        error = ProviderShutdownError.from_exception(kind, exc)
        logger.error("failed to shut down %s provider: %s", kind, error.description)
        return error

    if result is False:
        error = ProviderShutdownError(kind, "shutdown reported failure")
        logger.error("failed to shut down %s provider: %s", kind, error.description)
        return error

    logger.info("%s provider shut down successfully.", kind)
    return None
