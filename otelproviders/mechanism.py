"""Core error types for :mod:`otelproviders`."""


class ProviderShutdownError(Exception):
    """A telemetry provider failed to shut down.

    Never raised out of a teardown: the bundle catches the underlying failure,
    wraps it in this type, logs it and hands it back in the teardown result.
    """

    def __init__(self, kind: str, description: str, exception: Exception | None = None):
        super().__init__(f"failed to shut down {kind} provider: {description}")
        self.kind = kind
        self.description = description
        self.exception = exception

    @classmethod
    def from_exception(cls, kind: str, exception: Exception) -> "ProviderShutdownError":
        """Wrap an exception raised by a provider's ``shutdown()``."""
        description = str(exception) or type(exception).__name__
        return cls(kind, description, exception)

    def __str__(self):
        return f"failed to shut down {self.kind} provider: {self.description}"
