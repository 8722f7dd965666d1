"""Shared test fixtures for otelproviders tests."""

import logging
from unittest.mock import MagicMock

import pytest


class Recorder:
    """Mock providers that append their name to ``calls`` when shut down."""

    def __init__(self):
        self.calls: list[str] = []
        self.log = self._provider("log")
        self.metric = self._provider("metric")
        self.trace = self._provider("trace")

    def _provider(self, name: str) -> MagicMock:
        provider = MagicMock(name=f"{name}_provider")
        provider.shutdown.side_effect = lambda: self.calls.append(name)
        return provider

    def fail(self, name: str, error: Exception) -> None:
        """Make the named provider record the call, then raise ``error``."""

        def _shutdown():
            self.calls.append(name)
            raise error

        getattr(self, name).shutdown.side_effect = _shutdown


@pytest.fixture
def recorder():
    """Three recording mock providers (log, metric, trace)."""
    return Recorder()


@pytest.fixture
def teardown_messages(caplog):
    """Callable returning the (levelname, message) pairs the bundle logged, in order."""
    caplog.set_level(logging.DEBUG, logger="otelproviders.providers")

    def _messages() -> list[tuple[str, str]]:
        return [
            (r.levelname, r.getMessage())
            for r in caplog.records
            if r.name == "otelproviders.providers"
        ]

    return _messages
