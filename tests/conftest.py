import pytest

from hookscope.config import EngineConfig
from hookscope.core.scope import TestScope
from hookscope.hosts import HookStore, StubHost
from hookscope.reporting import MemoryTransport, ObserverReporter


@pytest.fixture
def store() -> HookStore:
    return HookStore()


@pytest.fixture
def host(store: HookStore) -> StubHost:
    return StubHost(store)


@pytest.fixture
def transport() -> MemoryTransport:
    return MemoryTransport()


@pytest.fixture
def make_scope(host: StubHost, transport: MemoryTransport):
    """Build a scope wired to the stub host and an in-memory observer."""

    def _make(**config) -> TestScope:
        settings = {"wait_time": 200, "poll_interval": 20}
        settings.update(config)
        return TestScope(
            host,
            EngineConfig(**settings),
            reporters=[ObserverReporter(transport)],
        )

    return _make
