"""The object spec functions receive: registration, primitives and run."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence

from hookscope.config import EngineConfig
from hookscope.reporting.base import ReportManager, Reporter

from .interactions import Interactions
from .models import Report, TestAction, TestCase
from .resolver import IdentifierResolver
from .runner import TestRunner
from .suite import TestGroup, TestSuite

if TYPE_CHECKING:
    from hookscope.hosts.base import HostProtocol


class TestScope(Interactions):
    """Wraps a running app and the test cases written against it.

    One scope runs once; build a new scope for another run.
    """

    __test__ = False

    def __init__(
        self,
        host: "HostProtocol",
        config: Optional[EngineConfig] = None,
        reporters: Sequence[Reporter] = (),
    ) -> None:
        config = config or EngineConfig()
        resolver = IdentifierResolver(
            host.registry,
            wait_time=config.wait_time,
            poll_interval=config.poll_interval,
        )
        super().__init__(host, resolver)
        self.config = config
        self.suite = TestSuite()
        self.reports = ReportManager(reporters)
        self._runner = TestRunner(host, self.reports, start_delay=config.start_delay)

    def describe(self, label: str, body: Callable[[TestGroup], Any]) -> Any:
        return self.suite.describe(label, body)

    def it(self, label: str, action: TestAction) -> TestCase:
        group = self.suite.current_group
        description = f"{group.label}: {label}" if group else label
        return self.suite.add(description, action)

    @property
    def test_cases(self) -> Sequence[TestCase]:
        return self.suite.cases

    async def run(self) -> Report:
        return await self._runner.run(self.suite.freeze())
