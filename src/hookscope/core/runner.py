"""Sequential test runner."""
from __future__ import annotations

import asyncio
import datetime as dt
import enum
import inspect
import logging
import time
from typing import TYPE_CHECKING, Sequence

from .errors import RunnerStateError, classify, describe_error
from .models import Report, RunStats, TestCase, TestResult

if TYPE_CHECKING:
    from hookscope.hosts.base import HostProtocol
    from hookscope.reporting.base import ReportManager

logger = logging.getLogger(__name__)

PASS_MARK = "✅"
FAIL_MARK = "❌"


class RunState(enum.Enum):
    IDLE = "idle"
    DELAYING = "delaying"
    RUNNING = "running"
    FINALIZING = "finalizing"
    DONE = "done"


class TestRunner:
    """Executes test cases one after another, exactly once.

    Every ``Exception`` raised by a case's action becomes a failing result;
    the run always reaches the end. Errors from the final host reset escape,
    and so does any ``BaseException`` that is not an ``Exception``
    (``asyncio.CancelledError``, ``KeyboardInterrupt``), which stops the whole
    run: cancellation is not a test outcome.
    """

    __test__ = False

    def __init__(
        self,
        host: "HostProtocol",
        reports: "ReportManager",
        *,
        start_delay: int = 0,
    ) -> None:
        self._host = host
        self._reports = reports
        self._start_delay = start_delay
        self.state = RunState.IDLE

    async def run(self, cases: Sequence[TestCase]) -> Report:
        if self.state is not RunState.IDLE:
            raise RunnerStateError(f"Runner already used (state={self.state.value}); create a new one")
        cases = tuple(cases)
        if self._start_delay > 0:
            self.state = RunState.DELAYING
            await asyncio.sleep(self._start_delay / 1000)

        self.state = RunState.RUNNING
        started_at = dt.datetime.now()
        start = time.perf_counter()
        logger.info("suite started at %s with %d case(s)", started_at.isoformat(), len(cases))
        self._reports.start(len(cases), started_at)

        stats = RunStats()
        total = len(cases)
        for index, case in enumerate(cases, start=1):
            result = await self._execute_case(case)
            stats.record(result)
            logger.debug("[%d/%d] %s", index, total, result.message)
            self._reports.handle_line(result, index, total)

        self.state = RunState.FINALIZING
        await self._host.clear_pending_work()
        self._host.force_full_rerender()
        duration = time.perf_counter() - start
        logger.info("suite stopped at %s, duration: %.3f seconds", dt.datetime.now().isoformat(), duration)

        report = Report(
            results=tuple(stats.results),
            error_count=stats.error_count,
            duration=duration,
        )
        self.state = RunState.DONE
        self._reports.complete(report)
        return report

    async def _execute_case(self, case: TestCase) -> TestResult:
        try:
            outcome = case.action()
            if inspect.isawaitable(outcome):
                await outcome
        except Exception as exc:
            return failure_result(case.description, exc)
        return TestResult(message=f"{case.description}  {PASS_MARK}", passed=True)


def failure_result(description: str, exc: BaseException) -> TestResult:
    return TestResult(
        message=f"{description}  {FAIL_MARK}\n   {describe_error(exc)}",
        passed=False,
        kind=classify(exc),
    )
