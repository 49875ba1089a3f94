"""Reporter interface definitions."""
from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Sequence

from hookscope.core.models import Report, TestResult

logger = logging.getLogger(__name__)


class Reporter:
    """Interface for run observers and output renderers."""

    def on_start(self, total: int, started_at: dt.datetime) -> None:
        pass

    def on_line(self, result: TestResult, index: int, total: int) -> None:  # pragma: no cover
        raise NotImplementedError

    def on_final(self, report: Report) -> None:  # pragma: no cover
        raise NotImplementedError


class ReportManager:
    """Dispatches lifecycle callbacks to multiple reporters.

    A reporter that raises is logged and skipped for that callback; the run
    and the remaining reporters carry on.
    """

    def __init__(self, reporters: Sequence[Reporter] = ()) -> None:
        self._reporters = list(reporters)

    def start(self, total: int, started_at: dt.datetime) -> None:
        self._dispatch("on_start", total, started_at)

    def handle_line(self, result: TestResult, index: int, total: int) -> None:
        self._dispatch("on_line", result, index, total)

    def complete(self, report: Report) -> None:
        self._dispatch("on_final", report)

    def _dispatch(self, hook: str, *args: Any) -> None:
        for reporter in self._reporters:
            try:
                getattr(reporter, hook)(*args)
            except Exception:
                logger.exception("%s.%s failed", type(reporter).__name__, hook)
