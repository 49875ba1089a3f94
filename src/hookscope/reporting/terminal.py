"""Terminal reporter rendering progress and summaries."""
from __future__ import annotations

import datetime as dt

import click

from hookscope.core.models import Report, TestResult

from .base import Reporter


class TerminalReporter(Reporter):
    """Human-readable reporter that streams to stdout."""

    def __init__(self, *, use_color: bool = True) -> None:
        self._use_color = use_color
        self._failures: list[tuple[int, TestResult]] = []

    def on_start(self, total: int, started_at: dt.datetime) -> None:
        self._failures.clear()
        click.echo(
            self._styled(f"hookscope suite started at {started_at:%Y-%m-%d %H:%M:%S} ({total} case(s)).", "cyan")
        )

    def on_line(self, result: TestResult, index: int, total: int) -> None:
        color = "green" if result.passed else "red"
        click.echo(f"[{index}/{total}] " + self._styled(result.message, color))
        if not result.passed:
            self._failures.append((index, result))

    def on_final(self, report: Report) -> None:
        stopped_at = dt.datetime.now()
        total = len(report.results)
        click.echo(
            self._styled(
                f"hookscope suite stopped at {stopped_at:%Y-%m-%d %H:%M:%S}, "
                f"duration: {report.duration:.3f} seconds.",
                "cyan",
            )
        )
        click.echo(
            self._styled(
                f"Summary: total={total} passed={total - report.error_count} "
                f"failed={report.error_count}",
                "green" if report.passed else "red",
            )
        )
        if self._failures:
            click.echo(self._styled("Failure details:", "red"))
            for index, result in self._failures:
                kind = result.kind.value if result.kind else "unknown"
                first_line = result.message.splitlines()[0]
                click.echo(f"  [{index}] {first_line} ({kind})")

    def _styled(self, text: str, color: str) -> str:
        if not self._use_color:
            return text
        return click.style(text, fg=color)
