"""Core dataclasses shared across hookscope subsystems."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple

from .errors import ErrorKind


TestAction = Callable[[], Awaitable[Any]]


@dataclass(frozen=True)
class TestCase:
    """A registered, named unit of behaviour to verify."""

    __test__ = False

    description: str
    action: TestAction


@dataclass(frozen=True)
class TestResult:
    """Outcome of executing a single test case."""

    __test__ = False

    message: str
    passed: bool
    kind: Optional[ErrorKind] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message, "passed": self.passed}


@dataclass(frozen=True)
class Report:
    """Aggregate outcome of one run."""

    results: Tuple[TestResult, ...]
    error_count: int
    duration: float

    def __post_init__(self) -> None:
        failed = sum(1 for result in self.results if not result.passed)
        if failed != self.error_count:
            raise ValueError(
                f"error_count={self.error_count} does not match {failed} failing result(s)"
            )

    @property
    def passed(self) -> bool:
        return self.error_count == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "results": [result.to_dict() for result in self.results],
            "errorCount": self.error_count,
            "duration": self.duration,
        }


@dataclass(frozen=True)
class Measurement:
    """Geometry reported by an element's native measure capability."""

    x: float
    y: float
    width: float
    height: float
    page_x: float
    page_y: float

    @property
    def left(self) -> float:
        return self.page_x

    @property
    def right(self) -> float:
        return self.page_x + self.width

    @property
    def top(self) -> float:
        return self.page_y

    @property
    def bottom(self) -> float:
        return self.page_y + self.height


@dataclass(frozen=True)
class Viewport:
    """Visible rectangle of the host, in page coordinates."""

    top: float
    right: float
    bottom: float
    left: float = 0.0

    @classmethod
    def of_size(cls, width: float, height: float) -> "Viewport":
        return cls(top=0.0, right=width, bottom=height, left=0.0)

    def contains(self, box: Measurement) -> bool:
        return (
            self.top <= box.top
            and self.right >= box.right
            and self.left <= box.left
            and self.bottom >= box.bottom
        )


@dataclass
class RunStats:
    """Mutable counters the runner owns while iterating."""

    results: list = field(default_factory=list)
    error_count: int = 0

    def record(self, result: TestResult) -> None:
        self.results.append(result)
        if not result.passed:
            self.error_count += 1
