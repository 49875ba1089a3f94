"""describe/it registration of test cases."""
from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Generator, List, Optional, Tuple, Union

from .errors import RegistrationClosedError, UnawaitedGroupError
from .models import TestAction, TestCase


class TestGroup:
    """Label scope handed to a ``describe`` body."""

    __test__ = False

    def __init__(self, suite: "TestSuite", label: str) -> None:
        self._suite = suite
        self.label = label

    def describe(self, label: str, body: Callable[["TestGroup"], Any]) -> Any:
        return self._suite.describe(label, body)

    def it(self, label: str, action: TestAction) -> TestCase:
        return self._suite.add(f"{self.label}: {label}", action)


class PendingGroup:
    """Coroutine ``describe`` body that the caller still has to await."""

    def __init__(self, label: str, awaitable: Awaitable[Any]) -> None:
        self.label = label
        self._awaitable = awaitable
        self.awaited = False

    def __await__(self) -> Generator[Any, None, Any]:
        self.awaited = True
        return (yield from self._awaitable.__await__())

    def discard(self) -> None:
        close = getattr(self._awaitable, "close", None)
        if callable(close):
            close()


class TestSuite:
    """Ordered, append-only list of test cases.

    Registration order is execution order. Once :meth:`freeze` has been called
    the list is read-only.
    """

    __test__ = False

    def __init__(self) -> None:
        self._cases: List[TestCase] = []
        self._frozen = False
        self.current_group: Optional[TestGroup] = None
        self._pending: List[PendingGroup] = []

    def describe(
        self, label: str, body: Callable[[TestGroup], Any]
    ) -> Union[TestGroup, PendingGroup]:
        """Run ``body`` with a group bound to ``label``.

        Synchronous bodies finish before this returns and the group is
        returned. Coroutine bodies come back as a :class:`PendingGroup` the caller
        must await; freezing the suite with one still un-awaited raises
        :class:`UnawaitedGroupError`.
        """

        group = TestGroup(self, label)
        self.current_group = group
        outcome = body(group)
        if inspect.isawaitable(outcome):
            pending = PendingGroup(label, outcome)
            self._pending.append(pending)
            return pending
        return group

    def add(self, description: str, action: TestAction) -> TestCase:
        if self._frozen:
            raise RegistrationClosedError(
                f"Cannot register '{description}': the run has already started"
            )
        if not callable(action):
            raise TypeError(f"Action for '{description}' is not callable")
        case = TestCase(description=description, action=action)
        self._cases.append(case)
        return case

    def freeze(self) -> Tuple[TestCase, ...]:
        skipped = [pending for pending in self._pending if not pending.awaited]
        if skipped:
            for pending in skipped:
                pending.discard()
            labels = ", ".join(repr(pending.label) for pending in skipped)
            raise UnawaitedGroupError(
                f"describe body never awaited for {labels}; await scope.describe(...) for async bodies"
            )
        self._frozen = True
        return tuple(self._cases)

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def cases(self) -> Tuple[TestCase, ...]:
        return tuple(self._cases)

    def __len__(self) -> int:
        return len(self._cases)
