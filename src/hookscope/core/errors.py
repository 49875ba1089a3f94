"""Error hierarchy raised by the engine and its interaction primitives."""
from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """Closed set of failure kinds a test action can end with."""

    NOT_FOUND = "not_found"
    MISSING_CAPABILITY = "missing_capability"
    ASSERTION_FAILED = "assertion_failed"
    OTHER = "other"


class HookScopeError(Exception):
    """Base class for every error raised by hookscope."""

    kind: ErrorKind = ErrorKind.OTHER
    default_message = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ComponentNotFoundError(HookScopeError):
    """The identifier did not resolve to an element before the wait time ran out."""

    kind = ErrorKind.NOT_FOUND


class MissingCapabilityError(HookScopeError):
    """The element does not expose the capability an interaction needs."""

    kind = ErrorKind.MISSING_CAPABILITY


class NoNativeComponentError(MissingCapabilityError):
    default_message = "Component needs access to a native component's measure method."


class TestFailedError(HookScopeError):
    """An assertion-style condition was false."""

    __test__ = False  # keep pytest from collecting this class

    kind = ErrorKind.ASSERTION_FAILED
    default_message = "Test was not successful."


class ComponentPresentError(HookScopeError):
    """An element that was expected to be absent resolved."""


class RegistrationClosedError(HookScopeError):
    """A test case was registered after the run started."""


class UnawaitedGroupError(HookScopeError):
    """A coroutine ``describe`` body was never awaited before the run started."""


class RunnerStateError(HookScopeError):
    """The runner was asked to do something its current state forbids."""


class ConfigError(HookScopeError):
    """Configuration could not be loaded or failed validation."""


def classify(exc: BaseException) -> ErrorKind:
    if isinstance(exc, HookScopeError):
        return exc.kind
    if isinstance(exc, AssertionError):
        return ErrorKind.ASSERTION_FAILED
    return ErrorKind.OTHER


def describe_error(exc: BaseException) -> str:
    """Message used in reports; falls back to the class name for bare errors."""

    text = str(exc)
    return text if text else type(exc).__name__
