"""Core engine exposed at the package level."""
from .errors import (
    ComponentNotFoundError,
    ComponentPresentError,
    ConfigError,
    ErrorKind,
    HookScopeError,
    MissingCapabilityError,
    NoNativeComponentError,
    RegistrationClosedError,
    RunnerStateError,
    TestFailedError,
    UnawaitedGroupError,
    classify,
)
from .models import Measurement, Report, TestCase, TestResult, Viewport
from .resolver import IdentifierResolver, poll_until
from .runner import RunState, TestRunner
from .suite import TestGroup, TestSuite

__all__ = [
    "ComponentNotFoundError",
    "ComponentPresentError",
    "ConfigError",
    "ErrorKind",
    "HookScopeError",
    "MissingCapabilityError",
    "NoNativeComponentError",
    "RegistrationClosedError",
    "RunnerStateError",
    "TestFailedError",
    "UnawaitedGroupError",
    "classify",
    "Measurement",
    "Report",
    "TestCase",
    "TestResult",
    "Viewport",
    "IdentifierResolver",
    "poll_until",
    "RunState",
    "TestRunner",
    "TestGroup",
    "TestSuite",
]
