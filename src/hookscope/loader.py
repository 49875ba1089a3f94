"""Locate a suite module's host factory and spec functions."""
from __future__ import annotations

import inspect
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, Sequence

from hookscope.config import EngineConfig
from hookscope.core.models import Report
from hookscope.core.scope import TestScope
from hookscope.reporting.base import Reporter
from hookscope.utils import import_string, load_module_from_source

DEFAULT_SPECS_ATTR = "SPECS"
HOST_FACTORY_ATTR = "create_host"

SpecFunction = Callable[[Any], Any]


@dataclass(frozen=True)
class SuiteDefinition:
    name: str
    create_host: Callable[[], Any]
    specs: Sequence[SpecFunction]


def load_suite(target: str) -> SuiteDefinition:
    """Resolve ``module[:ATTR]`` or ``path/to/file.py[:ATTR]`` to a suite.

    The module must define ``create_host()``; ``ATTR`` (default ``SPECS``)
    names a sequence of callables each taking a ``TestScope``.
    """

    location, _, attr = target.rpartition(":") if _has_attr(target) else (target, "", "")
    attr = attr or DEFAULT_SPECS_ATTR
    if location.endswith(".py"):
        module = load_module_from_source(Path(location))
    else:
        module = import_string(location)
    if not isinstance(module, ModuleType):
        raise TypeError(f"Suite target '{location}' is not a module")
    create_host = getattr(module, HOST_FACTORY_ATTR, None)
    if not callable(create_host):
        raise AttributeError(f"Suite '{location}' must define a callable '{HOST_FACTORY_ATTR}()'")
    specs = getattr(module, attr, None)
    if specs is None:
        raise AttributeError(f"Suite '{location}' has no attribute '{attr}'")
    if callable(specs):
        specs = (specs,)
    specs = tuple(specs)
    for spec in specs:
        if not callable(spec):
            raise TypeError(f"Spec entry {spec!r} in '{location}' is not callable")
    return SuiteDefinition(name=module.__name__, create_host=create_host, specs=specs)


def _has_attr(target: str) -> bool:
    # "C:\\suite.py" style drive letters are not attribute separators.
    head, sep, tail = target.rpartition(":")
    return bool(sep) and bool(head) and "/" not in tail and "\\" not in tail


async def execute_suite(
    suite: SuiteDefinition,
    config: EngineConfig,
    reporters: Sequence[Reporter] = (),
) -> Report:
    """Build the host, register every spec, then run the scope once."""

    host = suite.create_host()
    if inspect.isawaitable(host):
        host = await host
    scope = TestScope(host, config, reporters)
    for spec in suite.specs:
        outcome = spec(scope)
        if inspect.isawaitable(outcome):
            await outcome
    return await scope.run()
