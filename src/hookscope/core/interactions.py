"""Interaction primitives available to test actions."""
from __future__ import annotations

import asyncio
import inspect
from typing import TYPE_CHECKING, Any, Literal

from .errors import (
    ComponentPresentError,
    ErrorKind,
    MissingCapabilityError,
    NoNativeComponentError,
    TestFailedError,
    classify,
)
from .models import Measurement
from .resolver import IdentifierResolver

if TYPE_CHECKING:
    from hookscope.hosts.base import ElementProtocol, HostProtocol

ON_CHANGE_TEXT = "on_change_text"
ON_PRESS = "on_press"


async def measure_element(element: Any) -> Measurement:
    """Bridge an element's callback-style ``measure`` into one awaitable.

    The callback may fire synchronously, later on the loop, or from another
    thread; only its first invocation counts. If it never fires, the caller
    waits forever.
    """

    loop = asyncio.get_running_loop()
    future: asyncio.Future[Measurement] = loop.create_future()

    def _settle(measurement: Measurement) -> None:
        if not future.done():
            future.set_result(measurement)

    def _callback(x, y, width, height, page_x, page_y) -> None:
        loop.call_soon_threadsafe(_settle, Measurement(x, y, width, height, page_x, page_y))

    element.measure(_callback)
    return await future


class Interactions:
    """Primitives that resolve an element and then act on it."""

    def __init__(self, host: "HostProtocol", resolver: IdentifierResolver) -> None:
        self.host = host
        self.resolver = resolver

    async def find_component(self, identifier: str) -> Any:
        """Return the element registered under ``identifier``.

        Waits up to the configured wait time for it to appear, then raises
        :class:`ComponentNotFoundError`. Usually ``exists`` reads better.
        """

        return await self.resolver.resolve(identifier)

    async def exists(self, identifier: str) -> Literal[True]:
        await self.find_component(identifier)
        return True

    async def not_exists(self, identifier: str) -> Literal[True]:
        """Succeed only if ``identifier`` never resolves.

        Always waits the full wait time before succeeding.
        """

        try:
            await self.find_component(identifier)
        except Exception as exc:
            if classify(exc) is ErrorKind.NOT_FOUND:
                return True
            raise
        raise ComponentPresentError(f"Component with identifier {identifier} was present")

    async def fill_in(self, identifier: str, text: str) -> None:
        element = await self.find_component(identifier)
        await _invoke(element, identifier, ON_CHANGE_TEXT, text)

    async def press(self, identifier: str) -> None:
        element = await self.find_component(identifier)
        await _invoke(element, identifier, ON_PRESS)

    async def is_fully_visible(self, identifier: str) -> None:
        element = await self.find_component(identifier)
        if not callable(getattr(element, "measure", None)):
            raise NoNativeComponentError(
                f"Component {identifier} needs access to a native component's measure method."
            )
        measurement = await measure_element(element)
        if not self.host.viewport().contains(measurement):
            raise TestFailedError(f"Component {identifier} was not fully visible.")

    async def pause(self, ms: float) -> None:
        await asyncio.sleep(ms / 1000)

    @staticmethod
    async def assert_equal(value1: Any, value2: Any) -> None:
        if type(value1) is not type(value2) or value1 != value2:
            raise AssertionError(f"Values are not equal {value1!r} != {value2!r}")

    @staticmethod
    async def assert_true(value: Any) -> Literal[True]:
        if not value:
            raise TestFailedError(f"Value {value!r} did not evaluate to True.")
        return True


async def _invoke(element: "ElementProtocol", identifier: str, capability: str, *args: Any) -> None:
    props = getattr(element, "props", None) or {}
    handler = props.get(capability)
    if not callable(handler):
        raise MissingCapabilityError(
            f"Component {identifier} does not respond to '{capability}'."
        )
    outcome = handler(*args)
    if inspect.isawaitable(outcome):
        await outcome
