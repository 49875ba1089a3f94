from __future__ import annotations

import asyncio
import threading

import pytest

from hookscope.core import (
    ComponentNotFoundError,
    ComponentPresentError,
    ErrorKind,
    Measurement,
    MissingCapabilityError,
    NoNativeComponentError,
    TestFailedError,
    Viewport,
)
from hookscope.core.interactions import Interactions, measure_element
from hookscope.core.resolver import IdentifierResolver
from hookscope.hosts import HookStore, NativeStubElement, StubElement, StubHost


def _interactions(store: HookStore, *, wait_time: int = 100, viewport: Viewport | None = None) -> Interactions:
    host = StubHost(store, viewport=viewport or Viewport.of_size(100, 200))
    return Interactions(host, IdentifierResolver(store, wait_time=wait_time, poll_interval=20))


@pytest.mark.asyncio
async def test_exists_returns_true_or_propagates_not_found() -> None:
    store = HookStore({"A": StubElement()})
    scope = _interactions(store)
    assert await scope.exists("A") is True
    with pytest.raises(ComponentNotFoundError):
        await scope.exists("B")


@pytest.mark.asyncio
async def test_not_exists_succeeds_after_full_wait_when_absent() -> None:
    scope = _interactions(HookStore(), wait_time=150)
    loop = asyncio.get_running_loop()
    started = loop.time()
    assert await scope.not_exists("Gone") is True
    assert loop.time() - started >= 0.15


@pytest.mark.asyncio
async def test_not_exists_fails_when_element_appears_within_window() -> None:
    store = HookStore()
    store.add_later("Popup", StubElement(), delay_ms=40)
    scope = _interactions(store, wait_time=500)
    with pytest.raises(ComponentPresentError) as excinfo:
        await scope.not_exists("Popup")
    assert excinfo.value.kind is ErrorKind.OTHER
    assert "Popup was present" in str(excinfo.value)


@pytest.mark.asyncio
async def test_not_exists_reraises_unrelated_errors() -> None:
    class BrokenRegistry:
        def get(self, identifier):
            raise RuntimeError("registry offline")

    host = StubHost()
    scope = Interactions(host, IdentifierResolver(BrokenRegistry(), wait_time=50))
    with pytest.raises(RuntimeError, match="registry offline"):
        await scope.not_exists("Anything")


@pytest.mark.asyncio
async def test_fill_in_and_press_invoke_capabilities() -> None:
    typed = []
    pressed = []

    async def on_press() -> None:
        pressed.append(True)

    store = HookStore(
        {
            "Form.Name": StubElement(props={"on_change_text": typed.append}),
            "Form.Submit": StubElement(props={"on_press": on_press}),
        }
    )
    scope = _interactions(store)
    await scope.fill_in("Form.Name", "Ada")
    await scope.press("Form.Submit")
    assert typed == ["Ada"]
    assert pressed == [True]


@pytest.mark.asyncio
async def test_missing_capability_is_reported_by_kind() -> None:
    store = HookStore({"Label": StubElement()})
    scope = _interactions(store)
    with pytest.raises(MissingCapabilityError, match="on_press"):
        await scope.press("Label")
    with pytest.raises(MissingCapabilityError, match="on_change_text"):
        await scope.fill_in("Label", "text")


@pytest.mark.asyncio
async def test_is_fully_visible_requires_measure() -> None:
    scope = _interactions(HookStore({"Plain": StubElement()}))
    with pytest.raises(NoNativeComponentError) as excinfo:
        await scope.is_fully_visible("Plain")
    assert excinfo.value.kind is ErrorKind.MISSING_CAPABILITY


@pytest.mark.asyncio
async def test_is_fully_visible_accepts_box_touching_every_edge() -> None:
    box = NativeStubElement(geometry=Measurement(0, 0, 100, 200, 0, 0))
    scope = _interactions(HookStore({"Full": box}), viewport=Viewport.of_size(100, 200))
    assert await scope.is_fully_visible("Full") is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "geometry",
    [
        Measurement(0, 0, 10, 10, -1, 50),  # left
        Measurement(0, 0, 10, 10, 91, 50),  # right
        Measurement(0, 0, 10, 10, 50, -1),  # top
        Measurement(0, 0, 10, 10, 50, 191),  # bottom
    ],
)
async def test_is_fully_visible_fails_when_any_edge_is_outside(geometry: Measurement) -> None:
    scope = _interactions(
        HookStore({"Box": NativeStubElement(geometry=geometry)}),
        viewport=Viewport.of_size(100, 200),
    )
    with pytest.raises(TestFailedError, match="was not fully visible"):
        await scope.is_fully_visible("Box")


@pytest.mark.asyncio
async def test_measure_bridge_accepts_callback_from_another_thread() -> None:
    class ThreadedElement:
        thread: threading.Thread

        def measure(self, callback) -> None:
            def fire() -> None:
                callback(1, 2, 3, 4, 5, 6)
                callback(9, 9, 9, 9, 9, 9)

            self.thread = threading.Thread(target=fire)
            self.thread.start()

    element = ThreadedElement()
    measurement = await measure_element(element)
    element.thread.join()
    assert measurement == Measurement(1, 2, 3, 4, 5, 6)


@pytest.mark.asyncio
async def test_pause_suspends_for_requested_time() -> None:
    scope = _interactions(HookStore())
    loop = asyncio.get_running_loop()
    started = loop.time()
    await scope.pause(50)
    assert loop.time() - started >= 0.05


@pytest.mark.asyncio
async def test_assertions() -> None:
    scope = _interactions(HookStore())
    await scope.assert_equal("a", "a")
    with pytest.raises(AssertionError, match="'a' != 'b'"):
        await scope.assert_equal("a", "b")
    assert await scope.assert_true(1) is True
    with pytest.raises(TestFailedError, match="did not evaluate"):
        await scope.assert_true(0)


@pytest.mark.asyncio
async def test_assert_equal_is_strict_about_types() -> None:
    scope = _interactions(HookStore())
    with pytest.raises(AssertionError, match="1 != True"):
        await scope.assert_equal(1, True)
    with pytest.raises(AssertionError):
        await scope.assert_equal(1, 1.0)


@pytest.mark.asyncio
async def test_assert_true_message_quotes_value_once() -> None:
    scope = _interactions(HookStore())
    with pytest.raises(TestFailedError) as excinfo:
        await scope.assert_true("")
    assert str(excinfo.value) == "Value '' did not evaluate to True."
