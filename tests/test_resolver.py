from __future__ import annotations

import asyncio

import pytest

from hookscope.core import ComponentNotFoundError, ErrorKind, IdentifierResolver, classify
from hookscope.core.resolver import DeadlineExceeded, poll_until
from hookscope.hosts import HookStore, StubElement


@pytest.mark.asyncio
async def test_resolve_returns_registered_element_without_waiting() -> None:
    element = StubElement()
    store = HookStore({"Home.Title": element})
    resolver = IdentifierResolver(store, wait_time=5000, poll_interval=100)
    loop = asyncio.get_running_loop()
    started = loop.time()
    assert await resolver.resolve("Home.Title") is element
    assert loop.time() - started < 0.1


@pytest.mark.asyncio
async def test_resolve_times_out_with_not_found_error() -> None:
    resolver = IdentifierResolver(HookStore(), wait_time=500, poll_interval=100)
    loop = asyncio.get_running_loop()
    started = loop.time()
    with pytest.raises(ComponentNotFoundError) as excinfo:
        await resolver.resolve("Missing.Thing")
    assert loop.time() - started >= 0.5
    assert classify(excinfo.value) is ErrorKind.NOT_FOUND
    assert "Missing.Thing" in str(excinfo.value)


@pytest.mark.asyncio
async def test_resolve_picks_up_element_registered_mid_wait() -> None:
    store = HookStore()
    element = StubElement()
    store.add_later("Late.Button", element, delay_ms=60)
    resolver = IdentifierResolver(store, wait_time=1000, poll_interval=20)
    assert await resolver.resolve("Late.Button") is element


@pytest.mark.asyncio
async def test_zero_wait_time_checks_registry_once_before_giving_up() -> None:
    element = StubElement()
    present = IdentifierResolver(HookStore({"Now": element}), wait_time=0)
    assert await present.resolve("Now") is element

    absent = IdentifierResolver(HookStore(), wait_time=0)
    with pytest.raises(ComponentNotFoundError):
        await absent.resolve("Now")


@pytest.mark.asyncio
async def test_value_seen_on_deadline_tick_wins() -> None:
    loop = asyncio.get_running_loop()
    started = loop.time()

    def check():
        # Appears only once the deadline has already passed.
        return "found" if loop.time() - started >= 0.04 else None

    value = await poll_until(check, timeout=0.04, interval=0.02)
    assert value == "found"


@pytest.mark.asyncio
async def test_poll_until_leaves_no_pending_work_after_timeout() -> None:
    before = len(asyncio.all_tasks())
    with pytest.raises(DeadlineExceeded):
        await poll_until(lambda: None, timeout=0.05, interval=0.01)
    assert len(asyncio.all_tasks()) == before


@pytest.mark.asyncio
async def test_falsy_but_present_elements_resolve() -> None:
    store = HookStore({"Empty.List": []})
    resolver = IdentifierResolver(store, wait_time=0)
    assert await resolver.resolve("Empty.List") == []


def test_resolver_rejects_invalid_timing() -> None:
    with pytest.raises(ValueError):
        IdentifierResolver(HookStore(), wait_time=-1)
    with pytest.raises(ValueError):
        IdentifierResolver(HookStore(), wait_time=10, poll_interval=0)
