"""Identifier-to-element resolution with a bounded wait."""
from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar

from .errors import ComponentNotFoundError

if TYPE_CHECKING:
    from hookscope.hosts.base import RegistryProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_POLL_INTERVAL_MS = 100


class DeadlineExceeded(Exception):
    """Raised by :func:`poll_until` when the check never produced a value."""

    def __init__(self, elapsed: float) -> None:
        super().__init__(f"no value after {elapsed:.3f}s")
        self.elapsed = elapsed


async def poll_until(
    check: Callable[[], Optional[T]],
    *,
    timeout: float,
    interval: float,
) -> T:
    """Call ``check`` until it returns something other than ``None``.

    The first call happens immediately. On every tick the check runs before the
    deadline test, so a value observed on the tick that reaches the deadline is
    returned rather than discarded. Times are in seconds. Nothing keeps running
    once this coroutine returns, raises or is cancelled.
    """

    loop = asyncio.get_running_loop()
    started = loop.time()
    while True:
        value = check()
        if value is not None:
            return value
        elapsed = loop.time() - started
        if elapsed >= timeout:
            raise DeadlineExceeded(elapsed)
        await asyncio.sleep(min(interval, timeout - elapsed))


class IdentifierResolver:
    """Turns identifiers into live element handles by polling the registry."""

    def __init__(
        self,
        registry: "RegistryProtocol",
        *,
        wait_time: int,
        poll_interval: int = DEFAULT_POLL_INTERVAL_MS,
    ) -> None:
        if wait_time < 0:
            raise ValueError("wait_time must be >= 0")
        if poll_interval <= 0:
            raise ValueError("poll_interval must be > 0")
        self._registry = registry
        self.wait_time = wait_time
        self.poll_interval = poll_interval

    async def resolve(self, identifier: str) -> Any:
        try:
            return await poll_until(
                lambda: self._registry.get(identifier),
                timeout=self.wait_time / 1000,
                interval=self.poll_interval / 1000,
            )
        except DeadlineExceeded as exc:
            logger.debug("identifier %r not registered after %.3fs", identifier, exc.elapsed)
            raise ComponentNotFoundError(
                f"Could not find component with identifier {identifier}"
            ) from None
