"""Protocols the engine consumes from the application host."""
from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Protocol

from hookscope.core.models import Viewport

MeasureCallback = Callable[[float, float, float, float, float, float], None]


class ElementProtocol(Protocol):
    """A live element handle as stored in the registry.

    ``props`` maps capability names (``on_press``, ``on_change_text``) to
    callables. Elements backed by a native view may also expose
    ``measure(callback)``; it is looked up dynamically, so it is not declared
    here.
    """

    props: Mapping[str, Callable[..., Any]]


class RegistryProtocol(Protocol):
    """Read-only identifier lookup owned by the host."""

    def get(self, identifier: str) -> Optional[Any]:
        ...


class HostProtocol(Protocol):
    """The running application the suite is exercising."""

    registry: RegistryProtocol

    async def clear_pending_work(self) -> None:
        ...

    def force_full_rerender(self) -> None:
        ...

    def viewport(self) -> Viewport:
        ...
