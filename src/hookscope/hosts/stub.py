"""In-memory host used for development, examples and CI."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from hookscope.core.models import Measurement, Viewport

from .base import MeasureCallback


@dataclass
class StubElement:
    """Element double exposing only its props."""

    props: Dict[str, Callable[..., Any]] = field(default_factory=dict)


@dataclass
class NativeStubElement(StubElement):
    """Element double backed by a native view with fixed geometry."""

    geometry: Measurement = field(default_factory=lambda: Measurement(0, 0, 0, 0, 0, 0))

    def measure(self, callback: MeasureCallback) -> None:
        box = self.geometry
        callback(box.x, box.y, box.width, box.height, box.page_x, box.page_y)


class HookStore:
    """Identifier registry the stub host populates."""

    def __init__(self, elements: Optional[Mapping[str, Any]] = None) -> None:
        self._elements: Dict[str, Any] = dict(elements or {})

    def add(self, identifier: str, element: Any) -> Any:
        self._elements[identifier] = element
        return element

    def add_later(self, identifier: str, element: Any, delay_ms: int) -> asyncio.TimerHandle:
        """Register ``element`` after ``delay_ms``, like a view that mounts mid-render."""

        loop = asyncio.get_running_loop()
        return loop.call_later(delay_ms / 1000, self.add, identifier, element)

    def get(self, identifier: str) -> Optional[Any]:
        return self._elements.get(identifier)


class StubHost:
    """Host double that records reset requests."""

    def __init__(
        self,
        registry: Optional[HookStore] = None,
        *,
        viewport: Optional[Viewport] = None,
    ) -> None:
        self.registry = registry if registry is not None else HookStore()
        self._viewport = viewport or Viewport.of_size(375, 667)
        self.events: List[str] = []
        self.rerender_count = 0

    async def clear_pending_work(self) -> None:
        await asyncio.sleep(0)
        self.events.append("clear_pending_work")

    def force_full_rerender(self) -> None:
        self.rerender_count += 1
        self.events.append("force_full_rerender")

    def viewport(self) -> Viewport:
        return self._viewport
