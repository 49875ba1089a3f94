"""Transports carrying report messages to an external observer."""
from __future__ import annotations

import json
from typing import Any, List, Mapping, Protocol, TextIO, Tuple


class Transport(Protocol):
    """Delivers one tagged message; delivery guarantees are the transport's own."""

    def send(self, message_type: str, payload: Mapping[str, Any]) -> None:
        ...


class MemoryTransport:
    """Keeps every message in order; handy for tests and embedding."""

    def __init__(self) -> None:
        self.messages: List[Tuple[str, Mapping[str, Any]]] = []

    def send(self, message_type: str, payload: Mapping[str, Any]) -> None:
        self.messages.append((message_type, payload))

    def of_type(self, message_type: str) -> List[Mapping[str, Any]]:
        return [payload for kind, payload in self.messages if kind == message_type]


class JsonLinesTransport:
    """Writes ``{"type": ..., "payload": ...}`` records, one per line."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def send(self, message_type: str, payload: Mapping[str, Any]) -> None:
        record = {"type": message_type, "payload": payload}
        self._stream.write(json.dumps(record, ensure_ascii=False) + "\n")
        self._stream.flush()
