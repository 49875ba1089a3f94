"""Reporter forwarding per-line and final messages to a transport."""
from __future__ import annotations

from typing import Any, Mapping

from jsonschema import Draft7Validator

from hookscope.core.models import Report, TestResult

from .base import Reporter
from .schema import FINAL, LINE, SCHEMAS
from .transport import Transport

_VALIDATORS = {name: Draft7Validator(schema) for name, schema in SCHEMAS.items()}


class ObserverReporter(Reporter):
    """Streams each result as soon as it exists, then the aggregate once."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def on_line(self, result: TestResult, index: int, total: int) -> None:
        self._send(LINE, {"result": result.to_dict()})

    def on_final(self, report: Report) -> None:
        self._send(FINAL, report.to_dict())

    def _send(self, message_type: str, payload: Mapping[str, Any]) -> None:
        _VALIDATORS[message_type].validate(payload)
        self._transport.send(message_type, payload)
