"""JSON schemas for messages and files produced by the reporting pipeline."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

LINE = "line"
FINAL = "final"

_RESULT = {
    "type": "object",
    "required": ["message", "passed"],
    "additionalProperties": False,
    "properties": {
        "message": {"type": "string"},
        "passed": {"type": "boolean"},
    },
}

LINE_MESSAGE_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "hookscope line message",
    "type": "object",
    "required": ["result"],
    "additionalProperties": False,
    "properties": {"result": _RESULT},
}

FINAL_MESSAGE_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "hookscope final message",
    "type": "object",
    "required": ["results", "errorCount", "duration"],
    "properties": {
        "results": {"type": "array", "items": _RESULT},
        "errorCount": {"type": "integer", "minimum": 0},
        "duration": {"type": "number", "minimum": 0},
    },
}

JSON_REPORT_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "hookscope report",
    "type": "object",
    "required": ["schema_version", "generated_at", "summary", "results"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "summary": {
            "type": "object",
            "required": ["total", "passed", "failed", "duration_s"],
            "properties": {
                "total": {"type": "integer"},
                "passed": {"type": "integer"},
                "failed": {"type": "integer"},
                "duration_s": {"type": "number"},
            },
        },
        "results": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["message", "passed"],
                "properties": {
                    "message": {"type": "string"},
                    "passed": {"type": "boolean"},
                    "kind": {"type": ["string", "null"]},
                },
            },
        },
    },
}

SCHEMAS = {
    LINE: LINE_MESSAGE_SCHEMA,
    FINAL: FINAL_MESSAGE_SCHEMA,
}
