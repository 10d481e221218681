"""JSON schema definition for reporter output."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

JSON_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "objadapt probe report",
    "type": "object",
    "required": ["schema_version", "generated_at", "summary", "results"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "plan": {"type": ["string", "null"]},
        "summary": {
            "type": "object",
            "required": ["total", "resolved", "mismatch", "missing", "failed", "errors", "duration_s"],
            "properties": {
                "total": {"type": "integer"},
                "resolved": {"type": "integer"},
                "mismatch": {"type": "integer"},
                "missing": {"type": "integer"},
                "failed": {"type": "integer"},
                "errors": {"type": "integer"},
                "duration_s": {"type": "number"},
            },
        },
        "results": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "target", "property", "status", "duration_ms"],
                "properties": {
                    "id": {"type": "string"},
                    "target": {"type": "string"},
                    "property": {"type": "string"},
                    "status": {
                        "type": "string",
                        "enum": ["resolved", "mismatch", "missing", "failed", "error"],
                    },
                    "duration_ms": {"type": "number"},
                    "accessor": {"type": ["string", "null"]},
                    "value": {},
                    "expected": {},
                    "error": {"type": "string"},
                },
            },
        },
    },
}
