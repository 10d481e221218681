"""JSON schema for probe plan files."""
from __future__ import annotations

PLAN_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "objadapt probe plan",
    "type": "object",
    "required": ["targets"],
    "additionalProperties": False,
    "properties": {
        "description": {"type": "string"},
        "targets": {
            "type": "array",
            "minItems": 1,
            "items": {
                "type": "object",
                "required": ["name", "factory", "properties"],
                "additionalProperties": False,
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "factory": {"type": "string", "minLength": 1},
                    "args": {"type": "array"},
                    "kwargs": {"type": "object"},
                    "properties": {
                        "type": "array",
                        "minItems": 1,
                        "items": {"type": "string", "minLength": 1},
                    },
                    "expect": {"type": "object"},
                    "tags": {"type": "array", "items": {"type": "string"}},
                },
            },
        },
    },
}
