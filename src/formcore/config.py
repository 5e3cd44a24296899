"""
Configuration for textform.

This module provides application identifiers, defaults and the JSON schema
used to validate template presets.
"""

from typing import Any

# Application identifiers for QSettings
APP_ORGANIZATION = "Textform"
APP_NAME = "Demo"

# JSON Schema version for preset compatibility
SCHEMA_VERSION = "1.0.0"

DEFAULT_CONFIG: dict[str, Any] = {
    "log_level": "INFO",  # Options: "DEBUG", "INFO", "WARNING", "ERROR"
    "show_error_on_blur": True,
}

FIELD_TYPE_NAMES = ["none", "text", "number", "email"]
RULE_KINDS = ["min_length", "max_length", "exact_length", "pattern", "no_whitespace"]

# JSON Schema for preset validation (draft-07)
PRESET_JSON_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Textform Template Preset",
    "description": "Declarative validation template for text fields",
    "type": "object",
    "required": ["schema_version", "name", "template"],
    "additionalProperties": False,
    "properties": {
        "schema_version": {"type": "string", "minLength": 1},
        "name": {"type": "string", "minLength": 1, "maxLength": 100},
        "description": {"type": "string", "maxLength": 500},
        "template": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "type": {"type": "string", "enum": FIELD_TYPE_NAMES},
                "type_error": {"type": "string"},
                "show_error_on_blur": {"type": "boolean"},
                "rules": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "required": ["kind", "error"],
                        "additionalProperties": False,
                        "properties": {
                            "kind": {"type": "string", "enum": RULE_KINDS},
                            "value": {"type": ["integer", "string"]},
                            "error": {"type": "string"},
                        },
                    },
                },
            },
        },
    },
}
