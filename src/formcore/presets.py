"""
Template presets for textform.

Presets describe a Template declaratively in JSON so that the same field
configuration can be shared between screens. Documents are validated against
PRESET_JSON_SCHEMA before they are turned into Templates.
"""

import json
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Any

import jsonschema

from .config import PRESET_JSON_SCHEMA, SCHEMA_VERSION
from .errors import ErrorCode, PresetIOError, PresetValidationError
from .rules import FieldType, Predicate
from .template import Template

logger = logging.getLogger(__name__)


def validate_preset(preset_data: dict[str, Any]) -> None:
    """
    Validate a preset document against the schema.

    Raises:
        PresetValidationError: If the document is invalid
    """
    try:
        jsonschema.validate(preset_data, PRESET_JSON_SCHEMA)
    except jsonschema.ValidationError as e:
        path = "/".join(str(part) for part in e.absolute_path) or None
        raise PresetValidationError(f"Preset validation failed: {e.message}", path=path) from e


def _length_value(kind: str, value: Any) -> int:
    if not isinstance(value, int) or value < 0:
        raise PresetValidationError(f"Rule '{kind}' needs a non-negative integer value")
    return value


def build_predicate(kind: str, value: Any = None) -> Predicate:
    """
    Create the predicate for a declarative rule.

    Args:
        kind: One of the rule kinds listed in the schema
        value: Length for the length rules, regular expression for ``pattern``

    Returns:
        Predicate over the field text
    """
    if kind == "min_length":
        minimum = _length_value(kind, value)
        return lambda text: len(text) >= minimum
    if kind == "max_length":
        maximum = _length_value(kind, value)
        return lambda text: len(text) <= maximum
    if kind == "exact_length":
        length = _length_value(kind, value)
        return lambda text: len(text) == length
    if kind == "pattern":
        if not isinstance(value, str):
            raise PresetValidationError("Rule 'pattern' needs a regular expression value")
        try:
            compiled = re.compile(value)
        except re.error as e:
            raise PresetValidationError(f"Invalid pattern '{value}': {e}") from e
        return lambda text: compiled.fullmatch(text) is not None
    if kind == "no_whitespace":
        return lambda text: not any(char.isspace() for char in text)
    raise PresetValidationError(f"Unknown rule kind: '{kind}'")


def template_from_preset(preset_data: dict[str, Any]) -> Template:
    """
    Build a Template from a validated preset document.

    Raises:
        PresetValidationError: If the document is invalid
    """
    validate_preset(preset_data)
    settings = preset_data["template"]

    builder = Template.Builder()
    builder.set_type(FieldType(settings.get("type", "none")), settings.get("type_error"))
    builder.set_on_focus_change_error(settings.get("show_error_on_blur", False))
    for rule in settings.get("rules", []):
        builder.add_validation(build_predicate(rule["kind"], rule.get("value")), rule["error"])

    return builder.build()


def load_preset(preset_path: Path | str) -> Template:
    """
    Load a preset file into a Template.

    Raises:
        PresetIOError: If the file cannot be read or parsed
        PresetValidationError: If the preset is invalid
    """
    preset_path = Path(preset_path)
    try:
        with open(preset_path, encoding="utf-8") as f:
            preset_data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise PresetIOError(
            f"Failed to parse preset '{preset_path.name}': {e}",
            code=ErrorCode.PRESET_PARSE_ERROR,
            path=str(preset_path),
        ) from e
    except OSError as e:
        raise PresetIOError(f"Failed to load preset '{preset_path.name}': {e}", path=str(preset_path)) from e

    if isinstance(preset_data, dict) and preset_data.get("schema_version") != SCHEMA_VERSION:
        logger.warning(
            f"Preset '{preset_path.name}' has schema version {preset_data.get('schema_version')}, "
            f"expected {SCHEMA_VERSION}"
        )

    template = template_from_preset(preset_data)
    logger.debug(f"Loaded preset from {preset_path}")
    return template


def save_preset(preset_path: Path | str, preset_data: dict[str, Any]) -> None:
    """
    Validate and write a preset atomically.

    Raises:
        PresetValidationError: If the preset is invalid
        PresetIOError: If file operations fail
    """
    validate_preset(preset_data)
    preset_path = Path(preset_path)

    temp_path: str | None = None
    try:
        preset_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="w", suffix=".json", dir=preset_path.parent, delete=False, encoding="utf-8"
        ) as temp_file:
            temp_path = temp_file.name
            json.dump(preset_data, temp_file, ensure_ascii=False, indent=2, sort_keys=True)

        os.replace(temp_path, preset_path)
        logger.info(f"Saved preset '{preset_data['name']}' to {preset_path}")

    except OSError as e:
        if temp_path is not None and os.path.exists(temp_path):
            os.unlink(temp_path)
        raise PresetIOError(f"Failed to save preset '{preset_data['name']}': {e}", path=str(preset_path)) from e
