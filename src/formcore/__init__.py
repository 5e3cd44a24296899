"""
Live validation engine for text input fields.

This package provides rule classification, per-field validity tracking with
change notifications, reusable templates and group aggregation. It has no
dependency on any widget toolkit.
"""

from .errors import FailureKind, FormError, PresetIOError, PresetValidationError, TemplateError
from .field_validator import FieldValidator, InputSurface
from .group import check, check_all
from .rules import FieldType, Rule, RuleSet, verify_type
from .template import Template, apply_template, clear_all

__all__ = [
    "FailureKind",
    "FieldType",
    "FieldValidator",
    "FormError",
    "InputSurface",
    "PresetIOError",
    "PresetValidationError",
    "Rule",
    "RuleSet",
    "Template",
    "TemplateError",
    "apply_template",
    "check",
    "check_all",
    "clear_all",
    "verify_type",
]
