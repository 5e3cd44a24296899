"""
Error taxonomy for the textform validation engine.

Validation failures are not exceptions: they are recorded on the field as a
FailureKind plus an error tag. The exception hierarchy below is reserved for
configuration faults (bad templates, unreadable or malformed presets).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FailureKind(Enum):
    """Outcome category of the most recent verification of a field."""

    NONE = "none"
    TYPE_MISMATCH = "type_mismatch"
    EXTRA_RULE_VIOLATION = "extra_rule_violation"


class ErrorCode(Enum):
    """Specific error codes for configuration faults."""

    INVALID_FIELD_TYPE = "INVALID_FIELD_TYPE"
    INVALID_RULE = "INVALID_RULE"
    PRESET_INVALID = "PRESET_INVALID"
    PRESET_PARSE_ERROR = "PRESET_PARSE_ERROR"
    PRESET_IO_ERROR = "PRESET_IO_ERROR"


@dataclass
class FormError(Exception):
    """
    Base error with structured metadata.

    Raised only for configuration bugs; a field that fails its rules never
    raises.
    """

    code: ErrorCode
    user_message: str
    technical_message: str | None = None
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.user_message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message='{self.user_message}')"


class TemplateError(FormError):
    """Invalid validation configuration handed to a field or template."""

    def __init__(
        self,
        user_message: str,
        code: ErrorCode = ErrorCode.INVALID_FIELD_TYPE,
        technical_message: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            context=context or {},
        )


class PresetValidationError(FormError):
    """A preset document does not match the preset schema."""

    def __init__(self, user_message: str, path: str | None = None, technical_message: str | None = None):
        context: dict[str, Any] = {}
        if path:
            context["path"] = path
        super().__init__(
            code=ErrorCode.PRESET_INVALID,
            user_message=user_message,
            technical_message=technical_message,
            context=context,
        )


class PresetIOError(FormError):
    """A preset file could not be read, parsed or written."""

    def __init__(
        self,
        user_message: str,
        code: ErrorCode = ErrorCode.PRESET_IO_ERROR,
        path: str | None = None,
        technical_message: str | None = None,
    ):
        super().__init__(
            code=code,
            user_message=user_message,
            technical_message=technical_message,
            context={"path": path} if path else {},
        )
