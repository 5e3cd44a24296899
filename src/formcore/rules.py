"""
Validation rules for text fields.

This module provides the built-in field types, the Rule pair (predicate plus
error tag) and the RuleSet that classifies a piece of text against them.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass
from enum import Enum

from .errors import FailureKind

ErrorTag = Hashable
Predicate = Callable[[str], bool]

# Matched against the whole value
NUMBER_PATTERN = re.compile(r"[0-9]+")
EMAIL_PATTERN = re.compile(
    r"^[_A-Za-z0-9\-+]+(\.[_A-Za-z0-9\-]+)*@[A-Za-z0-9\-]+(\.[A-Za-z0-9]+)*(\.[A-Za-z]{2,})$"
)


class FieldType(Enum):
    """Built-in verification applied to a field."""

    NONE = "none"
    TEXT = "text"
    NUMBER = "number"
    EMAIL = "email"


@dataclass(frozen=True)
class Rule:
    """An extra validation: the text is valid when ``predicate(text)`` is true."""

    predicate: Predicate
    error_tag: ErrorTag

    def check(self, text: str) -> bool:
        return bool(self.predicate(text))


@dataclass(frozen=True)
class RuleResult:
    """Outcome of evaluating a RuleSet against one value."""

    valid: bool
    error_tag: ErrorTag | None = None
    failure: FailureKind = FailureKind.NONE


def verify_text(text: str) -> bool:
    """Verify that the value isn't blank."""
    return bool(text.strip())


def verify_number(text: str) -> bool:
    """Verify that the value contains only digits."""
    return NUMBER_PATTERN.fullmatch(text) is not None and bool(text.strip())


def verify_email(text: str) -> bool:
    """Verify that the value is a valid email address."""
    return EMAIL_PATTERN.fullmatch(text) is not None


_TYPE_VERIFIERS: dict[FieldType, Predicate] = {
    FieldType.TEXT: verify_text,
    FieldType.NUMBER: verify_number,
    FieldType.EMAIL: verify_email,
}


def verify_type(field_type: FieldType, text: str) -> bool:
    """
    Run the built-in check for ``field_type``.

    Args:
        field_type: Type to verify against; ``FieldType.NONE`` always passes
        text: Current value of the field

    Returns:
        True if the value satisfies the type
    """
    verifier = _TYPE_VERIFIERS.get(field_type)
    if verifier is None:
        return True
    return verifier(text)


class RuleSet:
    """
    Ordered rules for one field: extra rules first, then the type rule.

    Extra rules are evaluated in insertion order and evaluation stops at the
    first one that fails.
    """

    def __init__(
        self,
        field_type: FieldType = FieldType.NONE,
        type_error_tag: ErrorTag | None = None,
        extra_rules: Iterable[Rule] = (),
    ):
        self.field_type = field_type
        self.type_error_tag = type_error_tag
        self._extra_rules: list[Rule] = list(extra_rules)

    @property
    def extra_rules(self) -> tuple[Rule, ...]:
        return tuple(self._extra_rules)

    def add(self, rule: Rule) -> None:
        self._extra_rules.append(rule)

    def replace_extras(self, rules: Iterable[Rule]) -> None:
        """Clear the extra rules and repopulate them from ``rules``."""
        self._extra_rules.clear()
        self._extra_rules.extend(rules)

    def first_failing_extra(self, text: str) -> Rule | None:
        for rule in self._extra_rules:
            if not rule.check(text):
                return rule
        return None

    def evaluate(self, text: str) -> RuleResult:
        """
        Classify ``text`` against every rule.

        Predicate exceptions are not caught: a faulting predicate is a
        configuration bug and reaches the caller.
        """
        failed_extra = self.first_failing_extra(text)
        type_valid = verify_type(self.field_type, text)

        if failed_extra is not None:
            return RuleResult(False, failed_extra.error_tag, FailureKind.EXTRA_RULE_VIOLATION)
        if not type_valid:
            return RuleResult(False, self.type_error_tag, FailureKind.TYPE_MISMATCH)
        return RuleResult(True)

    def __len__(self) -> int:
        return len(self._extra_rules)
