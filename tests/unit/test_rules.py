"""
Tests for built-in type checks and RuleSet classification.
"""

import pytest

from formcore.errors import FailureKind
from formcore.rules import FieldType, Rule, RuleSet, verify_type


class TestVerifyType:
    """Test the built-in type predicates."""

    def test_none_accepts_anything(self):
        assert verify_type(FieldType.NONE, "") is True
        assert verify_type(FieldType.NONE, "  anything  ") is True

    def test_text_requires_non_blank(self):
        assert verify_type(FieldType.TEXT, "hello") is True
        assert verify_type(FieldType.TEXT, " x ") is True
        assert verify_type(FieldType.TEXT, "") is False
        assert verify_type(FieldType.TEXT, "   \t") is False

    @pytest.mark.parametrize("text", ["123", "0", "0042"])
    def test_number_accepts_digits(self, text):
        assert verify_type(FieldType.NUMBER, text) is True

    @pytest.mark.parametrize("text", ["", "   ", "12a", "-1", "1.5", " 12", "12 "])
    def test_number_rejects_non_digits(self, text):
        assert verify_type(FieldType.NUMBER, text) is False

    @pytest.mark.parametrize(
        "text", ["a@b.com", "john+tag@mail.example.org", "john.doe@mail.example.org", "a_b-c@host-name.io"]
    )
    def test_email_accepts_valid_addresses(self, text):
        assert verify_type(FieldType.EMAIL, text) is True

    @pytest.mark.parametrize(
        "text", ["a@b", "", "plain", "a@b.c", "@b.com", "a b@c.com", "a@b.com ", "john.doe+tag@mail.example.org"]
    )
    def test_email_rejects_invalid_addresses(self, text):
        assert verify_type(FieldType.EMAIL, text) is False


class TestRuleSet:
    """Test RuleSet evaluation order and results."""

    def test_empty_rule_set_is_valid(self):
        result = RuleSet().evaluate("")

        assert result.valid is True
        assert result.error_tag is None
        assert result.failure is FailureKind.NONE

    def test_type_failure_reports_type_tag(self):
        rules = RuleSet(FieldType.NUMBER, "only_numbers")

        result = rules.evaluate("abc")

        assert result.valid is False
        assert result.error_tag == "only_numbers"
        assert result.failure is FailureKind.TYPE_MISMATCH

    def test_first_failing_extra_rule_wins(self):
        second = Rule(lambda text: False, "second")
        rules = RuleSet(extra_rules=[Rule(lambda text: False, "first"), second])

        result = rules.evaluate("value")

        assert result.error_tag == "first"
        assert result.failure is FailureKind.EXTRA_RULE_VIOLATION

    def test_extra_rules_short_circuit(self):
        calls = []

        def failing(text):
            calls.append("failing")
            return False

        def never_reached(text):
            calls.append("never_reached")
            return False

        rules = RuleSet(extra_rules=[Rule(failing, "a"), Rule(never_reached, "b")])
        rules.evaluate("x")

        assert calls == ["failing"]

    def test_extra_rule_reported_before_type_rule(self):
        rules = RuleSet(FieldType.TEXT, "required", [Rule(lambda text: len(text) > 3, "too_short")])

        result = rules.evaluate("")

        assert result.error_tag == "too_short"

    def test_faulting_predicate_propagates(self):
        def broken(text):
            raise ValueError("bad predicate")

        rules = RuleSet(extra_rules=[Rule(broken, "tag")])

        with pytest.raises(ValueError, match="bad predicate"):
            rules.evaluate("x")

    def test_replace_extras_clears_previous_rules(self):
        rules = RuleSet(extra_rules=[Rule(lambda text: False, "old")])

        rules.replace_extras([Rule(lambda text: True, "new")])

        assert len(rules) == 1
        assert rules.extra_rules[0].error_tag == "new"
        assert rules.evaluate("x").valid is True
