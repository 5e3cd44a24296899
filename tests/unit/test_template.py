"""
Tests for Template building and application.
"""

from unittest.mock import Mock

from formcore.field_validator import FieldValidator
from formcore.rules import FieldType
from formcore.template import CLEAR_TEMPLATE, Template, apply_template, clear_all


class TestTemplateBuilder:
    """Test the fluent builder."""

    def test_defaults(self):
        template = Template.Builder().build()

        assert template.field_type is FieldType.NONE
        assert template.type_error_tag is None
        assert template.show_error_on_blur is False
        assert template.extra_rules == ()
        assert template.display_normal is None
        assert template.display_error is None

    def test_accumulates_settings(self):
        normal, error = Mock(), Mock()

        template = (
            Template.Builder()
            .set_type(FieldType.TEXT, "obligatory_field")
            .set_on_focus_change_error(True)
            .add_validation(lambda text: " " not in text, "blank_spaces_error")
            .add_validation(lambda text: len(text) < 10, "too_long")
            .set_display_error_function(normal, error)
            .build()
        )

        assert template.field_type is FieldType.TEXT
        assert template.type_error_tag == "obligatory_field"
        assert template.show_error_on_blur is True
        assert [rule.error_tag for rule in template.extra_rules] == ["blank_spaces_error", "too_long"]
        assert template.display_normal is normal
        assert template.display_error is error

    def test_built_template_is_not_changed_by_later_calls(self):
        builder = Template.Builder().set_type(FieldType.TEXT, "required").add_validation(lambda text: True, "a")
        first = builder.build()

        builder.add_validation(lambda text: True, "b").set_type(FieldType.EMAIL, "email")
        second = builder.build()

        assert first.field_type is FieldType.TEXT
        assert len(first.extra_rules) == 1
        assert second.field_type is FieldType.EMAIL
        assert len(second.extra_rules) == 2


class TestApplyTemplate:
    """Test stamping templates onto fields."""

    def setup_method(self):
        """Set up test fixtures."""
        self.surface = Mock()
        self.field = FieldValidator("field", surface=self.surface)
        self.template = (
            Template.Builder()
            .set_type(FieldType.TEXT, "obligatory_field")
            .set_on_focus_change_error(True)
            .add_validation(lambda text: " " not in text, "blank_spaces_error")
            .build()
        )

    def test_template_configures_field(self):
        apply_template(self.template, [self.field])

        assert self.field.field_type is FieldType.TEXT
        assert self.field.type_error_tag == "obligatory_field"
        assert self.field.show_error_on_blur is True

        self.field.on_text_changed("")
        self.field.on_focus_changed(False)

        self.surface.set_error.assert_called_once_with("obligatory_field")

    def test_template_replaces_extra_rules(self):
        self.field.add_validation(lambda text: False, "old_rule")

        apply_template(self.template, [self.field])
        self.field.on_text_changed("word")

        assert [rule.error_tag for rule in self.field.extra_rules] == ["blank_spaces_error"]
        assert self.field.is_valid is True

    def test_template_applies_to_many_fields(self):
        other = FieldValidator("other")

        apply_template(self.template, [self.field, other])
        self.field.add_validation(lambda text: False, "local")

        assert len(self.field.extra_rules) == 2
        assert len(other.extra_rules) == 1
        assert len(self.template.extra_rules) == 1

    def test_template_copies_display_hooks(self):
        normal, error = Mock(), Mock()
        template = Template.Builder().set_type(FieldType.TEXT, "required").set_display_error_function(normal, error).build()
        apply_template(template, [self.field])

        self.field.on_text_changed("")
        self.field.show_error()

        normal.assert_called_once_with(self.field)
        error.assert_called_once_with(self.field)
        self.surface.set_error.assert_not_called()


class TestClearAll:
    """Test resetting fields to the pristine template."""

    def test_clear_template_is_pristine(self):
        assert CLEAR_TEMPLATE == Template()

    def test_clear_all_removes_configuration(self):
        field = FieldValidator("field")
        field.set_type(FieldType.EMAIL, "valid_email")
        field.add_validation(lambda text: False, "never")
        field.show_error_on_blur = True

        clear_all([field])
        field.on_text_changed("not an email")

        assert field.field_type is FieldType.NONE
        assert field.extra_rules == ()
        assert field.show_error_on_blur is False
        assert field.is_valid is True
        assert field.current_error_tag is None
