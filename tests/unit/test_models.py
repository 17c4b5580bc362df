"""Unit tests for the template engine declaration models."""

import pytest
from pydantic import ValidationError

from formflow.strategies.template_engine import (
    ChoiceStyle,
    Describe,
    FieldDeclaration,
    NumericConstraint,
    PatternConstraint,
    Prompt,
    Template,
    TemplateConfig,
    TemplateUsage,
)
from formflow.strategies.template_engine.models import TEMPLATE_OPTIONS, is_unset
from formflow.strategies.terms import TermSpec


# =============================================================================
# TemplateConfig Tests
# =============================================================================


class TestTemplateConfig:
    """Test suite for TemplateConfig."""

    def test_new_record_is_unset(self):
        """Test that every option starts at its sentinel."""
        record = TemplateConfig.of("Hello")

        assert record.unresolved_options() == list(TEMPLATE_OPTIONS)
        assert not record.is_resolved
        assert record.localizable is True

    def test_is_unset(self):
        assert is_unset(None)
        assert is_unset(ChoiceStyle.DEFAULT)
        assert not is_unset(False)
        assert not is_unset("")
        assert not is_unset("default")

    def test_allow_numbers(self):
        """Test that numbers are allowed only with numbered, shown choices."""
        record = TemplateConfig.of("Pick one {||}", choice_format="{0}. {1}")
        assert record.allow_numbers is True

    def test_allow_numbers_without_number_placeholder(self):
        record = TemplateConfig.of("Pick one {||}", choice_format="{1}")
        assert record.allow_numbers is False

    def test_allow_numbers_without_choices_marker(self):
        record = TemplateConfig.of("Pick one", "Choose", choice_format="{0}. {1}")
        assert record.allow_numbers is False

    def test_allow_numbers_unset_format(self):
        assert TemplateConfig.of("Pick one {||}").allow_numbers is False

    def test_assignment_is_validated(self):
        """Test that options reject values outside their type."""
        record = TemplateConfig()

        with pytest.raises(ValidationError):
            record.choice_style = "sideways"

    def test_string_style_coerced(self):
        record = TemplateConfig(choice_style="per_line")
        assert record.choice_style is ChoiceStyle.PER_LINE

    def test_allow_default_documents_its_consumer(self):
        """Test that allow_default says it is read outside the engine."""
        description = TemplateConfig.model_fields["allow_default"].description

        assert "dialog layer" in description


# =============================================================================
# Prompt and Template Tests
# =============================================================================


class TestPromptAndTemplate:
    """Test suite for Prompt and Template records."""

    def test_template_copy(self):
        """Test that copying a template duplicates every option."""
        original = Template(
            usage=TemplateUsage.CONFIRMATION,
            patterns=["Is this right? {||}"],
            choice_style=ChoiceStyle.INLINE,
        )

        copy = Template.from_template(original)
        copy.patterns.append("Correct?")

        assert copy.usage is TemplateUsage.CONFIRMATION
        assert copy.choice_style is ChoiceStyle.INLINE
        assert original.patterns == ["Is this right? {||}"]

    def test_prompt_from_template(self):
        """Test that a prompt built from a template is not localizable."""
        template = Template(
            usage=TemplateUsage.ENUM_SELECT_ONE,
            patterns=["Please select a {&} {||}"],
            separator=" / ",
        )

        prompt = Prompt.from_template(template)

        assert isinstance(prompt, Prompt)
        assert prompt.patterns == template.patterns
        assert prompt.separator == " / "
        assert prompt.localizable is False
        assert not hasattr(prompt, "usage")


# =============================================================================
# Constraint and Declaration Tests
# =============================================================================


class TestConstraints:
    """Test suite for the value constraints."""

    def test_numeric_contains(self):
        constraint = NumericConstraint(min=1, max=10)

        assert constraint.contains(1)
        assert constraint.contains(10)
        assert not constraint.contains(10.5)

    def test_numeric_inverted_bounds(self):
        with pytest.raises(ValidationError, match="must not exceed"):
            NumericConstraint(min=5, max=1)

    def test_numeric_is_immutable(self):
        constraint = NumericConstraint(min=0, max=1)

        with pytest.raises(ValidationError):
            constraint.max = 2

    def test_pattern_full_match(self):
        constraint = PatternConstraint(pattern=r"\d{5}")

        assert constraint.matches("98052")
        assert not constraint.matches("98052-1234")

    def test_pattern_invalid(self):
        with pytest.raises(ValidationError, match="Invalid validation pattern"):
            PatternConstraint(pattern="[unclosed")


class TestFieldDeclaration:
    """Test suite for FieldDeclaration."""

    def test_description_from_describe(self):
        field = FieldDeclaration(name="colour", describe=Describe(description="favourite colour"))
        assert field.description == "favourite colour"

    def test_description_falls_back_to_name(self):
        assert FieldDeclaration(name="home_address").description == "home address"

    def test_template_lookup(self):
        override = Template(usage=TemplateUsage.BOOL, patterns=["Want {&}?"])
        field = FieldDeclaration(name="cheese", templates=[override])

        assert field.template(TemplateUsage.BOOL) is override
        assert field.template(TemplateUsage.HELP) is None

    def test_carries_terms_and_constraints(self):
        field = FieldDeclaration(
            name="size",
            terms=TermSpec.declare("large", "big"),
            numeric=NumericConstraint(min=1, max=3),
            optional=True,
        )

        assert [m.source for m in field.terms.compile()] == ["large", "big"]
        assert field.optional is True
