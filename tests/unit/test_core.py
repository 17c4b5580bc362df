"""Unit tests for settings, logging setup and the component factory."""

import importlib
import logging

import pytest
from pydantic import ValidationError

from formflow.core import config, logging_config
from formflow.core.config import Settings, get_settings
from formflow.core.factory import ComponentFactory
from formflow.core.logging_config import setup_logging
from formflow.interfaces.terms import BaseTermCompiler
from formflow.strategies.choices import AutoTextChoiceRenderer, PerLineChoiceRenderer
from formflow.strategies.template_engine import CaseNormalization, ChoiceStyle, Prompt


# =============================================================================
# Settings Tests
# =============================================================================


class TestSettings:
    """Test suite for Settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.default_choice_style is ChoiceStyle.AUTO
        assert settings.default_field_case is CaseNormalization.LOWER
        assert settings.default_choice_format == "{0}. {1}"
        assert settings.auto_text_inline_threshold == 4

    def test_string_values_parsed(self):
        settings = Settings(_env_file=None, default_choice_style="per_line", log_level="debug")

        assert settings.default_choice_style is ChoiceStyle.PER_LINE
        assert settings.log_level == "DEBUG"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_CHOICE_LAST_SEPARATOR", " or maybe ")

        assert Settings(_env_file=None).default_choice_last_separator == " or maybe "

    def test_rejects_default_sentinel(self):
        """Test that global defaults must be concrete."""
        with pytest.raises(ValidationError, match="cannot be 'default'"):
            Settings(_env_file=None, default_choice_style="default")

    def test_rejects_format_without_label(self):
        with pytest.raises(ValidationError, match="must contain"):
            Settings(_env_file=None, default_choice_format="{0}.")

    def test_rejects_zero_threshold(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, auto_text_inline_threshold=0)

    def test_get_settings_is_singleton(self, monkeypatch):
        """Test that get_settings builds the settings once and reuses them."""
        monkeypatch.setattr(config, "_settings", None)

        first = get_settings()

        assert get_settings() is first
        assert isinstance(first, Settings)


# =============================================================================
# Logging Tests
# =============================================================================


class TestSetupLogging:
    """Test suite for setup_logging."""

    @pytest.fixture(autouse=True)
    def restore_root_handlers(self):
        """Put the root logger back the way pytest configured it."""
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_console_only(self):
        root = setup_logging(Settings(_env_file=None))

        assert len(root.handlers) == 1
        assert root.level == logging.INFO

    def test_with_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "formflow.log"

        root = setup_logging(Settings(_env_file=None, log_file=log_file, log_level="DEBUG"))
        logging.getLogger("formflow.test").debug("written to file")

        assert len(root.handlers) == 2
        assert root.level == logging.DEBUG
        for handler in root.handlers:
            handler.flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_import_leaves_logging_alone(self):
        """Test that importing the core package installs no handlers."""
        root = logging.getLogger()
        handlers = list(root.handlers)

        importlib.reload(logging_config)
        importlib.reload(importlib.import_module("formflow.core"))

        assert root.handlers == handlers


# =============================================================================
# ComponentFactory Tests
# =============================================================================


class TestComponentFactory:
    """Test suite for ComponentFactory."""

    @pytest.fixture
    def factory(self):
        return ComponentFactory(Settings(_env_file=None, random_seed=7, auto_text_inline_threshold=3))

    def test_components_are_cached(self, factory):
        assert factory.get_random_source() is factory.get_random_source()
        assert factory.get_pattern_selector() is factory.get_pattern_selector()
        assert factory.get_cascade() is factory.get_cascade()
        assert factory.get_term_compiler() is factory.get_term_compiler()
        assert factory.get_prompt_formatter() is factory.get_prompt_formatter()

    def test_seeded_selection_repeats(self):
        """Test that a configured seed makes selection reproducible."""
        record = Prompt.of("a", "b", "c", "d")
        picks = []
        for _ in range(2):
            selector = ComponentFactory(Settings(_env_file=None, random_seed=11)).get_pattern_selector()
            picks.append([selector.select(record) for _ in range(10)])

        assert picks[0] == picks[1]

    def test_choice_renderer_by_name(self, factory):
        renderer = factory.get_choice_renderer("per_line")

        assert isinstance(renderer, PerLineChoiceRenderer)
        assert factory.get_choice_renderer(ChoiceStyle.PER_LINE) is renderer

    def test_auto_text_threshold_from_settings(self, factory):
        renderer = factory.get_choice_renderer(ChoiceStyle.AUTO_TEXT)

        assert isinstance(renderer, AutoTextChoiceRenderer)
        assert renderer.inline_threshold == 3

    def test_unknown_choice_style(self, factory):
        with pytest.raises(ValueError, match="Unknown choice style"):
            factory.get_choice_renderer("sideways")

    def test_term_compiler(self, factory):
        compiler = factory.get_term_compiler()

        assert isinstance(compiler, BaseTermCompiler)

    def test_end_to_end_prompt(self, factory):
        """Test resolving and formatting a prompt through factory components."""
        cascade = factory.get_cascade()
        prompt = cascade.resolve(Prompt.of("Which {&}? {||}", choice_style=ChoiceStyle.AUTO_TEXT))

        text = factory.get_prompt_formatter().format(
            prompt, field="Size", choices=["Small", "Medium", "Large"]
        )

        assert text == "Which size? 1. Small\n2. Medium\n3. Large"
