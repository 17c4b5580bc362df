"""Application configuration using Pydantic v2 Settings.

Centralized configuration that loads from environment variables and
supplies the global template defaults every record falls back to.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from formflow.strategies.template_engine.models import (
    LABEL_PLACEHOLDER,
    CaseNormalization,
    ChoiceStyle,
    FeedbackOptions,
)

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Randomness
    random_seed: int | None = Field(
        default=None,
        description="Seed for pattern selection. Unset draws from the OS.",
    )

    # Choice rendering
    auto_text_inline_threshold: int = Field(
        default=4,
        ge=1,
        description="Choice count from which the auto_text style renders one per line.",
    )

    # Global template defaults
    default_choice_style: ChoiceStyle = Field(default=ChoiceStyle.AUTO)
    default_choice_case: CaseNormalization = Field(default=CaseNormalization.NONE)
    default_field_case: CaseNormalization = Field(default=CaseNormalization.LOWER)
    default_value_case: CaseNormalization = Field(default=CaseNormalization.INITIAL_UPPER)
    default_feedback: FeedbackOptions = Field(default=FeedbackOptions.AUTO)
    default_allow_default: bool = Field(
        default=True,
        description="Offer the current value as a choice. Consumed by the dialog layer.",
    )
    default_choice_parens: bool = Field(
        default=True,
        description="Wrap inline choices in parentheses.",
    )
    default_separator: str = Field(default=", ")
    default_last_separator: str = Field(default=" and ")
    default_choice_separator: str = Field(default=", ")
    default_choice_last_separator: str = Field(default=" or ")
    default_choice_format: str = Field(
        default="{0}. {1}",
        description="Format for one choice: {0} is the number, {1} the label.",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional file receiving log output in addition to the console.",
    )

    @field_validator("default_choice_style", "default_choice_case", "default_field_case",
                     "default_value_case", "default_feedback")
    @classmethod
    def reject_default_sentinel(cls, v: str) -> str:
        """Global defaults are the end of the cascade and must be concrete."""
        if v == "default":
            raise ValueError("global template defaults cannot be 'default'")
        return v

    @field_validator("default_choice_format")
    @classmethod
    def check_choice_format(cls, v: str) -> str:
        """Require the label placeholder in the choice format."""
        if LABEL_PLACEHOLDER not in v:
            raise ValueError(f"choice format must contain {LABEL_PLACEHOLDER}: {v!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    def configure_logging(self) -> None:
        """Configure global logging based on settings."""
        import structlog

        level = getattr(logging, self.log_level, logging.INFO)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=level,
        )

        logger.setLevel(level)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.configure_logging()
    return _settings
