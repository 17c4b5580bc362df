"""Template engine domain models.

Pydantic models for the declarations a form field carries: prompt and
template records with their formatting options, display descriptions, and
value constraints. Records are built with every option unset and are filled
in by the default cascade.
"""

import enum
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from formflow.strategies.terms.spec import TermSpec

# Marker substituted with the rendered choice list.
CHOICES_MARKER = "{||}"
# Placeholder in choice_format receiving the 1-based choice number.
NUMBER_PLACEHOLDER = "{0}"
# Placeholder in choice_format receiving the choice label.
LABEL_PLACEHOLDER = "{1}"


class ChoiceStyle(str, enum.Enum):
    """How the choices for a field are presented.

    AUTO, BUTTONS and CAROUSEL are layout directives for the channel layer;
    the remaining styles are rendered to text here.
    """

    DEFAULT = "default"
    AUTO = "auto"
    AUTO_TEXT = "auto_text"
    INLINE = "inline"
    PER_LINE = "per_line"
    INLINE_NO_PAREN = "inline_no_paren"
    BUTTONS = "buttons"
    CAROUSEL = "carousel"


class CaseNormalization(str, enum.Enum):
    """Case applied to choices, field names or values."""

    DEFAULT = "default"
    INITIAL_UPPER = "initial_upper"
    LOWER = "lower"
    UPPER = "upper"
    NONE = "none"


class FeedbackOptions(str, enum.Enum):
    """When to echo back what was understood from the user."""

    DEFAULT = "default"
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class TemplateUsage(str, enum.Enum):
    """Built-in template slots a Template record can override."""

    NONE = "none"
    ATTACHMENT_COLLECTION = "attachment_collection"
    ATTACHMENT_COLLECTION_DESCRIPTION = "attachment_collection_description"
    ATTACHMENT_COLLECTION_HELP = "attachment_collection_help"
    ATTACHMENT_CONTENT_TYPE_VALIDATOR_ERROR = "attachment_content_type_validator_error"
    ATTACHMENT_CONTENT_TYPE_VALIDATOR_HELP = "attachment_content_type_validator_help"
    ATTACHMENT_FIELD = "attachment_field"
    ATTACHMENT_FIELD_DESCRIPTION = "attachment_field_description"
    ATTACHMENT_FIELD_HELP = "attachment_field_help"
    BOOL = "bool"
    BOOL_HELP = "bool_help"
    CLARIFY = "clarify"
    CONFIRMATION = "confirmation"
    CURRENT_CHOICE = "current_choice"
    DATE_TIME = "date_time"
    DATE_TIME_HELP = "date_time_help"
    DOUBLE = "double"
    DOUBLE_HELP = "double_help"
    ENUM_ONE_NUMBER_HELP = "enum_one_number_help"
    ENUM_MANY_NUMBER_HELP = "enum_many_number_help"
    ENUM_ONE_WORD_HELP = "enum_one_word_help"
    ENUM_MANY_WORD_HELP = "enum_many_word_help"
    ENUM_SELECT_ONE = "enum_select_one"
    ENUM_SELECT_MANY = "enum_select_many"
    FEEDBACK = "feedback"
    HELP = "help"
    HELP_CLARIFY = "help_clarify"
    HELP_CONFIRM = "help_confirm"
    HELP_NAVIGATION = "help_navigation"
    INTEGER = "integer"
    INTEGER_HELP = "integer_help"
    NAVIGATION = "navigation"
    NAVIGATION_COMMAND_HELP = "navigation_command_help"
    NAVIGATION_FORMAT = "navigation_format"
    NAVIGATION_HELP = "navigation_help"
    NO_PREFERENCE = "no_preference"
    NOT_UNDERSTOOD = "not_understood"
    STATUS_FORMAT = "status_format"
    STRING = "string"
    STRING_HELP = "string_help"
    UNSPECIFIED = "unspecified"


_SENTINELS = (
    ChoiceStyle.DEFAULT,
    CaseNormalization.DEFAULT,
    FeedbackOptions.DEFAULT,
)

# Options that participate in the default cascade.
TEMPLATE_OPTIONS: tuple[str, ...] = (
    "allow_default",
    "choice_case",
    "choice_format",
    "choice_last_separator",
    "choice_parens",
    "choice_separator",
    "choice_style",
    "feedback",
    "field_case",
    "last_separator",
    "separator",
    "value_case",
)


def is_unset(value: Any) -> bool:
    """Return True if an option value means "inherit from the enclosing scope"."""
    return value is None or any(value is sentinel for sentinel in _SENTINELS)


class TemplateConfig(BaseModel):
    """A templated string declaration and every option that formats it.

    All options start unset (``None`` or the enum's DEFAULT member) and are
    filled from more general scopes by the default cascade.
    """

    model_config = ConfigDict(validate_assignment=True)

    patterns: list[str] = Field(
        default_factory=list,
        description="Candidate pattern strings, one is picked per prompt",
    )
    allow_default: bool | None = Field(
        default=None,
        description="Offer the current value as a choice; read by the dialog layer, not the engine",
    )
    choice_case: CaseNormalization = CaseNormalization.DEFAULT
    choice_format: str | None = Field(
        default=None, description="Format for one choice: {0} is the number, {1} the label"
    )
    choice_last_separator: str | None = None
    choice_parens: bool | None = Field(
        default=None, description="Wrap inline choices in parentheses"
    )
    choice_separator: str | None = None
    choice_style: ChoiceStyle = ChoiceStyle.DEFAULT
    feedback: FeedbackOptions = FeedbackOptions.DEFAULT
    field_case: CaseNormalization = CaseNormalization.DEFAULT
    last_separator: str | None = None
    separator: str | None = None
    value_case: CaseNormalization = CaseNormalization.DEFAULT
    localizable: bool = Field(
        default=True, description="Include in generated localization resources"
    )

    @classmethod
    def of(cls, *patterns: str, **options: Any) -> "TemplateConfig":
        """Build a record from positional patterns and keyword options."""
        return cls(patterns=list(patterns), **options)

    @property
    def allow_numbers(self) -> bool:
        """True when choices are numbered and shown, so numbers can be matched."""
        return (
            self.choice_format is not None
            and NUMBER_PLACEHOLDER in self.choice_format
            and any(CHOICES_MARKER in pattern for pattern in self.patterns)
        )

    def unresolved_options(self) -> list[str]:
        """Return the names of options still at their sentinel."""
        return [name for name in TEMPLATE_OPTIONS if is_unset(getattr(self, name))]

    @property
    def is_resolved(self) -> bool:
        """True when no option is left to inherit."""
        return not self.unresolved_options()


class Prompt(TemplateConfig):
    """The prompt used when asking for a field."""

    @classmethod
    def from_template(cls, template: "TemplateConfig") -> "Prompt":
        """Build a prompt that reuses a template's patterns and options.

        Prompts built this way come from code rather than declarations, so
        they are not localizable.
        """
        data = template.model_dump(exclude={"usage", "localizable"})
        return cls(**data, localizable=False)


class Template(TemplateConfig):
    """A record overriding one of the built-in template usages."""

    usage: TemplateUsage = TemplateUsage.NONE

    @classmethod
    def from_template(cls, other: "Template") -> "Template":
        """Copy every option and pattern of another template."""
        return other.model_copy(deep=True)


class Describe(BaseModel):
    """Display strings for a field or enum value."""

    model_config = ConfigDict(frozen=True)

    description: str | None = None
    title: str | None = None
    subtitle: str | None = None
    image: str | None = Field(default=None, description="URL of an image for cards")
    message: str | None = Field(default=None, description="Text posted when chosen")
    localizable: bool = True


class NumericConstraint(BaseModel):
    """Inclusive numeric bounds for a field."""

    model_config = ConfigDict(frozen=True)

    min: float
    max: float

    @model_validator(mode="after")
    def check_bounds(self) -> "NumericConstraint":
        """Reject inverted bounds."""
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


class PatternConstraint(BaseModel):
    """Regular expression a string field's value must fully match."""

    model_config = ConfigDict(frozen=True)

    pattern: str

    @field_validator("pattern")
    @classmethod
    def check_pattern(cls, v: str) -> str:
        """Fail at declaration time on an invalid expression."""
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid validation pattern {v!r}: {e}") from e
        return v

    def matches(self, text: str) -> bool:
        return re.fullmatch(self.pattern, text) is not None


class FieldDeclaration(BaseModel):
    """Everything declared on one field, as handed over by the model reflection layer."""

    name: str
    describe: Describe | None = None
    prompt: Prompt | None = None
    templates: list[Template] = Field(default_factory=list)
    terms: TermSpec | None = None
    numeric: NumericConstraint | None = None
    pattern: PatternConstraint | None = None
    optional: bool = False

    @property
    def description(self) -> str:
        """The text shown for the field, falling back to its name."""
        if self.describe is not None and self.describe.description:
            return self.describe.description
        return self.name.replace("_", " ")

    def template(self, usage: TemplateUsage) -> Template | None:
        """Return the field-level override for a usage, if declared."""
        for template in self.templates:
            if template.usage is usage:
                return template
        return None
