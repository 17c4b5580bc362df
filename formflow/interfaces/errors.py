"""Declaration errors raised by the template and term engines.

All of these indicate a malformed declaration rather than a runtime
condition, so they are raised immediately and never retried.
"""


class TemplateConfigurationError(Exception):
    """Exception raised when a template or term declaration is malformed."""

    pass


class EmptyPatternListError(TemplateConfigurationError, IndexError):
    """Raised when a pattern is requested from a record with no patterns."""

    pass


class InvalidPhraseLengthError(TemplateConfigurationError, ValueError):
    """Raised when a maximum phrase length below 1 is requested."""

    pass


class UnresolvedTemplateError(TemplateConfigurationError):
    """Raised when the default cascade leaves options unset."""

    def __init__(self, unresolved: list[str]) -> None:
        self.unresolved = unresolved
        super().__init__(
            f"Template options still unresolved after applying defaults: "
            f"{', '.join(unresolved)}"
        )
