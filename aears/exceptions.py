"""Exception hierarchy for the AEARS requirements pipeline.

Four failure kinds are distinguished:

* :class:`RequirementSyntaxError` -- a line matches none of the sentence
  templates.
* :class:`RequirementValidationError` -- a parsed requirement violates a
  pattern-specific rule (e.g. an event-driven requirement without its
  precondition).
* :class:`ProcessingError` -- anything unexpected while turning text into an
  extraction result.
* :class:`ConfigurationError` -- supplied settings fail type/range checks.
"""

from __future__ import annotations

from typing import Any, Optional


class AearsError(Exception):
    """Base class for every error raised by this package."""


class RequirementSyntaxError(AearsError):
    """Raised when a line matches none of the requirement templates."""

    def __init__(self, line: int, text: str) -> None:
        self.line = line
        self.text = text
        super().__init__(f"Line {line}: Malformed requirement: {text}")


class RequirementValidationError(AearsError):
    """Raised when a parsed requirement breaks its pattern's structural rules."""

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        self.details = details
        self.line = line
        self.column = column
        super().__init__(message)


class ProcessingError(AearsError):
    """Raised when requirement processing fails.

    The original exception, if any, is kept both as ``cause`` and as the
    chained ``__cause__`` so tracebacks show the real origin.
    """

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        self.cause = cause
        self.context = context or {}
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause


class ConfigurationError(AearsError):
    """Raised when configuration values are invalid."""

    def __init__(self, message: str, invalid_fields: Optional[list[str]] = None) -> None:
        self.invalid_fields = list(invalid_fields or [])
        super().__init__(message)
