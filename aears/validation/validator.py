"""Requirement validation entry point used by editor integrations.

Validates a single requirement line or an already structured record.
Errors make a requirement invalid; warnings only point at weak wording.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, Field

from aears.config import build_config
from aears.exceptions import ProcessingError, RequirementValidationError
from aears.parser import RequirementRecord, RequirementType, parse_document
from aears.processor.models import InputLike, ProcessingInput


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------

class ValidationIssue(BaseModel):
    """A blocking validation problem."""
    message: str
    details: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None


class ValidationWarning(BaseModel):
    """A non-blocking remark with a suggested improvement."""
    message: str
    suggestion: Optional[str] = None
    line: Optional[int] = None


class ValidationResult(BaseModel):
    """Outcome of validating one requirement."""
    valid: bool = True
    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationWarning] = Field(default_factory=list)

    def raise_for_errors(self) -> None:
        """Raise the first error as a :class:`RequirementValidationError`."""
        if self.errors:
            first = self.errors[0]
            raise RequirementValidationError(first.message, first.details, first.line, first.column)


# ---------------------------------------------------------------------------
# Rule tables
# ---------------------------------------------------------------------------

_MIN_ENTITY_CHARS = 3
_MIN_FUNCTIONALITY_CHARS = 10
_MIN_FUNCTIONALITY_WORDS = 3
_WEAK_WORDS = ["should", "could"]
_AMBIGUOUS_TERMS = ["appropriate", "reasonable", "efficient", "user-friendly"]

# type -> (required field, error message, details)
_PATTERN_RULES: dict[RequirementType, tuple[str, str, str]] = {
    RequirementType.EV: (
        "precondition",
        "Event-driven requirement missing precondition",
        'EV patterns must specify "When [precondition]"',
    ),
    RequirementType.ST: (
        "state",
        "State-driven requirement missing state condition",
        'ST patterns must specify "While [state]"',
    ),
    RequirementType.OP: (
        "condition",
        "Option requirement missing condition",
        'OP patterns must specify "If [condition]" or "Where [condition]"',
    ),
}


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------

def _check_basic_fields(
    record: RequirementRecord,
    errors: list[ValidationIssue],
    warnings: list[ValidationWarning],
) -> None:
    if not record.entity or not record.entity.strip():
        errors.append(ValidationIssue(
            message="Missing entity",
            details="Requirements must specify an entity (actor or system)",
            line=record.line,
        ))
    elif len(record.entity) < _MIN_ENTITY_CHARS:
        warnings.append(ValidationWarning(
            message="Entity name is very short",
            suggestion="Consider using more descriptive entity names",
            line=record.line,
        ))

    if not record.functionality or not record.functionality.strip():
        errors.append(ValidationIssue(
            message="Missing functionality",
            details="Requirements must specify what the entity shall do",
            line=record.line,
        ))
    elif len(record.functionality) < _MIN_FUNCTIONALITY_CHARS:
        warnings.append(ValidationWarning(
            message="Functionality description is very brief",
            suggestion="Consider adding more detail to clarify the requirement",
            line=record.line,
        ))


def _check_pattern_fields(record: RequirementRecord, errors: list[ValidationIssue]) -> None:
    rule = _PATTERN_RULES.get(record.requirement_type)
    if rule is None:
        return
    field_name, message, details = rule
    if not getattr(record, field_name):
        errors.append(ValidationIssue(message=message, details=details, line=record.line))


def _check_wording(record: RequirementRecord, warnings: list[ValidationWarning]) -> None:
    functionality = record.functionality
    if any(word in functionality for word in _WEAK_WORDS):
        warnings.append(ValidationWarning(
            message="Weak requirement language detected",
            suggestion='Replace "should" or "could" with "shall" for stronger requirements',
            line=record.line,
        ))

    if len(functionality.split(" ")) < _MIN_FUNCTIONALITY_WORDS:
        warnings.append(ValidationWarning(
            message="Very brief functionality description",
            suggestion="Add more detail to make the requirement clearer",
            line=record.line,
        ))

    lower = functionality.lower()
    found = [term for term in _AMBIGUOUS_TERMS if term in lower]
    if found:
        warnings.append(ValidationWarning(
            message=f"Ambiguous terms detected: {', '.join(found)}",
            suggestion="Replace with specific, measurable criteria",
            line=record.line,
        ))


def validate_record(record: RequirementRecord) -> ValidationResult:
    """Run every structural and wording check against a parsed record."""
    errors: list[ValidationIssue] = []
    warnings: list[ValidationWarning] = []
    _check_basic_fields(record, errors, warnings)
    _check_pattern_fields(record, errors)
    _check_wording(record, warnings)
    return ValidationResult(valid=not errors, errors=errors, warnings=warnings)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

_TEXT_FIELDS = ("entity", "functionality")


def validate_requirement(
    requirement: Union[str, RequirementRecord, dict[str, Any]],
) -> ValidationResult:
    """Validate one requirement line or structured record.

    When a string holds several requirements only the first is validated and
    a warning says so.

    Raises:
        ProcessingError: If validation itself fails unexpectedly.
    """
    try:
        if isinstance(requirement, str):
            parsed = parse_document(requirement.strip())
            if not parsed.success:
                return ValidationResult(valid=False, errors=[ValidationIssue(
                    message="Failed to parse requirement",
                    details="; ".join(parsed.error_messages),
                    line=parsed.errors[0].line,
                )])
            if not parsed.requirements:
                return ValidationResult(valid=False, errors=[ValidationIssue(
                    message="No valid requirements found",
                    details="Input does not contain recognizable AEARS patterns",
                )])

            result = validate_record(parsed.requirements[0])
            if len(parsed.requirements) > 1:
                result.warnings.insert(0, ValidationWarning(
                    message="Multiple requirements found, validating first one only",
                    suggestion="Split into separate validation calls for each requirement",
                ))
            return result

        if isinstance(requirement, RequirementRecord):
            record = requirement
        else:
            # Absent fields are reported as "Missing ..." errors, not schema failures.
            fields = dict(requirement)
            for name in _TEXT_FIELDS:
                if fields.get(name) is None:
                    fields[name] = ""
            record = RequirementRecord.model_validate(fields)
        return validate_record(record)
    except Exception as exc:
        raise ProcessingError("Error during requirement validation", cause=exc) from exc


def validate_input(source: InputLike) -> bool:
    """Return ``True`` if *source* is non-blank and parses without errors."""
    text = source.text if isinstance(source, ProcessingInput) else source
    if not text or not text.strip():
        return False
    parsed = parse_document(text)
    return parsed.success and len(parsed.requirements) > 0


def validate_configuration(settings: dict[str, Any]) -> None:
    """Check a configuration mapping without applying it.

    Raises:
        ConfigurationError: Listing every invalid field.
    """
    build_config(settings)
