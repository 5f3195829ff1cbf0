"""Requirement and configuration validation."""

from aears.validation.validator import (
    ValidationIssue,
    ValidationResult,
    ValidationWarning,
    validate_configuration,
    validate_input,
    validate_record,
    validate_requirement,
)

__all__ = [
    "ValidationIssue",
    "ValidationResult",
    "ValidationWarning",
    "validate_configuration",
    "validate_input",
    "validate_record",
    "validate_requirement",
]
