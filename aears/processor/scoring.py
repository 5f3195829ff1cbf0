"""Per-requirement derived fields: id, trigger, priority and confidence."""

from __future__ import annotations

from typing import Optional

from aears.parser.models import RequirementRecord, RequirementType
from .models import Priority


_BASE_CONFIDENCE = 0.5
_COMPLETE_FIELDS_BONUS = 0.3
_TRIGGER_BONUS = 0.2


def generate_id(index: int) -> str:
    """Return the ordinal id for the requirement at 0-based *index*.

    Examples::

        generate_id(0)   -> "req_001"
        generate_id(41)  -> "req_042"
    """
    return f"req_{index + 1:03d}"


def extract_trigger(record: RequirementRecord) -> Optional[str]:
    """Return the precondition, condition or state (first one set), or ``None``."""
    if record.precondition:
        return record.precondition
    if record.condition:
        return record.condition
    if record.state:
        return record.state
    return None


def calculate_priority(requirement_type: RequirementType) -> Priority:
    """Map a requirement type to a priority.

    Unwanted behaviour is high, event-driven is medium, everything else low.
    The functionality text is not considered.
    """
    if requirement_type == RequirementType.UW:
        return Priority.HIGH
    if requirement_type == RequirementType.EV:
        return Priority.MEDIUM
    return Priority.LOW


def calculate_confidence(record: RequirementRecord) -> float:
    """Completeness-based confidence in ``[0, 1]``.

    Starts at 0.5, adds 0.3 when both entity and functionality are present and
    0.2 when a trigger is present.
    """
    confidence = _BASE_CONFIDENCE
    if record.entity and record.functionality:
        confidence += _COMPLETE_FIELDS_BONUS
    if record.precondition or record.condition or record.state:
        confidence += _TRIGGER_BONUS
    return min(confidence, 1.0)
