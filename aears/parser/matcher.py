"""Single-line pattern matcher for AEARS requirement sentences.

Each line is tried against the sentence templates in a fixed order and the
first match wins.  The order matters: ``The X shall not Y`` also satisfies the
looser ``The X shall Y`` template, so the unwanted-behaviour form is tried
first.  Keywords are case-insensitive; captured text is kept verbatim.
"""

from __future__ import annotations

import re
from typing import Optional

from aears.exceptions import RequirementSyntaxError
from .models import TRIGGER_FIELDS, RequirementRecord, RequirementType


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

_EV_PATTERN = re.compile(r"^When\s+(.+?)\s+the\s+(.+?)\s+shall\s+(.+)$", re.IGNORECASE)
_ST_PATTERN = re.compile(r"^While\s+(.+?)\s+the\s+(.+?)\s+shall\s+(.+)$", re.IGNORECASE)
_OP_IF_PATTERN = re.compile(
    r"^If\s+(.+?)\s+then\s+the\s+(.+?)\s+shall\s+(.+)$", re.IGNORECASE
)
_OP_WHERE_PATTERN = re.compile(r"^Where\s+(.+?)\s+the\s+(.+?)\s+shall\s+(.+)$", re.IGNORECASE)
_UW_PATTERN = re.compile(r"^The\s+(.+?)\s+shall\s+not\s+(.+)$", re.IGNORECASE)
_UB_PATTERN = re.compile(r"^The\s+(.+?)\s+shall\s+(.+)$", re.IGNORECASE)

# Tried in order; for triggered types group 1 holds the trigger.
_TEMPLATES: list[tuple[re.Pattern[str], RequirementType]] = [
    (_EV_PATTERN, RequirementType.EV),
    (_ST_PATTERN, RequirementType.ST),
    (_OP_IF_PATTERN, RequirementType.OP),
    (_OP_WHERE_PATTERN, RequirementType.OP),
    (_UW_PATTERN, RequirementType.UW),
    (_UB_PATTERN, RequirementType.UB),
]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def match_line(line: str, line_number: Optional[int] = None) -> Optional[RequirementRecord]:
    """Match one trimmed, non-empty line against the requirement templates.

    Args:
        line: The requirement sentence.
        line_number: Optional 1-based source line stored on the record.

    Returns:
        The decomposed requirement, or ``None`` when no template matches.
    """
    for pattern, requirement_type in _TEMPLATES:
        match = pattern.match(line)
        if match is None:
            continue

        trigger_field = TRIGGER_FIELDS.get(requirement_type)
        if trigger_field is None:
            return RequirementRecord(
                requirement_type=requirement_type,
                entity=match.group(1),
                functionality=match.group(2),
                negated=requirement_type == RequirementType.UW,
                line=line_number,
            )

        return RequirementRecord(
            requirement_type=requirement_type,
            entity=match.group(2),
            functionality=match.group(3),
            line=line_number,
            **{trigger_field: match.group(1)},
        )

    return None


def parse_line(line: str, line_number: int = 1) -> RequirementRecord:
    """Strict variant of :func:`match_line`.

    Raises:
        RequirementSyntaxError: If the line matches no template.
    """
    text = line.strip()
    record = match_line(text, line_number) if text else None
    if record is None:
        raise RequirementSyntaxError(line_number, text)
    return record
