"""Keyword-based functional categorisation of requirements."""

from __future__ import annotations

from typing import Optional

from aears.parser.models import RequirementRecord


_SYSTEM_ENTITY_KEYWORDS = ["system", "application"]
_SECURITY_KEYWORDS = ["authenticate", "login", "security"]
_DATA_KEYWORDS = ["store", "data", "save"]
_UI_KEYWORDS = ["interface", "display", "show"]


def _contains_any(text: str, keywords: list[str]) -> bool:
    return any(kw in text for kw in keywords)


def _categorize_system_functionality(functionality: str) -> str:
    """Pick a category for a requirement whose entity is the system itself."""
    if _contains_any(functionality, _SECURITY_KEYWORDS):
        return "security"
    if _contains_any(functionality, _DATA_KEYWORDS):
        return "data"
    if _contains_any(functionality, _UI_KEYWORDS):
        return "user-interface"
    return "system"


def categorize(entity: str, functionality: str) -> str:
    """Assign a functional category from entity and functionality text.

    Returns one of ``security``, ``data``, ``user-interface``, ``system`` or
    ``business``.
    """
    entity_lower = entity.lower()
    functionality_lower = functionality.lower()

    if _contains_any(entity_lower, _SYSTEM_ENTITY_KEYWORDS):
        return _categorize_system_functionality(functionality_lower)
    if "user" in entity_lower:
        return "user-interface"
    return "business"


def categorize_requirement(record: RequirementRecord, context: Optional[str] = None) -> str:
    """Categorise a parsed requirement.

    ``context`` is accepted for callers that pass one through but does not
    influence the result.
    """
    return categorize(record.entity, record.functionality)
