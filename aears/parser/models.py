"""Pydantic v2 models for the AEARS requirement parser.

Defines the requirement pattern tags, the record produced for each matched
line, and the document-level parse result with its per-line errors.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class RequirementType(str, Enum):
    """Sentence template a requirement line matched.

    ``HY`` (hybrid, complex conditional statements) is part of the vocabulary
    but no template produces it yet.
    """
    UB = "UB"  # The <entity> shall <functionality>
    EV = "EV"  # When <precondition> the <entity> shall <functionality>
    UW = "UW"  # The <entity> shall not <functionality>
    ST = "ST"  # While <state> the <entity> shall <functionality>
    OP = "OP"  # If <condition> then / Where <condition> the <entity> shall ...
    HY = "HY"


PATTERN_TYPES: tuple[str, ...] = tuple(t.value for t in RequirementType)

# Types whose record carries exactly one trigger field, and which field it is.
TRIGGER_FIELDS: dict[RequirementType, str] = {
    RequirementType.EV: "precondition",
    RequirementType.ST: "state",
    RequirementType.OP: "condition",
}


# ---------------------------------------------------------------------------
# Requirement record
# ---------------------------------------------------------------------------

class RequirementRecord(BaseModel):
    """A single requirement decomposed into its typed fields."""

    model_config = ConfigDict(frozen=True)

    requirement_type: RequirementType = Field(..., description="Matched pattern tag")
    entity: str = Field(..., description="Actor or system the requirement applies to")
    functionality: str = Field(..., description="What the entity shall (not) do")
    precondition: Optional[str] = Field(default=None, description="EV trigger ('When ...')")
    state: Optional[str] = Field(default=None, description="ST trigger ('While ...')")
    condition: Optional[str] = Field(default=None, description="OP trigger ('If ... then' / 'Where ...')")
    negated: bool = Field(default=False, description="True for unwanted-behaviour requirements")
    line: Optional[int] = Field(default=None, ge=1, description="1-based source line, if known")


# ---------------------------------------------------------------------------
# Document parse result
# ---------------------------------------------------------------------------

class ParseError(BaseModel):
    """A line that could not be parsed."""
    line: int = Field(..., ge=1, description="1-based line number")
    message: str = Field(..., description="Human-readable error message")

    def __str__(self) -> str:
        return f"Line {self.line}: {self.message}"


class DocumentParseResult(BaseModel):
    """Requirements parsed from a document plus any per-line errors."""
    requirements: list[RequirementRecord] = Field(default_factory=list)
    errors: list[ParseError] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        """True when every non-blank line matched a template."""
        return not self.errors

    @property
    def error_messages(self) -> list[str]:
        """Errors formatted as ``"Line N: message"`` strings."""
        return [str(e) for e in self.errors]
