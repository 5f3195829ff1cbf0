"""Pydantic v2 models for processed requirements and extraction results.

Everything the pipeline hands to report, export and diagram generators lives
here: the per-requirement classification, the category groups, the quality
metrics and the coverage report, bundled into an :class:`ExtractionResult`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from aears.parser.models import RequirementRecord


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SUPPORTED_DOMAINS: tuple[str, ...] = (
    "system",
    "user-interface",
    "security",
    "performance",
    "data",
    "integration",
    "business",
    "technical",
)

OutputFormat = Literal["json", "structured", "markdown"]


class Priority(str, Enum):
    """Requirement priority level."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

class ProcessingInput(BaseModel):
    """Requirement text with optional caller context."""
    text: str = Field(..., description="AEARS document text")
    context: Optional[str] = Field(default=None, description="Free-form context hint")
    metadata: Optional[dict[str, Any]] = Field(default=None, description="Caller metadata")


class ProcessingOptions(BaseModel):
    """Per-call processing options."""
    domains: Optional[list[str]] = Field(
        default=None, description="Keep only these categories and report coverage for them"
    )
    max_requirements: Optional[int] = Field(
        default=None, ge=0, description="Truncate the requirement list to this length"
    )
    min_quality: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    output_format: Optional[OutputFormat] = Field(default=None)


InputLike = Union[str, ProcessingInput]


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class ProcessedRequirement(BaseModel):
    """A parsed requirement with its derived classification."""
    id: str = Field(..., description="Stable ordinal id, e.g. 'req_001'")
    pattern: str = Field(..., description="Pattern tag of the source record")
    trigger: Optional[str] = Field(default=None, description="Precondition, condition or state")
    response: str = Field(..., description="The required functionality")
    category: str = Field(..., description="Functional category")
    priority: Priority = Field(..., description="Derived priority")
    confidence: float = Field(..., ge=0.0, le=1.0, description="Completeness score")
    original: RequirementRecord = Field(..., description="Record this was derived from")


class RequirementGroup(BaseModel):
    """Requirements sharing a category."""
    name: str = Field(..., description="Category name")
    theme: str = Field(..., description="'<category>-<dominant pattern>'")
    requirements: list[str] = Field(default_factory=list, description="Member requirement ids")


class QualityMetrics(BaseModel):
    """Aggregate quality figures for a requirement set."""
    total_requirements: int = Field(default=0, ge=0)
    valid_requirements: int = Field(default=0, ge=0)
    average_confidence: float = Field(default=0.0, ge=0.0)
    pattern_distribution: dict[str, int] = Field(default_factory=dict)
    quality_score: float = Field(default=0.0, ge=0.0)


class CoverageReport(BaseModel):
    """Percentage share of requirements per domain and per pattern (0-100)."""
    domain_coverage: dict[str, float] = Field(default_factory=dict)
    pattern_coverage: dict[str, float] = Field(default_factory=dict)
    overall_coverage: float = Field(default=0.0)


class ExtractionResult(BaseModel):
    """Everything produced by one pipeline pass."""
    requirements: list[ProcessedRequirement] = Field(default_factory=list)
    groups: list[RequirementGroup] = Field(default_factory=list)
    metrics: QualityMetrics = Field(default_factory=QualityMetrics)
    coverage: CoverageReport = Field(default_factory=CoverageReport)


class BatchResult(BaseModel):
    """Outcome of one batch item: either ``result`` or ``error`` is set."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    input: InputLike
    index: int = Field(..., ge=0)
    result: Optional[ExtractionResult] = None
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.result is not None and self.error is None
