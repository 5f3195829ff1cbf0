"""Quality analysis: issue detection and improvement recommendations.

Looks at a processed requirement set as a whole and flags low-confidence
requirements, pattern imbalance, missing security coverage and vague
wording, then suggests what to improve.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from aears.processor.models import (
    CoverageReport,
    ExtractionResult,
    Priority,
    ProcessedRequirement,
    QualityMetrics,
)


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class QualityIssue(BaseModel):
    """A problem spotted in a requirement set."""
    type: str = Field(default="warning", description="'warning' or 'error'")
    message: str = Field(..., description="Human-readable description")
    requirement_id: Optional[str] = Field(default=None)
    severity: Severity = Field(default=Severity.MEDIUM)


class QualityReport(QualityMetrics):
    """Quality metrics plus detected issues and recommendations."""
    issues: list[QualityIssue] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Thresholds
# ---------------------------------------------------------------------------

_LOW_CONFIDENCE = 0.5
_DOMINANT_PATTERN_SHARE = 0.7
_SECURITY_CHECK_MIN_REQUIREMENTS = 5
_VAGUE_MIN_CHARS = 20
_VAGUE_MIN_WORDS = 3
_VAGUE_SHARE = 0.3
_SECURITY_TERMS = ["security", "authenticate"]


def _is_vague(req: ProcessedRequirement) -> bool:
    return len(req.response) < _VAGUE_MIN_CHARS or len(req.response.split(" ")) < _VAGUE_MIN_WORDS


def _is_security_related(req: ProcessedRequirement) -> bool:
    response = req.response.lower()
    return req.category == "security" or any(term in response for term in _SECURITY_TERMS)


class QualityAnalyzer:
    """Derives quality issues and recommendations from processed requirements."""

    def identify_quality_issues(
        self, requirements: Sequence[ProcessedRequirement]
    ) -> list[QualityIssue]:
        issues: list[QualityIssue] = []
        total = len(requirements)

        low_confidence = [r for r in requirements if r.confidence < _LOW_CONFIDENCE]
        if low_confidence:
            issues.append(QualityIssue(
                message=f"{len(low_confidence)} requirements have low confidence scores",
                severity=Severity.MEDIUM,
            ))

        pattern_counts = Counter(r.pattern for r in requirements)
        if pattern_counts:
            dominant, count = pattern_counts.most_common(1)[0]
            if count / total > _DOMINANT_PATTERN_SHARE:
                issues.append(QualityIssue(
                    message=f"Over 70% of requirements use {dominant} pattern",
                    severity=Severity.LOW,
                ))

        has_security = any(_is_security_related(r) for r in requirements)
        if not has_security and total > _SECURITY_CHECK_MIN_REQUIREMENTS:
            issues.append(QualityIssue(
                message="No security-related requirements detected",
                severity=Severity.HIGH,
            ))

        vague = [r for r in requirements if _is_vague(r)]
        if len(vague) > total * _VAGUE_SHARE:
            issues.append(QualityIssue(
                message="Many requirements appear to be vague or incomplete",
                severity=Severity.MEDIUM,
            ))

        return issues

    def generate_recommendations(
        self,
        metrics: QualityMetrics,
        requirements: Sequence[ProcessedRequirement],
    ) -> list[str]:
        recommendations: list[str] = []
        total = len(requirements)

        if metrics.quality_score < 0.6:
            recommendations.append(
                "Consider reviewing and refining requirements to improve overall quality score"
            )

        if len(metrics.pattern_distribution) < 3 and total > 10:
            recommendations.append(
                "Consider using more diverse requirement patterns (UB, EV, UW, ST, OP) "
                "for comprehensive coverage"
            )

        if metrics.average_confidence < 0.7:
            recommendations.append(
                "Review requirements with low confidence scores and add more specific details"
            )

        categories = {r.category for r in requirements}
        if len(categories) < 3 and total > 15:
            recommendations.append(
                "Consider adding requirements across more functional domains for better coverage"
            )

        high = sum(1 for r in requirements if r.priority == Priority.HIGH)
        if high and high / total > 0.5:
            recommendations.append(
                "Consider reviewing priority assignments - too many high-priority "
                "requirements may indicate unclear prioritization"
            )
        if not high:
            recommendations.append(
                "Consider identifying critical requirements and marking them as high priority"
            )

        return recommendations

    def analyze_quality(self, result: ExtractionResult) -> QualityReport:
        """Build a :class:`QualityReport` for an extraction result."""
        return QualityReport(
            **result.metrics.model_dump(),
            issues=self.identify_quality_issues(result.requirements),
            recommendations=self.generate_recommendations(result.metrics, result.requirements),
        )

    def analyze_coverage(self, result: ExtractionResult) -> CoverageReport:
        return result.coverage
