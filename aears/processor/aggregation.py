"""Grouping, metrics and coverage aggregation over processed requirements.

All functions are pure: they build fresh models from their inputs and never
modify them.  Every division is guarded so that an empty requirement set
yields zeros rather than ``NaN`` or ``ZeroDivisionError``.
"""

from __future__ import annotations

from collections import Counter
from typing import Optional, Sequence

from aears.parser.models import PATTERN_TYPES
from .models import (
    SUPPORTED_DOMAINS,
    CoverageReport,
    ExtractionResult,
    ProcessedRequirement,
    QualityMetrics,
    RequirementGroup,
)


VALID_CONFIDENCE_THRESHOLD = 0.5


# ---------------------------------------------------------------------------
# Grouping
# ---------------------------------------------------------------------------

def _generate_theme(category: str, members: list[ProcessedRequirement]) -> str:
    """Label a group with its most frequent pattern.

    ``Counter.most_common`` keeps insertion order among equal counts, so ties
    go to the pattern encountered first.
    """
    counts = Counter(r.pattern for r in members)
    if not counts:
        return f"{category}-mixed"
    dominant, _ = counts.most_common(1)[0]
    return f"{category}-{dominant}"


def generate_groups(requirements: Sequence[ProcessedRequirement]) -> list[RequirementGroup]:
    """Partition requirements by category, in first-seen category order."""
    buckets: dict[str, list[ProcessedRequirement]] = {}
    for req in requirements:
        buckets.setdefault(req.category, []).append(req)

    return [
        RequirementGroup(
            name=category,
            theme=_generate_theme(category, members),
            requirements=[r.id for r in members],
        )
        for category, members in buckets.items()
    ]


# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------

def calculate_metrics(requirements: Sequence[ProcessedRequirement]) -> QualityMetrics:
    """Compute totals, validity, average confidence and quality score."""
    total = len(requirements)
    valid = sum(1 for r in requirements if r.confidence > VALID_CONFIDENCE_THRESHOLD)
    average = sum(r.confidence for r in requirements) / total if total else 0.0
    distribution = dict(Counter(r.pattern for r in requirements))
    quality_score = (valid / total) * average if total else 0.0

    return QualityMetrics(
        total_requirements=total,
        valid_requirements=valid,
        average_confidence=average,
        pattern_distribution=distribution,
        quality_score=quality_score,
    )


# ---------------------------------------------------------------------------
# Coverage
# ---------------------------------------------------------------------------

def _percentage(count: int, total: int) -> float:
    return (count / total) * 100 if total else 0.0


def calculate_coverage(
    requirements: Sequence[ProcessedRequirement],
    domains: Optional[Sequence[str]] = None,
) -> CoverageReport:
    """Share of requirements per domain and per pattern, as percentages.

    Args:
        requirements: Processed requirements.
        domains: Domains to report on.  Defaults to every supported domain.

    Returns:
        A :class:`CoverageReport` whose ``overall_coverage`` is the mean of the
        domain percentages.
    """
    domain_list = list(domains) if domains is not None else list(SUPPORTED_DOMAINS)
    total = len(requirements)
    category_counts = Counter(r.category for r in requirements)
    pattern_counts = Counter(r.pattern for r in requirements)

    domain_coverage = {d: _percentage(category_counts.get(d, 0), total) for d in domain_list}
    pattern_coverage = {p: _percentage(pattern_counts.get(p, 0), total) for p in PATTERN_TYPES}

    overall = (
        sum(domain_coverage.values()) / len(domain_coverage)
        if domain_coverage and total
        else 0.0
    )

    return CoverageReport(
        domain_coverage=domain_coverage,
        pattern_coverage=pattern_coverage,
        overall_coverage=overall,
    )


# ---------------------------------------------------------------------------
# Combination (batch / stream)
# ---------------------------------------------------------------------------

def empty_result() -> ExtractionResult:
    """An extraction result with no requirements and zeroed aggregates."""
    return ExtractionResult()


def _merge_weighted(
    target: dict[str, float], source: dict[str, float], result_count: int
) -> None:
    for key, value in source.items():
        target[key] = target.get(key, 0.0) + value / result_count


def combine_coverage(results: Sequence[ExtractionResult]) -> CoverageReport:
    """Average per-result coverage, each result weighted ``1/len(results)``."""
    domain_coverage: dict[str, float] = {}
    pattern_coverage: dict[str, float] = {}
    count = len(results)

    for result in results:
        _merge_weighted(domain_coverage, result.coverage.domain_coverage, count)
        _merge_weighted(pattern_coverage, result.coverage.pattern_coverage, count)

    overall = (
        sum(domain_coverage.values()) / len(domain_coverage) if domain_coverage else 0.0
    )
    return CoverageReport(
        domain_coverage=domain_coverage,
        pattern_coverage=pattern_coverage,
        overall_coverage=overall,
    )


def combine_results(results: Sequence[ExtractionResult]) -> ExtractionResult:
    """Merge several extraction results into one synthetic result.

    Requirements and groups are concatenated in order, metrics are recomputed
    over the union, and coverage is the weighted average of each result's
    coverage.  A single result is returned as is.
    """
    if not results:
        return empty_result()
    if len(results) == 1:
        return results[0]

    requirements = [req for r in results for req in r.requirements]
    groups = [group for r in results for group in r.groups]

    return ExtractionResult(
        requirements=requirements,
        groups=groups,
        metrics=calculate_metrics(requirements),
        coverage=combine_coverage(results),
    )
