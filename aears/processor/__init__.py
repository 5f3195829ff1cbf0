"""Requirement classification and aggregation.

Usage::

    from aears.processor import RequirementProcessor

    result = RequirementProcessor().process(text)
    print(result.metrics.quality_score)
    print([g.theme for g in result.groups])
"""

from aears.processor.models import (
    SUPPORTED_DOMAINS,
    BatchResult,
    CoverageReport,
    ExtractionResult,
    Priority,
    ProcessedRequirement,
    ProcessingInput,
    ProcessingOptions,
    QualityMetrics,
    RequirementGroup,
)
from aears.processor.aggregation import (
    calculate_coverage,
    calculate_metrics,
    combine_results,
    empty_result,
    generate_groups,
)
from aears.processor.core import RequirementProcessor

__all__ = [
    "SUPPORTED_DOMAINS",
    "BatchResult",
    "CoverageReport",
    "ExtractionResult",
    "Priority",
    "ProcessedRequirement",
    "ProcessingInput",
    "ProcessingOptions",
    "QualityMetrics",
    "RequirementGroup",
    "RequirementProcessor",
    "calculate_coverage",
    "calculate_metrics",
    "combine_results",
    "empty_result",
    "generate_groups",
]
