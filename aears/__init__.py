"""AEARS requirements extraction and classification pipeline.

Parses EARS-style requirement sentences ("The X shall Y", "When P the X
shall Y", ...), classifies each requirement, and aggregates groups, quality
metrics and coverage.

Usage::

    from aears import RequirementsPipeline

    pipeline = RequirementsPipeline()
    result = pipeline.process_requirements(text)
    print(result.metrics.quality_score)
    print(pipeline.analyze_quality(result).recommendations)
"""

__version__ = "0.1.0"

from aears.config import AearsConfig, ConfigurationManager
from aears.exceptions import (
    AearsError,
    ConfigurationError,
    ProcessingError,
    RequirementSyntaxError,
    RequirementValidationError,
)
from aears.parser import RequirementRecord, RequirementType, parse_document
from aears.pipeline import RequirementsPipeline
from aears.processor import (
    ExtractionResult,
    ProcessedRequirement,
    ProcessingInput,
    ProcessingOptions,
)

__all__ = [
    "AearsConfig",
    "AearsError",
    "ConfigurationError",
    "ConfigurationManager",
    "ExtractionResult",
    "ProcessedRequirement",
    "ProcessingError",
    "ProcessingInput",
    "ProcessingOptions",
    "RequirementRecord",
    "RequirementSyntaxError",
    "RequirementType",
    "RequirementValidationError",
    "RequirementsPipeline",
    "parse_document",
]
