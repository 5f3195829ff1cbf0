"""Result caching and quality analysis for extraction results."""

from aears.analysis.cache import CacheStats, ResultCache, generate_cache_key
from aears.analysis.quality import QualityAnalyzer, QualityIssue, QualityReport, Severity

__all__ = [
    "CacheStats",
    "QualityAnalyzer",
    "QualityIssue",
    "QualityReport",
    "ResultCache",
    "Severity",
    "generate_cache_key",
]
