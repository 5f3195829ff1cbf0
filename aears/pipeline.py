"""AEARS requirements pipeline facade.

Bundles the processor, validator, quality analyzer, result cache and batch
orchestrator behind one object configured from an :class:`AearsConfig`.

Usage::

    from aears import RequirementsPipeline

    pipeline = RequirementsPipeline()
    result = pipeline.process_requirements(
        "When the user clicks login the system shall authenticate the user"
    )
    print(result.requirements[0].category)   # "security"
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

from aears.analysis.cache import CacheStats, ResultCache
from aears.analysis.quality import QualityAnalyzer, QualityReport
from aears.batch.core import DEFAULT_CONCURRENCY, BatchProcessor
from aears.batch.stream import StreamCallback, process_stream
from aears.config import AearsConfig
from aears.exceptions import ConfigurationError
from aears.parser import RequirementRecord
from aears.processor.core import RequirementProcessor
from aears.processor.models import (
    BatchResult,
    CoverageReport,
    ExtractionResult,
    InputLike,
    ProcessingOptions,
)
from aears.validation.validator import ValidationResult, validate_input, validate_requirement


class RequirementsPipeline:
    """Entry point for processing, validating and analysing AEARS requirements.

    Each instance owns its own result cache, so two pipelines never see each
    other's cached results.  The cache starts disabled; call
    :meth:`enable_cache` to turn it on.

    Attributes:
        config: Active configuration.
        cache: This pipeline's result cache.
    """

    def __init__(self, config: Optional[AearsConfig] = None, verbose: bool = False) -> None:
        self.config = config or AearsConfig()
        self.cache = ResultCache()
        self.processor = RequirementProcessor(default_domains=self.config.default_domains)
        self.quality = QualityAnalyzer()
        self.batch = BatchProcessor(processor=self.processor, cache=self.cache, verbose=verbose)

    # ------------------------------------------------------------------
    # Core processing
    # ------------------------------------------------------------------

    def process_requirements(
        self,
        source: InputLike,
        options: Optional[ProcessingOptions] = None,
    ) -> ExtractionResult:
        """Process one document, using the cache when enabled.

        Raises:
            ProcessingError: If the document has syntax errors or processing fails.
        """
        return self.batch.process_cached(source, options)

    def validate_requirement(
        self, requirement: Union[str, RequirementRecord, dict[str, Any]]
    ) -> ValidationResult:
        return validate_requirement(requirement)

    def validate_input(self, source: InputLike) -> bool:
        return validate_input(source)

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------

    def analyze_quality(self, result: ExtractionResult) -> QualityReport:
        return self.quality.analyze_quality(result)

    def analyze_coverage(self, result: ExtractionResult) -> CoverageReport:
        return self.quality.analyze_coverage(result)

    def meets_quality_threshold(self, result: ExtractionResult) -> bool:
        """True when the result's quality score reaches ``config.quality_threshold``."""
        return result.metrics.quality_score >= self.config.quality_threshold

    # ------------------------------------------------------------------
    # Cache management
    # ------------------------------------------------------------------

    def enable_cache(self, max_size: Optional[int] = None) -> None:
        """Enable the result cache; *max_size* defaults to ``config.max_cache_size``."""
        self.cache.enable(self.config.max_cache_size if max_size is None else max_size)

    def clear_cache(self) -> None:
        self.cache.clear()

    def get_cache_stats(self) -> CacheStats:
        return self.cache.stats()

    # ------------------------------------------------------------------
    # Batch & stream
    # ------------------------------------------------------------------

    def process_batch(
        self,
        inputs: Sequence[InputLike],
        options: Optional[ProcessingOptions] = None,
    ) -> list[BatchResult]:
        return self.batch.process_batch(inputs, options)

    async def process_batch_async(
        self,
        inputs: Sequence[InputLike],
        options: Optional[ProcessingOptions] = None,
        concurrency: int = DEFAULT_CONCURRENCY,
    ) -> list[BatchResult]:
        return await self.batch.process_batch_async(inputs, options, concurrency)

    def process_stream(
        self,
        inputs: Sequence[InputLike],
        callback: StreamCallback,
        options: Optional[ProcessingOptions] = None,
    ) -> None:
        """Stream *inputs* through the pipeline, reporting combined partial results.

        Raises:
            ConfigurationError: If streaming is disabled in the configuration.
        """
        if not self.config.enable_streaming:
            raise ConfigurationError("Streaming is disabled in the configuration", ["enable_streaming"])
        process_stream(self.batch, inputs, callback, options)
