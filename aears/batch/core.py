"""Batch orchestration: run the requirement processor over many inputs.

One bad input never aborts a batch; its failure lands in the item's
``error`` slot.  Results are always returned in input order.  Both the
synchronous and the asyncio variants consult the shared result cache.
"""

from __future__ import annotations

import asyncio
from typing import Optional, Sequence

from rich.markup import escape

from aears.analysis.cache import ResultCache, generate_cache_key
from aears.exceptions import ProcessingError
from aears.processor.core import RequirementProcessor, normalize_input
from aears.processor.models import BatchResult, ExtractionResult, InputLike, ProcessingOptions
from aears.utils import (
    format_percentage,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


DEFAULT_CONCURRENCY = 3


class BatchProcessor:
    """Processes collections of AEARS documents.

    Attributes:
        processor: The single-document processor.
        cache: Result cache shared with the owning pipeline.
        verbose: When ``True``, failures and a per-batch summary are printed
            to the console.
    """

    def __init__(
        self,
        processor: Optional[RequirementProcessor] = None,
        cache: Optional[ResultCache] = None,
        verbose: bool = False,
    ) -> None:
        self.processor = processor or RequirementProcessor()
        self.cache = cache if cache is not None else ResultCache()
        self.verbose = verbose

    # ------------------------------------------------------------------
    # Single item
    # ------------------------------------------------------------------

    def process_cached(
        self, source: InputLike, options: Optional[ProcessingOptions] = None
    ) -> ExtractionResult:
        """Process one input, serving and filling the cache.

        Raises:
            ProcessingError: Propagated from the processor.
        """
        key = generate_cache_key(normalize_input(source).text, options)
        result = self.cache.get(key)
        if result is None:
            result = self.processor.process(source, options)
            self.cache.set(key, result)
        return result

    def run_item(
        self,
        source: InputLike,
        index: int,
        options: Optional[ProcessingOptions],
        label: str = "batch",
    ) -> BatchResult:
        try:
            result = self.process_cached(source, options)
            return BatchResult(input=source, index=index, result=result)
        except ProcessingError as exc:
            error = exc
        except Exception as exc:
            error = ProcessingError(
                f"Error processing {label} item {index}", cause=exc, context={"batch_index": index}
            )
        if self.verbose:
            print_error(f"  Item {index} failed: {escape(str(error))}")
        return BatchResult(input=source, index=index, error=error)

    # ------------------------------------------------------------------
    # Batches
    # ------------------------------------------------------------------

    def process_batch(
        self,
        inputs: Sequence[InputLike],
        options: Optional[ProcessingOptions] = None,
    ) -> list[BatchResult]:
        """Process every input in order, isolating per-item failures."""
        results = [self.run_item(source, i, options) for i, source in enumerate(inputs)]
        self._report(results, "Batch Results")
        return results

    async def process_batch_async(
        self,
        inputs: Sequence[InputLike],
        options: Optional[ProcessingOptions] = None,
        concurrency: int = DEFAULT_CONCURRENCY,
    ) -> list[BatchResult]:
        """Process inputs with at most *concurrency* items in flight.

        Each item runs in a worker thread; a semaphore bounds how many are
        active.  The returned list is ordered by input index regardless of
        completion order.

        Raises:
            ValueError: If *concurrency* is less than 1.
        """
        if concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {concurrency}")

        semaphore = asyncio.Semaphore(concurrency)

        async def _process(index: int, source: InputLike) -> BatchResult:
            async with semaphore:
                return await asyncio.to_thread(self.run_item, source, index, options, "async batch")

        results = await asyncio.gather(*(_process(i, s) for i, s in enumerate(inputs)))
        ordered = sorted(results, key=lambda r: r.index)
        self._report(ordered, "Async Batch Results")
        return ordered

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def _report(self, results: list[BatchResult], title: str) -> None:
        if not self.verbose:
            return
        failed = sum(1 for r in results if not r.succeeded)
        stats = self.cache.stats()
        print_summary_table(
            {
                "Items": str(len(results)),
                "Succeeded": str(len(results) - failed),
                "Failed": str(failed),
                "Cache hits": str(stats.hits),
                "Cache hit rate": format_percentage(stats.hit_rate * 100),
            },
            title=title,
        )
        if failed:
            print_warning(f"  {failed} item(s) failed. Check each item's error for details.")
        else:
            print_success("  All items processed.")
