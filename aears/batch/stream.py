"""Streaming orchestration with incremental combined results.

Inputs are processed strictly in order.  After each item the caller gets a
result combining every successful item so far, plus a flag that is ``True``
on the last item.  Failed items are left out of the combination; they do
not stop the stream.
"""

from __future__ import annotations

from typing import Callable, Iterator, Optional, Sequence

from aears.processor.aggregation import combine_results
from aears.processor.models import ExtractionResult, InputLike, ProcessingOptions
from .core import BatchProcessor

StreamCallback = Callable[[ExtractionResult, bool], None]


def iter_stream(
    batch: BatchProcessor,
    inputs: Sequence[InputLike],
    options: Optional[ProcessingOptions] = None,
) -> Iterator[tuple[ExtractionResult, bool]]:
    """Yield ``(combined_result, is_complete)`` after each input."""
    total = len(inputs)
    successes: list[ExtractionResult] = []

    for index, source in enumerate(inputs):
        item = batch.run_item(source, index, options, label="stream")
        if item.result is not None:
            successes.append(item.result)
        yield combine_results(successes), index + 1 == total


def process_stream(
    batch: BatchProcessor,
    inputs: Sequence[InputLike],
    callback: StreamCallback,
    options: Optional[ProcessingOptions] = None,
) -> None:
    """Process *inputs* in order, calling *callback* after every item."""
    for partial, is_complete in iter_stream(batch, inputs, options):
        callback(partial, is_complete)
