"""Batch, async batch and streaming orchestration."""

from aears.batch.core import DEFAULT_CONCURRENCY, BatchProcessor
from aears.batch.stream import StreamCallback, iter_stream, process_stream

__all__ = [
    "DEFAULT_CONCURRENCY",
    "BatchProcessor",
    "StreamCallback",
    "iter_stream",
    "process_stream",
]
