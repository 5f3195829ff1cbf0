"""Requirement processor: AEARS text in, :class:`ExtractionResult` out.

Runs the full single-document pipeline: parse, classify each requirement,
apply per-call filters, then group and aggregate.
"""

from __future__ import annotations

from typing import Optional, Sequence

from aears.exceptions import ProcessingError
from aears.parser import RequirementRecord, parse_document
from .aggregation import calculate_coverage, calculate_metrics, generate_groups
from .categorization import categorize_requirement
from .models import (
    SUPPORTED_DOMAINS,
    ExtractionResult,
    InputLike,
    ProcessedRequirement,
    ProcessingInput,
    ProcessingOptions,
)
from .scoring import calculate_confidence, calculate_priority, extract_trigger, generate_id


def normalize_input(source: InputLike) -> ProcessingInput:
    """Wrap plain text in a :class:`ProcessingInput`."""
    if isinstance(source, ProcessingInput):
        return source
    return ProcessingInput(text=source)


def process_record(
    record: RequirementRecord, index: int, context: Optional[str] = None
) -> ProcessedRequirement:
    """Classify one parsed requirement."""
    return ProcessedRequirement(
        id=generate_id(index),
        pattern=record.requirement_type.value,
        trigger=extract_trigger(record),
        response=record.functionality,
        category=categorize_requirement(record, context),
        priority=calculate_priority(record.requirement_type),
        confidence=calculate_confidence(record),
        original=record,
    )


class RequirementProcessor:
    """Turns AEARS documents into extraction results.

    Attributes:
        default_domains: Domains reported in coverage when the call's options
            do not name any.
    """

    def __init__(self, default_domains: Optional[Sequence[str]] = None) -> None:
        self.default_domains = (
            list(default_domains) if default_domains is not None else list(SUPPORTED_DOMAINS)
        )

    def process(
        self,
        source: InputLike,
        options: Optional[ProcessingOptions] = None,
    ) -> ExtractionResult:
        """Process one document.

        Args:
            source: Document text or a :class:`ProcessingInput`.
            options: Optional domain filter and requirement cap.

        Returns:
            A freshly built :class:`ExtractionResult`.

        Raises:
            ProcessingError: If any line fails to parse (the per-line errors
                are in ``context["errors"]``) or anything else goes wrong.
        """
        options = options or ProcessingOptions()
        try:
            payload = normalize_input(source)
            parsed = parse_document(payload.text)
            if not parsed.success:
                raise ProcessingError(
                    "Failed to parse AEARS content",
                    context={"errors": parsed.error_messages},
                )

            requirements = [
                process_record(record, i, payload.context)
                for i, record in enumerate(parsed.requirements)
            ]

            if options.domains:
                allowed = set(options.domains)
                requirements = [r for r in requirements if r.category in allowed]
            # 0 is an explicit cap that yields no requirements; only None means unlimited.
            if options.max_requirements is not None:
                requirements = requirements[: options.max_requirements]

            coverage_domains = options.domains or self.default_domains
            return ExtractionResult(
                requirements=requirements,
                groups=generate_groups(requirements),
                metrics=calculate_metrics(requirements),
                coverage=calculate_coverage(requirements, coverage_domains),
            )
        except ProcessingError:
            raise
        except Exception as exc:
            raise ProcessingError("Unexpected error during processing", cause=exc) from exc
