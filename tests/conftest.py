"""Shared pytest fixtures for the AEARS pipeline test suite.

Provides reusable fixtures for:
- Canonical one-line requirements, one per sentence template
- A multi-line sample document and a document with malformed lines
- Pre-built parsed records and processed requirements
- Fresh pipeline / batch processor instances with their own caches
"""

from __future__ import annotations

import textwrap

import pytest

from aears.analysis.cache import ResultCache
from aears.batch.core import BatchProcessor
from aears.config import AearsConfig
from aears.parser import RequirementRecord, RequirementType
from aears.pipeline import RequirementsPipeline
from aears.processor.core import RequirementProcessor


# ---------------------------------------------------------------------------
# Requirement text
# ---------------------------------------------------------------------------

@pytest.fixture
def canonical_lines() -> dict[str, str]:
    """One line per sentence template, keyed by a short label."""
    return {
        "ubiquitous": "The parser shall tokenize files",
        "event": "When the user clicks submit the system shall save the form data",
        "state": "While the device is offline the application shall queue outgoing messages",
        "if_then": "If the password is wrong then the system shall lock the account",
        "where": "Where encryption is enabled the system shall encrypt stored files",
        "unwanted": "The parser shall not crash on malformed input",
    }


@pytest.fixture
def sample_document() -> str:
    """A valid document mixing every template, with blank lines."""
    return textwrap.dedent("""\
        The system shall authenticate users with a password

        When the user submits a form the system shall store the data in the database
        While the connection is down the application shall display an offline banner
        If the session expires then the user shall be redirected to the login page

        The report generator shall not expose personal data
        Where auditing is enabled the billing service shall record every transaction
        The user shall see a confirmation message
    """)


@pytest.fixture
def malformed_document() -> str:
    """A document whose 2nd and 4th lines match no template."""
    return textwrap.dedent("""\
        The parser shall tokenize files
        This line is not a requirement
        The parser shall not crash on malformed input
        Users must log in somehow
    """)


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@pytest.fixture
def ub_record() -> RequirementRecord:
    return RequirementRecord(
        requirement_type=RequirementType.UB,
        entity="parser",
        functionality="tokenize files",
    )


@pytest.fixture
def ev_record() -> RequirementRecord:
    return RequirementRecord(
        requirement_type=RequirementType.EV,
        entity="system",
        functionality="save the form data",
        precondition="the user clicks submit",
    )


# ---------------------------------------------------------------------------
# Pipeline objects
# ---------------------------------------------------------------------------

@pytest.fixture
def processor() -> RequirementProcessor:
    """Processor reporting coverage over every supported domain."""
    return RequirementProcessor()


@pytest.fixture
def cache() -> ResultCache:
    return ResultCache()


@pytest.fixture
def batch_processor(processor: RequirementProcessor, cache: ResultCache) -> BatchProcessor:
    return BatchProcessor(processor=processor, cache=cache)


@pytest.fixture
def pipeline() -> RequirementsPipeline:
    """Pipeline with default configuration."""
    return RequirementsPipeline(AearsConfig())
