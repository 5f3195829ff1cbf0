"""AEARS requirement parser.

Recognises EARS-style requirement sentences and decomposes them into typed
records.

Usage::

    from aears.parser import parse_document

    result = parse_document("The parser shall tokenize files")
    print(result.requirements[0].entity)   # "parser"
    print(result.errors)
"""

from aears.parser.models import (
    PATTERN_TYPES,
    DocumentParseResult,
    ParseError,
    RequirementRecord,
    RequirementType,
)
from aears.parser.matcher import match_line, parse_line
from aears.parser.document import parse_document

__all__ = [
    "PATTERN_TYPES",
    "DocumentParseResult",
    "ParseError",
    "RequirementRecord",
    "RequirementType",
    "match_line",
    "parse_document",
    "parse_line",
]
