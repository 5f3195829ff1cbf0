"""Document builder: split text into lines and parse each requirement.

Malformed lines do not abort the parse.  Every failure is recorded as a
:class:`ParseError` with its 1-based line number so that editor diagnostics
can report all of them at once; the successfully parsed records are still
returned.
"""

from __future__ import annotations

from .matcher import match_line
from .models import DocumentParseResult, ParseError, RequirementRecord


def parse_document(content: str) -> DocumentParseResult:
    """Parse a multi-line AEARS document.

    Blank lines are skipped but still count towards line numbering.

    Args:
        content: Full document text.

    Returns:
        A :class:`DocumentParseResult`; ``success`` is ``False`` when at least
        one non-blank line failed to match.
    """
    requirements: list[RequirementRecord] = []
    errors: list[ParseError] = []

    for index, raw_line in enumerate(content.split("\n"), start=1):
        line = raw_line.strip()
        if not line:
            continue

        record = match_line(line, line_number=index)
        if record is None:
            errors.append(ParseError(line=index, message=f"Malformed requirement: {line}"))
        else:
            requirements.append(record)

    return DocumentParseResult(requirements=requirements, errors=errors)
