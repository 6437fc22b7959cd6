"""
Locator Extractor
=================
Reads a line and optional column number out of a standalone suffix string.

The suffix must be a locator in its entirety. Anything left over after the
match means the text is something else and no locator is reported.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from pathcleaner.parser.locator_patterns import match_whole

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Locator:
    line_number: Optional[str] = None
    column_number: Optional[str] = None

    def __post_init__(self) -> None:
        if self.column_number is not None and self.line_number is None:
            raise ValueError("column_number requires line_number")


def extract_locator(suffix: Optional[str]) -> Optional[Locator]:
    """
    Match ``suffix`` wholly against the locator table.

    Returns the line (capture 1) and column (capture 2, when the pattern
    has one) of the first qualifying pattern, or None.
    """
    if not suffix:
        return None

    match = match_whole(suffix)
    if match is None:
        return None

    logger.debug("  Suffix of %s matches pattern %s", suffix, match.pattern.name)
    captures = match.captures
    return Locator(
        line_number=captures[0] if len(captures) > 0 else None,
        column_number=captures[1] if len(captures) > 1 else None,
    )
