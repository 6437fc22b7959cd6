"""
Punctuation Stripper
====================
Removes the noise that surrounds a path token in terminal output.

Pipeline:
    1. Reject empty input
    2. Remove one layer of enclosing brackets / quotes
    3. Drop a single trailing ``.``, ``,`` or ``:``
    4. Chop off a trailing line/column locator (first matching pattern wins)
    5. Otherwise drop one stray trailing ``)``

The locator text removed in step 4 is handed back to the caller so the
line and column can be extracted from it.
"""
import re
import logging
from dataclasses import dataclass
from typing import Optional

from pathcleaner.core.constants import ENCLOSING_PAIRS, TRAILING_PUNCTUATION_PATTERN
from pathcleaner.parser.locator_patterns import match_anchored_at_end

logger = logging.getLogger(__name__)

_TRAILING_PUNCTUATION = re.compile(TRAILING_PUNCTUATION_PATTERN)


@dataclass(frozen=True)
class StrippedToken:
    stem: str
    locator_text: Optional[str] = None


def remove_enclosing_brackets(text: str) -> str:
    """Remove one matching delimiter pair wrapping the whole string."""
    if len(text) < 2:
        return text
    for opening, closing in ENCLOSING_PAIRS:
        if text.startswith(opening) and text.endswith(closing):
            return text[1:-1]
    return text


def strip_punctuation(path: str) -> Optional[StrippedToken]:
    """
    Strip enclosing punctuation and a trailing locator from a raw token.

    Parameters
    ----------
    path : str
        Raw token captured from terminal output.

    Returns
    -------
    StrippedToken | None
        The cleaned stem and the exact locator suffix that was removed
        (if any). None when the input is empty.
    """
    if not path:
        logger.debug("  no: it is empty")
        return None

    path = remove_enclosing_brackets(path)
    path = _TRAILING_PUNCTUATION.sub("", path, count=1)

    match = match_anchored_at_end(path)
    if match:
        return StrippedToken(stem=path[:-len(match.text)], locator_text=match.text)

    # No locator; a lone closing paren is left over from "(see foo.txt)"
    if path.endswith(")"):
        return StrippedToken(stem=path[:-1])

    return StrippedToken(stem=path)
