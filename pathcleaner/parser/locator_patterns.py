"""
Locator Patterns
================
Ordered table of line/column locator forms found next to file paths in
compiler errors, linters, stack traces and editors.

Recognised forms (priority order):
    1. :line:column          main.c:10:5
    2. :line                 main.c:10
    3. [line, column]        main.c[10, 5]
    4. ", line N, column M   "main.c", line 10, column 5
    5. (line, column)        Main.cs(10,5)

Contract:
    - Order is part of the contract. ``:10:5`` must be claimed by the two
      capture form before the line-only form gets a chance.
    - First qualifying pattern wins; captures are never combined across
      patterns.
    - Captures are returned as raw text.
"""
import re
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LocatorPattern:
    name: str
    whole: re.Pattern
    at_end: re.Pattern
    arity: int

    def search_at_end(self, text: str) -> Optional[re.Match]:
        """Match ending exactly at the last character of ``text``."""
        return self.at_end.search(text)

    def match_whole(self, text: str) -> Optional[re.Match]:
        """Match starting at index 0 and consuming all of ``text``."""
        return self.whole.fullmatch(text)


def _pattern(name: str, regex: str, arity: int) -> LocatorPattern:
    return LocatorPattern(name, re.compile(regex), re.compile(regex + r"\Z"), arity)


@dataclass(frozen=True)
class LocatorMatch:
    """A locator found by the table: the matched text plus its captures."""
    text: str
    captures: tuple[str, ...]
    pattern: LocatorPattern


# ---------------------------------------------------------------------------
# Pattern Table (ordered by priority)
# ---------------------------------------------------------------------------
# Order matters: first match wins. Two-capture forms precede their
# one-capture prefixes.
LOCATOR_PATTERNS: list[LocatorPattern] = [
    _pattern("colon_line_column",   r":(\d+):(\d+)",                  2),
    _pattern("colon_line",          r":(\d+)",                        1),
    _pattern("bracket_line_column", r"\[(\d+), ?(\d+)]",              2),
    _pattern("quoted_line_column",  r"\", line (\d+), column (\d+)", 2),
    _pattern("paren_line_column",   r"\((\d+), ?(\d+)\)",             2),
]


def match_anchored_at_end(text: str) -> Optional[LocatorMatch]:
    """
    Find the highest-priority locator that ends ``text``.

    A pattern that matches somewhere in the tail but leaves characters after
    it is not a match.

    Parameters
    ----------
    text : str
        Candidate token, already stripped of enclosing punctuation.

    Returns
    -------
    LocatorMatch | None
        The locator suffix and its captures, or None if no pattern ends
        the string.
    """
    for pattern in LOCATOR_PATTERNS:
        m = pattern.search_at_end(text)
        if m:
            return LocatorMatch(text=m.group(0), captures=m.groups(), pattern=pattern)
    return None


def match_whole(text: str) -> Optional[LocatorMatch]:
    """
    Find the highest-priority locator that is exactly ``text``.

    Partial matches are rejected: ``:10 in foo`` matches nothing even
    though ``:10`` is a valid locator on its own.
    """
    for pattern in LOCATOR_PATTERNS:
        m = pattern.match_whole(text)
        if m:
            return LocatorMatch(text=m.group(0), captures=m.groups(), pattern=pattern)
    return None
