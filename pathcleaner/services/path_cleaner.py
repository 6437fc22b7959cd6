"""
Path Cleaner
============
Turns a text fragment clicked in terminal output into a verified absolute
path plus an optional line/column locator.

Flow:
    DirectAttempt
        strip punctuation → extract locator → resolve path
    DiffFallbackAttempt (only if DirectAttempt failed and the token starts
    with ``a/`` or ``b/``)
        strip the two-character diff prefix once and repeat DirectAttempt

Contract:
    - Pure function of (token, suffix, working_directory, ignored_prefixes)
      and whatever the filesystem policy reports.
    - Never raises for bad input; failure is a CleaningResult whose
      clean_path is None.
    - The locator of the attempt that succeeded is published; locators seen
      during a failed attempt are discarded.
    - No state is shared between instances.
"""
import re
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from pathcleaner.core import config
from pathcleaner.core.constants import DIFF_PREFIX_PATTERN
from pathcleaner.models.cleaning_result import CleaningResult
from pathcleaner.parser.locator_extractor import Locator, extract_locator
from pathcleaner.parser.punctuation import strip_punctuation
from pathcleaner.services.filesystem_policy import FilesystemPolicy, LocalFilesystemPolicy
from pathcleaner.services.path_resolver import PathResolver

logger = logging.getLogger(__name__)

_DIFF_PREFIX = re.compile(DIFF_PREFIX_PATTERN)


@dataclass(frozen=True)
class _Attempt:
    clean_path: Optional[str]
    locator: Optional[Locator]


class PathCleaner:
    """
    One cleaning request.

    Usage:
        cleaner = PathCleaner("./main.c:10:5", "", "/repo")
        result = cleaner.clean()
        if result.succeeded:
            open_editor(result.clean_path, result.line_number)
    """

    def __init__(
        self,
        token: str,
        suffix: str,
        working_directory: str,
        ignored_prefixes: Optional[Iterable[str]] = None,
        policy: Optional[FilesystemPolicy] = None,
        settle_delay: Optional[float] = None,
    ) -> None:
        self.token = token or ""
        self.suffix = suffix or ""
        self.working_directory = working_directory
        # Snapshot now; later config changes do not reach this request
        if ignored_prefixes is None:
            ignored_prefixes = config.PATHS_TO_IGNORE
        self.ignored_prefixes = config.split_ignored_prefixes(ignored_prefixes)
        self._resolver = PathResolver(
            policy=policy or LocalFilesystemPolicy(),
            ignored_prefixes=self.ignored_prefixes,
            settle_delay=config.PROBE_SETTLE_DELAY if settle_delay is None else settle_delay,
        )

    def clean(self) -> CleaningResult:
        """Run the direct attempt and, if applicable, the diff fallback."""
        attempt = self._attempt(self.token)
        if attempt.clean_path is None:
            match = _DIFF_PREFIX.match(self.token)
            if not match:
                return CleaningResult.failure()
            logger.debug("  Treating as diff path")
            attempt = self._attempt(self.token[match.end():])
            if attempt.clean_path is None:
                return CleaningResult.failure()

        locator = attempt.locator or Locator()
        return CleaningResult(
            clean_path=attempt.clean_path,
            line_number=locator.line_number,
            column_number=locator.column_number,
        )

    def _attempt(self, token: str) -> _Attempt:
        stripped = strip_punctuation(token)
        if stripped is None:
            return _Attempt(clean_path=None, locator=None)

        # The in-token locator wins over the text that followed the token
        locator_text = stripped.locator_text if stripped.locator_text is not None else self.suffix
        locator = extract_locator(locator_text)

        clean_path = self._resolver.resolve(stripped.stem, self.working_directory)
        return _Attempt(clean_path=clean_path, locator=locator)


def clean_token(
    token: str,
    suffix: str,
    working_directory: str,
    ignored_prefixes: Optional[Iterable[str]] = None,
    policy: Optional[FilesystemPolicy] = None,
    settle_delay: Optional[float] = None,
) -> CleaningResult:
    """Convenience wrapper: build a PathCleaner and clean synchronously."""
    return PathCleaner(
        token,
        suffix,
        working_directory,
        ignored_prefixes=ignored_prefixes,
        policy=policy,
        settle_delay=settle_delay,
    ).clean()
