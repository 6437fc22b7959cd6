"""
Path Resolver
=============
Turns a cleaned path stem into a verified absolute path.

Steps:
    1. Reject an empty stem
    2. Expand ``~`` / ``~user``
    3. Reject an expansion that came out empty
    4. Anchor relative paths to the working directory (path join)
    5. Probe existence on the UN-standardized path
    6. Standardize (collapse ``.``, ``..`` and repeated slashes; symlinks are left alone)
    7. Reject the standardized path if it falls under an ignored prefix

Standardizing before step 5 would touch the filesystem for paths that may
live on a network mount. The forbidden-prefix re-check in step 7 catches
``..`` segments that walk into an ignored prefix.
"""
import os
import time
import logging
from typing import Optional, Sequence

from pathcleaner.services.filesystem_policy import FilesystemPolicy, lexical_form

logger = logging.getLogger(__name__)


class PathResolver:
    def __init__(
        self,
        policy: FilesystemPolicy,
        ignored_prefixes: Sequence[str] = (),
        settle_delay: float = 0.0,
    ) -> None:
        self.policy = policy
        self.ignored_prefixes = tuple(ignored_prefixes)
        self.settle_delay = settle_delay

    def resolve(self, stem: Optional[str], working_directory: str) -> Optional[str]:
        """
        Resolve ``stem`` against ``working_directory``.

        Returns
        -------
        str | None
            Standardized absolute path that exists locally and is not under
            an ignored prefix, else None.
        """
        logger.debug("Check if %s is a valid path in %s", stem, working_directory)
        if not stem:
            logger.debug("  no: it is empty")
            return None

        path = os.path.expanduser(stem)
        if not path:
            # Nothing left; must not fall back to the working directory itself
            return None

        if not os.path.isabs(path):
            path = os.path.join(working_directory, path)
            logger.debug("  Prepend working directory, giving %s", path)

        logger.debug("  Checking if file exists locally: %s", path)
        if not self._exists_locally(path):
            logger.debug("    NO: no valid path found")
            return None

        # normpath keeps a leading "//" on POSIX
        path = lexical_form(os.path.normpath(path))
        logger.debug("    Check standardized path for forbidden prefix %s", path)
        if self.policy.has_forbidden_prefix(path, self.ignored_prefixes):
            logger.debug("    NO: standardized path has forbidden prefix")
            return None

        return path

    def _exists_locally(self, path: str) -> bool:
        if self.settle_delay > 0:
            time.sleep(self.settle_delay)
        return self.policy.exists_locally(path, self.ignored_prefixes)
