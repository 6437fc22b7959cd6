"""
Filesystem Policy
=================
The two filesystem questions the path cleaner is allowed to ask.

Port:
    FilesystemPolicy.exists_locally(path, ignored_prefixes)
    FilesystemPolicy.has_forbidden_prefix(path, ignored_prefixes)

Local adapter:
    LocalFilesystemPolicy answers them against the real disk. A path under
    a configured ignored prefix, or on a network-backed mount, is reported
    as not existing locally WITHOUT being stat()ed, so a click on a path in
    the terminal never wakes up a hung NFS share.

Mount classification:
    The mount table is read through psutil on every call. The mount point
    for a path is the longest mount point that contains it; its fstype is
    compared against NETWORK_FS_TYPES.
"""
import os
import logging
from typing import Optional, Protocol, Sequence

import psutil

from pathcleaner.core.constants import NETWORK_FS_TYPES

logger = logging.getLogger(__name__)


class FilesystemPolicy(Protocol):
    def exists_locally(self, path: str, ignored_prefixes: Sequence[str]) -> bool:
        ...

    def has_forbidden_prefix(self, path: str, ignored_prefixes: Sequence[str]) -> bool:
        ...


def lexical_form(path: str) -> str:
    """Collapse runs of ``/`` and drop ``.`` segments without touching disk."""
    parts = [p for p in path.split("/") if p not in ("", ".")]
    joined = "/".join(parts)
    return "/" + joined if path.startswith("/") else joined


def is_under_prefix(path: str, prefix: str) -> bool:
    """True if ``path`` is ``prefix`` itself or lies beneath it."""
    path = lexical_form(path)
    prefix = lexical_form(prefix)
    if not prefix:
        return False
    if prefix == "/":
        return path.startswith("/")
    return path == prefix or path.startswith(prefix + "/")


def _mount_point_fstype(path: str) -> Optional[str]:
    """Return the fstype of the mount that contains ``path``, or None."""
    try:
        partitions = psutil.disk_partitions(all=True)
    except (OSError, psutil.Error) as e:
        logger.warning("Could not read mount table: %s", e)
        return None

    best_mount = ""
    best_fstype: Optional[str] = None
    for part in partitions:
        mount = lexical_form(part.mountpoint)
        if is_under_prefix(path, mount) and len(mount) > len(best_mount):
            best_mount = mount
            best_fstype = part.fstype
    return best_fstype


class LocalFilesystemPolicy:
    """FilesystemPolicy backed by the local OS."""

    def is_network_path(self, path: str) -> bool:
        fstype = _mount_point_fstype(path)
        return bool(fstype) and fstype.lower() in NETWORK_FS_TYPES

    def has_forbidden_prefix(self, path: str, ignored_prefixes: Sequence[str]) -> bool:
        return any(is_under_prefix(path, prefix) for prefix in ignored_prefixes)

    def exists_locally(self, path: str, ignored_prefixes: Sequence[str]) -> bool:
        if self.has_forbidden_prefix(path, ignored_prefixes):
            logger.debug("    %s is under an ignored prefix", path)
            return False
        if self.is_network_path(path):
            logger.debug("    %s is on a network mount", path)
            return False
        return os.path.exists(path)
