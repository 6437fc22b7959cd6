"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    PATHS_TO_IGNORE        — Comma-separated path prefixes that are never
                             returned as clean paths (e.g. network mounts)
    PROBE_SETTLE_DELAY     — Seconds to wait before each existence probe (default: 0.1)
    LOG_LEVEL              — Root logging level (default: INFO)
    LOG_DIR                — Directory for the daily log file (default: console only)
    ENABLE_CLEAN_ENDPOINT  — Enable the /clean-path HTTP routes (default: true)

Ignored Prefixes:
    PATHS_TO_IGNORE is read once at import time. Each PathCleaner takes its
    own snapshot of the split prefix list when it is constructed, so changing
    the module value afterwards never affects a cleaner already in flight.

Settle Delay:
    PROBE_SETTLE_DELAY throttles existence probes so that a burst of clean
    requests does not hammer a slow or network-backed filesystem. Setting it
    to 0 disables the delay entirely.
"""
import os
from typing import Iterable, Union
from dotenv import load_dotenv

load_dotenv()

PATHS_TO_IGNORE = os.getenv("PATHS_TO_IGNORE", "")
PROBE_SETTLE_DELAY = float(os.getenv("PROBE_SETTLE_DELAY", 0.1))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR", "")

# HTTP surface
ENABLE_CLEAN_ENDPOINT = os.getenv("ENABLE_CLEAN_ENDPOINT", "true").lower() == "true"


def split_ignored_prefixes(raw: Union[str, Iterable[str], None]) -> tuple[str, ...]:
    """
    Turn the configured ignore list into an ordered tuple of prefixes.

    Accepts either the raw comma-separated string or an already split
    iterable. Whitespace is stripped, empty entries are dropped and
    duplicates keep their first position.
    """
    if not raw:
        return ()
    parts = raw.split(",") if isinstance(raw, str) else raw

    prefixes: list[str] = []
    for part in parts:
        prefix = part.strip()
        if prefix and prefix not in prefixes:
            prefixes.append(prefix)
    return tuple(prefixes)
