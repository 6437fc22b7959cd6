"""
Async Cleaner
=============
Runs PathCleaner.clean() off the caller's thread.

The executor is always supplied by the caller. A single-worker thread pool
(see create_cleaner_executor) is recommended: existence probes are sequential
by nature and there is nothing to gain from running them in parallel.

Two styles are offered:
    - ``await clean_async(cleaner, executor)`` for asyncio callers
    - ``clean_with_completion(cleaner, executor, completion, loop)`` which
      fires ``completion(result)`` exactly once on ``loop``

Neither style can cancel a clean once it has started, and neither adds a
timeout. Callers wanting a bound wrap the await in ``asyncio.wait_for``.
"""
import asyncio
import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Callable, Optional

from pathcleaner.models.cleaning_result import CleaningResult
from pathcleaner.services.path_cleaner import PathCleaner

logger = logging.getLogger(__name__)


def create_cleaner_executor() -> ThreadPoolExecutor:
    """Build the recommended sequential executor for clean requests."""
    return ThreadPoolExecutor(max_workers=1, thread_name_prefix="path-cleaner")


def _clean_safely(cleaner: PathCleaner) -> CleaningResult:
    try:
        return cleaner.clean()
    except Exception as e:
        logger.warning("Path cleaning failed for %r: %s", cleaner.token, e, exc_info=True)
        return CleaningResult.failure()


async def clean_async(
    cleaner: PathCleaner,
    executor: Optional[Executor] = None,
) -> CleaningResult:
    """
    Clean on ``executor`` and resume on the running event loop.

    Passing ``executor=None`` uses the loop's default executor.
    """
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(executor, _clean_safely, cleaner)


def clean_with_completion(
    cleaner: PathCleaner,
    executor: Executor,
    completion: Callable[[CleaningResult], None],
    loop: asyncio.AbstractEventLoop,
) -> Future:
    """
    Submit a clean to ``executor``; call ``completion(result)`` on ``loop``.

    Parameters
    ----------
    cleaner : PathCleaner
        The request to run.
    executor : Executor
        Worker the blocking clean runs on.
    completion : Callable[[CleaningResult], None]
        Invoked exactly once, on ``loop``'s thread, after the clean finishes.
    loop : asyncio.AbstractEventLoop
        The caller's loop.

    Returns
    -------
    concurrent.futures.Future
        Future of the executor job, resolving to the CleaningResult.
    """
    def _job() -> CleaningResult:
        result = _clean_safely(cleaner)
        loop.call_soon_threadsafe(completion, result)
        return result

    return executor.submit(_job)
