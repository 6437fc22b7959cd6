"""
Unit Tests — Async Cleaner
==========================
Tests for running PathCleaner off the caller's thread with a
caller-supplied executor and a one-shot completion callback.
"""
import asyncio
import threading

from pathcleaner.models.cleaning_result import CleaningResult
from pathcleaner.services.async_cleaner import (
    clean_async,
    clean_with_completion,
    create_cleaner_executor,
)
from pathcleaner.services.path_cleaner import PathCleaner


class RecordingPolicy:
    def __init__(self, existing=()):
        self.existing = set(existing)
        self.threads: list[str] = []

    def exists_locally(self, path, ignored_prefixes):
        self.threads.append(threading.current_thread().name)
        return path in self.existing

    def has_forbidden_prefix(self, path, ignored_prefixes):
        return False


class ExplodingPolicy:
    def exists_locally(self, path, ignored_prefixes):
        raise RuntimeError("probe failed")

    def has_forbidden_prefix(self, path, ignored_prefixes):
        return False


def _cleaner(token, policy):
    return PathCleaner(token, "", "/w", ignored_prefixes=(), policy=policy, settle_delay=0)


def test_executor_runs_jobs_on_one_worker():
    executor = create_cleaner_executor()
    try:
        names = [
            executor.submit(lambda: threading.current_thread().name).result()
            for _ in range(3)
        ]
    finally:
        executor.shutdown()

    assert len(set(names)) == 1
    assert names[0].startswith("path-cleaner")


def test_clean_async_runs_on_executor():
    policy = RecordingPolicy({"/w/main.c"})
    executor = create_cleaner_executor()

    async def run_test():
        return await clean_async(_cleaner("main.c:3", policy), executor)

    try:
        result = asyncio.run(run_test())
    finally:
        executor.shutdown()

    assert result == CleaningResult(clean_path="/w/main.c", line_number="3")
    assert policy.threads and all(t.startswith("path-cleaner") for t in policy.threads)


def test_clean_async_default_executor():
    policy = RecordingPolicy({"/w/main.c"})

    async def run_test():
        return await clean_async(_cleaner("main.c", policy))

    assert asyncio.run(run_test()).clean_path == "/w/main.c"


def test_completion_fires_once_on_caller_loop():
    policy = RecordingPolicy({"/w/main.c"})
    executor = create_cleaner_executor()
    received = []
    threads = []

    async def run_test():
        loop = asyncio.get_running_loop()
        done = asyncio.Event()

        def completion(result):
            received.append(result)
            threads.append(threading.get_ident())
            done.set()

        future = clean_with_completion(_cleaner("main.c:7:1", policy), executor, completion, loop)
        await asyncio.wait_for(done.wait(), timeout=5)
        # Give a stray second callback a chance to show up
        await asyncio.sleep(0.05)
        return future.result(), threading.get_ident()

    try:
        future_result, loop_thread = asyncio.run(run_test())
    finally:
        executor.shutdown()

    assert len(received) == 1
    assert received[0] == future_result
    assert received[0].line_number == "7"
    assert threads == [loop_thread]


def test_completion_fires_with_failure_when_clean_raises():
    executor = create_cleaner_executor()
    received = []

    async def run_test():
        loop = asyncio.get_running_loop()
        done = asyncio.Event()

        def completion(result):
            received.append(result)
            done.set()

        clean_with_completion(_cleaner("main.c", ExplodingPolicy()), executor, completion, loop)
        await asyncio.wait_for(done.wait(), timeout=5)

    try:
        asyncio.run(run_test())
    finally:
        executor.shutdown()

    assert received == [CleaningResult.failure()]
