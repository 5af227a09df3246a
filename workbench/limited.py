"""Run work items concurrently with a cap, stopping new work after the first failure."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TypeVar

T = TypeVar("T")

DEFAULT_LIMIT = 8
BAD_DIVISOR = 311


def check_number(n: int) -> None:
    """Raise ``ValueError`` for multiples of 311."""
    if n % BAD_DIVISOR == 0:
        raise ValueError("n bad number")


def run_limited(
    items: Iterable[T], worker: Callable[[T], Any], limit: int = DEFAULT_LIMIT
) -> list[T]:
    """Call ``worker`` on each item with at most ``limit`` calls running at once.

    Once a call fails, items that have not started yet are skipped. Returns
    the items that succeeded, in input order, or raises the first failure
    after all running calls have finished.
    """
    if limit < 1:
        raise ValueError("limit must be at least 1")
    slots = threading.Semaphore(limit)
    cancelled = threading.Event()
    lock = threading.Lock()
    errors: list[BaseException] = []

    def run(item: T) -> bool:
        try:
            if cancelled.is_set():
                print("Canceled:", item)
                return False
            try:
                worker(item)
            except Exception as exc:
                print("Error:", item, exc)
                with lock:
                    errors.append(exc)
                cancelled.set()
                return False
            print("fin", item)
            return True
        finally:
            slots.release()

    submitted: list[tuple[T, Any]] = []
    with ThreadPoolExecutor(max_workers=limit) as pool:
        for item in items:
            slots.acquire()
            submitted.append((item, pool.submit(run, item)))
    if errors:
        raise errors[0]
    return [item for item, future in submitted if future.result()]