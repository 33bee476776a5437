from __future__ import annotations
import concurrent.futures
import logging
import os
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")

log = logging.getLogger(__name__)


def any_match(predicate: Callable[[T], bool], items: Iterable[T],
              parallel: bool = True, max_workers: int | None = None) -> bool:
    """
    True as soon as predicate(item) is True for some item, else False once all are done.
    Parallel mode runs on a thread pool and abandons the rest after the first hit;
    evaluations already running finish in the background and their results are dropped.
    Exceptions raised by the predicate propagate.
    """
    items = list(items)
    if not parallel or len(items) <= 1:
        return any(predicate(item) for item in items)

    num_workers = min(len(items), max_workers or os.cpu_count() or 1)
    executor = concurrent.futures.ThreadPoolExecutor(max_workers=num_workers,
                                                     thread_name_prefix="mrprime")
    futures = [executor.submit(predicate, item) for item in items]
    try:
        for future in concurrent.futures.as_completed(futures):
            if future.result():
                pending = sum(1 for f in futures if f.cancel())
                log.debug("match found, cancelled %d pending of %d", pending, len(futures))
                return True
        return False
    finally:
        executor.shutdown(wait=False, cancel_futures=True)
