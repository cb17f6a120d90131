"""Bounded worker pool for bulk calls against one shared client."""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable

from m2rest import MagentoClientError, cancel_scope

logger = logging.getLogger("m2rest_bulk")


@dataclass
class PoolReport:
    succeeded: int = 0
    failed: int = 0
    errors: dict[str, MagentoClientError] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return self.succeeded + self.failed


class WorkerPool:
    """Run keyed tasks on at most ``concurrency`` threads.

    Every task runs inside ``cancel_scope(self.cancel)``, so setting the event
    (done automatically on Ctrl-C) stops in-progress retries and makes queued
    tasks fail fast with ``RequestCancelled``.
    """

    def __init__(self, concurrency: int, cancel: threading.Event | None = None):
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")
        self.concurrency = concurrency
        self.cancel = cancel or threading.Event()

    def _call(self, task: Callable[[], Any]) -> Any:
        with cancel_scope(self.cancel):
            return task()

    def run(self, tasks: Iterable[tuple[str, Callable[[], Any]]]) -> PoolReport:
        report = PoolReport()
        with ThreadPoolExecutor(max_workers=self.concurrency, thread_name_prefix="m2rest-bulk") as executor:
            futures = {executor.submit(self._call, task): key for key, task in tasks}
            try:
                for future in as_completed(futures):
                    key = futures[future]
                    try:
                        future.result()
                    except MagentoClientError as e:
                        logger.error(f"[{key}] {e}")
                        report.failed += 1
                        report.errors[key] = e
                    else:
                        report.succeeded += 1
            except KeyboardInterrupt:
                logger.warning("Interrupted, cancelling outstanding tasks")
                self.cancel.set()
                executor.shutdown(wait=True, cancel_futures=True)
                raise
        return report
