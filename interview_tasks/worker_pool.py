"""Fixed-size pool of worker threads that process a batch of integer jobs."""

from __future__ import annotations

import queue
import threading
import time
from collections.abc import Iterable

JOB_DELAY_SEC = 1.0


class WorkerPool:
    """Runs jobs on ``num_workers`` threads, each job taking ``delay`` seconds."""

    def __init__(self, num_workers: int, delay: float = JOB_DELAY_SEC) -> None:
        if num_workers < 1:
            raise ValueError("num_workers must be at least 1")
        self.num_workers = num_workers
        self.delay = delay

    def submit_tasks(self, tasks: Iterable[int]) -> list[int]:
        """Process every task and return the results in completion order."""
        tasks = list(tasks)
        jobs: queue.SimpleQueue = queue.SimpleQueue()
        for task in tasks:
            jobs.put(task)
        results: queue.SimpleQueue = queue.SimpleQueue()
        for worker_id in range(self.num_workers):
            threading.Thread(
                target=self._work, args=(worker_id, jobs, results), daemon=True
            ).start()
        received = []
        for _ in tasks:
            value = results.get()
            print(f"received outVal: {value}")
            received.append(value)
        return received

    def _work(
        self, worker_id: int, jobs: queue.SimpleQueue, results: queue.SimpleQueue
    ) -> None:
        while True:
            try:
                job = jobs.get_nowait()
            except queue.Empty:
                return
            print(f"worker {worker_id} received job: {job}")
            time.sleep(self.delay)
            results.put(job)