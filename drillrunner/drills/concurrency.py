"""Thread drills: joining workers, a shared counter, channels and shared data."""

from __future__ import annotations

import queue
import threading
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field


def run_workers(count: int, delay: float) -> int:
    """Start ``count`` threads that sleep then report, wait for all, return how many finished."""

    def work(index: int) -> None:
        time.sleep(delay)
        print(f"thread {index} is complete")

    threads = [threading.Thread(target=work, args=(i,)) for i in range(count)]
    for thread in threads:
        thread.start()
    completed = 0
    for thread in threads:
        thread.join()
        completed += 1
    if completed != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    return completed


class JobStatus:
    """A counter of completed jobs that threads may update safely."""

    def __init__(self, jobs_completed: int = 0) -> None:
        self._lock = threading.Lock()
        self._jobs_completed = jobs_completed

    @property
    def jobs_completed(self) -> int:
        with self._lock:
            return self._jobs_completed

    def complete_job(self) -> None:
        """Record one more completed job."""
        with self._lock:
            self._jobs_completed += 1


def count_jobs(count: int, delay: float) -> int:
    """Have ``count`` threads each complete one job; return the final count."""
    status = JobStatus()

    def work() -> None:
        time.sleep(delay)
        status.complete_job()

    threads = [threading.Thread(target=work) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
        print(f"jobs completed {status.jobs_completed}")
    return status.jobs_completed


@dataclass(frozen=True)
class WorkQueue:
    """Numbers to send, split into two halves, and how many there should be."""

    length: int = 10
    first_half: tuple[int, ...] = field(default=(1, 2, 3, 4, 5))
    second_half: tuple[int, ...] = field(default=(6, 7, 8, 9, 10))


def send_queue(
    work_queue: WorkQueue, channel: queue.Queue, delay: float
) -> list[threading.Thread]:
    """Send both halves on the channel from two threads.

    Each sender puts ``None`` on the channel once it has sent everything.
    The started threads are returned.
    """

    def send(values: Iterable[int]) -> None:
        try:
            for value in values:
                print(f"sending {value}")
                channel.put(value)
                time.sleep(delay)
        finally:
            channel.put(None)

    threads = [
        threading.Thread(target=send, args=(half,), daemon=True)
        for half in (work_queue.first_half, work_queue.second_half)
    ]
    for thread in threads:
        thread.start()
    return threads


def receive_all(work_queue: WorkQueue, delay: float) -> list[int]:
    """Receive every value sent for the queue, in arrival order.

    Raises RuntimeError when the number received differs from the queue length.
    """
    channel: queue.Queue = queue.Queue()
    senders = send_queue(work_queue, channel, delay)
    open_senders = len(senders)
    received: list[int] = []
    while open_senders:
        value = channel.get()
        if value is None:
            open_senders -= 1
            continue
        print(f"Got: {value}")
        received.append(value)
    for sender in senders:
        sender.join()
    print(f"total numbers received: {len(received)}")
    if len(received) != work_queue.length:
        raise RuntimeError(
            f"received {len(received)} numbers, expected {work_queue.length}"
        )
    return received


def offset_sums(numbers: Iterable[int], offsets: int) -> list[int]:
    """Sum the numbers by remainder modulo ``offsets``, one thread per remainder.

    The result holds the sum for remainder 0 first.
    """
    if offsets <= 0:
        raise ValueError("offsets must be positive")
    shared = tuple(numbers)

    def sum_offset(offset: int) -> int:
        total = sum(n for n in shared if n % offsets == offset)
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=offsets) as pool:
        return list(pool.map(sum_offset, range(offsets)))