import queue

import pytest

from drillrunner.drills.concurrency import (
    JobStatus,
    WorkQueue,
    count_jobs,
    offset_sums,
    receive_all,
    run_workers,
    send_queue,
)


def test_run_workers_waits_for_all():
    assert run_workers(10, 0.01) == 10


def test_run_workers_none():
    assert run_workers(0, 0) == 0


def test_count_jobs_counts_every_thread():
    assert count_jobs(10, 0.01) == 10


def test_job_status_counter():
    status = JobStatus()
    status.complete_job()
    status.complete_job()
    assert status.jobs_completed == 2


def test_receive_all_gets_every_value():
    work = WorkQueue()
    received = receive_all(work, 0)
    assert len(received) == work.length
    assert sorted(received) == sorted(work.first_half + work.second_half)


def test_receive_all_keeps_order_within_each_half():
    work = WorkQueue()
    received = receive_all(work, 0)
    assert [v for v in received if v in work.first_half] == list(work.first_half)
    assert [v for v in received if v in work.second_half] == list(work.second_half)


def test_receive_all_rejects_wrong_length():
    work = WorkQueue(length=3, first_half=(1,), second_half=(2,))
    with pytest.raises(RuntimeError):
        receive_all(work, 0)


def test_send_queue_closes_each_sender():
    work = WorkQueue(length=3, first_half=(1, 2), second_half=(3,))
    channel = queue.Queue()
    threads = send_queue(work, channel, 0)
    for thread in threads:
        thread.join()
    items = []
    while not channel.empty():
        items.append(channel.get())
    assert items.count(None) == len(threads)
    assert sorted(v for v in items if v is not None) == [1, 2, 3]


def test_offset_sums_cover_everything():
    sums = offset_sums(range(100), 8)
    assert len(sums) == 8
    assert sum(sums) == sum(range(100))


def test_offset_sums_small_example():
    assert offset_sums([1, 2, 3, 4], 2) == [6, 4]


def test_offset_sums_rejects_zero():
    with pytest.raises(ValueError):
        offset_sums([1, 2], 0)