import asyncio

import pytest

from core.tasks import DetachedTasks


async def _settle(tasks: DetachedTasks):
    for _ in range(10):
        if tasks.pending == 0:
            return
        await asyncio.sleep(0)


@pytest.mark.asyncio
async def test_task_is_tracked_until_done():
    tasks = DetachedTasks()
    done = asyncio.Event()

    async def work():
        await done.wait()

    tasks.spawn(work(), name="work")
    assert tasks.pending == 1
    done.set()
    await _settle(tasks)
    assert tasks.pending == 0


@pytest.mark.asyncio
async def test_failure_is_logged_not_raised(caplog):
    tasks = DetachedTasks()

    async def explode():
        raise ValueError("kaput")

    tasks.spawn(explode(), name="explode")
    await _settle(tasks)
    assert tasks.pending == 0
    assert "Detached task explode failed: kaput" in caplog.text


@pytest.mark.asyncio
async def test_shutdown_cancels_pending():
    tasks = DetachedTasks()
    task = tasks.spawn(asyncio.sleep(3600), name="sleeper")
    await asyncio.sleep(0)
    await tasks.shutdown()
    assert task.cancelled()
    assert tasks.pending == 0
