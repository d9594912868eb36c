import asyncio

import pytest

ACK = "Automation test started in background. Check logs for progress."


@pytest.mark.asyncio
async def test_status_endpoint(client):
    resp = await client.get("/api/test-automation")
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["data"] == {"available": True}
    assert "Send POST request" in body["message"]


@pytest.mark.asyncio
async def test_trigger_acknowledges_before_task_finishes(client, tester, collaborators):
    tester.release.clear()
    resp = await client.post("/api/test-automation")
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": ACK, "data": {"status": "started"}}

    await asyncio.sleep(0)
    assert tester.started == 1
    assert tester.finished == 0
    assert collaborators.detached_tasks.pending == 1

    tester.release.set()
    for _ in range(10):
        if collaborators.detached_tasks.pending == 0:
            break
        await asyncio.sleep(0)
    assert tester.finished == 1
    assert collaborators.detached_tasks.pending == 0


@pytest.mark.asyncio
async def test_background_failure_is_not_surfaced(client, tester, collaborators, caplog):
    tester.exc = RuntimeError("browser crashed")
    resp = await client.post("/api/test-automation")
    assert resp.status_code == 200
    assert resp.json()["message"] == ACK

    for _ in range(10):
        if collaborators.detached_tasks.pending == 0:
            break
        await asyncio.sleep(0)
    assert collaborators.detached_tasks.pending == 0
    assert "browser crashed" in caplog.text


@pytest.mark.asyncio
async def test_launch_failure_returns_500(client, collaborators):
    class BrokenTester:
        def run(self):
            raise RuntimeError()

    collaborators.automation_tester = BrokenTester()
    resp = await client.post("/api/test-automation")
    assert resp.status_code == 500
    assert resp.json() == {"success": False, "error": "Failed to start automation test"}
