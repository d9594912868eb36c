# api/routes_automation.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.dependencies import get_automation_runner, get_automation_tester, get_detached_tasks
from core.response import ok, error, error_message
from core.tasks import DetachedTasks
from models.schemas import AutoApplyRequest
from services.automation_runner import AutomationRunner, as_automation_result
from services.automation_tester import AutomationTesterProtocol

logger = logging.getLogger(__name__)

router = APIRouter()

CONFIG_ID_REQUIRED = "Configuration ID is required"
TEST_STARTED = "Automation test started in background. Check logs for progress."
TEST_AVAILABLE = "Automation test endpoint available. Send POST request to start test."


@router.post("/auto-apply")
async def auto_apply(
    payload: Optional[AutoApplyRequest] = None,
    runner: AutomationRunner = Depends(get_automation_runner),
):
    """
    Run the auto-apply automation for one job board configuration.

    Request JSON: {"configId": "<id>", "useRealAutomation": false}
    """
    if payload is None or not payload.config_id:
        return JSONResponse(status_code=400, content=error(error=CONFIG_ID_REQUIRED))

    try:
        result = as_automation_result(await runner.run(payload.config_id, payload.use_real_automation))
        data = result.model_dump(mode="json", by_alias=True)
    except Exception as e:
        logger.exception("Automation failed for config %s", payload.config_id)
        return JSONResponse(status_code=500, content=error(error=error_message(e)))

    return ok(data, message=f"Automation completed! Applied to {data['applicationsSubmitted']} jobs.")


@router.post("/auto-apply-test")
async def auto_apply_test():
    """Liveness check for the automation routes."""
    return ok({"status": "ok"}, message="Test route is working")


@router.post("/test-automation")
async def start_automation_test(
    tester: AutomationTesterProtocol = Depends(get_automation_tester),
    tasks: DetachedTasks = Depends(get_detached_tasks),
):
    """Start a simulated automation session in the background and return immediately."""
    logger.info("Starting automation test...")
    coro = None
    try:
        coro = tester.run()
        tasks.spawn(coro, name="automation-test")
    except Exception as e:
        if coro is not None:
            coro.close()
        logger.exception("Failed to start automation test")
        return JSONResponse(
            status_code=500,
            content=error(error=error_message(e, fallback="Failed to start automation test")),
        )
    return ok({"status": "started"}, message=TEST_STARTED)


@router.get("/test-automation")
async def automation_test_status():
    return ok({"available": True}, message=TEST_AVAILABLE)
