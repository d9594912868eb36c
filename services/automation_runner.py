"""
Automation runner seam for /api/auto-apply.

The engine that logs into job boards and submits applications lives outside this
service. It is plugged in through AUTOMATION_RUNNER ("package.module:attribute"),
which may name either an object with an async ``run(config_id, use_real_automation)``
method or an async callable with the same signature.
"""
import inspect
import logging
from importlib import import_module
from typing import Any, Awaitable, Callable, Protocol

from core.exceptions import AutomationUnavailable
from models.automation import AutomationResult

logger = logging.getLogger(__name__)


class AutomationRunner(Protocol):
    async def run(self, config_id: str, use_real_automation: bool = False) -> AutomationResult:
        ...


class UnconfiguredAutomationRunner:
    """Placeholder used when no runner is configured; every run fails."""

    async def run(self, config_id: str, use_real_automation: bool = False) -> AutomationResult:
        raise AutomationUnavailable("Automation runner is not configured")


def as_automation_result(result: Any) -> AutomationResult:
    """Accept an AutomationResult or anything shaped like one (e.g. a plain dict)."""
    if isinstance(result, AutomationResult):
        return result
    return AutomationResult.model_validate(result)


class CallableAutomationRunner:
    """Adapts a bare async function to the AutomationRunner protocol."""

    def __init__(self, func: Callable[[str, bool], Awaitable[Any]]):
        self.func = func

    async def run(self, config_id: str, use_real_automation: bool = False) -> AutomationResult:
        return as_automation_result(await self.func(config_id, use_real_automation))


def load_automation_runner(ref: str | None) -> AutomationRunner:
    """
    Resolve a runner from a "module:attribute" reference.

    Args:
        ref: import reference, or None for the unconfigured placeholder

    Returns:
        an AutomationRunner

    Raises:
        ValueError: malformed reference or unusable target
        ImportError / AttributeError: target cannot be imported
    """
    if not ref:
        logger.warning("AUTOMATION_RUNNER not set; /api/auto-apply will report the runner as unavailable")
        return UnconfiguredAutomationRunner()

    module_path, sep, attr = ref.partition(":")
    if not sep or not module_path or not attr:
        raise ValueError(f"AUTOMATION_RUNNER must look like 'package.module:attribute', got {ref!r}")

    target = getattr(import_module(module_path), attr)
    if inspect.isclass(target):
        target = target()
    if inspect.iscoroutinefunction(getattr(target, "run", None)):
        logger.info("Using automation runner %s", ref)
        return target
    if inspect.iscoroutinefunction(target):
        logger.info("Using automation runner function %s", ref)
        return CallableAutomationRunner(target)
    raise ValueError(f"{ref} is neither an async callable nor an object with an async run()")
