"""
Collaborator registry and FastAPI dependencies.

build_collaborators() is the composition root: it is called once per app at
process start. Route handlers receive the collaborators through the getters below,
which read them from app.state, so tests can hand create_app() fakes instead.
"""
from dataclasses import dataclass, field

from fastapi import Request

from config.settings import Settings, settings as default_settings
from core import db
from core.tasks import DetachedTasks
from services.automation_runner import AutomationRunner, load_automation_runner
from services.automation_tester import AutomationTester, AutomationTesterProtocol
from services.job_repository import JobRepository, SQLJobRepository
from services.session_provider import MockSessionProvider, SessionProvider


@dataclass
class Collaborators:
    session_provider: SessionProvider
    automation_runner: AutomationRunner
    automation_tester: AutomationTesterProtocol
    job_repository: JobRepository
    detached_tasks: DetachedTasks = field(default_factory=DetachedTasks)


def build_collaborators(cfg: Settings | None = None) -> Collaborators:
    cfg = cfg or default_settings
    return Collaborators(
        session_provider=MockSessionProvider(),
        automation_runner=load_automation_runner(cfg.AUTOMATION_RUNNER),
        automation_tester=AutomationTester(
            delay_scale=cfg.AUTOMATION_TEST_DELAY_SCALE,
            log_dir=cfg.AUTOMATION_LOG_DIR,
        ),
        job_repository=SQLJobRepository(db.async_session_maker),
    )


def get_collaborators(request: Request) -> Collaborators:
    return request.app.state.collaborators


def get_session_provider(request: Request) -> SessionProvider:
    return get_collaborators(request).session_provider


def get_automation_runner(request: Request) -> AutomationRunner:
    return get_collaborators(request).automation_runner


def get_automation_tester(request: Request) -> AutomationTesterProtocol:
    return get_collaborators(request).automation_tester


def get_job_repository(request: Request) -> JobRepository:
    return get_collaborators(request).job_repository


def get_detached_tasks(request: Request) -> DetachedTasks:
    return get_collaborators(request).detached_tasks
