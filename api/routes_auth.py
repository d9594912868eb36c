# api/routes_auth.py
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from core.dependencies import get_session_provider
from core.response import ok, error, error_message
from services.session_provider import SessionProvider

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/auth/dev-session")
async def dev_session(provider: SessionProvider = Depends(get_session_provider)):
    """Mock authentication for development: current user profile plus session tokens."""
    try:
        session = await provider.get_session()
    except Exception as e:
        logger.exception("Session lookup failed")
        return JSONResponse(status_code=500, content=error(error=error_message(e)))
    return ok({
        "user": session.user.model_dump(mode="json", by_alias=True),
        "session": session.tokens(),
    })
