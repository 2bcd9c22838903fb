# backend/automarker/routes/auth_routes.py
import logging
from typing import Optional

from fastapi import APIRouter, Cookie, HTTPException, Response

from .. import auth, config, schemas

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["session"])


# -------- SESSION DEPENDENCY --------
def require_session(session: Optional[str] = Cookie(default=None, alias=config.COOKIE_NAME)) -> None:
    if not auth.is_session_valid(session):
        raise HTTPException(status_code=401, detail="unauthorized")


# -------- ROUTES --------
@router.post("/unlock", response_model=schemas.OkOut)
def unlock(data: schemas.UnlockIn, response: Response):
    code = str(data.code or "").strip()
    if not code:
        raise HTTPException(status_code=400, detail="missing_code")
    if not auth.check_access_code(code):
        logger.warning("unlock attempt with incorrect code")
        raise HTTPException(status_code=401, detail="incorrect_code")

    response.set_cookie(
        key=config.COOKIE_NAME,
        value=auth.create_session_token(),
        max_age=config.SESSION_MINUTES * 60,
        httponly=True,
        secure=config.COOKIE_SECURE,
        samesite="lax",
    )
    logger.info("session unlocked for %d minutes", config.SESSION_MINUTES)
    return {"ok": True}


@router.post("/logout", response_model=schemas.OkOut)
def logout(response: Response):
    response.delete_cookie(config.COOKIE_NAME)
    return {"ok": True}
