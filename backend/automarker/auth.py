# backend/automarker/auth.py
import hmac
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from . import config

logger = logging.getLogger(__name__)


def check_access_code(code: str) -> bool:
    # constant-time compare; length mismatch is simply a miss
    return hmac.compare_digest(code.encode("utf-8"), config.ACCESS_CODE.encode("utf-8"))


def create_session_token(minutes: Optional[int] = None) -> str:
    if minutes is None:
        minutes = config.SESSION_MINUTES
    expire = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    return jwt.encode({"exp": expire}, config.SECRET_KEY, algorithm=config.ALGORITHM)


def is_session_valid(token: Optional[str]) -> bool:
    """True when the token is signed with our secret and not yet expired."""
    if not token:
        return False
    try:
        payload = jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])
    except JWTError as exc:
        logger.debug("rejected session token: %s", exc)
        return False
    return isinstance(payload.get("exp"), (int, float))
