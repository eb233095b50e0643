from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from ainotes.storage.database import db
from ainotes.storage.users_store import UsersStore

logger = logging.getLogger(__name__)

bearer = HTTPBearer(auto_error=False)
users = UsersStore(db)


def _secret() -> str:
    s = os.getenv("JWT_SECRET", "")
    if not s:
        # required in every environment; tests set their own
        raise RuntimeError("JWT_SECRET is not set")
    return s


def _algo() -> str:
    return os.getenv("JWT_ALGORITHM", "HS256")


def _exp_minutes() -> int:
    try:
        return int(os.getenv("JWT_EXP_MINUTES", "15"))
    except ValueError:
        return 15


def create_access_token(subject: str) -> str:
    now = datetime.now(timezone.utc)
    exp = now + timedelta(minutes=_exp_minutes())
    payload = {"sub": subject, "iat": int(now.timestamp()), "exp": int(exp.timestamp())}
    return jwt.encode(payload, _secret(), algorithm=_algo())


def decode_token(token: str) -> dict:
    return jwt.decode(token, _secret(), algorithms=[_algo()])


def get_user(
    creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
) -> Optional[str]:
    """
    Resolve the current user id from the bearer token.

    Returns None instead of raising when the request is unauthenticated:
    actions decide themselves how to report a missing user.
    """
    if creds is None or creds.scheme.lower() != "bearer":
        return None

    try:
        payload = decode_token(creds.credentials)
    except JWTError as e:
        logger.warning("Rejected bearer token: %s", e)
        return None

    sub = payload.get("sub")
    if not sub:
        logger.warning("Rejected bearer token without subject")
        return None

    # token may outlive its account
    if users.get(str(sub)) is None:
        logger.warning("Rejected bearer token for unknown user")
        return None
    return str(sub)


def get_current_user(user_id: Optional[str] = Depends(get_user)) -> str:
    """Strict variant for plain reads: 401 when there is no user."""
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id
