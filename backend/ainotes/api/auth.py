from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ainotes.errors import UserExistsError
from ainotes.models.auth import LoginRequest, RegisterRequest, TokenResponse
from ainotes.storage.database import db
from ainotes.storage.users_store import UsersStore
from ainotes.utils.auth_hash import hash_password, verify_password
from ainotes.utils.jwt_auth import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

users = UsersStore(db)


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(req: RegisterRequest):
    if users.get(req.user_id) is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="User exists")

    try:
        # never store the plaintext
        users.create(req.user_id, hash_password(req.password))
    except UserExistsError:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="User exists")

    logger.info("User registered: user_id=%s", req.user_id)
    return {"user_id": req.user_id}


@router.post("/login", response_model=TokenResponse)
def login(req: LoginRequest):
    rec = users.get(req.user_id)
    if rec is None or not verify_password(req.password, rec.hashed_password):
        logger.warning("Failed login for user_id=%s", req.user_id)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    token = create_access_token(subject=req.user_id)
    return TokenResponse(access_token=token)
