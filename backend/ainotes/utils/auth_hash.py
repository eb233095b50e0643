"""Password hashing helpers using passlib.

Used by the register/login flow:
- hash_password(plain: str) -> str
- verify_password(plain: str, hashed: str) -> bool

Hashes with bcrypt through passlib's CryptContext. The cost can be set with
the `BCRYPT_ROUNDS` environment variable (int). When the installed bcrypt
backend cannot be loaded by passlib, pbkdf2_sha256 is used instead so that
registration keeps working.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from passlib.context import CryptContext

logger = logging.getLogger(__name__)


def _rounds() -> Optional[int]:
    raw = os.getenv("BCRYPT_ROUNDS")
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring invalid BCRYPT_ROUNDS=%r", raw)
        return None


def _context_for(scheme: str, rounds: Optional[int]) -> CryptContext:
    if rounds:
        return CryptContext(schemes=[scheme], deprecated="auto", **{f"{scheme}__rounds": rounds})
    return CryptContext(schemes=[scheme], deprecated="auto")


def _build_context() -> CryptContext:
    rounds = _rounds()
    try:
        ctx = _context_for("bcrypt", rounds)
        # the backend is loaded lazily; force it here so failures surface at import
        ctx.hash("probe")
        return ctx
    except Exception as exc:
        logger.warning("bcrypt backend unavailable (%s); falling back to pbkdf2_sha256", exc)
        return _context_for("pbkdf2_sha256", rounds)


pwd_context = _build_context()


def hash_password(plain: str) -> str:
    """Hash a plaintext password and return the encoded hash string."""
    if plain is None:
        raise ValueError("Password must not be None")
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """Verify a plaintext password against a stored hash.

    Malformed hashes count as a mismatch.
    """
    if plain is None or hashed is None:
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except (ValueError, TypeError):
        return False
