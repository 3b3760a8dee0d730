"""Password hashing helpers used when seeding account-like tables."""

from __future__ import annotations

import logging
import warnings

# argon2 cffi exposes a deprecated attribute access that creates a lot of noise
warnings.filterwarnings("ignore", category=DeprecationWarning, message=r".*argon2.*")

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["argon2", "bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    if not password:
        raise ValueError("password must not be empty")
    return pwd_context.hash(password)


__all__ = ["pwd_context", "verify_password", "get_password_hash"]
