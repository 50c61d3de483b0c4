"""Password Hashing — passlib CryptContext wrapping bcrypt.

Invariants:
    - Plain passwords are never stored or logged
    - verify_password never raises on a malformed hash; it returns False
"""

import logging
from functools import lru_cache

from passlib.context import CryptContext
from passlib.exc import UnknownHashError

from teachteam.config import get_settings

logger = logging.getLogger(__name__)


@lru_cache
def get_password_context() -> CryptContext:
    settings = get_settings()
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=settings.password_hash_rounds,
    )


def hash_password(password: str) -> str:
    return get_password_context().hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return get_password_context().verify(plain_password, hashed_password)
    except (UnknownHashError, ValueError):
        logger.warning("Stored password hash is not a recognised bcrypt hash")
        return False
