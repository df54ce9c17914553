"""
Password hashing and bearer token helpers.
"""
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from formbot.config import Settings, settings


@lru_cache(maxsize=8)
def get_crypt_context(rounds: int) -> CryptContext:
    """Bcrypt context for a cost factor. Verification reads the cost from the hash."""
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


pwd_context = get_crypt_context(settings.BCRYPT_ROUNDS)


class InvalidTokenError(Exception):
    """Raised when a bearer token is malformed, expired or wrongly signed."""


def get_password_hash(password: str, config: Settings = settings) -> str:
    return get_crypt_context(config.BCRYPT_ROUNDS).hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not plain_password or not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # stored value is not a hash passlib recognises
        return False


def create_access_token(
    user_id: int,
    config: Settings = settings,
    issued_at: Optional[datetime] = None,
) -> str:
    """
    Sign a token carrying the user id.

    Args:
        user_id: Id of the authenticated user
        config: Settings holding the signing key, algorithm and lifetime
        issued_at: Issuance time, defaults to now

    Returns:
        Encoded JWT with ``userId`` and ``exp`` claims
    """
    issued_at = issued_at or datetime.now(timezone.utc)
    expire = issued_at + timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {"userId": user_id, "exp": expire}
    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=config.ALGORITHM)


def decode_access_token(token: str, config: Settings = settings) -> int:
    """Return the user id carried by a token, or raise InvalidTokenError."""
    try:
        payload = jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])
    except JWTError as exc:
        raise InvalidTokenError(str(exc)) from exc

    user_id = payload.get("userId")
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise InvalidTokenError("Token does not carry a user id")
    return user_id
