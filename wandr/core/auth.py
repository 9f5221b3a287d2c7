"""Bearer-token identity for API callers.

Tokens are issued by the account service; this module only decodes them.
``create_access_token`` mirrors the issuer's claims for scripts and tests.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from wandr.core.config import settings
from wandr.core.exceptions import InvalidCredentials

logger = logging.getLogger(__name__)

security = HTTPBearer()
optional_security = HTTPBearer(auto_error=False)


def create_access_token(
    user_id: int, expires_delta: Optional[timedelta] = None
) -> str:
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode = {"sub": str(user_id), "exp": expire, "type": "access"}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_user_id(token: str) -> int:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.warning(f"Rejected bearer token: {e}")
        raise InvalidCredentials()

    subject = payload.get("sub")
    if subject is None or payload.get("type") != "access":
        raise InvalidCredentials()
    try:
        return int(subject)
    except (TypeError, ValueError):
        raise InvalidCredentials()


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> int:
    return decode_user_id(credentials.credentials)


def get_optional_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_security),
) -> Optional[int]:
    """The caller's user id, or None for anonymous callers and bad tokens."""
    if credentials is None:
        return None
    try:
        return decode_user_id(credentials.credentials)
    except InvalidCredentials:
        return None
