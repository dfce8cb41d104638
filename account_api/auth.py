from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone
from typing import Optional
import jwt
from pydantic import ValidationError

from .config import settings
from .errors import ExpiredToken, InvalidToken
from .models import User
from .schemas import TokenClaims

# Unsalted uppercase hex SHA-256 so stored digests stay comparable with existing rows.
pwd_context = CryptContext(schemes=["hex_sha256"])


def hash_password(password: str) -> str:
    return pwd_context.hash(password).upper()


def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {
        "sub": str(user.id),
        "username": user.username,
        "role": user.role,
        "iat": now,
        "exp": expire,
    }
    if settings.JWT_ISSUER:
        payload["iss"] = settings.JWT_ISSUER
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> TokenClaims:
    """
    Verify a token's signature, expiry and issuer and return its claims.

    Raises:
        ExpiredToken: the token's ``exp`` is in the past
        InvalidToken: anything else wrong with the token
    """
    try:
        data = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            issuer=settings.JWT_ISSUER,
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise ExpiredToken() from exc
    except jwt.InvalidTokenError as exc:
        raise InvalidToken() from exc

    try:
        return TokenClaims(**data)
    except ValidationError as exc:
        raise InvalidToken() from exc
