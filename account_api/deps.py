"""
FastAPI dependencies: database-bound services and the bearer-token guard.
"""
from typing import Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from .auth import decode_access_token
from .db import get_db
from .errors import InsufficientRole, InvalidToken
from .schemas import TokenClaims
from .services import AccountService

_bearer_scheme = HTTPBearer(auto_error=False)


def get_account_service(db: Session = Depends(get_db)) -> AccountService:
    return AccountService(db)


def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
) -> TokenClaims:
    """
    Verify the Bearer token and return its claims.

    Missing, malformed, invalid and expired tokens all fail with 401.
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise InvalidToken("Not authenticated")
    return decode_access_token(credentials.credentials)


def require_role(role: str) -> Callable[..., TokenClaims]:
    """Dependency factory admitting only callers whose role claim equals ``role``."""

    def checker(claims: TokenClaims = Depends(get_current_claims)) -> TokenClaims:
        if claims.role != role:
            raise InsufficientRole()
        return claims

    return checker
