"""
Current-user routes.
"""
from fastapi import APIRouter, Depends

from ..deps import get_current_claims
from ..schemas import CurrentUser, TokenClaims

router = APIRouter(prefix="/api/user", tags=["user"])


@router.get("/me", response_model=CurrentUser)
def get_current_user(claims: TokenClaims = Depends(get_current_claims)):
    """Identifier and username of the token holder, read from its claims."""
    return CurrentUser(user_id=claims.sub, username=claims.username)


@router.get("/boom")
def boom():
    """Always fails; exercises the top-level error boundary."""
    raise RuntimeError("Simulated failure")
