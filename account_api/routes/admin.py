"""
Admin routes - restricted to the admin role.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends

from ..config import settings
from ..deps import get_account_service, require_role
from ..schemas import TokenClaims, UserSummary
from ..services import AccountService

router = APIRouter(prefix="/api/admin", tags=["admin"])
logger = logging.getLogger(__name__)


@router.get("/users", response_model=List[UserSummary])
def list_users(
    claims: TokenClaims = Depends(require_role(settings.ADMIN_ROLE)),
    service: AccountService = Depends(get_account_service),
):
    users = service.list_users()
    logger.info("Admin user listing: admin=%s results=%s", claims.username, len(users))
    return [UserSummary.model_validate(u) for u in users]
