"""
Auth routes - register and login.
"""
from fastapi import APIRouter, Depends, Request

from ..deps import get_account_service
from ..errors import DuplicateUsername, InvalidCredentials
from ..schemas import MessageResponse, Token, UserCreate, UserLogin
from ..services import AccountService
from ..utils.event_logger import log_auth_event

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=MessageResponse)
def register(payload: UserCreate, request: Request, service: AccountService = Depends(get_account_service)):
    try:
        service.register(payload.username, payload.password, payload.role)
    except DuplicateUsername:
        log_auth_event("register_duplicate", payload.username, request)
        raise
    log_auth_event("register", payload.username, request)
    return MessageResponse(message="registered")


@router.post("/login", response_model=Token)
def login(credentials: UserLogin, request: Request, service: AccountService = Depends(get_account_service)):
    try:
        token = service.login(credentials.username, credentials.password)
    except InvalidCredentials:
        log_auth_event("login_failure", credentials.username, request)
        raise
    log_auth_event("login_success", credentials.username, request)
    return Token(token=token)
