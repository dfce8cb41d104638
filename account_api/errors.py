"""
Domain errors raised by the account service and access guard.

Each error carries the HTTP status and the client-safe detail that the
exception handler in ``main.py`` turns into a response.
"""
from typing import Dict, Optional


class AccountError(Exception):
    status_code = 400
    detail = "Bad request"
    headers: Optional[Dict[str, str]] = None

    def __init__(self, detail: Optional[str] = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class DuplicateUsername(AccountError):
    status_code = 400
    detail = "Username already exists"


class InvalidCredentials(AccountError):
    status_code = 401
    detail = "Invalid credentials"


class InvalidToken(AccountError):
    status_code = 401
    detail = "Invalid token"
    headers = {"WWW-Authenticate": "Bearer"}


class ExpiredToken(InvalidToken):
    pass


class InsufficientRole(AccountError):
    status_code = 403
    detail = "Insufficient role"
