"""
Global middleware and exception handlers.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .errors import AccountError

logger = logging.getLogger(__name__)


async def account_error_handler(request: Request, exc: AccountError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=exc.headers,
    )


def register_middleware(app: FastAPI) -> None:
    """Attach the error handlers and the top-level fault boundary."""
    app.add_exception_handler(AccountError, account_error_handler)

    @app.middleware("http")
    async def unhandled_exception_boundary(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "code": status.HTTP_500_INTERNAL_SERVER_ERROR,
                    "message": "Internal server error",
                },
            )
