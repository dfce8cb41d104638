"""
Event logger utility for authentication events.
"""
import logging
from typing import Optional

from fastapi import Request

logger = logging.getLogger(__name__)


ALLOWED_EVENT_TYPES = {
    "register",
    "register_duplicate",
    "login_success",
    "login_failure",
}


def client_ip(request: Request) -> Optional[str]:
    """Client address, falling back to the first X-Forwarded-For hop."""
    if request.client and request.client.host:
        return request.client.host

    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        # X-Forwarded-For can contain multiple IPs, take the first one
        return forwarded.split(",")[0].strip()
    return None


def log_auth_event(event_type: str, username: str, request: Request) -> None:
    """
    Log an authentication event.

    Args:
        event_type: One of: register, register_duplicate, login_success,
                    login_failure
        username: Username the request was made for
        request: FastAPI Request object

    Raises:
        ValueError: If event_type is invalid
    """
    if event_type not in ALLOWED_EVENT_TYPES:
        raise ValueError(
            f"Invalid event_type '{event_type}'. Must be one of: {', '.join(sorted(ALLOWED_EVENT_TYPES))}"
        )

    level = logging.WARNING if event_type in ("login_failure", "register_duplicate") else logging.INFO
    logger.log(
        level,
        "AUTH %s username=%s ip=%s user_agent=%s",
        event_type, username, client_ip(request), request.headers.get("user-agent"),
    )
