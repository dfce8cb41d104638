"""
Unit tests for event logger utility.
"""
import logging
from unittest.mock import Mock

import pytest

from account_api.utils.event_logger import client_ip, log_auth_event


@pytest.fixture
def mock_request():
    """Create a mock FastAPI Request object."""
    request = Mock()
    request.client = Mock()
    request.client.host = "192.168.1.1"
    request.headers = {"user-agent": "Mozilla/5.0 Test Browser"}
    return request


def test_log_auth_event_writes_record(mock_request, caplog):
    with caplog.at_level(logging.INFO, logger="account_api.utils.event_logger"):
        log_auth_event("login_success", "testuser", mock_request)

    assert len(caplog.records) == 1
    message = caplog.records[0].getMessage()
    assert "AUTH login_success" in message
    assert "username=testuser" in message
    assert "ip=192.168.1.1" in message


def test_failures_logged_as_warning(mock_request, caplog):
    with caplog.at_level(logging.INFO, logger="account_api.utils.event_logger"):
        log_auth_event("login_failure", "testuser", mock_request)

    assert caplog.records[0].levelno == logging.WARNING


def test_log_auth_event_rejects_unknown_type(mock_request):
    with pytest.raises(ValueError):
        log_auth_event("password_reset", "testuser", mock_request)


def test_client_ip_falls_back_to_forwarded_header():
    request = Mock()
    request.client = None
    request.headers = {"x-forwarded-for": "10.0.0.5, 172.16.0.1"}
    assert client_ip(request) == "10.0.0.5"


def test_client_ip_unknown():
    request = Mock()
    request.client = None
    request.headers = {}
    assert client_ip(request) is None


def test_login_endpoints_emit_events(client, caplog):
    client.post("/api/auth/register", json={"username": "alice", "password": "pw1"})
    with caplog.at_level(logging.INFO, logger="account_api.utils.event_logger"):
        client.post("/api/auth/login", json={"username": "alice", "password": "bad"})

    assert any("AUTH login_failure username=alice" in r.getMessage() for r in caplog.records)
