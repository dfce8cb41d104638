"""
Pytest configuration for Account API tests.

Points the application at a throwaway SQLite file in a temporary directory
before any module reads its settings; the directory is removed at session end.
"""
import os
import shutil
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="account_api_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test_account_api.db')}"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ.pop("JWT_ISSUER", None)
os.environ["ENVIRONMENT"] = "production"

import pytest
from fastapi.testclient import TestClient

from account_api.main import app
from account_api.db import Base, engine, SessionLocal
from account_api.models import User
from account_api.auth import hash_password, create_access_token


@pytest.fixture(scope="session", autouse=True)
def database_dir():
    yield _DB_DIR
    engine.dispose()
    shutil.rmtree(_DB_DIR, ignore_errors=True)


@pytest.fixture(autouse=True)
def reset_database():
    # Drop all tables and recreate them before each test
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db_session():
    session = SessionLocal()
    yield session
    session.close()


def ensure_user(username="owner", password="Secret123!", role="User"):
    db = SessionLocal()
    try:
        u = db.query(User).filter(User.username == username).first()
        if not u:
            u = User(username=username, password_hash=hash_password(password), role=role)
            db.add(u)
            db.commit()
            db.refresh(u)
        db.expunge(u)
        return u
    finally:
        db.close()


def auth_header_for(user):
    token = create_access_token(user)
    return {"Authorization": f"Bearer {token}"}
