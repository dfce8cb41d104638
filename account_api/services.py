"""
Account service - registration, login and user listing over an injected session.
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .auth import create_access_token, hash_password
from .config import settings
from .errors import DuplicateUsername, InvalidCredentials
from .models import User

logger = logging.getLogger(__name__)


class AccountService:
    """Auth flows bound to one database session."""

    def __init__(self, db: Session):
        self.db = db

    def username_taken(self, username: str) -> bool:
        return self.db.query(User.id).filter(User.username == username).first() is not None

    def register(self, username: str, password: str, role: Optional[str] = None) -> User:
        """
        Create a user with the digest of ``password``.

        Raises:
            DuplicateUsername: a user with this username already exists
        """
        if self.username_taken(username):
            raise DuplicateUsername()

        user = User(
            username=username,
            password_hash=hash_password(password),
            role=role or settings.DEFAULT_ROLE,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            # Lost a concurrent registration for the same username
            self.db.rollback()
            raise DuplicateUsername() from exc
        self.db.refresh(user)

        logger.info("Registered user_id=%s username=%s role=%s", user.id, user.username, user.role)
        return user

    def authenticate(self, username: str, password: str) -> User:
        """
        Find the user matching both username and password digest.

        Raises:
            InvalidCredentials: no such user or wrong password
        """
        user = (
            self.db.query(User)
            .filter(User.username == username, User.password_hash == hash_password(password))
            .first()
        )
        if user is None:
            raise InvalidCredentials()
        return user

    def login(self, username: str, password: str) -> str:
        """Authenticate and return a signed access token."""
        user = self.authenticate(username, password)
        return create_access_token(user)

    def list_users(self) -> List[User]:
        return self.db.query(User).order_by(User.id).all()
