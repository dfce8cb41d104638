from sqlalchemy import Column, Integer, String
from .db import Base
from .config import settings


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    # Case-sensitive as stored
    username = Column(String, unique=True, index=True, nullable=False)
    # Hex SHA-256 digest, never the plaintext
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False, default=settings.DEFAULT_ROLE)

    def to_dict(self) -> dict:
        """Public view of the record, used by the admin listing."""
        return {
            "id": self.id,
            "username": self.username,
            "role": self.role,
        }
