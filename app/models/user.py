"""ORM model for application users (sign-up and JWT authentication)."""

from sqlalchemy import Column, Integer, String

from app.core.security import hash_password
from app.models.base import Base, TimestampMixin


class User(TimestampMixin, Base):
    """
    User account. The password is only ever stored as a bcrypt hash.

    Assigning ``user.password = "..."`` hashes immediately; if hashing fails the
    assignment raises and the object is never added with a usable secret.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    country = Column(String(100), nullable=False)

    @property
    def password(self) -> str:
        raise AttributeError("password is write-only; use password_hash")

    @password.setter
    def password(self, plain_password: str) -> None:
        self.password_hash = hash_password(plain_password)
