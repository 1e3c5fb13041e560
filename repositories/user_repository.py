"""
User Repository - Data access layer for user accounts
"""

from typing import Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from domain.models import User
from repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_username(self, username: str) -> Optional[User]:
        return (
            self.db.query(User)
            .filter(func.lower(User.username) == username.strip().lower())
            .first()
        )

    def get_by_email(self, email: str) -> Optional[User]:
        return (
            self.db.query(User)
            .filter(func.lower(User.email) == email.strip().lower())
            .first()
        )

    def get_by_username_or_email(self, value: str) -> Optional[User]:
        """Get user whose username or email equals ``value`` (case-insensitive)"""
        normalized = value.strip().lower()
        return (
            self.db.query(User)
            .filter(
                or_(
                    func.lower(User.username) == normalized,
                    func.lower(User.email) == normalized,
                )
            )
            .first()
        )

    def create_user(self, username: str, email: str, password_hash: str) -> User:
        """Stage a new user"""
        return self.add(User(username=username, email=email, password=password_hash))
