from typing import Any, Optional, Tuple
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from app.config import Settings
from app.exceptions import ConflictError, NotFoundError, UnauthorizedError
from app.security import (
    build_access_token,
    decode_access_token,
    hash_password,
    user_id_from_claims,
    verify_password,
)
from domain.models import User
from domain.schemas.user_schemas import LoginRequest, UserRegister
from repositories import UserRepository
from services.helpers import validate_schema

logger = logging.getLogger("foodbase.user")


class UserService:
    """Accounts, login and token issuing"""

    @staticmethod
    def get_user(db: Session, user_id: int) -> User:
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            raise NotFoundError(f"User with ID {user_id} not found.")
        return user

    @staticmethod
    def find_user(db: Session, user_id: Optional[int]) -> Optional[User]:
        if user_id is None:
            return None
        return UserRepository(db).get_by_id(user_id)

    @staticmethod
    def user_from_token(
        db: Session, settings: Settings, token: Optional[str]
    ) -> Optional[User]:
        """
        User a bearer token belongs to. An absent, invalid or expired token,
        or one naming an unknown user, yields None.
        """
        if not token:
            return None
        try:
            claims = decode_access_token(settings, token)
            user_id = user_id_from_claims(claims)
        except UnauthorizedError as e:
            logger.info(f"token_rejected reason={e.message!r}")
            return None

        user = UserRepository(db).get_by_id(user_id)
        if user is None:
            logger.warning(f"token_user_missing user_id={user_id}")
        return user

    @staticmethod
    def register(db: Session, settings: Settings, data: Any) -> Tuple[str, User]:
        """Create an account and return ``(token, user)``"""
        data = validate_schema(UserRegister, data, "Invalid registration input")
        repo = UserRepository(db)

        if repo.get_by_username(data.username):
            raise ConflictError(
                "Username is already taken.", details={"field": "username"}
            )
        if repo.get_by_email(data.email):
            raise ConflictError(
                "Email is already registered.", details={"field": "email"}
            )

        password_hash = hash_password(data.password, rounds=settings.bcrypt_rounds)
        try:
            user = repo.create_user(data.username, data.email, password_hash)
            db.commit()
            db.refresh(user)
        except IntegrityError:
            db.rollback()
            raise ConflictError("Username or email is already registered.")
        except Exception:
            db.rollback()
            logger.exception(f"user_register_failed username={data.username!r}")
            raise

        logger.info(f"user_registered user_id={user.id}")
        return build_access_token(settings, user_id=user.id), user

    @staticmethod
    def login(db: Session, settings: Settings, data: Any) -> Tuple[str, User]:
        """Check credentials (username or email) and return ``(token, user)``"""
        data = validate_schema(LoginRequest, data, "Invalid login input")
        user = UserRepository(db).get_by_username_or_email(data.username_or_email)

        if not user or not verify_password(data.password, user.password):
            logger.warning("login_failed reason=invalid_credentials")
            raise UnauthorizedError("Invalid credentials")

        logger.info(f"user_logged_in user_id={user.id}")
        return build_access_token(settings, user_id=user.id), user
