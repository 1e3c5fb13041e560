"""GraphQL context: one database session and the caller's identity per request."""

import logging
from typing import Any, Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from strawberry.fastapi import BaseContext

from api.dependencies import get_db, get_settings
from app.config import Settings
from app.exceptions import UnauthorizedError
from app.security import extract_bearer_token
from domain.models import User
from services import UserService

logger = logging.getLogger("foodbase.graphql.context")


class GraphQLContext(BaseContext):
    """Per-request context handed to every resolver as ``info.context``.

    Attributes:
        db: SQLAlchemy session for this request
        settings: application settings
        user: authenticated user, or None for anonymous requests
    """

    def __init__(self, db: Session, settings: Settings, user: Optional[User] = None) -> None:
        super().__init__()
        self.db = db
        self.settings = settings
        self.user = user

    def require_user(self) -> User:
        if self.user is None:
            raise UnauthorizedError("Authentication required")
        return self.user

    def get(self, key: str) -> Any:
        """Get a context attribute by name, None when missing"""
        return getattr(self, key, None)


def get_graphql_context(
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> GraphQLContext:
    """
    Build the context for one GraphQL request. A missing or malformed
    Authorization header, or a token that does not resolve to a user,
    makes the request anonymous; it is never an error on its own.
    """
    token = extract_bearer_token(request.headers.get("Authorization"))
    user = UserService.user_from_token(db, settings, token)
    if user is not None:
        logger.debug(f"graphql_context user_id={user.id}")
    return GraphQLContext(db=db, settings=settings, user=user)
