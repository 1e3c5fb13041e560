"""Strawberry permission classes."""

import logging
from typing import Any

from strawberry.permission import BasePermission
from strawberry.types import Info

from app.exceptions import UnauthorizedError

logger = logging.getLogger("foodbase.graphql.permissions")


class IsAuthenticated(BasePermission):
    """Allow the field only for requests carrying a valid user token.

    Examples:
        @strawberry.mutation(permission_classes=[IsAuthenticated])
        def create_brand(self, info: Info, input: CreateBrandInput) -> BrandType:
            user = info.context.user
    """

    message = "Authentication required"
    error_extensions = {
        "code": UnauthorizedError.default_code,
        "status": UnauthorizedError.http_status,
    }

    def has_permission(self, source: Any, info: Info, **kwargs: Any) -> bool:
        if info.context.get("user") is None:
            logger.info(f"permission_denied field={info.field_name} reason=anonymous")
            return False
        return True
