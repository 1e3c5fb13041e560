"""
Error reporting at the GraphQL boundary.

Resolver exceptions reach clients as GraphQL errors with a stable
``extensions.code``. Domain errors (``AppError``) keep their message;
anything else is reported as a generic internal error so no internals leak.
"""

import logging
from typing import Iterator, List, Optional

from graphql import GraphQLError
from strawberry.extensions import SchemaExtension

from api.middleware import make_serializable
from app.exceptions import AppError, InternalError

logger = logging.getLogger("foodbase.graphql.errors")

UNEXPECTED_ERROR_MESSAGE = InternalError.default_message


def error_extensions(error: AppError) -> dict:
    extensions = {"code": error.code, "status": error.http_status}
    if error.details:
        extensions["details"] = make_serializable(dict(error.details))
    return extensions


def format_graphql_error(error: GraphQLError) -> GraphQLError:
    """Client-facing version of a resolver error"""
    original = error.original_error
    if original is None or isinstance(original, GraphQLError):
        # Syntax, validation and permission errors are already client-facing
        return error

    if isinstance(original, AppError):
        message = original.message
        extensions = error_extensions(original)
    else:
        message = UNEXPECTED_ERROR_MESSAGE
        extensions = {
            "code": InternalError.default_code,
            "status": InternalError.http_status,
        }

    return GraphQLError(
        message,
        nodes=error.nodes,
        source=error.source,
        positions=error.positions,
        path=error.path,
        original_error=original,
        extensions=extensions,
    )


def log_graphql_errors(errors: List[GraphQLError], operation_name: Optional[str] = None) -> None:
    """Domain errors are logged without a traceback, unexpected ones with it"""
    for error in errors:
        original = error.original_error
        path = ".".join(str(p) for p in (error.path or [])) or "-"
        if original is None or isinstance(original, GraphQLError):
            logger.info(f"graphql_request_error operation={operation_name} message={error.message!r}")
        elif isinstance(original, AppError):
            logger.warning(
                f"graphql_domain_error operation={operation_name} path={path} "
                f"code={original.code} message={original.message!r}"
            )
        else:
            logger.error(
                f"graphql_unexpected_error operation={operation_name} path={path}",
                exc_info=(type(original), original, original.__traceback__),
            )


class DomainErrorExtension(SchemaExtension):
    """Rewrite every error of an operation with ``format_graphql_error``"""

    def on_operation(self) -> Iterator[None]:
        yield
        result = self.execution_context.result
        if result is not None and getattr(result, "errors", None):
            result.errors = [format_graphql_error(error) for error in result.errors]
