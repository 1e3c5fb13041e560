"""
Error handling tests.

- AppError hierarchy: codes, HTTP statuses, serialisation
- GraphQL error formatting: domain errors keep their message, others are masked
- HTTP error envelope used by the plain routes
"""

import json
from decimal import Decimal

import pytest
from graphql import GraphQLError

from app.exceptions import (
    AppError,
    ConflictError,
    InternalError,
    NotFoundError,
    ServiceValidationError,
    UnauthorizedError,
)
from api.graphql.errors import format_graphql_error
from api.middleware import error_envelope, make_serializable


# =============================================================================
# EXCEPTION HIERARCHY
# =============================================================================


@pytest.mark.parametrize(
    "error_class, code, status",
    [
        (ServiceValidationError, "BAD_REQUEST", 400),
        (UnauthorizedError, "UNAUTHORIZED", 401),
        (NotFoundError, "NOT_FOUND", 404),
        (ConflictError, "CONFLICT", 409),
        (InternalError, "INTERNAL_SERVER_ERROR", 500),
    ],
)
def test_error_codes_and_statuses(error_class, code, status):
    error = error_class("boom")

    assert isinstance(error, AppError)
    assert error.code == code
    assert error.http_status == status
    assert str(error) == "boom"


def test_to_dict_includes_details_only_when_present():
    assert NotFoundError("Food with ID 1 not found.").to_dict() == {
        "message": "Food with ID 1 not found.",
        "code": "NOT_FOUND",
    }
    assert ServiceValidationError("bad", details={"field": "fat"}).to_dict() == {
        "message": "bad",
        "code": "BAD_REQUEST",
        "details": {"field": "fat"},
    }


def test_default_message_and_code_override():
    error = ServiceValidationError(code="INVALID_CURSOR")

    assert error.message == "Invalid input"
    assert error.code == "INVALID_CURSOR"


# =============================================================================
# GRAPHQL ERROR FORMATTING
# =============================================================================


def _resolver_error(original: Exception) -> GraphQLError:
    return GraphQLError(str(original), path=["food"], original_error=original)


def test_domain_error_keeps_message_and_code():
    error = ServiceValidationError(
        "Invalid negative values for: fat", details={"fields": ["fat"]}
    )

    formatted = format_graphql_error(_resolver_error(error))

    assert formatted.message == "Invalid negative values for: fat"
    assert formatted.extensions == {
        "code": "BAD_REQUEST",
        "status": 400,
        "details": {"fields": ["fat"]},
    }
    assert formatted.path == ["food"]


def test_unexpected_error_is_masked():
    formatted = format_graphql_error(_resolver_error(KeyError("password_hash")))

    assert formatted.message == "An unexpected error occurred"
    assert formatted.extensions == {"code": "INTERNAL_SERVER_ERROR", "status": 500}
    assert "password_hash" not in formatted.message


def test_request_errors_pass_through_unchanged():
    syntax_error = GraphQLError("Syntax Error: Unexpected <EOF>.")
    permission_error = _resolver_error(
        GraphQLError("Authentication required", extensions={"code": "UNAUTHORIZED"})
    )

    assert format_graphql_error(syntax_error) is syntax_error
    assert format_graphql_error(permission_error) is permission_error


# =============================================================================
# HTTP ENVELOPE
# =============================================================================


def test_make_serializable_converts_nested_values():
    value = {"amount": Decimal("1.5"), "items": (Decimal("2"), ValueError("nope"))}

    assert make_serializable(value) == {"amount": 1.5, "items": [2.0, "nope"]}


def test_error_envelope_shape():
    response = error_envelope(404, "NOT_FOUND", "missing", details={"id": Decimal("3")})

    body = json.loads(response.body)
    assert response.status_code == 404
    assert body["success"] is False
    assert body["error"] == {"code": "NOT_FOUND", "message": "missing", "details": {"id": 3.0}}
    assert "timestamp" in body
