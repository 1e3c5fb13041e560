"""GraphQL schema factory."""

from typing import List, Optional

import strawberry
from graphql import GraphQLError
from strawberry.types import ExecutionContext

from api.graphql.errors import DomainErrorExtension, log_graphql_errors
from api.graphql.mutations import Mutation
from api.graphql.queries import Query


class FoodbaseSchema(strawberry.Schema):
    """Schema whose error log tells domain errors apart from crashes"""

    def process_errors(
        self,
        errors: List[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        operation_name = execution_context.operation_name if execution_context else None
        log_graphql_errors(errors, operation_name)


def create_schema() -> strawberry.Schema:
    """Create the schema with queries, mutations and error reporting"""
    return FoodbaseSchema(
        query=Query,
        mutation=Mutation,
        extensions=[DomainErrorExtension],
    )


schema = create_schema()
