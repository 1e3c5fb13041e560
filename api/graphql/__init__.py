"""GraphQL API: schema, context and resolvers."""

from api.graphql.context import GraphQLContext, get_graphql_context
from api.graphql.schema import create_schema, schema

__all__ = ["GraphQLContext", "get_graphql_context", "create_schema", "schema"]
