"""
GraphQL schema definitions using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..config import settings
from ..logging import get_logger
from .mutations.root import Mutation
from .queries.root import MessageQuery, Query

logger = get_logger(__name__)

GRAPHQL_PATH = "/graphql"
MESSAGES_GRAPHQL_PATH = "/graphqlmutations"

# Dice, greetings and messages
schema = strawberry.Schema(query=Query, mutation=Mutation)

# Messages only
message_schema = strawberry.Schema(query=MessageQuery, mutation=Mutation)


class SchemaValidationError(Exception):
    """Raised when a GraphQL schema fails validation at startup."""

    pass


def validate_schema() -> None:
    """Validate both GraphQL schemas at startup.

    Runs graphql-core validation and an introspection query against each
    schema so unresolvable types fail the app at startup instead of at
    request time.

    Raises:
        SchemaValidationError: If either schema is invalid
    """
    for name, candidate in (("main", schema), ("messages", message_schema)):
        try:
            graphql_schema = candidate._schema

            errors = gql_validate_schema(graphql_schema)
            if errors:
                error_messages = [str(e) for e in errors]
                raise SchemaValidationError(
                    f"GraphQL schema validation failed: {'; '.join(error_messages)}"
                )

            result = graphql_sync(graphql_schema, get_introspection_query())
            if result.errors:
                error_messages = [str(e) for e in result.errors]
                raise SchemaValidationError(
                    f"GraphQL introspection failed: {'; '.join(error_messages)}"
                )

        except Exception as e:
            logger.error("GraphQL schema validation failed", schema=name, error=str(e))
            raise

        logger.info("GraphQL schema validation successful", schema=name)


async def get_context(request: Request) -> dict[str, Any]:
    """Get the context for GraphQL resolvers."""
    return {
        "request": request,
        "store": request.app.state.message_store,
        "dice": request.app.state.dice_roller,
    }


def create_graphql_router(
    path: str = GRAPHQL_PATH, messages_only: bool = False
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""

    return GraphQLRouter(
        message_schema if messages_only else schema,
        path=path,
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )
