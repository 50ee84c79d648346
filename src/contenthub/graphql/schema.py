"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..auth.middleware import get_auth_context_optional
from ..config import settings
from ..logging import get_logger, get_request_id, set_request_context
from ..repository.sql import SqlContentStore
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

schema = strawberry.Schema(query=Query, mutation=Mutation)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Catches unresolved type references early so the server fails fast.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


async def get_context(request: Request) -> dict[str, Any]:
    """Build the per-request context: a fresh identity and a store handle."""
    auth = await get_auth_context_optional(authorization=request.headers.get("authorization"))
    if auth.user_id is not None:
        set_request_context(request_id=get_request_id(), user_id=str(auth.user_id))

    return {
        "request": request,
        "auth": auth,
        "store": SqlContentStore(),
    }


def create_graphql_router() -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""
    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if settings.debug else None,
        context_getter=get_context,
    )
