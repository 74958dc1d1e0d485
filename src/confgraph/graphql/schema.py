"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext

from ..errors import ResolutionError
from ..logging import get_logger
from ..store import StoreHolder
from .context import build_context
from .queries.root import Query
from .types.conference import Conference, ConferenceDate
from .types.schedule import Period, Place, ScheduleItem
from .types.session import Activity, Session, SessionTag, Speaker

logger = get_logger(__name__)


class ConferenceSchema(strawberry.Schema):
    """Schema that logs field errors through structlog."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            if isinstance(original, ResolutionError):
                logger.warning(
                    "Field resolution failed",
                    path=error.path,
                    code=original.code,
                    error=error.message,
                )
            else:
                logger.error(
                    "GraphQL error",
                    path=error.path,
                    error=error.message,
                    exc_info=original,
                )


# Create the GraphQL schema
schema = ConferenceSchema(
    query=Query,
    # Node implementations, so `node` can return any of them
    types=[
        Conference,
        ConferenceDate,
        Speaker,
        Session,
        SessionTag,
        Activity,
        Period,
        Place,
        ScheduleItem,
    ],
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        # Check that introspection query works (catches most resolution issues)
        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router(
    holder: StoreHolder, path: str = "/graphql", graphiql: bool = True
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers.

        The store snapshot is taken once so the whole request reads from it.
        """
        return build_context(holder.store, request=request)

    return GraphQLRouter(
        schema,
        path=path,
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
