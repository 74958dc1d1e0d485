"""
Root GraphQL query definitions
"""

import strawberry

from ...relay.registry import CollectionKey
from ..context import get_store
from ..types.conference import Conference
from ..types.connection import (
    PageInfo,
    SessionConnection,
    SessionEdge,
    SpeakerConnection,
    SpeakerEdge,
)
from ..types.node import Node
from ..types.schedule import ScheduleItem
from ..types.session import Session, Speaker


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def node(self, info: strawberry.Info, id: strawberry.ID) -> Node | None:
        """Fetch any object by its global ID."""
        from ..nodes import node_from_resolved
        from ..resolvers.node import resolve_node

        return node_from_resolved(resolve_node(get_store(info), id))

    @strawberry.field
    def conference(self, info: strawberry.Info, code: str) -> Conference | None:
        """Get a conference by its code."""
        from ..resolvers.node import resolve_conference

        conference = resolve_conference(get_store(info), code)
        return Conference.from_record(conference) if conference else None

    @strawberry.field
    def schedule_item(self, info: strawberry.Info, id: strawberry.ID) -> ScheduleItem | None:
        """Get a schedule item by its global ID."""
        from ..resolvers.node import resolve_schedule_item

        return ScheduleItem.from_record(resolve_schedule_item(get_store(info), id))

    @strawberry.field
    def speakers(
        self,
        info: strawberry.Info,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> SpeakerConnection | None:
        """Page through the speakers of every conference."""
        from ..resolvers.connections import connection_from_list

        page = connection_from_list(
            get_store(info).records(CollectionKey.SPEAKERS), first, after, last, before
        )
        return SpeakerConnection(
            edges=[SpeakerEdge(node=Speaker.from_record(r), cursor=c) for c, r in page.edges],
            page_info=PageInfo(
                has_next_page=page.has_next_page,
                has_previous_page=page.has_previous_page,
                start_cursor=page.start_cursor,
                end_cursor=page.end_cursor,
            ),
        )

    @strawberry.field
    def sessions(
        self,
        info: strawberry.Info,
        first: int | None = None,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> SessionConnection | None:
        """Page through the sessions of every conference."""
        from ..resolvers.connections import connection_from_list

        page = connection_from_list(
            get_store(info).records(CollectionKey.SESSIONS), first, after, last, before
        )
        return SessionConnection(
            edges=[SessionEdge(node=Session.from_record(r), cursor=c) for c, r in page.edges],
            page_info=PageInfo(
                has_next_page=page.has_next_page,
                has_previous_page=page.has_previous_page,
                start_cursor=page.start_cursor,
                end_cursor=page.end_cursor,
            ),
        )
