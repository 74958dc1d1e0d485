"""
Relay connection types for speakers and sessions
"""

import strawberry

from .session import Session, Speaker


@strawberry.type(description="Information about pagination in a connection")
class PageInfo:
    has_next_page: bool
    has_previous_page: bool
    start_cursor: str | None
    end_cursor: str | None


@strawberry.type
class SpeakerEdge:
    node: Speaker
    cursor: str


@strawberry.type
class SpeakerConnection:
    edges: list[SpeakerEdge]
    page_info: PageInfo


@strawberry.type
class SessionEdge:
    node: Session
    cursor: str


@strawberry.type
class SessionConnection:
    edges: list[SessionEdge]
    page_info: PageInfo
