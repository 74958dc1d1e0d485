"""
Session, speaker and event GraphQL type definitions
"""

from enum import Enum

import strawberry

from ...relay.global_id import encode_global_id
from ...relay.registry import NodeType
from ...store import models
from ..context import get_store
from .node import Node
from .scalars import URL


@strawberry.enum
class Language(Enum):
    """Language a session is given in."""

    EN = "en"
    ZH_TW = "zh-TW"


@strawberry.interface(description="Something that happens in a schedule slot")
class Event:
    id: strawberry.ID
    title: str


@strawberry.type
class Speaker(Node):
    """Speaker type for GraphQL API."""

    name: str
    title: str | None
    picture_url: URL | None
    bio: str | None
    homepage_url: URL | None
    twitter_username: str | None
    github_username: str | None

    @classmethod
    def from_record(cls, record: models.Speaker) -> "Speaker":
        return cls(
            id=strawberry.ID(encode_global_id(NodeType.SPEAKER.value, record.id)),
            name=record.name,
            title=record.title,
            picture_url=record.picture_url,
            bio=record.bio,
            homepage_url=record.homepage_url,
            twitter_username=record.twitter_username,
            github_username=record.github_username,
        )


@strawberry.type
class SessionTag(Node):
    name: str

    @classmethod
    def from_record(cls, record: models.SessionTag) -> "SessionTag":
        return cls(
            id=strawberry.ID(encode_global_id(NodeType.SESSION_TAG.value, record.id)),
            name=record.name,
        )


@strawberry.type
class Session(Node, Event):
    """A talk given by a speaker."""

    description: str
    speaker_id: strawberry.ID | None
    tag_ids: list[strawberry.ID]
    slide_url: str | None
    video_url: str | None
    record: strawberry.Private[models.Session]

    @classmethod
    def from_record(cls, record: models.Session) -> "Session":
        return cls(
            id=strawberry.ID(encode_global_id(NodeType.SESSION.value, record.id)),
            title=record.title,
            description=record.description,
            speaker_id=strawberry.ID(record.speaker_id) if record.speaker_id else None,
            tag_ids=[strawberry.ID(tag_id) for tag_id in record.tag_ids],
            slide_url=record.slide_url,
            video_url=record.video_url,
            record=record,
        )

    @strawberry.field
    def speaker(self, info: strawberry.Info) -> Speaker | None:
        """Get the speaker giving this session."""
        from ..resolvers.relationships import resolve_session_speaker

        return Speaker.from_record(resolve_session_speaker(get_store(info), self.record))

    @strawberry.field
    def language(self) -> Language | None:
        """Get the language of this session."""
        return Language(self.record.language)

    @strawberry.field
    def tags(self, info: strawberry.Info) -> list[SessionTag] | None:
        """Get the tags of this session, in stored order."""
        from ..resolvers.relationships import resolve_session_tags

        return [
            SessionTag.from_record(tag)
            for tag in resolve_session_tags(get_store(info), self.record)
        ]


@strawberry.type
class Activity(Node, Event):
    """A non-session slot such as registration, lunch or a break."""

    @classmethod
    def from_record(cls, record: models.Activity) -> "Activity":
        return cls(
            id=strawberry.ID(encode_global_id(NodeType.ACTIVITY.value, record.id)),
            title=record.title,
        )


@strawberry.type
class EventInterface:
    """A schedule item's event; exactly one field is set."""

    session: Session | None = None
    activity: Activity | None = None
