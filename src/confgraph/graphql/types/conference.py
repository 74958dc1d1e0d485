"""
Conference GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

from ...relay.global_id import encode_global_id
from ...relay.registry import NodeType
from ...store import models
from .node import Node
from .scalars import URL
from .session import Session, Speaker

if TYPE_CHECKING:
    from .schedule import Schedule


@strawberry.type
class ConferenceDate(Node):
    """One day of a conference."""

    name: str
    date: str

    @classmethod
    def from_record(cls, record: models.ConferenceDate) -> "ConferenceDate":
        return cls(
            id=strawberry.ID(encode_global_id(NodeType.CONFERENCE_DATE.value, record.id)),
            name=record.name,
            date=record.date,
        )


@strawberry.type
class ConferenceLocation:
    name: str
    address: str


@strawberry.type
class ConferenceWifiNetwork:
    ssid: str
    password: str


@strawberry.type
class Conference(Node):
    """Conference type for GraphQL API."""

    code: str
    name: str
    key_vision_url: URL | None
    location: ConferenceLocation
    wifi_network: ConferenceWifiNetwork
    record: strawberry.Private[models.Conference]

    @classmethod
    def from_record(cls, record: models.Conference) -> "Conference":
        return cls(
            id=strawberry.ID(encode_global_id(NodeType.CONFERENCE.value, record.code)),
            code=record.code,
            name=record.name,
            key_vision_url=record.key_vision_url,
            location=ConferenceLocation(
                name=record.location.name, address=record.location.address
            ),
            wifi_network=ConferenceWifiNetwork(
                ssid=record.wifi_network.ssid, password=record.wifi_network.password
            ),
            record=record,
        )

    @strawberry.field
    def dates(self) -> list[ConferenceDate]:
        """Get the days of this conference."""
        return [ConferenceDate.from_record(date) for date in self.record.dates]

    @strawberry.field
    def speakers(self) -> list[Speaker]:
        """Get the speakers of this conference."""
        return [Speaker.from_record(speaker) for speaker in self.record.speakers]

    @strawberry.field
    def sessions(self) -> list[Session]:
        """Get the sessions of this conference."""
        return [Session.from_record(session) for session in self.record.sessions]

    @strawberry.field
    def schedule(self) -> Annotated["Schedule", strawberry.lazy(".schedule")]:
        """Get the schedule of this conference."""
        from .schedule import Schedule

        return Schedule(record=self.record)
