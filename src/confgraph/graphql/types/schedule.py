"""
Schedule GraphQL type definitions
"""

import strawberry

from ...relay.global_id import encode_global_id
from ...relay.registry import NodeType
from ...store import models
from ..context import get_store
from .conference import ConferenceDate
from .node import Node
from .scalars import URL, DatetimeWithZone
from .session import Activity, Event, EventInterface, Session


@strawberry.input
class ConferenceDateInput:
    """Reference to a conference date by global ID."""

    id: strawberry.ID | None = None


@strawberry.type
class Place(Node):
    """A room or area where schedule items take place."""

    name: str
    map_image_url: URL | None

    @classmethod
    def from_record(cls, record: models.Place) -> "Place":
        return cls(
            id=strawberry.ID(encode_global_id(NodeType.PLACE.value, record.id)),
            name=record.name,
            map_image_url=record.map_image_url,
        )


@strawberry.type
class Period(Node):
    """A time slot on one conference date."""

    start: DatetimeWithZone
    end: DatetimeWithZone
    record: strawberry.Private[models.Period]

    @classmethod
    def from_record(cls, record: models.Period) -> "Period":
        return cls(
            id=strawberry.ID(encode_global_id(NodeType.PERIOD.value, record.id)),
            start=record.start,
            end=record.end,
            record=record,
        )

    @strawberry.field
    def date(self, info: strawberry.Info) -> ConferenceDate | None:
        """Get the date this period is on."""
        from ..resolvers.relationships import resolve_period_date

        return ConferenceDate.from_record(resolve_period_date(get_store(info), self.record))


@strawberry.type
class ScheduleItem(Node):
    """One occupied slot in the agenda."""

    period_ids: list[strawberry.ID]
    place_ids: list[strawberry.ID]
    record: strawberry.Private[models.ScheduleItem]

    @classmethod
    def from_record(cls, record: models.ScheduleItem) -> "ScheduleItem":
        return cls(
            id=strawberry.ID(encode_global_id(NodeType.SCHEDULE_ITEM.value, record.id)),
            period_ids=[strawberry.ID(period_id) for period_id in record.period_ids],
            place_ids=[strawberry.ID(place_id) for place_id in record.place_ids],
            record=record,
        )

    @strawberry.field
    def date(self, info: strawberry.Info) -> ConferenceDate | None:
        """Get the date of this item, taken from its first period."""
        from ..resolvers.relationships import resolve_item_date

        return ConferenceDate.from_record(resolve_item_date(get_store(info), self.record))

    @strawberry.field
    def periods(self, info: strawberry.Info) -> list[Period] | None:
        """Get the periods this item spans."""
        from ..resolvers.relationships import resolve_item_periods

        return [
            Period.from_record(period)
            for period in resolve_item_periods(get_store(info), self.record)
        ]

    @strawberry.field
    def places(self, info: strawberry.Info) -> list[Place] | None:
        """Get the places this item takes place in."""
        from ..resolvers.relationships import resolve_item_places

        return [
            Place.from_record(place) for place in resolve_item_places(get_store(info), self.record)
        ]

    @strawberry.field
    def event(self, info: strawberry.Info) -> Event | None:
        """Get the session or activity held in this slot."""
        from ..nodes import event_from_payload
        from ..resolvers.events import resolve_item_event_payload

        return event_from_payload(resolve_item_event_payload(get_store(info), self.record))

    @strawberry.field
    def event_interface(self, info: strawberry.Info) -> EventInterface | None:
        """Get the event wrapped by its concrete type."""
        from ..resolvers.events import resolve_item_event_payload

        payload = resolve_item_event_payload(get_store(info), self.record)
        return EventInterface(
            session=Session.from_record(payload.session) if payload.session else None,
            activity=Activity.from_record(payload.activity) if payload.activity else None,
        )


@strawberry.type
class Schedule:
    """The agenda of one conference."""

    record: strawberry.Private[models.Conference]

    @strawberry.field
    def dates(self) -> list[ConferenceDate]:
        """Get the conference dates."""
        return [ConferenceDate.from_record(date) for date in self.record.dates]

    @strawberry.field
    def periods(self, date: ConferenceDateInput | None = None) -> list[Period] | None:
        """Get the periods, optionally only those on one date."""
        from ..resolvers.relationships import resolve_schedule_periods

        date_id = date.id if date else None
        return [Period.from_record(p) for p in resolve_schedule_periods(self.record, date_id)]

    @strawberry.field
    def places(self) -> list[Place]:
        """Get the places used by the schedule."""
        return [Place.from_record(place) for place in self.record.places]

    @strawberry.field
    def items(self, date: ConferenceDateInput | None = None) -> list[ScheduleItem] | None:
        """Get the schedule items, optionally only those on one date."""
        from ..resolvers.relationships import resolve_schedule_items

        date_id = date.id if date else None
        return [
            ScheduleItem.from_record(item)
            for item in resolve_schedule_items(self.record, date_id)
        ]
