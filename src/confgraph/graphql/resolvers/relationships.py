"""
Relationship resolvers: follow foreign keys between records.

Every lookup is scoped to the conference that owns the source record. A
foreign key with no target raises ``DanglingReference``; nothing is
silently dropped.
"""

from collections.abc import Sequence
from typing import TypeVar

from ...errors import DanglingReference, MalformedIdentifier
from ...relay.global_id import decode_global_id
from ...relay.registry import CollectionKey, NodeType
from ...store import DataStore
from ...store.models import (
    Conference,
    ConferenceDate,
    Period,
    Place,
    Record,
    ScheduleItem,
    Session,
    SessionTag,
    Speaker,
)

R = TypeVar("R", bound=Record)


def _follow(
    store: DataStore,
    source: Record,
    field: str,
    collection: CollectionKey,
    local_id: str,
    expected: type[R],
) -> R:
    record = store.lookup(source.conference_code, collection, local_id)
    if not isinstance(record, expected):
        raise DanglingReference(
            f"{type(source).__name__} {source.id} references missing "
            f"{collection.value} record {local_id!r} via {field}",
            source_id=source.id,
            field=field,
            target_id=local_id,
        )
    return record


def _follow_all(
    store: DataStore,
    source: Record,
    field: str,
    collection: CollectionKey,
    local_ids: Sequence[str],
    expected: type[R],
) -> list[R]:
    return [_follow(store, source, field, collection, i, expected) for i in local_ids]


def resolve_session_speaker(store: DataStore, session: Session) -> Speaker:
    """Get the speaker of a session."""
    if not session.speaker_id:
        raise DanglingReference(
            f"Session {session.id} has no speakerId", source_id=session.id, field="speakerId"
        )
    return _follow(store, session, "speakerId", CollectionKey.SPEAKERS, session.speaker_id, Speaker)


def resolve_session_tags(store: DataStore, session: Session) -> list[SessionTag]:
    """Get the tags of a session in ``tagIds`` order."""
    return _follow_all(
        store, session, "tagIds", CollectionKey.SESSION_TAGS, session.tag_ids, SessionTag
    )


def resolve_item_periods(store: DataStore, item: ScheduleItem) -> list[Period]:
    """Get the periods of a schedule item in ``periodIds`` order."""
    return _follow_all(store, item, "periodIds", CollectionKey.PERIODS, item.period_ids, Period)


def resolve_item_places(store: DataStore, item: ScheduleItem) -> list[Place]:
    """Get the places of a schedule item in ``placeIds`` order."""
    return _follow_all(store, item, "placeIds", CollectionKey.PLACES, item.place_ids, Place)


def resolve_period_date(store: DataStore, period: Period) -> ConferenceDate:
    """Get the conference date a period belongs to."""
    return _follow(store, period, "dateId", CollectionKey.DATES, period.date_id, ConferenceDate)


def resolve_item_date(store: DataStore, item: ScheduleItem) -> ConferenceDate:
    """Get the date of a schedule item: the date of its first period."""
    if not item.period_ids:
        raise DanglingReference(
            f"ScheduleItem {item.id} has no periods, so it has no date",
            source_id=item.id,
            field="periodIds",
        )
    first_period = _follow(
        store, item, "periodIds", CollectionKey.PERIODS, item.period_ids[0], Period
    )
    return resolve_period_date(store, first_period)


def date_filter_local_id(date_global_id: str | None) -> str | None:
    """Decode a date filter's global ID into a local date ID.

    Raises:
        MalformedIdentifier: If the ID is not a ConferenceDate global ID
    """
    if not date_global_id:
        return None
    type_name, local_id = decode_global_id(date_global_id)
    if type_name != NodeType.CONFERENCE_DATE.value:
        raise MalformedIdentifier(
            f"Date filter expects a ConferenceDate ID, got a {type_name} ID",
            type_name=type_name,
        )
    return local_id


def resolve_schedule_periods(
    conference: Conference, date_global_id: str | None = None
) -> list[Period]:
    """Get the periods of a conference, optionally only those on one date."""
    date_id = date_filter_local_id(date_global_id)
    if date_id is None:
        return list(conference.periods)
    return [period for period in conference.periods if period.date_id == date_id]


def resolve_schedule_items(
    conference: Conference, date_global_id: str | None = None
) -> list[ScheduleItem]:
    """Get the schedule items of a conference, optionally only those on one date.

    An item is on a date when any of its periods belongs to that date.
    """
    date_id = date_filter_local_id(date_global_id)
    if date_id is None:
        return list(conference.schedule)

    period_ids = {period.id for period in conference.periods if period.date_id == date_id}
    return [item for item in conference.schedule if period_ids.intersection(item.period_ids)]
