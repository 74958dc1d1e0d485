"""
Polymorphic event resolvers for schedule items
"""

from dataclasses import dataclass

from ...errors import AmbiguousEvent, DanglingReference
from ...relay.registry import CollectionKey, NodeType
from ...store import DataStore
from ...store.models import (
    Activity,
    ActivityReference,
    InlineActivity,
    Record,
    ScheduleItem,
    Session,
    SessionReference,
)


@dataclass(frozen=True)
class EventPayload:
    """Exactly one of ``session`` or ``activity`` is set."""

    session: Session | None = None
    activity: Activity | None = None


def resolve_event_type(record: Record) -> str:
    """Decide the concrete ``Event`` type of an event record.

    Structural: a record with a speaker reference is a Session, anything
    else is an Activity.
    """
    if getattr(record, "speaker_id", None):
        return NodeType.SESSION.value
    return NodeType.ACTIVITY.value


def _lookup(store: DataStore, item: ScheduleItem, field: str, collection: CollectionKey,
            local_id: str, expected: type) -> Record:
    record = store.lookup(item.conference_code, collection, local_id)
    if not isinstance(record, expected):
        raise DanglingReference(
            f"ScheduleItem {item.id} references missing {collection.value} record "
            f"{local_id!r} via {field}",
            source_id=item.id,
            field=field,
            target_id=local_id,
        )
    return record


def resolve_item_event(store: DataStore, item: ScheduleItem) -> Session | Activity:
    """Get the single event record of a schedule item."""
    event = item.event
    if isinstance(event, ActivityReference):
        return _lookup(store, item, "eventActivityId", CollectionKey.ACTIVITIES,
                       event.activity_id, Activity)
    if isinstance(event, SessionReference):
        return _lookup(store, item, "eventSessionId", CollectionKey.SESSIONS,
                       event.session_id, Session)
    if isinstance(event, InlineActivity):
        return event.activity
    raise AmbiguousEvent(f"ScheduleItem {item.id} has no event variant", schedule_item_id=item.id)


def resolve_item_event_payload(store: DataStore, item: ScheduleItem) -> EventPayload:
    """Get a schedule item's event wrapped by its concrete type."""
    record = resolve_item_event(store, item)
    event_type = resolve_event_type(record)

    if event_type == NodeType.SESSION.value and isinstance(record, Session):
        return EventPayload(session=record)
    if event_type == NodeType.ACTIVITY.value and isinstance(record, Activity):
        return EventPayload(activity=record)

    raise AmbiguousEvent(
        f"ScheduleItem {item.id} event {record.id} looks like a {event_type} "
        f"but is stored as a {type(record).__name__}",
        schedule_item_id=item.id,
        event_id=record.id,
    )
