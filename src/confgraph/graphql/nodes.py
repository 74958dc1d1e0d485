"""
Conversion from resolved store records to GraphQL node objects.

``NODE_CONVERTERS`` is keyed by ``NodeType`` and checked for completeness at
import, so every type the registry can dispatch to has a GraphQL object.
"""

from collections.abc import Callable
from typing import Any

from ..errors import AmbiguousEvent
from ..relay.registry import NodeType
from .resolvers.events import EventPayload
from .resolvers.node import ResolvedNode
from .types.conference import Conference, ConferenceDate
from .types.node import Node
from .types.schedule import Period, Place, ScheduleItem
from .types.session import Activity, Event, Session, SessionTag, Speaker

NODE_CONVERTERS: dict[NodeType, Callable[[Any], Node]] = {
    NodeType.CONFERENCE: Conference.from_record,
    NodeType.CONFERENCE_DATE: ConferenceDate.from_record,
    NodeType.SPEAKER: Speaker.from_record,
    NodeType.SESSION: Session.from_record,
    NodeType.SESSION_TAG: SessionTag.from_record,
    NodeType.ACTIVITY: Activity.from_record,
    NodeType.PERIOD: Period.from_record,
    NodeType.PLACE: Place.from_record,
    NodeType.SCHEDULE_ITEM: ScheduleItem.from_record,
}

_missing = set(NodeType) - set(NODE_CONVERTERS)
if _missing:
    raise RuntimeError(f"No GraphQL converter for node types: {sorted(t.value for t in _missing)}")


def node_from_resolved(resolved: ResolvedNode) -> Node:
    """Build the GraphQL object for a resolved node, dispatching on its type tag."""
    return NODE_CONVERTERS[resolved.type_name](resolved.record)


def event_from_payload(payload: EventPayload) -> Event:
    """Build the GraphQL object for an event payload."""
    if payload.session is not None:
        return Session.from_record(payload.session)
    if payload.activity is not None:
        return Activity.from_record(payload.activity)
    raise AmbiguousEvent("Event payload has neither a session nor an activity")
