"""
Load-time normalization of schedule item events.

The dataset has three shapes for a schedule item's event: an embedded
activity (``event``), a session reference (``eventSessionId``) and an
activity reference (``eventActivityId``). They are folded into one tagged
union here so resolvers never inspect raw fields.
"""

from ..errors import AmbiguousEvent
from ..logging import get_logger
from .models import (
    ActivityReference,
    EventVariant,
    InlineActivity,
    RawScheduleItem,
    ScheduleItem,
    SessionReference,
)

logger = get_logger(__name__)


def normalize_event(raw: RawScheduleItem) -> EventVariant:
    """Pick the single event variant of a raw schedule item.

    References take priority over an embedded event, and an activity
    reference takes priority over a session reference.

    Raises:
        AmbiguousEvent: If the item has no event association at all
    """
    candidates: list[EventVariant] = []
    if raw.event_activity_id:
        candidates.append(ActivityReference(activity_id=raw.event_activity_id))
    if raw.event_session_id:
        candidates.append(SessionReference(session_id=raw.event_session_id))
    if raw.event is not None:
        candidates.append(InlineActivity(activity=raw.event))

    if not candidates:
        raise AmbiguousEvent(
            f"Schedule item {raw.id} has no event association",
            schedule_item_id=raw.id,
        )

    chosen = candidates[0]
    if len(candidates) > 1:
        logger.warning(
            "Schedule item has more than one event association",
            schedule_item_id=raw.id,
            conference=raw.conference_code,
            chosen=chosen.kind,
            ignored=[c.kind for c in candidates[1:]],
        )
    return chosen


def normalize_schedule_item(raw: RawScheduleItem) -> ScheduleItem:
    """Convert a raw schedule item into its normalized form."""
    return ScheduleItem(
        id=raw.id,
        conference_code=raw.conference_code,
        period_ids=raw.period_ids,
        place_ids=raw.place_ids,
        event=normalize_event(raw),
    )
