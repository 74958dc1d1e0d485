"""Dataset loader.

Reads the conference JSON file, validates it with pydantic, normalizes
schedule item events and builds a ``DataStore``. Any failure is raised as
``DataLoadError``; callers treat it as fatal at startup.

The file maps conference codes to conference objects::

    {"2016": {"code": "2016", "name": "...", "dates": [...], "schedule": [...]}}
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ..errors import AmbiguousEvent, DataLoadError
from ..logging import get_logger
from ..relay.registry import CollectionKey
from .events import normalize_schedule_item
from .models import (
    Activity,
    Conference,
    InlineActivity,
    RawConference,
)
from .store import DataStore

logger = get_logger(__name__)

DATASET_ADAPTER: TypeAdapter[dict[str, RawConference]] = TypeAdapter(dict[str, RawConference])

# Record lists that get the owning conference code injected before validation
RECORD_LISTS = (
    "dates",
    "speakers",
    "sessions",
    "sessionTags",
    "activities",
    "places",
    "periods",
    "schedule",
)


@dataclass(frozen=True)
class ReferenceProblem:
    """A foreign key with no target record."""

    conference: str
    source: str
    source_id: str
    field: str
    target: str

    def __str__(self) -> str:
        return (
            f"[{self.conference}] {self.source} {self.source_id}.{self.field} -> "
            f"missing {self.target}"
        )


def _tag_conference(code: str, raw: Mapping[str, Any]) -> dict[str, Any]:
    tagged = dict(raw)
    for key in RECORD_LISTS:
        records = raw.get(key)
        if not isinstance(records, list):
            continue
        tagged_records = []
        for record in records:
            if isinstance(record, Mapping):
                record = {**record, "conferenceCode": code}
                event = record.get("event")
                if isinstance(event, Mapping):
                    record["event"] = {**event, "conferenceCode": code}
            tagged_records.append(record)
        tagged[key] = tagged_records
    return tagged


def _build_conference(code: str, raw: RawConference) -> Conference:
    if raw.code != code:
        raise DataLoadError(f"Conference key {code!r} does not match its code {raw.code!r}")

    schedule = tuple(normalize_schedule_item(item) for item in raw.schedule)

    # Embedded activities become addressable through the activities collection
    activities: dict[str, Activity] = {activity.id: activity for activity in raw.activities}
    for item in schedule:
        if not isinstance(item.event, InlineActivity):
            continue
        inline = item.event.activity
        existing = activities.setdefault(inline.id, inline)
        if existing != inline:
            raise DataLoadError(
                f"Schedule item {item.id} embeds activity {inline.id!r}, which conflicts "
                f"with another activity of the same ID in conference {code!r}"
            )

    return Conference(
        id=code,
        conference_code=code,
        code=raw.code,
        name=raw.name,
        key_vision_url=raw.key_vision_url,
        location=raw.location,
        wifi_network=raw.wifi_network,
        dates=tuple(raw.dates),
        speakers=tuple(raw.speakers),
        sessions=tuple(raw.sessions),
        session_tags=tuple(raw.session_tags),
        activities=tuple(activities.values()),
        places=tuple(raw.places),
        periods=tuple(raw.periods),
        schedule=schedule,
    )


def build_store(data: Mapping[str, Any]) -> DataStore:
    """Build a data store from the decoded dataset.

    Raises:
        DataLoadError: If the dataset does not validate or a schedule item
            has no event association
    """
    if not isinstance(data, Mapping):
        raise DataLoadError("Dataset must be an object keyed by conference code")

    tagged: dict[str, Any] = {}
    for code, raw in data.items():
        if not isinstance(raw, Mapping):
            raise DataLoadError(f"Conference entry {code!r} must be an object")
        tagged[str(code)] = _tag_conference(str(code), raw)

    try:
        raw_conferences = DATASET_ADAPTER.validate_python(tagged)
    except ValidationError as e:
        raise DataLoadError(f"Invalid dataset: {e}") from e

    try:
        conferences = [_build_conference(code, raw) for code, raw in raw_conferences.items()]
    except AmbiguousEvent as e:
        raise DataLoadError(str(e)) from e

    return DataStore(conferences)


def find_dangling_references(store: DataStore) -> list[ReferenceProblem]:
    """List every foreign key in the store whose target does not exist."""
    problems: list[ReferenceProblem] = []

    def check(conf: str, source: str, source_id: str, field: str,
              target: CollectionKey, target_id: str) -> None:
        if store.lookup(conf, target, target_id) is None:
            problems.append(
                ReferenceProblem(conf, source, source_id, field, f"{target.value}/{target_id}")
            )

    for conference in store:
        code = conference.code
        for session in conference.sessions:
            if session.speaker_id:
                check(code, "Session", session.id, "speakerId",
                      CollectionKey.SPEAKERS, session.speaker_id)
            for tag_id in session.tag_ids:
                check(code, "Session", session.id, "tagIds", CollectionKey.SESSION_TAGS, tag_id)
        for period in conference.periods:
            check(code, "Period", period.id, "dateId", CollectionKey.DATES, period.date_id)
        for item in conference.schedule:
            if not item.period_ids:
                problems.append(
                    ReferenceProblem(code, "ScheduleItem", item.id, "periodIds", "periods/<none>")
                )
            for period_id in item.period_ids:
                check(code, "ScheduleItem", item.id, "periodIds", CollectionKey.PERIODS, period_id)
            for place_id in item.place_ids:
                check(code, "ScheduleItem", item.id, "placeIds", CollectionKey.PLACES, place_id)
            event = item.event
            if event.kind == "session_reference":
                check(code, "ScheduleItem", item.id, "eventSessionId",
                      CollectionKey.SESSIONS, event.session_id)
            elif event.kind == "activity_reference":
                check(code, "ScheduleItem", item.id, "eventActivityId",
                      CollectionKey.ACTIVITIES, event.activity_id)

    return problems


def load_store(path: str | Path, strict_references: bool = True) -> DataStore:
    """Load the dataset file into a data store.

    Args:
        path: Path to the JSON dataset
        strict_references: Fail when any foreign key has no target record

    Raises:
        DataLoadError: If the file cannot be read, parsed or validated
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise DataLoadError(f"Dataset file not found: {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise DataLoadError(f"Failed to read dataset {path}: {e}") from e

    store = build_store(data)

    problems = find_dangling_references(store)
    if problems:
        if strict_references:
            raise DataLoadError(
                f"Dataset has {len(problems)} dangling reference(s): "
                + "; ".join(str(p) for p in problems[:10])
            )
        logger.warning(
            "Dataset has dangling references",
            count=len(problems),
            problems=[str(p) for p in problems[:10]],
        )

    logger.info(
        "Loaded conference dataset",
        path=str(path),
        conferences=store.codes,
        counts=store.counts(),
    )
    return store


__all__ = [
    "ReferenceProblem",
    "build_store",
    "find_dangling_references",
    "load_store",
]
