"""
Immutable record models for the conference dataset.

Field names are snake_case; the JSON dataset uses camelCase, handled by the
alias generator. Every record carries the code of the conference that owns
it so relationships resolve inside that conference.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Record(FrozenModel):
    """A stored record addressable by a local ID."""

    id: str
    conference_code: str = ""


class ConferenceDate(Record):
    name: str
    date: str


class Speaker(Record):
    name: str
    title: str | None = None
    picture_url: str | None = None
    bio: str | None = None
    homepage_url: str | None = None
    twitter_username: str | None = None
    github_username: str | None = None


class SessionTag(Record):
    name: str


class Session(Record):
    title: str
    description: str = ""
    speaker_id: str | None = None
    tag_ids: tuple[str, ...] = ()
    language: str = "en"
    slide_url: str | None = None
    video_url: str | None = None


class Activity(Record):
    title: str


class Period(Record):
    date_id: str
    start: str
    end: str


class Place(Record):
    name: str
    map_image_url: str | None = None


class InlineActivity(FrozenModel):
    """The event is an activity embedded in the schedule item."""

    kind: Literal["inline_activity"] = "inline_activity"
    activity: Activity


class SessionReference(FrozenModel):
    """The event is a session stored in the sessions collection."""

    kind: Literal["session_reference"] = "session_reference"
    session_id: str


class ActivityReference(FrozenModel):
    """The event is an activity stored in the activities collection."""

    kind: Literal["activity_reference"] = "activity_reference"
    activity_id: str


EventVariant = Annotated[
    InlineActivity | SessionReference | ActivityReference,
    Field(discriminator="kind"),
]


class ScheduleItem(Record):
    period_ids: tuple[str, ...]
    place_ids: tuple[str, ...]
    event: EventVariant


class ConferenceLocation(FrozenModel):
    name: str
    address: str


class ConferenceWifiNetwork(FrozenModel):
    ssid: str
    password: str


class Conference(Record):
    """A conference and every collection it owns. ``id`` is the conference code."""

    code: str
    name: str
    key_vision_url: str | None = None
    location: ConferenceLocation
    wifi_network: ConferenceWifiNetwork
    dates: tuple[ConferenceDate, ...] = ()
    speakers: tuple[Speaker, ...] = ()
    sessions: tuple[Session, ...] = ()
    session_tags: tuple[SessionTag, ...] = ()
    activities: tuple[Activity, ...] = ()
    places: tuple[Place, ...] = ()
    periods: tuple[Period, ...] = ()
    schedule: tuple[ScheduleItem, ...] = ()


class RawScheduleItem(Record):
    """A schedule item as stored in the dataset, before event normalization."""

    period_ids: tuple[str, ...] = ()
    place_ids: tuple[str, ...] = ()
    event: Activity | None = None
    event_session_id: str | None = None
    event_activity_id: str | None = None


class RawConference(FrozenModel):
    """A conference entry as stored in the dataset file."""

    code: str
    name: str
    key_vision_url: str | None = None
    location: ConferenceLocation
    wifi_network: ConferenceWifiNetwork
    dates: list[ConferenceDate] = []
    speakers: list[Speaker] = []
    sessions: list[Session] = []
    session_tags: list[SessionTag] = []
    activities: list[Activity] = []
    places: list[Place] = []
    periods: list[Period] = []
    schedule: list[RawScheduleItem] = []
