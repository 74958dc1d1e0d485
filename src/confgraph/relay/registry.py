"""
Type registry mapping node type names to store collections.
"""

import re
from enum import Enum

from ..errors import UnknownType


class NodeType(str, Enum):
    """Every GraphQL type that implements ``Node``."""

    CONFERENCE = "Conference"
    CONFERENCE_DATE = "ConferenceDate"
    SPEAKER = "Speaker"
    SESSION = "Session"
    SESSION_TAG = "SessionTag"
    ACTIVITY = "Activity"
    PERIOD = "Period"
    PLACE = "Place"
    SCHEDULE_ITEM = "ScheduleItem"


class CollectionKey(str, Enum):
    """Every collection held by the data store."""

    CONFERENCES = "conferences"
    DATES = "dates"
    SPEAKERS = "speakers"
    SESSIONS = "sessions"
    SESSION_TAGS = "sessionTags"
    ACTIVITIES = "activities"
    PERIODS = "periods"
    PLACES = "places"
    SCHEDULE = "schedule"


# Types whose collection does not follow the naming rule
COLLECTION_OVERRIDES: dict[NodeType, CollectionKey] = {
    NodeType.SCHEDULE_ITEM: CollectionKey.SCHEDULE,
    NodeType.CONFERENCE_DATE: CollectionKey.DATES,
}


def default_collection_name(type_name: str) -> str:
    """Lower-camel-case and pluralize a type name (``SessionTag`` -> ``sessionTags``)."""
    name = type_name[:1].lower() + type_name[1:]
    if re.search(r"[^aeiou]y$", name):
        return name[:-1] + "ies"
    return name + "s"


def _build_collection_table() -> dict[NodeType, CollectionKey]:
    table: dict[NodeType, CollectionKey] = {}
    for node_type in NodeType:
        if node_type in COLLECTION_OVERRIDES:
            table[node_type] = COLLECTION_OVERRIDES[node_type]
            continue
        name = default_collection_name(node_type.value)
        try:
            table[node_type] = CollectionKey(name)
        except ValueError as e:
            raise RuntimeError(
                f"Node type {node_type.value} maps to unknown collection {name!r}; "
                "add an entry to COLLECTION_OVERRIDES"
            ) from e
    return table


# Checked at import: every node type resolves to a real collection
COLLECTIONS_BY_TYPE: dict[NodeType, CollectionKey] = _build_collection_table()


def node_type_for(type_name: str) -> NodeType:
    """Get the node type for a type name.

    Raises:
        UnknownType: If the type name is not a registered node type
    """
    try:
        return NodeType(type_name)
    except ValueError as e:
        raise UnknownType(f"Unknown node type: {type_name}", type_name=type_name) from e


def collection_for(type_name: str) -> CollectionKey:
    """Get the collection holding records of the given type.

    Raises:
        UnknownType: If the type name is not a registered node type
    """
    return COLLECTIONS_BY_TYPE[node_type_for(type_name)]
