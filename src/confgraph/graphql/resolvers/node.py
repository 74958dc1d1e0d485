"""
Generic node lookup by global ID
"""

from dataclasses import dataclass

from ...errors import NotFound
from ...logging import get_logger
from ...relay.global_id import decode_global_id
from ...relay.registry import COLLECTIONS_BY_TYPE, NodeType, node_type_for
from ...store import DataStore
from ...store.models import Conference, Record, ScheduleItem

logger = get_logger(__name__)


@dataclass(frozen=True)
class ResolvedNode:
    """A record together with the node type it was resolved as."""

    type_name: NodeType
    record: Record


def resolve_node(store: DataStore, global_id: str) -> ResolvedNode:
    """Resolve any entity from its global ID.

    Raises:
        MalformedIdentifier: If the global ID cannot be decoded
        UnknownType: If the decoded type has no collection
        NotFound: If no record of that type has the local ID
    """
    type_name, local_id = decode_global_id(global_id)
    node_type = node_type_for(type_name)
    collection = COLLECTIONS_BY_TYPE[node_type]

    record = store.find(collection, local_id)
    if record is None:
        logger.debug("Node not found", type=type_name, id=local_id)
        raise NotFound(f"{type_name} {local_id} not found", type_name=type_name, id=local_id)

    return ResolvedNode(node_type, record)


def resolve_schedule_item(store: DataStore, global_id: str) -> ScheduleItem:
    """Resolve a schedule item from its global ID.

    A global ID of any other node type is reported as not found.
    """
    resolved = resolve_node(store, global_id)
    if resolved.type_name is not NodeType.SCHEDULE_ITEM or not isinstance(
        resolved.record, ScheduleItem
    ):
        raise NotFound(
            f"{global_id} is a {resolved.type_name.value} ID, not a ScheduleItem ID",
            type_name=resolved.type_name.value,
        )
    return resolved.record


def resolve_conference(store: DataStore, code: str) -> Conference | None:
    """Get a conference by its code; ``None`` for an unknown code."""
    conference = store.conference(code)
    if conference is None:
        logger.debug("Conference not found", code=code)
    return conference
