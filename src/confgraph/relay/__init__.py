"""
Relay-style global identification: ID codec and type dispatch
"""

from .global_id import GlobalId, decode_global_id, encode_global_id
from .registry import CollectionKey, NodeType, collection_for, node_type_for

__all__ = [
    "CollectionKey",
    "GlobalId",
    "NodeType",
    "collection_for",
    "decode_global_id",
    "encode_global_id",
    "node_type_for",
]
