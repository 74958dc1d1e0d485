"""
Global ID codec.

A global ID is ``base64("<TypeName>:<localId>")``, the Relay convention.
Type names never contain ``:``, so splitting on the first separator recovers
the exact pair and no two pairs share an encoding.
"""

import base64
import binascii
from typing import NamedTuple

from ..errors import MalformedIdentifier

SEPARATOR = ":"


class GlobalId(NamedTuple):
    """A decoded global ID."""

    type_name: str
    local_id: str


def encode_global_id(type_name: str, local_id: str) -> str:
    """Encode a (type name, local id) pair into an opaque global ID."""
    if not type_name or SEPARATOR in type_name:
        raise MalformedIdentifier(f"Invalid type name for global ID: {type_name!r}")
    if not local_id:
        raise MalformedIdentifier("Local ID must not be empty")

    raw = f"{type_name}{SEPARATOR}{local_id}".encode()
    return base64.b64encode(raw).decode("ascii")


def decode_global_id(global_id: str) -> GlobalId:
    """Decode a global ID back into its (type name, local id) pair.

    Raises:
        MalformedIdentifier: If the string is not a global ID produced by
            :func:`encode_global_id`.
    """
    try:
        raw = base64.b64decode(global_id.encode("ascii"), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError) as e:
        raise MalformedIdentifier(f"Malformed global ID: {global_id!r}") from e

    type_name, separator, local_id = raw.partition(SEPARATOR)
    if not separator or not type_name or not local_id:
        raise MalformedIdentifier(f"Malformed global ID: {global_id!r}")

    return GlobalId(type_name, local_id)
