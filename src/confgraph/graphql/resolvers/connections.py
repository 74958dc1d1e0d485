"""
Array-backed Relay connections.

Cursors are ``base64("arrayconnection:<offset>")`` offsets into the full
list, so they are only stable while the dataset does not change.
"""

import base64
import binascii
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from ...errors import MalformedIdentifier

T = TypeVar("T")

CURSOR_PREFIX = "arrayconnection:"


@dataclass(frozen=True)
class Slice(Generic[T]):
    """A window of a list plus the Relay page info describing it."""

    edges: list[tuple[str, T]]
    has_previous_page: bool
    has_next_page: bool

    @property
    def start_cursor(self) -> str | None:
        return self.edges[0][0] if self.edges else None

    @property
    def end_cursor(self) -> str | None:
        return self.edges[-1][0] if self.edges else None


def offset_to_cursor(offset: int) -> str:
    return base64.b64encode(f"{CURSOR_PREFIX}{offset}".encode()).decode("ascii")


def cursor_to_offset(cursor: str) -> int:
    """Decode a cursor back into an offset.

    Raises:
        MalformedIdentifier: If the cursor was not produced by ``offset_to_cursor``
    """
    try:
        raw = base64.b64decode(cursor.encode("ascii"), validate=True).decode("utf-8")
        if not raw.startswith(CURSOR_PREFIX):
            raise ValueError(raw)
        return int(raw[len(CURSOR_PREFIX):])
    except (binascii.Error, UnicodeError, ValueError) as e:
        raise MalformedIdentifier(f"Malformed cursor: {cursor!r}") from e


def connection_from_list(
    items: Sequence[T],
    first: int | None = None,
    after: str | None = None,
    last: int | None = None,
    before: str | None = None,
) -> Slice[T]:
    """Slice a list the way graphql-relay's ``connectionFromArray`` does."""
    if first is not None and first < 0:
        raise ValueError("Argument 'first' must be a non-negative integer")
    if last is not None and last < 0:
        raise ValueError("Argument 'last' must be a non-negative integer")

    start = 0
    end = len(items)
    if after is not None:
        start = max(start, cursor_to_offset(after) + 1)
    if before is not None:
        end = min(end, cursor_to_offset(before))

    if first is not None:
        end = min(end, start + first)
    if last is not None:
        start = max(start, end - last)

    edges = [(offset_to_cursor(i), items[i]) for i in range(start, max(start, end))]

    lower_bound = cursor_to_offset(after) + 1 if after is not None else 0
    upper_bound = cursor_to_offset(before) if before is not None else len(items)
    return Slice(
        edges=edges,
        has_previous_page=last is not None and start > lower_bound,
        has_next_page=first is not None and end < upper_bound,
    )
