"""
Custom GraphQL scalars.

Both scalars pass values through unchanged; they only document intent in the
schema.
"""

from typing import NewType

import strawberry


def _identity(value: str) -> str:
    return value


URL = strawberry.scalar(
    NewType("URL", str),
    name="URL",
    description="An absolute URL, serialized as a string",
    serialize=_identity,
    parse_value=_identity,
)

DatetimeWithZone = strawberry.scalar(
    NewType("DatetimeWithZone", str),
    name="DatetimeWithZone",
    description="An ISO 8601 datetime with UTC offset, e.g. 2016-12-02T09:00:00+0800",
    serialize=_identity,
    parse_value=_identity,
)

__all__ = ["URL", "DatetimeWithZone"]
