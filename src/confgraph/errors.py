"""
Error types raised while loading the dataset and resolving GraphQL fields
"""

from typing import Any


class ResolutionError(Exception):
    """Base class for errors raised while resolving a field.

    graphql-core copies ``extensions`` from the original exception onto the
    located GraphQL error, so clients receive the ``code`` alongside the
    message and the field path.
    """

    code = "RESOLUTION_ERROR"

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.details = details

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code, **self.details}


class MalformedIdentifier(ResolutionError):
    """A global ID cannot be decoded."""

    code = "MALFORMED_IDENTIFIER"


class UnknownType(ResolutionError):
    """A decoded type name has no collection mapping."""

    code = "UNKNOWN_TYPE"


class NotFound(ResolutionError):
    """The type is valid but no record has the requested local ID."""

    code = "NOT_FOUND"


class DanglingReference(ResolutionError):
    """A foreign key points to a record absent from its target collection."""

    code = "DANGLING_REFERENCE"


class AmbiguousEvent(ResolutionError):
    """A schedule item's event variant cannot be determined."""

    code = "AMBIGUOUS_EVENT"


class DataLoadError(Exception):
    """The dataset could not be loaded. Fatal at startup."""
