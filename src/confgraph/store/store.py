"""
In-memory, read-only data store.

A ``DataStore`` is an immutable snapshot of every conference and an index of
each collection, built once from validated records. ``StoreHolder`` owns the
current snapshot; replacing it swaps the whole snapshot in one assignment.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from ..errors import DataLoadError
from ..logging import get_logger
from ..relay.registry import CollectionKey
from .models import Conference, Record

logger = get_logger(__name__)


def _collection_records(conference: Conference, collection: CollectionKey) -> tuple[Record, ...]:
    if collection is CollectionKey.CONFERENCES:
        return (conference,)
    return {
        CollectionKey.DATES: conference.dates,
        CollectionKey.SPEAKERS: conference.speakers,
        CollectionKey.SESSIONS: conference.sessions,
        CollectionKey.SESSION_TAGS: conference.session_tags,
        CollectionKey.ACTIVITIES: conference.activities,
        CollectionKey.PERIODS: conference.periods,
        CollectionKey.PLACES: conference.places,
        CollectionKey.SCHEDULE: conference.schedule,
    }[collection]


class DataStore:
    """Immutable snapshot of the conference dataset."""

    def __init__(self, conferences: list[Conference]):
        self._conferences: Mapping[str, Conference] = MappingProxyType(
            {conference.code: conference for conference in conferences}
        )

        scoped: dict[tuple[str, CollectionKey], Mapping[str, Record]] = {}
        merged: dict[CollectionKey, dict[str, Record]] = {key: {} for key in CollectionKey}

        # A global ID carries no conference code, so a local ID must be
        # unique within its collection across every conference
        for conference in conferences:
            for collection in CollectionKey:
                index: dict[str, Record] = {}
                for record in _collection_records(conference, collection):
                    owner = merged[collection].get(record.id)
                    if owner is not None:
                        logger.error(
                            "Duplicate local ID in collection",
                            conference=conference.code,
                            collection=collection.value,
                            id=record.id,
                            first_conference=owner.conference_code,
                        )
                        raise DataLoadError(
                            f"Duplicate {collection.value} ID {record.id!r} in conference "
                            f"{conference.code!r} (already used in {owner.conference_code!r})"
                        )
                    index[record.id] = record
                    merged[collection][record.id] = record
                scoped[(conference.code, collection)] = MappingProxyType(index)

        self._scoped: Mapping[tuple[str, CollectionKey], Mapping[str, Record]] = MappingProxyType(
            scoped
        )
        self._merged: Mapping[CollectionKey, Mapping[str, Record]] = MappingProxyType(
            {key: MappingProxyType(index) for key, index in merged.items()}
        )

    def __iter__(self) -> Iterator[Conference]:
        return iter(self._conferences.values())

    def __len__(self) -> int:
        return len(self._conferences)

    @property
    def codes(self) -> list[str]:
        """Conference codes in load order."""
        return list(self._conferences)

    def conference(self, code: str) -> Conference | None:
        """Get a conference by its code."""
        return self._conferences.get(code)

    def find(self, collection: CollectionKey, local_id: str) -> Record | None:
        """Find a record by local ID; local IDs are unique across conferences."""
        return self._merged[collection].get(local_id)

    def lookup(self, conference_code: str, collection: CollectionKey, local_id: str) -> Record | None:
        """Find a record by local ID within one conference."""
        index = self._scoped.get((conference_code, collection))
        if index is None:
            return None
        return index.get(local_id)

    def records(self, collection: CollectionKey) -> list[Record]:
        """All records of a collection across conferences, in stored order."""
        return [
            record
            for conference in self._conferences.values()
            for record in _collection_records(conference, collection)
        ]

    def counts(self) -> dict[str, int]:
        """Number of records per collection."""
        return {key.value: len(self.records(key)) for key in CollectionKey}


class StoreHolder:
    """Holds the current store snapshot.

    Readers take ``holder.store`` once and keep using that snapshot; ``replace``
    installs a fully built snapshot in a single reference assignment.
    """

    def __init__(self, store: DataStore):
        self._store = store

    @property
    def store(self) -> DataStore:
        return self._store

    def replace(self, store: DataStore) -> DataStore:
        """Install a new snapshot and return the previous one."""
        previous, self._store = self._store, store
        logger.info("Data store replaced", conferences=store.codes)
        return previous
