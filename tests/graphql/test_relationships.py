"""
Unit tests for relationship resolvers
"""

import pytest

from confgraph.errors import DanglingReference, MalformedIdentifier
from confgraph.graphql.resolvers.relationships import (
    date_filter_local_id,
    resolve_item_date,
    resolve_item_periods,
    resolve_item_places,
    resolve_period_date,
    resolve_schedule_items,
    resolve_schedule_periods,
    resolve_session_speaker,
    resolve_session_tags,
)
from confgraph.relay.registry import CollectionKey
from confgraph.store import build_store

DAY_1 = "Q29uZmVyZW5jZURhdGU6ZC0x"
DAY_2 = "Q29uZmVyZW5jZURhdGU6ZC0y"


def _get(store, collection, local_id, code="2016"):
    record = store.lookup(code, collection, local_id)
    assert record is not None
    return record


class TestSessionRelationships:
    """Tests for session speaker and tags."""

    def test_speaker(self, store):
        session = _get(store, CollectionKey.SESSIONS, "d2ba3fbf")

        speaker = resolve_session_speaker(store, session)

        assert speaker.name == "Yukihiro (Matz) Matsumoto"

    def test_tags_follow_tag_ids_order(self, store):
        session = _get(store, CollectionKey.SESSIONS, "62e21cbb")

        tags = resolve_session_tags(store, session)

        assert [tag.name for tag in tags] == ["Elixir", "Ruby"]

    def test_no_tags(self, store):
        session = _get(store, CollectionKey.SESSIONS, "f6133b0a")

        assert resolve_session_tags(store, session) == []

    def test_dangling_speaker(self, dataset):
        dataset["2016"]["sessions"][0]["speakerId"] = "nobody"
        store = build_store(dataset)
        session = _get(store, CollectionKey.SESSIONS, "d2ba3fbf")

        with pytest.raises(DanglingReference) as exc_info:
            resolve_session_speaker(store, session)

        assert exc_info.value.extensions["code"] == "DANGLING_REFERENCE"
        assert exc_info.value.extensions["target_id"] == "nobody"

    def test_dangling_tag_is_not_dropped(self, dataset):
        dataset["2016"]["sessions"][1]["tagIds"] = ["t-e", "t-missing"]
        store = build_store(dataset)
        session = _get(store, CollectionKey.SESSIONS, "62e21cbb")

        with pytest.raises(DanglingReference):
            resolve_session_tags(store, session)


class TestScheduleItemRelationships:
    """Tests for schedule item periods, places and date."""

    def test_periods_keep_order(self, store):
        item = _get(store, CollectionKey.SCHEDULE, "90d4c7c2")

        assert [p.id for p in resolve_item_periods(store, item)] == ["p-3", "p-13"]

    def test_places_keep_order(self, store):
        item = _get(store, CollectionKey.SCHEDULE, "78c1e1c5")

        places = resolve_item_places(store, item)

        assert [p.name for p in places] == ["1st Conference Room", "Auditorium"]

    def test_date_comes_from_first_period(self, store):
        item = _get(store, CollectionKey.SCHEDULE, "90d4c7c2")

        assert resolve_item_date(store, item).id == "d-1"

    def test_date_on_second_day(self, store):
        item = _get(store, CollectionKey.SCHEDULE, "49225f30")

        assert resolve_item_date(store, item).name == "Day 2"

    def test_period_date(self, store):
        period = _get(store, CollectionKey.PERIODS, "p-13")

        assert resolve_period_date(store, period).date == "2016-12-03"

    def test_item_without_periods_has_no_date(self, dataset):
        dataset["2016"]["schedule"][0]["periodIds"] = []
        store = build_store(dataset)
        item = _get(store, CollectionKey.SCHEDULE, "c416ae39")

        with pytest.raises(DanglingReference, match="no periods"):
            resolve_item_date(store, item)

    def test_relationships_stay_in_owning_conference(self, store):
        item = _get(store, CollectionKey.SCHEDULE, "e2017001", code="2017")

        date = resolve_item_date(store, item)

        assert date.name == "2017 Day 1"
        assert [p.name for p in resolve_item_places(store, item)] == ["Hall X"]


class TestDateFilter:
    """Tests for schedule filtering by date."""

    def test_no_filter(self):
        assert date_filter_local_id(None) is None
        assert date_filter_local_id("") is None

    def test_decodes_date_id(self):
        assert date_filter_local_id(DAY_2) == "d-2"

    def test_rejects_other_node_type(self):
        with pytest.raises(MalformedIdentifier, match="ConferenceDate"):
            date_filter_local_id("UGVyaW9kOnAtMQ==")

    def test_periods_on_date(self, store):
        conference = store.conference("2016")

        assert [p.id for p in resolve_schedule_periods(conference, DAY_1)] == ["p-1", "p-2", "p-3"]
        assert [p.id for p in resolve_schedule_periods(conference, DAY_2)] == ["p-13"]
        assert len(resolve_schedule_periods(conference)) == 4

    def test_items_on_first_day(self, store):
        items = resolve_schedule_items(store.conference("2016"), DAY_1)

        assert [item.id for item in items] == ["c416ae39", "56e047e5", "78c1e1c5", "90d4c7c2"]

    def test_items_spanning_days_match_both(self, store):
        items = resolve_schedule_items(store.conference("2016"), DAY_2)

        assert [item.id for item in items] == ["49225f30", "90d4c7c2", "a6f1cfa8"]

    def test_all_items_without_filter(self, store):
        assert len(resolve_schedule_items(store.conference("2016"))) == 6

    def test_unknown_date_matches_nothing(self, store):
        items = resolve_schedule_items(store.conference("2016"), "Q29uZmVyZW5jZURhdGU6ZC05")

        assert items == []
