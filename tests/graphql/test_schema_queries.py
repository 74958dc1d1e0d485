"""
Tests for GraphQL queries executed against the schema
"""

import pytest

from confgraph.graphql.context import build_context
from confgraph.graphql.schema import schema, validate_schema
from confgraph.store import build_store

NODE_QUERY = """
    query Node($id: ID!) {
        node(id: $id) {
            __typename
            id
            ... on Session { title language speaker { name githubUsername } tags { name } }
            ... on ConferenceDate { name date }
            ... on Activity { title }
        }
    }
"""

SCHEDULE_ITEM_QUERY = """
    query Item($id: ID!) {
        scheduleItem(id: $id) {
            id
            date { id name }
            periods { start end }
            places { name }
            event {
                __typename
                id
                title
                ... on Session { speaker { name } }
            }
            eventInterface {
                session { title }
                activity { title }
            }
        }
    }
"""

SCHEDULE_QUERY = """
    query Schedule($code: String!, $date: ConferenceDateInput) {
        conference(code: $code) {
            name
            schedule {
                dates { id }
                places { name }
                periods(date: $date) { id }
                items(date: $date) { id event { title } }
            }
        }
    }
"""


def _execute(context, query, **variables):
    return schema.execute_sync(query, variable_values=variables, context_value=context)


class TestSchema:
    def test_schema_validates(self):
        validate_schema()

    def test_schema_declares_node_interface(self):
        sdl = schema.as_str()

        assert "interface Node" in sdl
        assert "interface Event" in sdl
        assert "type Session implements Node & Event" in sdl


class TestNodeQuery:
    """Tests for the node field."""

    def test_session_node(self, context):
        result = _execute(context, NODE_QUERY, id="U2Vzc2lvbjpkMmJhM2ZiZg==")

        assert result.errors is None
        node = result.data["node"]
        assert node["__typename"] == "Session"
        assert node["id"] == "U2Vzc2lvbjpkMmJhM2ZiZg=="
        assert node["title"] == "Beware of Alpha Syndrome"
        assert node["language"] == "EN"
        assert node["speaker"] == {"name": "Yukihiro (Matz) Matsumoto", "githubUsername": "matz"}
        assert node["tags"] == [{"name": "Ruby"}]

    def test_session_language(self, context):
        result = _execute(context, NODE_QUERY, id="U2Vzc2lvbjo2MmUyMWNiYg==")

        assert result.errors is None
        assert result.data["node"]["language"] == "ZH_TW"
        assert result.data["node"]["tags"] == [{"name": "Elixir"}, {"name": "Ruby"}]

    def test_conference_date_node(self, context):
        result = _execute(context, NODE_QUERY, id="Q29uZmVyZW5jZURhdGU6ZC0y")

        assert result.errors is None
        assert result.data["node"] == {
            "__typename": "ConferenceDate",
            "id": "Q29uZmVyZW5jZURhdGU6ZC0y",
            "name": "Day 2",
            "date": "2016-12-03",
        }

    @pytest.mark.parametrize(
        "global_id,code",
        [
            ("Tm9wZTp4", "UNKNOWN_TYPE"),
            ("U2Vzc2lvbjpub3Bl", "NOT_FOUND"),
            ("not-an-id!", "MALFORMED_IDENTIFIER"),
        ],
    )
    def test_lookup_errors(self, context, global_id, code):
        result = _execute(context, NODE_QUERY, id=global_id)

        assert result.data == {"node": None}
        assert len(result.errors) == 1
        assert result.errors[0].extensions["code"] == code
        assert result.errors[0].path == ["node"]

    def test_repeated_queries_are_identical(self, context):
        first = _execute(context, NODE_QUERY, id="U2Vzc2lvbjpkMmJhM2ZiZg==")
        second = _execute(context, NODE_QUERY, id="U2Vzc2lvbjpkMmJhM2ZiZg==")

        assert first.data == second.data


class TestScheduleItemQuery:
    """Tests for the scheduleItem field."""

    def test_session_item(self, context):
        result = _execute(context, SCHEDULE_ITEM_QUERY, id="U2NoZWR1bGVJdGVtOjc4YzFlMWM1")

        assert result.errors is None
        item = result.data["scheduleItem"]
        assert item["date"] == {"id": "Q29uZmVyZW5jZURhdGU6ZC0x", "name": "Day 1"}
        assert item["periods"] == [
            {"start": "2016-12-02T09:40:00+0800", "end": "2016-12-02T10:40:00+0800"}
        ]
        assert item["places"] == [{"name": "1st Conference Room"}, {"name": "Auditorium"}]
        assert item["event"] == {
            "__typename": "Session",
            "id": "U2Vzc2lvbjpkMmJhM2ZiZg==",
            "title": "Beware of Alpha Syndrome",
            "speaker": {"name": "Yukihiro (Matz) Matsumoto"},
        }
        assert item["eventInterface"] == {
            "session": {"title": "Beware of Alpha Syndrome"},
            "activity": None,
        }

    def test_inline_activity_item(self, context):
        result = _execute(context, SCHEDULE_ITEM_QUERY, id="U2NoZWR1bGVJdGVtOjU2ZTA0N2U1")

        assert result.errors is None
        item = result.data["scheduleItem"]
        assert item["event"] == {
            "__typename": "Activity",
            "id": "QWN0aXZpdHk6NTZlMDQ3ZTU=",
            "title": "Opening",
        }
        assert item["eventInterface"] == {"session": None, "activity": {"title": "Opening"}}

    def test_other_node_type_is_not_found(self, context):
        result = _execute(context, SCHEDULE_ITEM_QUERY, id="U2Vzc2lvbjpkMmJhM2ZiZg==")

        assert result.data == {"scheduleItem": None}
        assert result.errors[0].extensions["code"] == "NOT_FOUND"

    def test_dangling_reference_is_a_partial_result(self, dataset):
        dataset["2016"]["sessions"][0]["speakerId"] = "nobody"
        context = build_context(build_store(dataset))

        result = _execute(context, SCHEDULE_ITEM_QUERY, id="U2NoZWR1bGVJdGVtOjc4YzFlMWM1")

        item = result.data["scheduleItem"]
        assert item["event"]["title"] == "Beware of Alpha Syndrome"
        assert item["event"]["speaker"] is None
        assert item["places"] == [{"name": "1st Conference Room"}, {"name": "Auditorium"}]
        assert len(result.errors) == 1
        assert result.errors[0].extensions["code"] == "DANGLING_REFERENCE"
        assert result.errors[0].path == ["scheduleItem", "event", "speaker"]


class TestConferenceQuery:
    """Tests for the conference field and its schedule."""

    def test_unknown_conference_is_null(self, context):
        result = _execute(context, SCHEDULE_QUERY, code="1999")

        assert result.errors is None
        assert result.data == {"conference": None}

    def test_schedule_without_filter(self, context):
        result = _execute(context, SCHEDULE_QUERY, code="2016")

        assert result.errors is None
        schedule = result.data["conference"]["schedule"]
        assert len(schedule["dates"]) == 2
        assert [p["name"] for p in schedule["places"]] == ["Auditorium", "1st Conference Room"]
        assert len(schedule["periods"]) == 4
        assert len(schedule["items"]) == 6

    def test_schedule_filtered_by_date(self, context):
        result = _execute(
            context, SCHEDULE_QUERY, code="2016", date={"id": "Q29uZmVyZW5jZURhdGU6ZC0x"}
        )

        assert result.errors is None
        schedule = result.data["conference"]["schedule"]
        assert [p["id"] for p in schedule["periods"]] == [
            "UGVyaW9kOnAtMQ==",
            "UGVyaW9kOnAtMg==",
            "UGVyaW9kOnAtMw==",
        ]
        assert [i["event"]["title"] for i in schedule["items"]] == [
            "Registration",
            "Opening",
            "Beware of Alpha Syndrome",
            "Untagged talk",
        ]

    def test_filter_with_null_id_returns_everything(self, context):
        result = _execute(context, SCHEDULE_QUERY, code="2016", date={"id": None})

        assert result.errors is None
        assert len(result.data["conference"]["schedule"]["items"]) == 6

    def test_filter_rejects_non_date_id(self, context):
        result = _execute(context, SCHEDULE_QUERY, code="2016", date={"id": "UGVyaW9kOnAtMQ=="})

        schedule = result.data["conference"]["schedule"]
        assert schedule["periods"] is None
        assert schedule["items"] is None
        assert {e.extensions["code"] for e in result.errors} == {"MALFORMED_IDENTIFIER"}

    def test_schedule_is_scoped_to_conference(self, context):
        result = _execute(context, SCHEDULE_QUERY, code="2017")

        assert result.errors is None
        items = result.data["conference"]["schedule"]["items"]
        assert items == [{"id": "U2NoZWR1bGVJdGVtOmUyMDE3MDAx", "event": {"title": "Registration 2017"}}]


class TestConnections:
    """Tests for the speakers and sessions connections."""

    QUERY = """
        query Sessions($first: Int, $after: String) {
            sessions(first: $first, after: $after) {
                edges { cursor node { title } }
                pageInfo { hasNextPage hasPreviousPage startCursor endCursor }
            }
        }
    """

    def test_first_page(self, context):
        result = _execute(context, self.QUERY, first=2)

        assert result.errors is None
        connection = result.data["sessions"]
        assert [e["node"]["title"] for e in connection["edges"]] == [
            "Beware of Alpha Syndrome",
            "Salary negotiations with a Sinatra app",
        ]
        assert connection["edges"][0]["cursor"] == "YXJyYXljb25uZWN0aW9uOjA="
        assert connection["pageInfo"]["hasNextPage"] is True

    def test_next_page(self, context):
        first = _execute(context, self.QUERY, first=2)
        end_cursor = first.data["sessions"]["pageInfo"]["endCursor"]

        result = _execute(context, self.QUERY, first=2, after=end_cursor)

        connection = result.data["sessions"]
        assert [e["node"]["title"] for e in connection["edges"]] == ["Untagged talk"]
        assert connection["pageInfo"]["hasNextPage"] is False

    def test_speakers(self, context):
        result = _execute(context, "{ speakers { edges { node { name } } } }")

        assert result.errors is None
        names = [e["node"]["name"] for e in result.data["speakers"]["edges"]]
        assert names == ["Yukihiro (Matz) Matsumoto", "Konstantin Haase"]

    def test_bad_cursor(self, context):
        result = _execute(context, self.QUERY, first=1, after="bogus!")

        assert result.data == {"sessions": None}
        assert result.errors[0].extensions["code"] == "MALFORMED_IDENTIFIER"


@pytest.mark.asyncio
async def test_async_execution(store):
    result = await schema.execute(
        "{ conference(code: \"2016\") { name sessions { title } } }",
        context_value=build_context(store),
    )

    assert result.errors is None
    assert result.data["conference"]["name"] == "RubyConf 2016"
    assert len(result.data["conference"]["sessions"]) == 3
