"""
Shared pytest fixtures and configuration for all tests.
"""

import copy
import os
from collections.abc import Generator
from typing import Any

import pytest

from confgraph.graphql.context import build_context
from confgraph.store import DataStore, build_store

DATASET: dict[str, Any] = {
    "2016": {
        "code": "2016",
        "name": "RubyConf 2016",
        "keyVisionUrl": "https://i.imgur.com/a6x3nsK.png",
        "location": {"name": "Academia Sinica", "address": "128 Academia Rd., Taipei"},
        "wifiNetwork": {"ssid": "5xRuby", "password": "28825252"},
        "dates": [
            {"id": "d-1", "date": "2016-12-02", "name": "Day 1"},
            {"id": "d-2", "date": "2016-12-03", "name": "Day 2"},
        ],
        "speakers": [
            {
                "id": "b57d6ba1",
                "name": "Yukihiro (Matz) Matsumoto",
                "title": "Creator of Ruby, Heroku",
                "pictureUrl": "https://2016.rubyconf.tw/images/speakers/matz.png",
                "githubUsername": "matz",
            },
            {"id": "56e28e36", "name": "Konstantin Haase"},
        ],
        "sessionTags": [
            {"id": "t-r", "name": "Ruby"},
            {"id": "t-e", "name": "Elixir"},
        ],
        "sessions": [
            {
                "id": "d2ba3fbf",
                "title": "Beware of Alpha Syndrome",
                "description": "Matz talks about programmers",
                "speakerId": "b57d6ba1",
                "language": "en",
                "tagIds": ["t-r"],
                "videoUrl": "https://youtu.be/a8ycBvTzl3Y",
            },
            {
                "id": "62e21cbb",
                "title": "Salary negotiations with a Sinatra app",
                "description": "Let's talk about salaries",
                "speakerId": "56e28e36",
                "language": "zh-TW",
                "tagIds": ["t-e", "t-r"],
            },
            {
                "id": "f6133b0a",
                "title": "Untagged talk",
                "description": "",
                "speakerId": "56e28e36",
                "language": "en",
                "tagIds": [],
            },
        ],
        "activities": [{"id": "a-lunch", "title": "Lunch"}],
        "places": [
            {"id": "pl-a", "name": "Auditorium"},
            {"id": "pl-1", "name": "1st Conference Room"},
        ],
        "periods": [
            {"id": "p-1", "dateId": "d-1", "start": "2016-12-02T09:00:00+0800",
             "end": "2016-12-02T09:30:00+0800"},
            {"id": "p-2", "dateId": "d-1", "start": "2016-12-02T09:30:00+0800",
             "end": "2016-12-02T09:40:00+0800"},
            {"id": "p-3", "dateId": "d-1", "start": "2016-12-02T09:40:00+0800",
             "end": "2016-12-02T10:40:00+0800"},
            {"id": "p-13", "dateId": "d-2", "start": "2016-12-03T09:00:00+0800",
             "end": "2016-12-03T09:30:00+0800"},
        ],
        "schedule": [
            {"id": "c416ae39", "periodIds": ["p-1"], "placeIds": ["pl-a", "pl-1"],
             "event": {"id": "c416ae39", "title": "Registration"}},
            {"id": "56e047e5", "periodIds": ["p-2"], "placeIds": ["pl-a"],
             "event": {"id": "56e047e5", "title": "Opening"}},
            {"id": "78c1e1c5", "periodIds": ["p-3"], "placeIds": ["pl-1", "pl-a"],
             "eventSessionId": "d2ba3fbf"},
            {"id": "49225f30", "periodIds": ["p-13"], "placeIds": ["pl-1"],
             "eventSessionId": "62e21cbb"},
            {"id": "90d4c7c2", "periodIds": ["p-3", "p-13"], "placeIds": ["pl-a"],
             "eventSessionId": "f6133b0a"},
            {"id": "a6f1cfa8", "periodIds": ["p-13"], "placeIds": ["pl-a", "pl-1"],
             "eventActivityId": "a-lunch"},
        ],
    },
    "2017": {
        "code": "2017",
        "name": "RubyConf 2017",
        "location": {"name": "Taipei", "address": "Taipei City"},
        "wifiNetwork": {"ssid": "rubyconf", "password": "secret"},
        "dates": [{"id": "d17-1", "date": "2017-09-29", "name": "2017 Day 1"}],
        "places": [{"id": "pl-x", "name": "Hall X"}],
        "periods": [
            {"id": "p17-1", "dateId": "d17-1", "start": "2017-09-29T09:00:00+0800",
             "end": "2017-09-29T09:30:00+0800"},
        ],
        "schedule": [
            {"id": "e2017001", "periodIds": ["p17-1"], "placeIds": ["pl-x"],
             "event": {"id": "e2017001", "title": "Registration 2017"}},
        ],
    },
}


@pytest.fixture
def dataset() -> dict[str, Any]:
    """A fresh copy of the test dataset that tests may modify."""
    return copy.deepcopy(DATASET)


@pytest.fixture
def store(dataset: dict[str, Any]) -> DataStore:
    """A data store built from the test dataset."""
    return build_store(dataset)


@pytest.fixture
def context(store: DataStore) -> dict[str, Any]:
    """GraphQL execution context backed by the test store."""
    return build_context(store)


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
