"""Tests for Todoist task retrieval (HTTP mocked with httpx.MockTransport)."""

import httpx
import pytest

from todofilter.domains.todoist.client import (
    NO_TASKS_MESSAGE,
    Task,
    TaskQueryClient,
    format_task_list,
)
from todofilter.domains.todoist.errors import TodoistAPIError
from todofilter.domains.todoist.extract import MatchStrategy
from todofilter.domains.todoist.priorities import InvalidPriorityError

TASKS = [
    {
        "id": "101",
        "content": "Paint the fence",
        "description": "Two coats",
        "priority": 4,
        "due": {"string": "today", "date": "2025-09-01"},
        "parent_id": None,
    },
    {"id": "102", "content": "Buy brushes", "priority": 1, "due": None},
    {"id": 103, "content": "Call painter", "priority": 4, "parent_id": 101},
]


def _client(handler, **kwargs) -> TaskQueryClient:
    return TaskQueryClient(
        "test-token",
        base_url="https://todoist.test/rest/v2",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestGetTasks:
    """Tests for TaskQueryClient.get_tasks."""

    def test_filter_is_formatted_and_forwarded(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = request
            return httpx.Response(200, json=TASKS)

        with _client(handler) as client:
            tasks = client.get_tasks(filter="urgent tasks due today")

        request = seen["request"]
        assert request.url.path == "/rest/v2/tasks"
        assert request.url.params["filter"] == "p1 & today"
        assert request.headers["Authorization"] == "Bearer test-token"
        assert [t.id for t in tasks] == ["101", "102", "103"]

    def test_match_strategy_used(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["filter"] = request.url.params["filter"]
            return httpx.Response(200, json=[])

        with _client(handler, strategy=MatchStrategy.WORD) as client:
            client.get_tasks(filter="network tasks")

        assert seen["filter"] == "search: network"

    def test_no_params_without_filters(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["query"] = request.url.query
            return httpx.Response(200, json=[])

        with _client(handler) as client:
            assert client.get_tasks() == []

        assert seen["query"] == b""

    def test_project_id_forwarded(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json=[])

        with _client(handler) as client:
            client.get_tasks(project_id="2203306141")

        assert seen["params"] == {"project_id": "2203306141"}

    def test_priority_filters_client_side(self):
        with _client(lambda request: httpx.Response(200, json=TASKS)) as client:
            tasks = client.get_tasks(priority="P1")

        assert [t.id for t in tasks] == ["101", "103"]

    def test_limit(self):
        with _client(lambda request: httpx.Response(200, json=TASKS)) as client:
            assert len(client.get_tasks(limit=2)) == 2
            assert len(client.get_tasks(limit=0)) == 3
            assert len(client.get_tasks(limit=None)) == 3

    def test_invalid_priority_rejected_before_request(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        with _client(handler) as client:
            with pytest.raises(InvalidPriorityError):
                client.get_tasks(priority="P9")

    def test_bad_request_mentions_filter(self):
        with _client(lambda request: httpx.Response(400)) as client:
            with pytest.raises(TodoistAPIError) as exc_info:
                client.get_tasks(filter="urgent tasks due today")

        assert exc_info.value.status_code == 400
        assert 'Your filter was: "p1 & today"' in exc_info.value.message

    def test_unauthorized(self):
        with _client(lambda request: httpx.Response(401)) as client:
            with pytest.raises(TodoistAPIError, match="TODOIST_API_TOKEN"):
                client.get_tasks()

    def test_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with _client(handler) as client:
            with pytest.raises(TodoistAPIError, match="Network error") as exc_info:
                client.get_tasks(filter="paint")

        assert exc_info.value.status_code is None


class TestTask:
    """Tests for Task parsing and rendering."""

    def test_from_dict(self):
        task = Task.from_dict(TASKS[0])
        assert task.id == "101"
        assert task.description == "Two coats"
        assert task.due == "today"
        assert task.parent_id is None

    def test_from_dict_numeric_ids(self):
        task = Task.from_dict(TASKS[2])
        assert task.id == "103"
        assert task.parent_id == "101"
        assert task.due is None

    def test_format(self):
        task = Task.from_dict(TASKS[0])
        assert task.format() == (
            "- Paint the fence (ID: 101)\n"
            "  Description: Two coats\n"
            "  Due: today\n"
            "  Priority: 4"
        )

    def test_format_default_priority(self):
        task = Task(id="7", content="Sand the deck")
        assert task.format() == "- Sand the deck (ID: 7)\n  Priority: 1"

    def test_format_task_list(self):
        tasks = [Task.from_dict(t) for t in TASKS[:2]]
        listing = format_task_list(tasks)
        assert listing.count("\n\n") == 1
        assert listing.endswith("- Buy brushes (ID: 102)\n  Priority: 1")

    def test_empty_list(self):
        assert format_task_list([]) == NO_TASKS_MESSAGE
