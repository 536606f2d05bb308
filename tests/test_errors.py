"""Unit tests for user-facing Todoist API error messages."""

from dataclasses import fields

import pytest

from todofilter.domains.todoist.errors import (
    ErrorContext,
    describe_api_error,
    describe_network_error,
)


class TestErrorContext:
    """Request context carried into error messages."""

    def test_fields(self):
        assert [f.name for f in fields(ErrorContext)] == ["filter", "project_id", "task_name"]


class TestDescribeApiError:
    """Tests for status-specific guidance."""

    def test_bad_request_with_filter(self):
        message = describe_api_error(400, "Bad Request", ErrorContext(filter="p1 & today"))
        assert message.startswith("Invalid request: Bad Request")
        assert 'Your filter was: "p1 & today"' in message

    def test_bad_request_with_empty_filter(self):
        message = describe_api_error(400, "Bad Request", ErrorContext(filter=""))
        assert 'Your filter was: "none"' in message

    def test_bad_request_with_task(self):
        message = describe_api_error(400, "Bad Request", ErrorContext(task_name="Paint"))
        assert 'The task "Paint" could not be found' in message

    def test_bad_request_generic(self):
        assert "Check your parameters" in describe_api_error(400, "Bad Request")

    def test_not_found_project(self):
        message = describe_api_error(404, "Not Found", ErrorContext(project_id="42"))
        assert 'The project_id "42" does not exist' in message

    def test_not_found_generic(self):
        assert "could not be found" in describe_api_error(404)

    @pytest.mark.parametrize("status", [403, 429])
    def test_rate_limits(self, status):
        assert "450 requests per 15 minutes" in describe_api_error(status)

    def test_unauthorized(self):
        assert "TODOIST_API_TOKEN" in describe_api_error(401, "Unauthorized")

    def test_default_status_text(self):
        assert describe_api_error(503).startswith("API Error (503): HTTP 503")

    def test_network_error(self):
        assert describe_network_error(OSError("refused")).startswith("Network error")
