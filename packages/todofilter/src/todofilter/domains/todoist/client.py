"""Todoist task retrieval with natural-language filters.

The client translates the caller's filter with format_filter and forwards
the result verbatim as the `filter` query parameter. Priority filtering and
result limiting happen client-side.
"""

import logging
from dataclasses import dataclass

import httpx

from .errors import ErrorContext, TodoistAPIError, describe_api_error, describe_network_error
from .extract import MatchStrategy
from .pipeline import format_filter
from .priorities import map_priority

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.todoist.com/rest/v2"
NO_TASKS_MESSAGE = "No tasks found matching the criteria"


@dataclass
class Task:
    """The subset of a Todoist task this tool reports on."""

    id: str
    content: str
    description: str = ""
    priority: int = 1
    due: str | None = None
    parent_id: str | None = None

    @classmethod
    def from_dict(cls, d: dict) -> "Task":
        """Create a Task from a Todoist API task object."""
        due = d.get("due") or {}
        parent_id = d.get("parent_id")
        return cls(
            id=str(d["id"]),
            content=d.get("content", ""),
            description=d.get("description") or "",
            priority=d.get("priority", 1),
            due=due.get("string"),
            parent_id=str(parent_id) if parent_id is not None else None,
        )

    def format(self) -> str:
        lines = [f"- {self.content} (ID: {self.id})"]
        if self.description:
            lines.append(f"  Description: {self.description}")
        if self.due:
            lines.append(f"  Due: {self.due}")
        lines.append(f"  Priority: {self.priority}")
        if self.parent_id:
            lines.append(f"  Parent Task ID: {self.parent_id}")
        return "\n".join(lines)


def format_task_list(tasks: list[Task]) -> str:
    """Render tasks as a text listing, one block per task."""
    if not tasks:
        return NO_TASKS_MESSAGE
    return "\n\n".join(task.format() for task in tasks)


class TaskQueryClient:
    """Thin Todoist REST client for filtered task retrieval.

    Args:
        api_token: Todoist API token
        base_url: REST API root
        timeout: Request timeout in seconds
        strategy: Phrase matching strategy for filter translation
        transport: Optional httpx transport (used by tests)
    """

    def __init__(
        self,
        api_token: str,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
        strategy: MatchStrategy = MatchStrategy.SUBSTRING,
        transport: httpx.BaseTransport | None = None,
    ):
        self.strategy = strategy
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers={"Authorization": f"Bearer {api_token}"},
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> "TaskQueryClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def get_tasks(
        self,
        filter: str | None = None,
        project_id: str | None = None,
        priority: int | str | None = None,
        limit: int | None = 10,
    ) -> list[Task]:
        """Fetch tasks, translating a natural-language filter first.

        Args:
            filter: Natural-language or Todoist filter
            project_id: Restrict to one project
            priority: Keep only tasks with this priority (1-4 or P1-P4)
            limit: Maximum number of tasks to return (None or <= 0 for all)

        Returns:
            Matching tasks in API order

        Raises:
            TodoistAPIError: On HTTP or transport failure
            InvalidPriorityError: If priority is not a valid value
        """
        # Validate before spending a request on it
        numeric_priority = map_priority(priority) if priority is not None else None

        params = {}
        if project_id:
            params["project_id"] = project_id
        if filter:
            params["filter"] = format_filter(filter, self.strategy)
            logger.info(f"Filter '{filter}' formatted as '{params['filter']}'")

        context = ErrorContext(filter=params.get("filter"), project_id=project_id)
        try:
            response = self._client.get("/tasks", params=params or None)
        except httpx.RequestError as e:
            logger.error(f"Todoist request failed: {e}")
            raise TodoistAPIError(describe_network_error(e)) from e

        if response.is_error:
            logger.warning(f"Todoist returned HTTP {response.status_code}")
            raise TodoistAPIError(
                describe_api_error(response.status_code, response.reason_phrase, context),
                status_code=response.status_code,
            )

        tasks = [Task.from_dict(item) for item in response.json()]
        if numeric_priority is not None:
            tasks = [task for task in tasks if task.priority == numeric_priority]
        if limit and limit > 0:
            tasks = tasks[:limit]
        return tasks
