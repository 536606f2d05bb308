"""User-facing errors for Todoist API calls.

HTTP failures are turned into a TodoistAPIError whose message explains what
went wrong and what to try next, using whatever request context is known
(the filter that was sent, the project id, ...).
"""

from dataclasses import dataclass

FILTER_HELP_URL = "https://www.todoist.com/help/articles/introduction-to-filters-V98wIH"
TOKEN_HELP_URL = "https://todoist.com/prefs/integrations"
RATE_LIMIT_NOTE = "Todoist allows 450 requests per 15 minutes."


@dataclass
class ErrorContext:
    """Request details used to tailor error guidance.

    Attributes:
        filter: Filter that was sent (after formatting), if any
        project_id: Project the request was scoped to, if any
        task_name: Task being looked up, if any
    """

    filter: str | None = None
    project_id: str | None = None
    task_name: str | None = None


class TodoistAPIError(Exception):
    """A failed Todoist API request, with a user-facing message."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def describe_api_error(
    status_code: int,
    status_text: str = "",
    context: ErrorContext | None = None,
) -> str:
    """Build a user-facing message for an HTTP error response.

    Args:
        status_code: HTTP status returned by Todoist
        status_text: Reason phrase, if any
        context: Request context for tailored tips

    Returns:
        Multi-line message with the error and suggested next steps
    """
    context = context or ErrorContext()
    status_text = status_text or f"HTTP {status_code}"

    if status_code == 400:
        return _bad_request_message(status_text, context)
    if status_code == 401:
        return (
            f"Authentication failed: {status_text}\n\n"
            "Please check that your TODOIST_API_TOKEN environment variable is set correctly.\n"
            f"You can get your API token from: {TOKEN_HELP_URL}"
        )
    if status_code == 403:
        return (
            f"Access denied or rate limit exceeded: {status_text}\n\n"
            "If this is a rate limit error, please wait a few minutes before trying again.\n"
            f"{RATE_LIMIT_NOTE}"
        )
    if status_code == 404:
        return _not_found_message(status_text, context)
    if status_code == 429:
        return (
            f"Rate limit exceeded: {status_text}\n\n"
            "Too many requests have been made. Please wait before trying again.\n"
            f"{RATE_LIMIT_NOTE}"
        )
    return (
        f"API Error ({status_code}): {status_text}\n\n"
        "Please try again or contact support if the problem persists."
    )


def describe_network_error(error: Exception) -> str:
    """Build a user-facing message for a transport failure."""
    return (
        f"Network error: Unable to connect to Todoist ({error}).\n\n"
        "Please check your internet connection and try again."
    )


def _bad_request_message(status_text: str, context: ErrorContext) -> str:
    message = f"Invalid request: {status_text}\n\n"
    if context.filter is not None:
        message += (
            "Tip: Check your filter syntax. Examples of valid filters:\n"
            '- "today" or "tomorrow"\n'
            '- "p1" for priority 1 tasks\n'
            '- "#ProjectName" for specific projects\n'
            '- "@LabelName" for specific labels\n\n'
            f'Your filter was: "{context.filter or "none"}"\n\n'
            f"Visit {FILTER_HELP_URL} for filter examples."
        )
    elif context.task_name:
        message += (
            f'Tip: The task "{context.task_name}" could not be found or the update parameters are invalid.\n'
            "- Check that the task name exists\n"
            "- Verify that any IDs (project_id, section_id, etc.) are valid\n"
            "- Ensure label names don't contain special characters"
        )
    else:
        message += (
            "Tip: Check your parameters:\n"
            "- Ensure all IDs are valid numbers or strings\n"
            "- Verify that project and section IDs exist\n"
            "- Check that label names are properly formatted"
        )
    return message


def _not_found_message(status_text: str, context: ErrorContext) -> str:
    message = f"Resource not found: {status_text}\n\n"
    if context.project_id:
        message += (
            f'The project_id "{context.project_id}" does not exist or you don\'t have access to it.\n'
            'Use "Get my projects" to see available project IDs.'
        )
    elif context.task_name:
        message += (
            f'The task "{context.task_name}" could not be found.\n'
            "- Check the task name spelling\n"
            "- Ensure the task hasn't been deleted\n"
            "- Try searching with partial task name"
        )
    else:
        message += (
            "The requested resource could not be found.\n"
            "- Verify that all IDs are correct\n"
            "- Check that you have access to the resource\n"
            '- Use the appropriate "get" command to list available resources'
        )
    return message
