"""Documented natural-language → filter translations.

The values are literal and do not consult the catalog, so they double as a
regression table for the translator.
"""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class FilterExample:
    """A documented translation.

    Attributes:
        input: Natural-language request
        output: Expected Todoist filter
    """

    input: str
    output: str

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


FILTER_EXAMPLES: tuple[FilterExample, ...] = (
    FilterExample("urgent tasks due today", "p1 & today"),
    FilterExample("high priority work project", "p1 & #Work"),
    FilterExample("overdue tasks with no priority", "no priority & overdue"),
    FilterExample("personal tasks due this week", "7 days & #Personal"),
    FilterExample("waiting tasks in work", "@waiting_for & #Work"),
    FilterExample("important tasks due tomorrow", "@important & tomorrow"),
    FilterExample("no date low priority", "p3 & no date"),
    FilterExample("work urgent", "p1 & #Work"),
    FilterExample("tasks with deadline", "!no deadline"),
    FilterExample("no deadline", "!deadline"),
    FilterExample("deadline before Sept 5 2025", "deadline before: Sept 5 2025"),
    FilterExample("deadline after Jan 1 2024", "deadline after: Jan 1 2024"),
    FilterExample("deadline on March 10 2025", "deadline: March 10 2025"),
    FilterExample("deadline today", "deadline: today"),
    FilterExample("deadline this week", "deadline before: next week"),
    FilterExample("deadline next week", "deadline after: this week & deadline before: 2 weeks"),
)


def get_filter_examples() -> list[FilterExample]:
    """Return the documented example translations."""
    return list(FILTER_EXAMPLES)
