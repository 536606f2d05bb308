"""Conversion between P1-P4 priority notation and Todoist API priorities.

Todoist's API numbers priorities the other way round from its UI:

- P1 = Urgent (API priority 4)
- P2 = High (API priority 3)
- P3 = Medium (API priority 2)
- P4 = Normal (API priority 1)
"""

PRIORITY_MAP: dict[str, int] = {
    "P1": 4,
    "P2": 3,
    "P3": 2,
    "P4": 1,
}

API_PRIORITIES: frozenset[int] = frozenset(PRIORITY_MAP.values())


class InvalidPriorityError(ValueError):
    """Raised when a priority is neither 1-4 nor P1-P4."""


def map_priority(priority: int | str) -> int:
    """Map a priority to the Todoist API value.

    Integers 1-4 are taken as API values already. Strings are matched
    case-insensitively against P1-P4.

    Raises:
        InvalidPriorityError: If the value is out of range or unrecognized
    """
    if isinstance(priority, int) and not isinstance(priority, bool):
        if priority in API_PRIORITIES:
            return priority
        raise InvalidPriorityError(f"Invalid numeric priority: {priority}. Must be 1-4.")
    if isinstance(priority, str):
        normalized = priority.upper().strip()
        if normalized in PRIORITY_MAP:
            return PRIORITY_MAP[normalized]
        raise InvalidPriorityError(
            f"Invalid priority string: {priority}. Must be P1, P2, P3, or P4."
        )
    raise InvalidPriorityError(
        f"Invalid priority type: {type(priority).__name__}. Must be number (1-4) or string (P1-P4)."
    )


def is_valid_priority(priority: object) -> bool:
    """Check whether map_priority would accept the value."""
    try:
        map_priority(priority)
    except InvalidPriorityError:
        return False
    return True
