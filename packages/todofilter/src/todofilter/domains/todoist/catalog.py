"""Phrase catalog mapping natural-language phrases to Todoist filter tokens.

The catalog is grouped by Category for authorship only. At match time the
pairs are flattened into a single list sorted longest-phrase-first, and the
category plays no role in which token wins.

Project and label tokens are placeholders (#Work, @waiting_for, ...). The
catalog knows nothing about a user's real projects or labels.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class Category(str, Enum):
    """Authoring group of a catalog entry. Declaration order is iteration order."""

    PRIORITY = "priority"
    DATE = "date"
    PROJECT = "project"
    LABEL = "label"
    STATUS = "status"
    DEADLINE = "deadline"


# =============================================================================
# PHRASE MAPS
# =============================================================================
# Phrases are lowercase. Tokens are emitted verbatim into the filter string.

PRIORITY_PHRASES: tuple[tuple[str, str], ...] = (
    ("high priority", "p1"),
    ("urgent tasks", "p1"),
    ("urgent", "p1"),
    ("important", "p1"),
    ("priority 1", "p1"),
    ("p1", "p1"),
    ("medium priority", "p2"),
    ("normal priority", "p2"),
    ("priority 2", "p2"),
    ("p2", "p2"),
    ("low priority", "p3"),
    ("priority 3", "p3"),
    ("p3", "p3"),
    ("lowest priority", "p4"),
    ("priority 4", "p4"),
    ("p4", "p4"),
    ("no priority", "no priority"),
)

DATE_PHRASES: tuple[tuple[str, str], ...] = (
    ("today", "today"),
    ("due today", "today"),
    ("scheduled today", "today"),
    ("tomorrow", "tomorrow"),
    ("due tomorrow", "tomorrow"),
    ("scheduled tomorrow", "tomorrow"),
    ("this week", "7 days"),
    ("due this week", "7 days"),
    ("next 7 days", "7 days"),
    ("next week", "7 days & before: 14 days"),
    ("due next week", "7 days & before: 14 days"),
    ("overdue", "overdue"),
    ("past due", "overdue"),
    ("late", "overdue"),
    ("no date", "no date"),
    ("no due date", "no date"),
    ("unscheduled", "no date"),
    ("yesterday", "yesterday"),
    ("due yesterday", "yesterday"),
)

PROJECT_PHRASES: tuple[tuple[str, str], ...] = (
    ("work project", "#Work"),
    ("work", "#Work"),
    ("in work", "#Work"),
    ("personal project", "#Personal"),
    ("personal", "#Personal"),
    ("in personal", "#Personal"),
    ("inbox", "#Inbox"),
    ("in inbox", "#Inbox"),
)

LABEL_PHRASES: tuple[tuple[str, str], ...] = (
    ("with urgent label", "@urgent"),
    ("waiting tasks", "@waiting_for"),
    ("waiting for", "@waiting_for"),
    ("blocked", "@waiting_for"),
    ("important tasks", "@important"),
    ("important", "@important"),
    ("with important label", "@important"),
    ("home tasks", "@home"),
    ("at home", "@home"),
    ("office tasks", "@office"),
    ("at office", "@office"),
    ("work location", "@office"),
)

STATUS_PHRASES: tuple[tuple[str, str], ...] = (
    ("completed", "completed"),
    ("done", "completed"),
    ("finished", "completed"),
    ("assigned to me", "assigned by: others"),
    ("delegated", "assigned by: me"),
    ("shared", "shared"),
)

# Bare "deadline before/after/on" only fire when the clause extractor found no
# date after them.
DEADLINE_PHRASES: tuple[tuple[str, str], ...] = (
    ("has deadline", "!no deadline"),
    ("with deadline", "!no deadline"),
    ("deadline", "!no deadline"),
    ("no deadline", "!deadline"),
    ("without deadline", "!deadline"),
    ("deadline today", "deadline: today"),
    ("deadline tomorrow", "deadline: tomorrow"),
    ("deadline this week", "deadline before: next week"),
    ("deadline next week", "deadline after: this week & deadline before: 2 weeks"),
    ("deadline none", "!deadline"),
    ("deadline before", "deadline before:"),
    ("deadline after", "deadline after:"),
    ("deadline on", "deadline:"),
)

FILTER_PATTERNS: MappingProxyType = MappingProxyType(
    {
        Category.PRIORITY: PRIORITY_PHRASES,
        Category.DATE: DATE_PHRASES,
        Category.PROJECT: PROJECT_PHRASES,
        Category.LABEL: LABEL_PHRASES,
        Category.STATUS: STATUS_PHRASES,
        Category.DEADLINE: DEADLINE_PHRASES,
    }
)


# =============================================================================
# STOPWORDS
# =============================================================================
# Connector and filler words dropped from the residual text before it becomes
# a search: token.

STOPWORDS: frozenset[str] = frozenset(
    {
        "and",
        "or",
        "tasks",
        "task",
        "that",
        "are",
        "is",
        "with",
        "the",
        "a",
        "an",
        "to",
        "for",
        "of",
        "by",
        "in",
        "on",
        "at",
        "as",
        "from",
        "mention",
    }
)


# =============================================================================
# FLATTENED VIEW
# =============================================================================


@dataclass(frozen=True)
class PhrasePattern:
    """A single phrase -> token pair from the flattened catalog.

    Attributes:
        phrase: Lowercase natural-language phrase to look for
        token: Filter syntax fragment emitted when the phrase matches
        category: Category the pair was authored under (informational only)
    """

    phrase: str
    token: str
    category: Category


def flatten_patterns(patterns=FILTER_PATTERNS) -> tuple[PhrasePattern, ...]:
    """Flatten a category catalog into phrase patterns sorted for matching.

    When the same phrase is registered under more than one category, the last
    registration wins: its token replaces the earlier one and the entry moves
    to the later position in iteration order.

    The result is sorted by phrase length, longest first. The sort is stable,
    so equal-length phrases keep catalog order.

    Args:
        patterns: Mapping of Category -> sequence of (phrase, token) pairs

    Returns:
        Tuple of PhrasePattern in matching order
    """
    registered: dict[str, PhrasePattern] = {}
    for category, pairs in patterns.items():
        for phrase, token in pairs:
            registered.pop(phrase, None)
            registered[phrase] = PhrasePattern(phrase=phrase, token=token, category=category)

    return tuple(sorted(registered.values(), key=lambda p: len(p.phrase), reverse=True))


def duplicate_phrases(patterns=FILTER_PATTERNS) -> dict[str, list[Category]]:
    """Find phrases registered under more than one category.

    Returns:
        Mapping of phrase -> categories it appears in, in registration order
    """
    seen: dict[str, list[Category]] = {}
    for category, pairs in patterns.items():
        for phrase, _token in pairs:
            seen.setdefault(phrase, []).append(category)
    return {phrase: cats for phrase, cats in seen.items() if len(cats) > 1}


SORTED_PATTERNS: tuple[PhrasePattern, ...] = flatten_patterns()
