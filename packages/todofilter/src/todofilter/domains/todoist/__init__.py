"""Todoist domain: natural-language task filters to Todoist filter syntax."""

from todofilter.domains.todoist.examples import FilterExample, get_filter_examples
from todofilter.domains.todoist.extract import MatchStrategy
from todofilter.domains.todoist.pipeline import (
    FilterResult,
    format_filter,
    is_already_formatted,
    translate_filter,
)

__all__ = [
    "FilterExample",
    "FilterResult",
    "MatchStrategy",
    "format_filter",
    "get_filter_examples",
    "is_already_formatted",
    "translate_filter",
]
