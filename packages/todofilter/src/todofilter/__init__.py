"""Translate natural-language task filters into Todoist filter syntax."""

from todofilter.domains.todoist import format_filter, get_filter_examples

__version__ = "0.1.0"

__all__ = ["__version__", "format_filter", "get_filter_examples"]
