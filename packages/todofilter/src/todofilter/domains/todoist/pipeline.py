"""Natural language to Todoist filter translation pipeline.

This module orchestrates the translation stages:
1. Syntax detection → pass already-formatted filters through untouched
2. Deadline clause extraction → "deadline before: <date>" tokens
3. Greedy phrase matching → catalog tokens
4. Residual filtering → "search: <words>" token
5. Assembly → deduplicated tokens joined with " & "

The pipeline is pure and synchronous. Each call owns its working buffer,
and the only shared data (catalog, stopwords) is immutable.
"""

import json
import logging
import re
import time
from dataclasses import asdict, dataclass, field

from .assembler import assemble_filter
from .extract import (
    SEARCH_PREFIX,
    MatchStrategy,
    WorkingBuffer,
    extract_deadlines,
    extract_residual,
    match_phrases,
    residual_token,
)

logger = logging.getLogger(__name__)

# Any of these anywhere in the input means it is already filter syntax
STRONG_SYNTAX_INDICATORS: tuple[re.Pattern, ...] = (
    re.compile(r"#\w+"),  # Projects (#Work)
    re.compile(r"@\w+"),  # Labels (@urgent)
    re.compile(r"\bp[1-4]\b"),  # Priorities
    re.compile(r"&|\|"),  # Operators
    re.compile(r"\bassigned by:"),
    re.compile(r"\bbefore:"),
    re.compile(r"\bafter:"),
)

# Only count as filter syntax when they are the entire input
STANDALONE_KEYWORDS: frozenset[str] = frozenset(
    {
        "today",
        "tomorrow",
        "overdue",
        "yesterday",
        "no date",
        "no priority",
        "completed",
    }
)


@dataclass
class FilterResult:
    """Result of translating one natural-language filter request.

    Attributes:
        raw_user_text: Input as given (trimmed)
        final_filter: Todoist filter string
        passthrough: True if the input was judged already formatted
        deadline_tokens: Tokens from deadline clause extraction
        phrase_tokens: Tokens from catalog phrase matching
        residual: Unmatched words left after stopword removal
        search_token: Residual wrapped as a search: token, if any
        strategy: Phrase matching strategy used
        total_time_ms: Wall-clock translation time
    """

    raw_user_text: str
    final_filter: str
    passthrough: bool = False
    deadline_tokens: list[str] = field(default_factory=list)
    phrase_tokens: list[str] = field(default_factory=list)
    residual: str = ""
    search_token: str | None = None
    strategy: MatchStrategy = MatchStrategy.SUBSTRING
    total_time_ms: float = 0.0

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        d = asdict(self)
        d["strategy"] = self.strategy.value
        return d

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=2)


def is_already_formatted(text: str) -> bool:
    """Check if text already appears to be Todoist filter syntax.

    Strong indicators (#project, @label, p1-p4, & or |, "assigned by:",
    "before:", "after:") count anywhere in the text. Date and status keywords
    only count when they make up the whole input, so "today" passes through
    but "paint due today" does not.

    Args:
        text: Lowercased, trimmed input

    Returns:
        True if the input should be passed through unchanged
    """
    if any(pattern.search(text) for pattern in STRONG_SYNTAX_INDICATORS):
        return True
    return text.strip() in STANDALONE_KEYWORDS


def translate_filter(
    text: str,
    strategy: MatchStrategy = MatchStrategy.SUBSTRING,
) -> FilterResult:
    """Translate natural language into Todoist filter syntax, keeping every stage.

    Args:
        text: Natural-language filter request
        strategy: Phrase matching strategy

    Returns:
        FilterResult with the final filter and intermediate tokens. For empty
        or non-string input the final filter is "".
    """
    start_time = time.perf_counter()

    if not isinstance(text, str) or not text:
        return FilterResult(raw_user_text="", final_filter="", strategy=strategy)

    original = text.strip()
    normalized = original.lower()

    if is_already_formatted(normalized) or normalized.startswith(SEARCH_PREFIX):
        logger.debug(f"Passing through already formatted filter: '{original}'")
        return FilterResult(
            raw_user_text=original,
            final_filter=original,
            passthrough=True,
            strategy=strategy,
            total_time_ms=(time.perf_counter() - start_time) * 1000,
        )

    buffer = WorkingBuffer(normalized)

    # Deadline clauses FIRST - the catalog's bare "deadline before" would
    # otherwise swallow the prefix and strand the date in the search text
    deadline_tokens = extract_deadlines(original, buffer)
    phrase_tokens = match_phrases(buffer, strategy=strategy)
    residual = extract_residual(buffer)
    search_token = residual_token(residual)

    final_filter = assemble_filter(deadline_tokens, phrase_tokens, search_token, original)
    logger.debug(f"Translated '{original}' -> '{final_filter}'")

    return FilterResult(
        raw_user_text=original,
        final_filter=final_filter,
        deadline_tokens=deadline_tokens,
        phrase_tokens=phrase_tokens,
        residual=residual,
        search_token=search_token,
        strategy=strategy,
        total_time_ms=(time.perf_counter() - start_time) * 1000,
    )


def format_filter(text: str, strategy: MatchStrategy = MatchStrategy.SUBSTRING) -> str:
    """Convert a natural-language filter request into Todoist filter syntax.

    Examples:
        "urgent tasks due today" -> "p1 & today"
        "#Work & p1" -> "#Work & p1" (already formatted, passed through)
        "paint" -> "search: paint"

    Never raises. Returns "" for empty or non-string input.
    """
    return translate_filter(text, strategy).final_filter
