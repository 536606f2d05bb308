"""Rules-based extraction of filter tokens from natural-language text.

Extraction runs in three stages over a per-call WorkingBuffer:

1. Deadline clauses ("deadline before Sept 5") are pulled out with regexes
   so the trailing date is kept with its clause.
2. Catalog phrases are matched greedily, longest first, and each match
   consumes the first occurrence of the phrase from the buffer.
3. Whatever is left, minus stopwords, becomes the residual search text.

Phrase matching is plain substring matching by default, so "work" matches
inside "network". MatchStrategy.WORD requires word boundaries instead.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

from .catalog import SORTED_PATTERNS, STOPWORDS, PhrasePattern

logger = logging.getLogger(__name__)

SEARCH_PREFIX = "search:"


class MatchStrategy(str, Enum):
    """How catalog phrases are located in the working buffer."""

    SUBSTRING = "substring"
    WORD = "word"


# =============================================================================
# DEADLINE CLAUSE PATTERNS
# =============================================================================
# Order matters only for token order in the output. All rules are attempted.


@dataclass(frozen=True)
class DeadlineRule:
    """A deadline clause regex and the filter prefix it emits."""

    pattern: re.Pattern
    prefix: str

    def render(self, date_text: str) -> str:
        return f"{self.prefix} {date_text}"


DEADLINE_RULES: tuple[DeadlineRule, ...] = (
    DeadlineRule(
        re.compile(r"deadline before ([\w\s,\-/]+)", re.IGNORECASE | re.ASCII),
        "deadline before:",
    ),
    DeadlineRule(
        re.compile(r"deadline after ([\w\s,\-/]+)", re.IGNORECASE | re.ASCII),
        "deadline after:",
    ),
    DeadlineRule(
        re.compile(r"deadline on ([\w\s,\-/]+)", re.IGNORECASE | re.ASCII),
        "deadline:",
    ),
)


# =============================================================================
# WORKING BUFFER
# =============================================================================


class WorkingBuffer:
    """Mutable lowercase copy of the input that matches are consumed from.

    Created once per translation and discarded afterwards. Every removal
    takes out exactly one occurrence (the first) and re-trims the text.
    """

    def __init__(self, text: str):
        self.text = text.lower().strip()

    def __str__(self) -> str:
        return self.text

    def __bool__(self) -> bool:
        return bool(self.text)

    def find(self, phrase: str, strategy: MatchStrategy = MatchStrategy.SUBSTRING) -> int:
        """Return the start offset of the first occurrence of phrase, or -1."""
        if strategy == MatchStrategy.WORD:
            match = _word_pattern(phrase).search(self.text)
            return match.start() if match else -1
        return self.text.find(phrase)

    def remove(self, start: int, end: int) -> None:
        """Cut text[start:end] out of the buffer."""
        self.text = (self.text[:start] + self.text[end:]).strip()

    def consume(self, phrase: str, strategy: MatchStrategy = MatchStrategy.SUBSTRING) -> bool:
        """Remove the first occurrence of phrase.

        Returns:
            True if the phrase was found and removed
        """
        start = self.find(phrase, strategy)
        if start < 0:
            return False
        self.remove(start, start + len(phrase))
        return True

    def words(self) -> list[str]:
        return self.text.split()


def _word_pattern(phrase: str) -> re.Pattern:
    return re.compile(r"(?<!\w)" + re.escape(phrase) + r"(?!\w)")


# =============================================================================
# EXTRACTION STAGES
# =============================================================================


def extract_deadlines(original: str, buffer: WorkingBuffer) -> list[str]:
    """Extract "deadline before/after/on <date>" clauses.

    Rules are matched against the original text so the date keeps the user's
    casing. The whole clause is then consumed from the buffer, which keeps
    the bare "deadline before" catalog phrase and the residual search text
    from seeing it again.

    Args:
        original: Trimmed input text with original casing
        buffer: Working buffer to consume matched clauses from

    Returns:
        Deadline tokens in rule order
    """
    tokens = []
    for rule in DEADLINE_RULES:
        match = rule.pattern.search(original)
        if not match:
            continue
        date_text = match.group(1).strip()
        if not date_text:
            continue
        token = rule.render(date_text)
        tokens.append(token)
        buffer.consume(match.group(0).lower())
        logger.debug(f"Deadline clause '{match.group(0)}' -> '{token}'")
    return tokens


def match_phrases(
    buffer: WorkingBuffer,
    patterns: tuple[PhrasePattern, ...] = SORTED_PATTERNS,
    strategy: MatchStrategy = MatchStrategy.SUBSTRING,
) -> list[str]:
    """Greedily match catalog phrases against the buffer.

    Patterns are tried in the given order (longest phrase first for the
    default catalog). Each phrase is matched at most once.

    Args:
        buffer: Working buffer; matched phrases are consumed from it
        patterns: Phrase patterns in matching order
        strategy: Substring or whole-word matching

    Returns:
        Tokens of the matched phrases, in match order
    """
    tokens = []
    for pattern in patterns:
        if buffer.consume(pattern.phrase, strategy):
            tokens.append(pattern.token)
            logger.debug(
                f"Matched {pattern.category.value} phrase '{pattern.phrase}' -> '{pattern.token}'"
            )
    return tokens


def extract_residual(buffer: WorkingBuffer) -> str:
    """Return the unmatched buffer text with stopwords removed."""
    meaningful = [w for w in buffer.words() if w not in STOPWORDS]
    return " ".join(meaningful).strip()


def residual_token(residual: str) -> str | None:
    """Wrap residual text as a search: token, without double-wrapping."""
    if not residual:
        return None
    if residual.startswith(SEARCH_PREFIX):
        return residual
    return f"{SEARCH_PREFIX} {residual}"
