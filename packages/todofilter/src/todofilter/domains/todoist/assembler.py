"""Deterministic assembly of extracted tokens into a Todoist filter string.

Tokens are combined in accumulation order: deadline tokens, then catalog
phrase tokens, then the residual search token. Callers must not assume any
alphabetical or priority-first ordering.
"""

import logging
from collections.abc import Sequence

from .extract import SEARCH_PREFIX

logger = logging.getLogger(__name__)

AND_OPERATOR = " & "


def dedupe_tokens(tokens: Sequence[str]) -> list[str]:
    """Drop repeated tokens by exact string equality, keeping first-seen order."""
    return list(dict.fromkeys(tokens))


def assemble_filter(
    deadline_tokens: Sequence[str],
    phrase_tokens: Sequence[str],
    search_token: str | None,
    original: str,
) -> str:
    """Build the final filter string.

    Args:
        deadline_tokens: Tokens from deadline clause extraction
        phrase_tokens: Tokens from catalog phrase matching
        search_token: Residual "search: ..." token, if any
        original: Trimmed original input, used for the fallback search

    Returns:
        Tokens joined with " & ", or "search: <original>" when nothing
        was extracted at all
    """
    tokens = [*deadline_tokens, *phrase_tokens]
    if search_token:
        tokens.append(search_token)

    if not tokens:
        logger.debug(f"Nothing extracted from '{original}', falling back to plain search")
        return f"{SEARCH_PREFIX} {original}"

    unique = dedupe_tokens(tokens)
    if len(unique) != len(tokens):
        logger.debug(f"Dropped {len(tokens) - len(unique)} duplicate token(s)")
    return AND_OPERATOR.join(unique)
