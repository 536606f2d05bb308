"""Filter translation request/response models."""

from pydantic import BaseModel

from todofilter.domains.todoist.extract import MatchStrategy


class FormatRequest(BaseModel):
    """Request to translate a natural-language filter."""

    query: str
    strategy: MatchStrategy | None = None  # defaults to the configured strategy


class FormatResponse(BaseModel):
    """Translated filter with its intermediate tokens."""

    filter: str
    passthrough: bool
    deadline_tokens: list[str]
    phrase_tokens: list[str]
    search_token: str | None = None
    strategy: MatchStrategy
    latency_ms: float


class ExampleResponse(BaseModel):
    """A documented example translation."""

    input: str
    output: str
