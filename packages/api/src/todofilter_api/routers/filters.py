"""Filter translation API routes."""

from fastapi import APIRouter

from todofilter.config import settings
from todofilter.domains.todoist.examples import get_filter_examples
from todofilter.domains.todoist.pipeline import translate_filter
from todofilter_api.models.filters import ExampleResponse, FormatRequest, FormatResponse

router = APIRouter(prefix="/filters", tags=["filters"])


@router.post("/format", response_model=FormatResponse)
async def format_query(request: FormatRequest) -> FormatResponse:
    """Translate a natural-language filter into Todoist syntax."""
    result = translate_filter(request.query, request.strategy or settings.filter_match_strategy)
    return FormatResponse(
        filter=result.final_filter,
        passthrough=result.passthrough,
        deadline_tokens=result.deadline_tokens,
        phrase_tokens=result.phrase_tokens,
        search_token=result.search_token,
        strategy=result.strategy,
        latency_ms=result.total_time_ms,
    )


@router.get("/examples", response_model=list[ExampleResponse])
async def list_examples() -> list[ExampleResponse]:
    """List documented example translations."""
    return [ExampleResponse(**example.to_dict()) for example in get_filter_examples()]
