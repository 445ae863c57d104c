# thrift_finder/services/summary_service.py

import structlog

from thrift_finder.core.errors import UpstreamError
from thrift_finder.llm import gemini_client
from thrift_finder.models.request_models import SummaryRequest
from thrift_finder.models.response_models import SummaryResponse

logger = structlog.get_logger(__name__)


def summarize_place(req: SummaryRequest) -> SummaryResponse:
    """
    Ask Gemini for a short blurb about one place.

    Every call goes to the provider; nothing is cached between requests.
    """
    prompt = gemini_client.build_summary_prompt(
        name=req.name,
        address=req.address,
        category=req.category,
        rating=req.rating,
        website=req.website,
        phone=req.phone,
    )

    logger.info("summary_requested", name=req.name)
    try:
        summary = gemini_client.generate_text(prompt)
    except UpstreamError as e:
        logger.error("summary_failed", name=req.name, error=e.detail)
        raise UpstreamError("Failed to generate summary", detail=e.detail) from e

    logger.info("summary_generated", name=req.name, chars=len(summary or ""))
    return SummaryResponse(name=req.name, summary=summary)
