import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request, Response

from petition_api.api.client_ip import resolve_client_id
from petition_api.core.config import Settings, get_settings
from petition_api.core.errors import (
    MissingField, RateLimitExceeded, ServerMisconfiguration, UnsupportedMethod
)
from petition_api.services.petition.models import PetitionRequest, PetitionResponse, UsageSummary
from petition_api.services.petition.service import PetitionService, get_petition_service
from petition_api.services.rate_limit import DailyRateLimiter, get_rate_limiter

logger = logging.getLogger(__name__)

router = APIRouter()


@router.options("/generate")
async def preflight() -> Response:
    return Response(status_code=200)


@router.api_route("/generate", methods=["GET", "PUT", "PATCH", "DELETE"], include_in_schema=False)
async def method_not_allowed() -> Any:
    raise UnsupportedMethod()


@router.post("/generate", response_model=PetitionResponse)
async def generate_petition(
    request: Request,
    payload: Optional[PetitionRequest] = None,
    settings: Settings = Depends(get_settings),
    limiter: DailyRateLimiter = Depends(get_rate_limiter),
    service: PetitionService = Depends(get_petition_service),
) -> Any:
    """
    Generate a sentencing petition (엄벌 탄원서) from case details.

    Flow:
    1. Resolve client & check daily limit
    2. Check server credential
    3. Validate required fields
    4. Build prompts & call completion API
    5. Record usage on success
    """
    client_id = resolve_client_id(request)

    status = limiter.check(client_id)
    if not status.allowed:
        logger.warning(f"Daily limit reached for {client_id} ({status.used}/{status.limit})")
        raise RateLimitExceeded(used=status.used, limit=status.limit)

    api_key = settings.OPENAI_API_KEY
    if not api_key:
        logger.error("OPENAI_API_KEY is not configured")
        raise ServerMisconfiguration()

    if payload is None or payload.missing_fields():
        raise MissingField()

    content = await service.generate(api_key, payload)

    limiter.increment(client_id)
    updated = limiter.check(client_id)
    logger.info(f"Petition generated for {client_id} ({updated.used}/{updated.limit})")

    return PetitionResponse(
        content=content,
        usage=UsageSummary(used=updated.used, remaining=updated.remaining, limit=updated.limit),
    )
