#!/usr/bin/env python3
"""
Matching endpoints - trigger a scoring sweep for a user.
"""

import logging
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from core.config_loader import AppConfig
from ..dependencies import get_db, get_app_config
from ..exceptions import error_response
from ..services.pipeline_service import PipelineService
from ..models.requests import MatchingRunRequest
from ..models.responses import MatchingRunResponse

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/api/matching", tags=["matching"])

# Per client address
RUN_RATE_LIMIT = "5/minute"


def add_rate_limit_handlers(app):
    """Add rate limit exception handlers to the FastAPI app."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


async def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return error_response(429, str(exc), "RateLimitExceeded")


@router.post("/run", response_model=MatchingRunResponse)
@limiter.limit(RUN_RATE_LIMIT)
def run_matching(
    request: Request,
    body: MatchingRunRequest,
    db: Session = Depends(get_db),
    config: AppConfig = Depends(get_app_config)
):
    """
    Score every active job for the user and store qualifying matches.

    Runs synchronously; the response carries the batch summary.
    """
    logger.info(f"Matching requested for user {body.user_id}")
    result = PipelineService(db, config).run_matching(body.user_id)

    return MatchingRunResponse(
        success=result.success,
        matches_created=result.matches_created,
        matches_updated=result.matches_updated,
        failed=result.failed
    )
