#!/usr/bin/env python3
"""
Match endpoints - view stored job matches.
"""

import uuid
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.match_service import MatchService
from ..models.responses import MatchesResponse, MatchDetailResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/matches", tags=["matches"])


@router.get("", response_model=MatchesResponse)
def get_matches(
    user_id: uuid.UUID = Query(..., description="Profile id of the user"),
    min_score: Optional[int] = Query(default=None, ge=0, le=100, description="Minimum match score"),
    status: Optional[str] = Query(default=None, pattern="^(new|low_match)$", description="Match status: new or low_match"),
    top_k: Optional[int] = Query(default=None, ge=1, le=500, description="Maximum results to return"),
    db: Session = Depends(get_db)
):
    """
    Get a user's stored matches sorted by match score (highest first).
    """
    service = MatchService(db)
    matches = service.get_matches(
        user_id=user_id,
        min_score=min_score,
        status=status,
        top_k=top_k
    )

    return MatchesResponse(
        success=True,
        count=len(matches),
        matches=matches
    )


@router.get("/{match_id}", response_model=MatchDetailResponse)
def get_match_details(
    match_id: uuid.UUID,
    db: Session = Depends(get_db)
):
    """
    Get detailed information about a specific match.

    Includes sub-scores, matched skills and job details.
    """
    service = MatchService(db)
    return service.get_match_detail(match_id)
