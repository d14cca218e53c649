#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

import uuid
from pydantic import BaseModel, Field


class MatchingRunRequest(BaseModel):
    """Request to score all active jobs for a user."""
    user_id: uuid.UUID = Field(..., description="Profile id of the user to match")
