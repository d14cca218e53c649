#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class SubScores(BaseModel):
    """Per-criterion contributions to a match score."""
    skills: Optional[int] = Field(None, ge=0, le=40)
    experience: Optional[int] = Field(None, ge=0, le=20)
    industry: Optional[int] = Field(None, ge=0, le=15)
    location: Optional[int] = Field(None, ge=0, le=10)
    salary: Optional[int] = Field(None, ge=0, le=10)
    job_type: Optional[int] = Field(None, ge=0, le=5)
    geo_bonus: int = Field(0, ge=0)


class MatchSummary(BaseModel):
    """Summary of a job match."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "match_id": "550e8400-e29b-41d4-a716-446655440000",
                "job_id": "6ba7b810-9dad-11d1-80b4-00c04fd430c8",
                "title": "Software Engineer",
                "company": "MTN Ghana",
                "location": "Accra, Ghana",
                "is_remote": False,
                "match_score": 78,
                "match_label": "excellent",
                "status": "new",
                "matched_at": "2026-02-01T12:00:00"
            }
        }
    )

    match_id: str
    job_id: str
    title: Optional[str]
    company: Optional[str]
    location: Optional[str]
    is_remote: Optional[bool]
    match_score: int = Field(ge=0, le=100)
    match_label: Optional[str]
    status: str
    matched_at: Optional[str]


class JobDetails(BaseModel):
    """Details of a job posting."""
    job_id: str
    title: Optional[str]
    company: Optional[str]
    location: Optional[str]
    job_type: Optional[str]
    salary_range: Optional[str]
    is_remote: Optional[bool]
    visa_sponsorship: Optional[bool]
    description: Optional[str]
    requirements: Optional[str]


class MatchDetail(BaseModel):
    """Detailed match information."""
    match_id: str
    user_id: str
    match_score: int = Field(ge=0, le=100)
    match_label: Optional[str]
    status: str
    sub_scores: SubScores
    matched_skills: List[str] = Field(default_factory=list)
    created_at: Optional[str]
    updated_at: Optional[str]
    matched_at: Optional[str]


class MatchDetailResponse(BaseModel):
    """Response containing full match details."""
    success: bool
    match: MatchDetail
    job: Optional[JobDetails]


class MatchesResponse(BaseModel):
    """Response containing list of matches."""
    success: bool
    count: int
    matches: List[MatchSummary]


class MatchingRunResponse(BaseModel):
    """Batch summary returned after a matching run."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    matches_created: int = Field(alias="matchesCreated")
    matches_updated: int = Field(alias="matchesUpdated")
    failed: int = 0
