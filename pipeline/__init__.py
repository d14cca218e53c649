"""Pipeline execution modules for job matching."""

from .runner import run_matching_pipeline, run_matching_for_user, MatchingPipelineResult

__all__ = ['run_matching_pipeline', 'run_matching_for_user', 'MatchingPipelineResult']
