"""Candidate collection module."""

from .collector import (
    CandidateCollector,
    CandidatePool,
    ProjectCandidates,
    merge_candidates,
)

__all__ = [
    "CandidateCollector",
    "CandidatePool",
    "ProjectCandidates",
    "merge_candidates",
]
