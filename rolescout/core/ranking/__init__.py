"""Suggested role ranking module."""

from .ranker import Ranker, ScoredCandidate

__all__ = [
    "Ranker",
    "ScoredCandidate",
]
