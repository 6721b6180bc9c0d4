"""Role suggestion entry point."""

from .service import RoleSuggestionService, score_pool

__all__ = [
    "RoleSuggestionService",
    "score_pool",
]
