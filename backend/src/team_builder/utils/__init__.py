"""Utility modules for team_builder."""

from team_builder.utils.star_tiers import (
    NOT_AVAILABLE,
    SCORE_TO_STAR_LEVEL,
    STAR_LEVEL_TO_SCORE,
    STAR_TIERS,
    is_known_tier,
    score_to_tier,
    tier_to_score,
)

__all__ = [
    "NOT_AVAILABLE",
    "SCORE_TO_STAR_LEVEL",
    "STAR_LEVEL_TO_SCORE",
    "STAR_TIERS",
    "is_known_tier",
    "score_to_tier",
    "tier_to_score",
]
