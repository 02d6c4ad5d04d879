"""Individual scoring components."""
from team_builder.services.scorers.individual_scorer import (
    calculate_individual_score,
    ensure_individual_scores,
    normalize_roster,
)

__all__ = [
    "calculate_individual_score",
    "ensure_individual_scores",
    "normalize_roster",
]
