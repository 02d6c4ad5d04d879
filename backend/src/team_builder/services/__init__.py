"""Business logic services."""

from team_builder.services.best_team_search import find_best_team
from team_builder.services.community_average_service import calculate_community_averages
from team_builder.services.roster_service import (
    excluded_ids_from_saved_teams,
    recalculate_saved_teams,
    upgrade_champion,
)
from team_builder.services.team_calculator import TeamCalculator

__all__ = [
    "find_best_team",
    "calculate_community_averages",
    "excluded_ids_from_saved_teams",
    "recalculate_saved_teams",
    "upgrade_champion",
    "TeamCalculator",
]
