"""Data models for the Team Builder."""

from team_builder.models.champion import Catalog, Champion
from team_builder.models.roster import (
    DataIntegrityWarning,
    EvaluatedMember,
    GearPiece,
    LegacyPiece,
    RosterMember,
    SavedTeam,
)
from team_builder.models.synergy import SynergyRule, SynergyTier
from team_builder.models.team import (
    ActiveSynergy,
    NoValidTeamFound,
    ScoreBreakdown,
    SearchConstraints,
    Team,
)

__all__ = [
    "Catalog",
    "Champion",
    "DataIntegrityWarning",
    "EvaluatedMember",
    "GearPiece",
    "LegacyPiece",
    "RosterMember",
    "SavedTeam",
    "SynergyRule",
    "SynergyTier",
    "ActiveSynergy",
    "NoValidTeamFound",
    "ScoreBreakdown",
    "SearchConstraints",
    "Team",
]
