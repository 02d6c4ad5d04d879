"""Evaluated team and best-team search models."""

from dataclasses import asdict, dataclass, field
from typing import Optional

from team_builder.models.roster import EvaluatedMember


@dataclass(frozen=True)
class ActiveSynergy:
    """A synergy rule that fired for a team."""

    name: str
    applied_at_member_count: int
    calculated_bonus: float
    bonus_type: str
    bonus_value: float
    description: str = ""


@dataclass(frozen=True)
class ScoreBreakdown:
    """How a team's total score was built up."""

    base: float
    percentage_synergy_bonus: float = 0.0
    flat_synergy_bonus: float = 0.0
    synergy_depth_bonus: float = 0.0
    subtotal_after_synergies: float = 0.0
    class_diversity_bonus: float = 0.0


@dataclass(frozen=True)
class Team:
    """Result of evaluating exactly one team of members."""

    members: tuple[EvaluatedMember, ...]
    total_score: float
    score_breakdown: ScoreBreakdown
    active_synergies: tuple[ActiveSynergy, ...] = ()
    class_diversity_bonus_applied: bool = False
    unique_classes_count: int = 0
    name: Optional[str] = None  # Assigned by the caller, never by the calculator

    @property
    def champion_ids(self) -> tuple[str, ...]:
        return tuple(member.db_champion_id for member in self.members)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON response."""
        return {
            "name": self.name,
            "members": [member.to_dict() for member in self.members],
            "total_score": self.total_score,
            "score_breakdown": asdict(self.score_breakdown),
            "active_synergies": [asdict(synergy) for synergy in self.active_synergies],
            "class_diversity_bonus_applied": self.class_diversity_bonus_applied,
            "unique_classes_count": self.unique_classes_count,
        }


@dataclass(frozen=True)
class SearchConstraints:
    """Constraints for the best-team search."""

    require_healer: bool = False
    excluded_champion_ids: frozenset[str] = field(default_factory=frozenset)
    required_synergies: frozenset[str] = field(default_factory=frozenset)  # Empty means no filter


@dataclass(frozen=True)
class NoValidTeamFound:
    """Typed empty result of a best-team search."""

    reason: str  # "insufficient_members", "no_healer", "no_valid_combination"
    eligible_count: int = 0

    def __bool__(self) -> bool:
        return False
