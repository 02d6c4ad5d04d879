"""Team scoring: base power, synergy bonuses, synergy depth and class diversity."""
import logging
from collections import Counter
from typing import Iterable, Optional, Sequence

from team_builder.constants import GAME_CONSTANTS, GameConstants
from team_builder.errors import DuplicateMemberError, InvalidTeamSizeError
from team_builder.models.champion import UNKNOWN_CLASS
from team_builder.models.roster import EvaluatedMember, RosterMember
from team_builder.models.synergy import SynergyRule
from team_builder.models.team import ActiveSynergy, ScoreBreakdown, Team
from team_builder.services.scorers.individual_scorer import CatalogLike, ensure_individual_scores

logger = logging.getLogger(__name__)


class TeamCalculator:
    """Evaluates teams against a synergy rule set.

    Holds only the rule set and constants; every call is a pure function of
    its arguments, so one instance can be shared across requests.
    """

    def __init__(
        self,
        synergy_rules: Iterable[SynergyRule],
        game_constants: GameConstants = GAME_CONSTANTS,
    ):
        self.synergy_rules: tuple[SynergyRule, ...] = tuple(synergy_rules)
        self.constants = game_constants

        seen: set[str] = set()
        for rule in self.synergy_rules:
            if rule.name in seen:
                raise ValueError(f"Duplicate synergy rule: {rule.name}")
            seen.add(rule.name)

    @property
    def team_size(self) -> int:
        return self.constants.team_size

    @staticmethod
    def count_synergies(members: Sequence[EvaluatedMember]) -> Counter:
        """Number of members carrying each synergy (a member counts once per synergy)."""
        counts: Counter = Counter()
        for member in members:
            counts.update(set(member.synergies))
        return counts

    @staticmethod
    def unique_classes(members: Sequence[EvaluatedMember]) -> set[str]:
        return {
            member.champion_class
            for member in members
            if member.champion_class and member.champion_class != UNKNOWN_CLASS
        }

    def _rule_bonus(self, rule: SynergyRule, member_count: int, base: float) -> Optional[float]:
        """Bonus granted by a rule, or None when the rule is inactive."""
        if member_count == 0:
            return None

        if rule.is_tiered:
            tier = rule.applicable_tier(member_count)
            if tier is None:
                return None
            return rule.bonus_value * tier.count_required

        if member_count < rule.activation_count(self.constants.synergy_activation_count):
            return None
        if rule.bonus_type == "percentage":
            return base * (rule.bonus_value / 100)
        return rule.bonus_value

    def evaluate_team(self, members: Sequence[EvaluatedMember]) -> Team:
        """Score a team of exactly ``team_size`` scored members.

        Raises:
            InvalidTeamSizeError: If the member count is wrong
            DuplicateMemberError: If a champion appears more than once
        """
        members = tuple(members)
        if len(members) != self.team_size:
            raise InvalidTeamSizeError(len(members), self.team_size)
        repeated = [
            champion_id
            for champion_id, count in Counter(member.db_champion_id for member in members).items()
            if count > 1
        ]
        if repeated:
            raise DuplicateMemberError(repeated)

        base = sum(member.individual_score or 0.0 for member in members)
        counts = self.count_synergies(members)

        percentage_bonus = 0.0
        flat_bonus = 0.0
        active: list[ActiveSynergy] = []

        # Declaration order keeps the breakdown stable
        for rule in self.synergy_rules:
            member_count = counts.get(rule.name, 0)
            bonus = self._rule_bonus(rule, member_count, base)
            if bonus is None:
                continue

            if rule.bonus_type == "percentage" and not rule.is_tiered:
                percentage_bonus += bonus
            else:
                flat_bonus += bonus

            tier = rule.applicable_tier(member_count) if rule.is_tiered else None
            active.append(ActiveSynergy(
                name=rule.name,
                applied_at_member_count=member_count,
                calculated_bonus=bonus,
                bonus_type=rule.bonus_type,
                bonus_value=rule.bonus_value,
                description=(tier.description if tier and tier.description else rule.description),
            ))

        depth_bonus = 0.0
        if len(active) >= self.constants.synergy_depth_threshold:
            depth_bonus = self.constants.synergy_depth_bonus

        subtotal = base + percentage_bonus + flat_bonus + depth_bonus

        classes = self.unique_classes(members)
        diversity_applied = len(classes) >= self.constants.class_diversity_threshold
        diversity_bonus = 0.0
        if diversity_applied:
            diversity_bonus = subtotal * (self.constants.class_diversity_multiplier - 1)

        return Team(
            members=members,
            total_score=subtotal + diversity_bonus,
            score_breakdown=ScoreBreakdown(
                base=base,
                percentage_synergy_bonus=percentage_bonus,
                flat_synergy_bonus=flat_bonus,
                synergy_depth_bonus=depth_bonus,
                subtotal_after_synergies=subtotal,
                class_diversity_bonus=diversity_bonus,
            ),
            active_synergies=tuple(active),
            class_diversity_bonus_applied=diversity_applied,
            unique_classes_count=len(classes),
        )

    def evaluate_roster_team(
        self,
        members: Sequence[RosterMember | EvaluatedMember],
        catalog: CatalogLike,
    ) -> Team:
        """Score raw roster records (e.g. a saved or shared team) as a team."""
        evaluated = ensure_individual_scores(members, catalog, self.constants)
        return self.evaluate_team(evaluated)

    def swap_member(
        self,
        members: Sequence[EvaluatedMember],
        index: int,
        replacement: EvaluatedMember,
    ) -> Team:
        """Replace one team member and re-evaluate.

        Raises:
            IndexError: If index is outside the team
            DuplicateMemberError: If the replacement champion is already on the team
        """
        if not 0 <= index < len(members):
            raise IndexError(f"No team member at position {index}")

        others = [member for i, member in enumerate(members) if i != index]
        if any(member.db_champion_id == replacement.db_champion_id for member in others):
            raise DuplicateMemberError([replacement.db_champion_id])

        swapped = list(members)
        logger.debug(f"Swapping {swapped[index].name} for {replacement.name}")
        swapped[index] = replacement
        return self.evaluate_team(swapped)
