"""Roster operations around the team calculator: upgrades, saved-team exclusions and re-scoring."""
import logging
from dataclasses import replace
from typing import Iterable, Sequence

from team_builder.models.champion import Champion
from team_builder.models.roster import EvaluatedMember, RosterMember, SavedTeam
from team_builder.models.team import Team
from team_builder.services.scorers.individual_scorer import CatalogLike
from team_builder.services.team_calculator import TeamCalculator

logger = logging.getLogger(__name__)

UPGRADEABLE_RARITY = "Legendary"
UPGRADED_RARITY = "Mythic"
UPGRADED_STAR_TIER = "Purple 5-Star"


def excluded_ids_from_saved_teams(saved_teams: Iterable[SavedTeam], team_ids: Iterable[str]) -> frozenset[str]:
    """Champion ids of every member of the selected saved teams.

    Unknown team ids are ignored.
    """
    selected = set(team_ids)
    excluded: set[str] = set()
    for team in saved_teams:
        if team.id in selected:
            excluded.update(team.champion_ids)
    return frozenset(excluded)


def upgrade_champion(member: RosterMember, champion: Champion) -> RosterMember:
    """Upgrade a Legendary champion to Mythic.

    The upgrade is permanent: the champion gains its upgrade synergy and its
    star tier is raised to Purple 5-Star. The cached score is cleared so the
    next normalization recomputes it.

    Raises:
        ValueError: If the champion cannot be upgraded
    """
    if member.db_champion_id != champion.id:
        raise ValueError(f"Roster entry {member.db_champion_id} does not belong to {champion.id}")

    rarity = member.base_rarity or champion.base_rarity
    if rarity != UPGRADEABLE_RARITY or not champion.can_upgrade:
        raise ValueError(f"{champion.name} cannot be upgraded")

    synergies = list(member.inherent_synergies if member.inherent_synergies is not None else champion.inherent_synergies)
    if champion.upgrade_synergy and champion.upgrade_synergy not in synergies:
        synergies.append(champion.upgrade_synergy)

    logger.info(f"Upgrading {champion.name} to {UPGRADED_RARITY}")
    return replace(
        member,
        base_rarity=UPGRADED_RARITY,
        star_color_tier=UPGRADED_STAR_TIER,
        inherent_synergies=tuple(synergies),
        individual_score=None,
    )


def recalculate_saved_teams(
    saved_teams: Sequence[SavedTeam],
    updated_member: RosterMember | EvaluatedMember,
    catalog: CatalogLike,
    calculator: TeamCalculator,
) -> list[Team]:
    """Re-evaluate saved teams that contain the updated champion.

    Returns:
        One re-evaluated Team per affected saved team, named after it
    """
    champion_id = updated_member.db_champion_id
    results: list[Team] = []

    for saved in saved_teams:
        if champion_id not in saved.champion_ids:
            continue
        members = [
            updated_member if member.db_champion_id == champion_id else member
            for member in saved.members
        ]
        team = calculator.evaluate_roster_team(members, catalog)
        results.append(replace(team, name=saved.name))

    if results:
        logger.info(f"Re-scored {len(results)} saved team(s) containing {champion_id}")
    return results
