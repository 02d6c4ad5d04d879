"""Individual champion power score from progression state."""
import logging
from typing import Iterable, Optional, Union

from team_builder.constants import GAME_CONSTANTS, GameConstants
from team_builder.models.champion import Catalog, Champion
from team_builder.models.roster import (
    DataIntegrityWarning,
    EvaluatedMember,
    GearPiece,
    LegacyPiece,
    RosterMember,
)

logger = logging.getLogger(__name__)

Member = Union[RosterMember, EvaluatedMember]
CatalogLike = Union[Catalog, Iterable[Champion]]


def _as_catalog(catalog: CatalogLike) -> Catalog:
    if isinstance(catalog, Catalog):
        return catalog
    return Catalog.from_champions(list(catalog))


def star_score(tier: Optional[str], constants: GameConstants = GAME_CONSTANTS) -> float:
    """Score for a star tier; missing, unknown or non-string tiers score 0."""
    if not tier or not isinstance(tier, str):
        return 0.0
    return constants.star_tier_scores.get(tier.strip(), 0.0)


def gear_score(gear: dict[str, GearPiece], constants: GameConstants = GAME_CONSTANTS) -> float:
    """Sum of per-slot gear contributions."""
    total = 0.0
    for slot, piece in gear.items():
        if piece is None:
            continue
        weight = constants.gear_slot_weights.get(slot, 0.0)
        value = weight * constants.gear_rarity_scores.get(piece.rarity, 0.0)
        if piece.has_synergy:
            value *= constants.synergy_gear_multiplier
        total += value
    return total


def legacy_piece_score(piece: Optional[LegacyPiece], constants: GameConstants = GAME_CONSTANTS) -> float:
    """Contribution of an equipped legacy piece (0 when none is equipped)."""
    if piece is None or not piece.equipped:
        return 0.0
    rarity_score = constants.legacy_piece_rarity_scores.get(piece.rarity, 0.0)
    return (
        constants.legacy_piece_weight * rarity_score
        + constants.legacy_piece_star_weight * star_score(piece.star_color_tier, constants)
    )


def calculate_individual_score(member: Member, constants: GameConstants = GAME_CONSTANTS) -> float:
    """Compute a member's power score.

    score = star score + force level * weight + gear slots + legacy piece
    """
    return (
        star_score(member.star_color_tier, constants)
        + max(member.force_level or 0, 0) * constants.force_level_weight
        + gear_score(member.gear or {}, constants)
        + legacy_piece_score(member.legacy_piece, constants)
    )


def _is_unknown_tier(tier: object, constants: GameConstants) -> bool:
    if tier is None or tier == "":
        return False
    return not isinstance(tier, str) or tier.strip() not in constants.star_tier_scores


def _join_with_catalog(member: RosterMember, champion: Champion) -> EvaluatedMember:
    synergies = member.inherent_synergies
    if synergies is None:
        synergies = champion.inherent_synergies
    return EvaluatedMember(
        db_champion_id=member.db_champion_id,
        name=champion.name,
        champion_class=champion.champion_class,
        base_rarity=member.base_rarity or champion.base_rarity,
        is_healer=champion.healer,
        synergies=tuple(synergies),
        star_color_tier=member.star_color_tier,
        force_level=member.force_level,
        gear=dict(member.gear),
        legacy_piece=member.legacy_piece,
        card_image_url=champion.card_image_url,
        individual_score=member.individual_score,
    )


def normalize_roster(
    members: Iterable[Member],
    catalog: CatalogLike,
    constants: GameConstants = GAME_CONSTANTS,
) -> tuple[list[EvaluatedMember], list[DataIntegrityWarning]]:
    """Join members with the catalog and fill in missing individual scores.

    Members that already carry a score pass through with that score. Members
    whose champion is not in the catalog are dropped and reported. A champion
    listed more than once keeps its first record; later ones are dropped and
    reported.

    Returns:
        (evaluated members in input order, data-integrity warnings)
    """
    lookup = _as_catalog(catalog)
    evaluated: list[EvaluatedMember] = []
    warnings: list[DataIntegrityWarning] = []
    seen: set[str] = set()

    for member in members:
        if member.db_champion_id in seen:
            warnings.append(DataIntegrityWarning(
                kind="duplicate_roster_entry",
                db_champion_id=member.db_champion_id,
                message=f"Champion {member.db_champion_id} appears more than once, keeping the first record",
            ))
            continue
        seen.add(member.db_champion_id)

        champion = lookup.get(member.db_champion_id)
        if champion is None:
            warnings.append(DataIntegrityWarning(
                kind="missing_catalog_entry",
                db_champion_id=member.db_champion_id,
                message=f"Champion {member.db_champion_id} is not in the catalog",
            ))
            continue

        if _is_unknown_tier(member.star_color_tier, constants):
            warnings.append(DataIntegrityWarning(
                kind="unknown_star_tier",
                db_champion_id=member.db_champion_id,
                message=f"Unknown star tier {member.star_color_tier!r} for {champion.name}, scored as 0",
            ))
        legacy = member.legacy_piece
        if legacy is not None and legacy.equipped and _is_unknown_tier(legacy.star_color_tier, constants):
            warnings.append(DataIntegrityWarning(
                kind="unknown_star_tier",
                db_champion_id=member.db_champion_id,
                message=(
                    f"Unknown legacy piece star tier {legacy.star_color_tier!r} "
                    f"for {champion.name}, scored as 0"
                ),
            ))

        if isinstance(member, EvaluatedMember):
            result = member
        else:
            result = _join_with_catalog(member, champion)

        if result.individual_score is None:
            result = result.with_score(calculate_individual_score(result, constants))
        evaluated.append(result)

    return evaluated, warnings


def ensure_individual_scores(
    members: Iterable[Member],
    catalog: CatalogLike,
    constants: GameConstants = GAME_CONSTANTS,
) -> list[EvaluatedMember]:
    """Return scored members, logging any data-integrity warnings."""
    evaluated, warnings = normalize_roster(members, catalog, constants)
    for warning in warnings:
        logger.warning(f"{warning.kind}: {warning.message}")
    return evaluated
