"""Community average star level per champion across all player rosters."""
import logging
from collections import defaultdict
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from team_builder.models.roster import RosterMember
from team_builder.utils.star_tiers import score_to_tier, tier_to_score

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def calculate_community_averages(rosters: Iterable[Iterable[RosterMember]]) -> dict[str, str]:
    """Average star tier of each champion over every roster that owns it.

    Unlocked, missing and unknown tiers are left out of the average. The
    rounded average maps back to a tier name, or "N/A" when it has none.

    Returns:
        Mapping of champion id to average tier name
    """
    totals: dict[str, int] = defaultdict(int)
    counts: dict[str, int] = defaultdict(int)

    for roster in rosters:
        for member in roster:
            score = tier_to_score(member.star_color_tier)
            if not member.db_champion_id or score is None or score <= 0:
                continue
            totals[member.db_champion_id] += score
            counts[member.db_champion_id] += 1

    logger.info(f"Aggregated star levels for {len(counts)} champions")

    return {
        champion_id: score_to_tier(_round_half_up(totals[champion_id] / count))
        for champion_id, count in counts.items()
    }
