"""Star tier progression table.

Star tiers are the champion progression ranks: "Unlocked" followed by five
colours (White, Blue, Purple, Gold, Red) of five stars each. Every tier maps to
an integer score from 0 to 25, and the mapping must round-trip:

    >>> score_to_tier(tier_to_score("Gold 3-Star"))
    'Gold 3-Star'
"""

from typing import Optional

UNLOCKED = "Unlocked"
NOT_AVAILABLE = "N/A"

STAR_COLORS = ("White", "Blue", "Purple", "Gold", "Red")
STARS_PER_COLOR = 5

# Ordered from weakest to strongest
STAR_TIERS: tuple[str, ...] = (UNLOCKED,) + tuple(
    f"{color} {star}-Star"
    for color in STAR_COLORS
    for star in range(1, STARS_PER_COLOR + 1)
)

STAR_LEVEL_TO_SCORE: dict[str, int] = {tier: score for score, tier in enumerate(STAR_TIERS)}

SCORE_TO_STAR_LEVEL: dict[int, str] = {score: tier for tier, score in STAR_LEVEL_TO_SCORE.items()}

MAX_STAR_SCORE = len(STAR_TIERS) - 1


def is_known_tier(tier: Optional[str]) -> bool:
    """Check if a tier name is in the star tier table."""
    return tier in STAR_LEVEL_TO_SCORE


def tier_to_score(tier: Optional[str]) -> Optional[int]:
    """Get the integer score for a star tier.

    Returns:
        Score 0-25, or None when the tier is missing or not recognized
    """
    if not isinstance(tier, str):
        return None
    return STAR_LEVEL_TO_SCORE.get(tier.strip())


def score_to_tier(score: Optional[float]) -> str:
    """Map a score back to its star tier name.

    Only exact integer scores have a tier; anything else (fractional averages,
    out-of-range values, None) maps to "N/A".
    """
    if score is None or isinstance(score, bool):
        return NOT_AVAILABLE
    if isinstance(score, float):
        if not score.is_integer():
            return NOT_AVAILABLE
        score = int(score)
    return SCORE_TO_STAR_LEVEL.get(score, NOT_AVAILABLE)

