"""Game balance constants used by the scoring engine.

The constants are plain configuration: the calculator receives them in its
constructor, and a JSON file can override any subset of keys so balance changes
do not need code changes.
"""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from team_builder.utils.star_tiers import STAR_LEVEL_TO_SCORE, STAR_TIERS

GEAR_SLOTS = ("head", "arms", "legs", "chest", "waist")

STANDARD_GEAR_RARITIES = ["None", "Uncommon", "Rare", "Epic", "Legendary", "Mythic", "Mythic Enhanced"]

LEGACY_PIECE_RARITIES = ["None", "Epic", "Legendary", "Mythic", "Mythic+"]

CHAMPION_RARITIES = ["Epic", "Legendary", "Mythic", "Limited Mythic"]


class GameConstants(BaseModel):
    """Versioned balance table for individual and team scoring."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    version: str = "1"

    # Individual score
    star_tier_scores: dict[str, float] = Field(default_factory=lambda: dict(STAR_LEVEL_TO_SCORE))
    force_level_weight: float = 2.0
    gear_rarity_scores: dict[str, float] = Field(
        default_factory=lambda: {
            "None": 0.0,
            "Uncommon": 0.5,
            "Rare": 1.0,
            "Epic": 2.0,
            "Legendary": 3.0,
            "Mythic": 4.0,
            "Mythic Enhanced": 5.0,
        }
    )
    gear_slot_weights: dict[str, float] = Field(
        default_factory=lambda: {slot: 1.0 for slot in GEAR_SLOTS}
    )
    synergy_gear_multiplier: float = 1.2  # Gear flagged as synergy gear is worth 20% more
    legacy_piece_rarity_scores: dict[str, float] = Field(
        default_factory=lambda: {
            "None": 0.0,
            "Epic": 2.0,
            "Legendary": 3.0,
            "Mythic": 4.0,
            "Mythic+": 5.0,
        }
    )
    legacy_piece_weight: float = 1.0
    legacy_piece_star_weight: float = 0.2

    # Team score
    synergy_activation_count: int = 3
    synergy_depth_threshold: int = 2
    synergy_depth_bonus: float = 10.0
    class_diversity_threshold: int = 4
    class_diversity_multiplier: float = 1.15
    team_size: int = 5

    # Best-team search
    max_search_combinations: int = 400_000

    @field_validator(
        "force_level_weight",
        "synergy_gear_multiplier",
        "legacy_piece_weight",
        "legacy_piece_star_weight",
        "synergy_depth_bonus",
    )
    @classmethod
    def _non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("must be non-negative")
        return value

    @field_validator("star_tier_scores", "gear_rarity_scores", "gear_slot_weights", "legacy_piece_rarity_scores")
    @classmethod
    def _non_negative_table(cls, table: dict[str, float]) -> dict[str, float]:
        negative = [key for key, value in table.items() if value < 0]
        if negative:
            raise ValueError(f"negative values for {', '.join(negative)}")
        return table

    @field_validator("star_tier_scores")
    @classmethod
    def _complete_and_ordered_tiers(cls, table: dict[str, float]) -> dict[str, float]:
        missing = [tier for tier in STAR_TIERS if tier not in table]
        if missing:
            raise ValueError(f"missing star tiers: {', '.join(missing)}")
        unknown = [tier for tier in table if tier not in STAR_LEVEL_TO_SCORE]
        if unknown:
            raise ValueError(f"unknown star tiers: {', '.join(unknown)}")
        for lower, higher in zip(STAR_TIERS, STAR_TIERS[1:]):
            if table[higher] < table[lower]:
                raise ValueError(f"{higher} scores below {lower}")
        return table

    @field_validator("class_diversity_multiplier")
    @classmethod
    def _multiplier_at_least_one(cls, value: float) -> float:
        if value < 1.0:
            raise ValueError("class diversity multiplier must be >= 1.0")
        return value

    @field_validator("synergy_activation_count", "synergy_depth_threshold", "class_diversity_threshold", "team_size", "max_search_combinations")
    @classmethod
    def _positive_int(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be at least 1")
        return value


GAME_CONSTANTS = GameConstants()


def load_game_constants(path: Path) -> GameConstants:
    """Load a constants override file.

    Keys missing from the file keep their defaults.
    """
    with open(path) as f:
        overrides = json.load(f)
    return GameConstants.model_validate(overrides)
