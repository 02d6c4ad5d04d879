"""Synergy rule models."""

from dataclasses import dataclass
from typing import Literal, Optional

from team_builder.models.champion import pick

BonusType = Literal["percentage", "flat"]


@dataclass(frozen=True)
class SynergyTier:
    """A tier of a tiered synergy, unlocked at a member count."""

    count_required: int
    description: str = ""


@dataclass(frozen=True)
class SynergyRule:
    """A named team bonus granted when enough members share the synergy."""

    name: str
    bonus_type: BonusType = "flat"
    bonus_value: float = 0.0
    min_count: Optional[int] = None  # None means GameConstants.synergy_activation_count
    tiers: tuple[SynergyTier, ...] = ()
    description: str = ""

    def __post_init__(self):
        if self.bonus_type not in ("percentage", "flat"):
            raise ValueError(f"Unknown bonus type for synergy {self.name}: {self.bonus_type}")
        if self.bonus_value < 0:
            raise ValueError(f"Synergy {self.name} has a negative bonus value")
        if self.min_count is not None and self.min_count < 1:
            raise ValueError(f"Synergy {self.name} needs a minimum count of at least 1")

    @property
    def is_tiered(self) -> bool:
        return len(self.tiers) > 0

    def activation_count(self, default: int) -> int:
        """Lowest member count at which the rule grants anything."""
        if self.is_tiered:
            return min(tier.count_required for tier in self.tiers)
        return self.min_count if self.min_count is not None else default

    def applicable_tier(self, member_count: int) -> Optional[SynergyTier]:
        """Highest tier reached by member_count, or None."""
        reached = [tier for tier in self.tiers if member_count >= tier.count_required]
        if not reached:
            return None
        return max(reached, key=lambda tier: tier.count_required)

    @classmethod
    def from_dict(cls, data: dict) -> "SynergyRule":
        """Build a rule from a synergy document."""
        tiers = tuple(
            SynergyTier(
                count_required=int(pick(tier, "countRequired", "count_required", default=0)),
                description=pick(tier, "tierDescription", "description", default=""),
            )
            for tier in pick(data, "tiers", default=[]) or []
        )
        min_count = pick(data, "minCount", "min_count")
        return cls(
            name=data["name"],
            bonus_type=pick(data, "bonusType", "bonus_type", default="flat"),
            bonus_value=float(pick(data, "bonusValue", "bonus_value", default=0.0)),
            min_count=int(min_count) if min_count is not None else None,
            tiers=tiers,
            description=pick(data, "description", default=""),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "bonus_type": self.bonus_type,
            "bonus_value": self.bonus_value,
            "min_count": self.min_count,
            "tiers": [
                {"count_required": tier.count_required, "description": tier.description}
                for tier in self.tiers
            ],
            "description": self.description,
        }
