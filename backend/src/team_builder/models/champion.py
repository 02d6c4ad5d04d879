"""Champion catalog models."""

from dataclasses import dataclass, field
from typing import Any, Optional

HEALER_CLASS = "Healer"
UNKNOWN_CLASS = "N/A"


def pick(data: dict, *keys: str, default: Any = None) -> Any:
    """Return the first present key from a document (accepts camelCase or snake_case)."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return default


@dataclass(frozen=True)
class Champion:
    """A catalog entry. Reference data, never mutated by the engine."""

    id: str
    name: str
    champion_class: str = UNKNOWN_CLASS  # Attacker, Support, Tank, Healer, ...
    base_rarity: str = "Epic"  # Epic, Legendary, Mythic, Limited Mythic
    inherent_synergies: tuple[str, ...] = ()
    is_healer: bool = False
    card_image_url: Optional[str] = None
    community_average_level: Optional[str] = None  # Display only
    can_upgrade: bool = False
    upgrade_synergy: Optional[str] = None

    @property
    def healer(self) -> bool:
        return self.is_healer or self.champion_class == HEALER_CLASS

    @classmethod
    def from_dict(cls, data: dict) -> "Champion":
        """Build a champion from a catalog document."""
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            champion_class=pick(data, "class", "champion_class", default=UNKNOWN_CLASS),
            base_rarity=pick(data, "baseRarity", "base_rarity", default="Epic"),
            inherent_synergies=tuple(pick(data, "inherentSynergies", "inherent_synergies", default=[])),
            is_healer=bool(pick(data, "isHealer", "is_healer", default=False)),
            card_image_url=pick(data, "cardImageUrl", "card_image_url"),
            community_average_level=pick(data, "communityAverageLevel", "community_average_level"),
            can_upgrade=bool(pick(data, "canUpgrade", "can_upgrade", default=False)),
            upgrade_synergy=pick(data, "upgradeSynergy", "upgrade_synergy"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "class": self.champion_class,
            "base_rarity": self.base_rarity,
            "inherent_synergies": list(self.inherent_synergies),
            "is_healer": self.healer,
            "card_image_url": self.card_image_url,
            "community_average_level": self.community_average_level,
            "can_upgrade": self.can_upgrade,
            "upgrade_synergy": self.upgrade_synergy,
        }


@dataclass(frozen=True)
class Catalog:
    """Champion lookup table keyed by id."""

    champions: dict[str, Champion] = field(default_factory=dict)

    @classmethod
    def from_champions(cls, champions: list[Champion]) -> "Catalog":
        return cls(champions={champion.id: champion for champion in champions})

    def get(self, champion_id: str) -> Optional[Champion]:
        return self.champions.get(champion_id)

    def __contains__(self, champion_id: object) -> bool:
        return champion_id in self.champions

    def __len__(self) -> int:
        return len(self.champions)
