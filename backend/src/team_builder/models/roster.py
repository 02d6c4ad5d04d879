"""Roster models: a player's progression records for owned champions."""

from dataclasses import asdict, dataclass, field, replace
from typing import Optional

from team_builder.models.champion import HEALER_CLASS, UNKNOWN_CLASS, pick


@dataclass(frozen=True)
class GearPiece:
    """One equipped gear slot."""

    rarity: str = "None"
    has_synergy: bool = False

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "GearPiece":
        data = data or {}
        return cls(
            rarity=pick(data, "rarity", default="None"),
            has_synergy=bool(pick(data, "hasSynergy", "has_synergy", default=False)),
        )


@dataclass(frozen=True)
class LegacyPiece:
    """An equipped legacy piece with its own star tier."""

    id: Optional[str] = None
    rarity: str = "None"
    star_color_tier: str = "Unlocked"

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "LegacyPiece":
        data = data or {}
        piece_id = pick(data, "id")
        return cls(
            id=str(piece_id) if piece_id is not None else None,
            rarity=pick(data, "rarity", default="None"),
            star_color_tier=pick(data, "starColorTier", "star_color_tier", default="Unlocked"),
        )

    @property
    def equipped(self) -> bool:
        return bool(self.id) and self.rarity != "None"


@dataclass(frozen=True)
class RosterMember:
    """A player's progression record for one owned champion."""

    db_champion_id: str
    star_color_tier: Optional[str] = None
    force_level: int = 0
    gear: dict[str, GearPiece] = field(default_factory=dict)
    legacy_piece: Optional[LegacyPiece] = None
    inherent_synergies: Optional[tuple[str, ...]] = None  # Overrides the catalog after an upgrade
    base_rarity: Optional[str] = None  # Overrides the catalog after an upgrade
    individual_score: Optional[float] = None  # Present on server-denormalized data

    @classmethod
    def from_dict(cls, data: dict) -> "RosterMember":
        """Build a member from a roster document.

        Raises:
            ValueError: If the document has no champion id
        """
        champion_id = pick(data, "dbChampionId", "db_champion_id")
        if champion_id is None or champion_id == "":
            raise ValueError("Roster record has no dbChampionId")
        synergies = pick(data, "inherentSynergies", "inherent_synergies")
        legacy = pick(data, "legacyPiece", "legacy_piece")
        score = pick(data, "individualScore", "individual_score")
        return cls(
            db_champion_id=str(champion_id),
            star_color_tier=pick(data, "starColorTier", "star_color_tier"),
            force_level=int(pick(data, "forceLevel", "force_level", default=0)),
            gear={
                slot: GearPiece.from_dict(piece)
                for slot, piece in (pick(data, "gear", default={}) or {}).items()
            },
            legacy_piece=LegacyPiece.from_dict(legacy) if legacy else None,
            inherent_synergies=tuple(synergies) if synergies is not None else None,
            base_rarity=pick(data, "baseRarity", "base_rarity"),
            individual_score=float(score) if score is not None else None,
        )


@dataclass(frozen=True)
class EvaluatedMember:
    """A roster member joined with its catalog entry and scored."""

    db_champion_id: str
    name: str
    champion_class: str = UNKNOWN_CLASS
    base_rarity: str = "Epic"
    is_healer: bool = False
    synergies: tuple[str, ...] = ()
    star_color_tier: Optional[str] = None
    force_level: int = 0
    gear: dict[str, GearPiece] = field(default_factory=dict)
    legacy_piece: Optional[LegacyPiece] = None
    card_image_url: Optional[str] = None
    individual_score: Optional[float] = None

    @property
    def healer(self) -> bool:
        return self.is_healer or self.champion_class == HEALER_CLASS

    def with_score(self, score: float) -> "EvaluatedMember":
        return replace(self, individual_score=score)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["synergies"] = list(self.synergies)
        data["is_healer"] = self.healer
        return data


@dataclass(frozen=True)
class DataIntegrityWarning:
    """A non-fatal problem found while scoring a roster."""

    kind: str  # "missing_catalog_entry", "unknown_star_tier" or "duplicate_roster_entry"
    db_champion_id: str
    message: str


@dataclass(frozen=True)
class SavedTeam:
    """A team the player saved earlier."""

    id: str
    name: str
    members: tuple[EvaluatedMember, ...] = ()

    @property
    def champion_ids(self) -> frozenset[str]:
        return frozenset(member.db_champion_id for member in self.members)
