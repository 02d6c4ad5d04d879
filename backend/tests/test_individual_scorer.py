"""Tests for individual score normalization."""
import logging

import pytest

from team_builder.constants import GameConstants
from team_builder.models.roster import EvaluatedMember, GearPiece, LegacyPiece, RosterMember
from team_builder.services.scorers.individual_scorer import (
    calculate_individual_score,
    ensure_individual_scores,
    normalize_roster,
)


def test_star_tier_only():
    member = RosterMember(db_champion_id="alpha", star_color_tier="Gold 3-Star")
    assert calculate_individual_score(member) == pytest.approx(18.0)


def test_full_progression():
    """Star + force + gear (with a synergy piece) + legacy piece."""
    member = RosterMember(
        db_champion_id="alpha",
        star_color_tier="Gold 3-Star",
        force_level=2,
        gear={
            "head": GearPiece(rarity="Epic"),
            "arms": GearPiece(rarity="Legendary", has_synergy=True),
            "legs": GearPiece(rarity="None"),
        },
        legacy_piece=LegacyPiece(id="lp-1", rarity="Mythic", star_color_tier="Blue 1-Star"),
    )
    # 18 + 2*2 + 2 + 3*1.2 + 4 + 6*0.2
    assert calculate_individual_score(member) == pytest.approx(32.8)


def test_unequipped_legacy_piece_scores_zero():
    no_id = RosterMember(
        db_champion_id="alpha",
        legacy_piece=LegacyPiece(id=None, rarity="Mythic", star_color_tier="Red 5-Star"),
    )
    no_rarity = RosterMember(
        db_champion_id="alpha",
        legacy_piece=LegacyPiece(id="lp-1", rarity="None", star_color_tier="Red 5-Star"),
    )
    assert calculate_individual_score(no_id) == 0.0
    assert calculate_individual_score(no_rarity) == 0.0


def test_missing_or_unknown_tier_scores_zero():
    assert calculate_individual_score(RosterMember(db_champion_id="alpha")) == 0.0
    assert calculate_individual_score(RosterMember(db_champion_id="alpha", star_color_tier="Green 9-Star")) == 0.0


def test_custom_constants():
    constants = GameConstants(force_level_weight=10.0)
    member = RosterMember(db_champion_id="alpha", force_level=3)
    assert calculate_individual_score(member, constants) == pytest.approx(30.0)


def test_normalize_joins_catalog_fields(champions):
    members = [RosterMember(db_champion_id="bravo", star_color_tier="White 2-Star")]

    evaluated, warnings = normalize_roster(members, champions)

    assert warnings == []
    assert len(evaluated) == 1
    bravo = evaluated[0]
    assert bravo.name == "Bravo"
    assert bravo.champion_class == "Tank"
    assert bravo.synergies == ("League", "Night")
    assert bravo.individual_score == pytest.approx(2.0)


def test_normalize_drops_missing_catalog_entries(champions):
    members = [
        RosterMember(db_champion_id="alpha", star_color_tier="Unlocked"),
        RosterMember(db_champion_id="ghost", star_color_tier="Red 1-Star"),
    ]

    evaluated, warnings = normalize_roster(members, champions)

    assert [m.db_champion_id for m in evaluated] == ["alpha"]
    assert len(warnings) == 1
    assert warnings[0].kind == "missing_catalog_entry"
    assert warnings[0].db_champion_id == "ghost"


def test_normalize_warns_on_unknown_tier(champions):
    members = [RosterMember(db_champion_id="alpha", star_color_tier="Rainbow 1-Star")]

    evaluated, warnings = normalize_roster(members, champions)

    assert evaluated[0].individual_score == 0.0
    assert [w.kind for w in warnings] == ["unknown_star_tier"]


def test_existing_score_passes_through(champions):
    """Server-denormalized members keep the score they arrive with."""
    members = [RosterMember(db_champion_id="alpha", star_color_tier="Red 5-Star", individual_score=123.0)]

    evaluated = ensure_individual_scores(members, champions)

    assert evaluated[0].individual_score == 123.0


def test_synergy_override_from_roster(champions):
    members = [RosterMember(db_champion_id="delta", inherent_synergies=("League", "Crown"), base_rarity="Mythic")]

    evaluated = ensure_individual_scores(members, champions)

    assert evaluated[0].synergies == ("League", "Crown")
    assert evaluated[0].base_rarity == "Mythic"


def test_idempotent(champions):
    members = [
        RosterMember(db_champion_id="alpha", star_color_tier="Gold 1-Star", force_level=1),
        RosterMember(db_champion_id="charlie", star_color_tier="Blue 4-Star", gear={"head": GearPiece("Rare")}),
        RosterMember(db_champion_id="echo"),
    ]

    once = ensure_individual_scores(members, champions)
    twice = ensure_individual_scores(once, champions)

    assert [m.individual_score for m in twice] == [m.individual_score for m in once]
    assert twice == once


def test_ensure_logs_warnings(champions, caplog):
    members = [RosterMember(db_champion_id="ghost")]

    with caplog.at_level(logging.WARNING):
        evaluated = ensure_individual_scores(members, champions)

    assert evaluated == []
    assert "ghost" in caplog.text


def test_from_dict_accepts_documents():
    member = RosterMember.from_dict({
        "dbChampionId": "alpha",
        "starColorTier": "Purple 1-Star",
        "forceLevel": 2,
        "gear": {"head": {"rarity": "Epic", "hasSynergy": True}},
        "legacyPiece": {"id": "lp", "rarity": "Epic", "starColorTier": "White 5-Star"},
    })

    assert member.force_level == 2
    assert member.gear["head"] == GearPiece(rarity="Epic", has_synergy=True)
    assert member.legacy_piece.star_color_tier == "White 5-Star"
    assert member.individual_score is None


def test_normalize_keeps_first_record_per_champion(champions):
    members = [
        RosterMember(db_champion_id="alpha", star_color_tier="Red 5-Star"),
        RosterMember(db_champion_id="bravo", star_color_tier="White 1-Star"),
        RosterMember(db_champion_id="alpha", star_color_tier="White 1-Star"),
        RosterMember(db_champion_id="alpha", star_color_tier="Red 5-Star"),
    ]

    evaluated, warnings = normalize_roster(members, champions)

    assert [m.db_champion_id for m in evaluated] == ["alpha", "bravo"]
    assert evaluated[0].individual_score == pytest.approx(25.0)
    assert [w.kind for w in warnings] == ["duplicate_roster_entry", "duplicate_roster_entry"]
    assert {w.db_champion_id for w in warnings} == {"alpha"}


def test_normalize_warns_on_unknown_legacy_piece_tier(champions):
    legacy = LegacyPiece(id="lp", rarity="Epic", star_color_tier="Rainbow 1-Star")
    members = [RosterMember(db_champion_id="alpha", star_color_tier="Gold 1-Star", legacy_piece=legacy)]

    evaluated, warnings = normalize_roster(members, champions)

    # Legacy piece rarity still counts, its star tier scores 0
    assert evaluated[0].individual_score == pytest.approx(16.0 + 2.0)
    assert [w.kind for w in warnings] == ["unknown_star_tier"]
    assert "legacy piece" in warnings[0].message


def test_unequipped_legacy_piece_tier_not_reported(champions):
    legacy = LegacyPiece(id=None, rarity="None", star_color_tier="Rainbow 1-Star")
    members = [RosterMember(db_champion_id="alpha", legacy_piece=legacy)]

    _, warnings = normalize_roster(members, champions)

    assert warnings == []


def test_non_string_tier_scores_zero_with_warning(champions):
    member = RosterMember.from_dict({
        "dbChampionId": "alpha",
        "starColorTier": 18,
        "legacyPiece": {"id": "lp", "rarity": "Epic", "starColorTier": 5},
    })

    evaluated, warnings = normalize_roster([member], champions)

    assert evaluated[0].individual_score == pytest.approx(2.0)
    assert [w.kind for w in warnings] == ["unknown_star_tier", "unknown_star_tier"]


def test_already_evaluated_duplicates_are_dropped(champions):
    first = EvaluatedMember(db_champion_id="alpha", name="Alpha", individual_score=40.0)
    second = EvaluatedMember(db_champion_id="alpha", name="Alpha", individual_score=90.0)

    evaluated, warnings = normalize_roster([first, second], champions)

    assert evaluated == [first]
    assert warnings[0].kind == "duplicate_roster_entry"


def test_from_dict_requires_champion_id():
    with pytest.raises(ValueError, match="dbChampionId"):
        RosterMember.from_dict({"starColorTier": "Gold 1-Star"})
    with pytest.raises(ValueError):
        RosterMember.from_dict({"dbChampionId": "", "starColorTier": "Gold 1-Star"})
