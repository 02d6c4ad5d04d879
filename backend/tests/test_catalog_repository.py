"""Tests for catalog loading."""
import json

import pytest

from team_builder.repositories.catalog_repository import CatalogRepository


@pytest.fixture
def knowledge_dir(tmp_path):
    (tmp_path / "champions.json").write_text(json.dumps([
        {"id": "alpha", "name": "Alpha", "class": "Healer", "inherentSynergies": ["League"]},
        {"name": "No Id"},
        {"id": 7, "name": "Seven", "baseRarity": "Mythic"},
    ]))
    (tmp_path / "synergies.json").write_text(json.dumps({"synergies": [
        {"name": "League", "bonusType": "percentage", "bonusValue": 10},
        {"name": "League", "bonusType": "flat", "bonusValue": 99},
        {"name": "Broken", "bonusType": "multiplier", "bonusValue": 2},
        {"name": "Titans", "bonusValue": 8, "tiers": [{"countRequired": 2, "tierDescription": "Pair"}]},
    ]}))
    return tmp_path


def test_loads_champions_and_skips_malformed(knowledge_dir):
    repo = CatalogRepository(knowledge_dir)

    assert [c.id for c in repo.champions] == ["alpha", "7"]
    alpha = repo.get_champion("alpha")
    assert alpha.healer is True
    assert alpha.inherent_synergies == ("League",)
    assert repo.get_champion("7").base_rarity == "Mythic"
    assert repo.get_champion("missing") is None


def test_loads_synergies_in_declaration_order(knowledge_dir):
    repo = CatalogRepository(knowledge_dir)

    names = [rule.name for rule in repo.synergies]

    assert names == ["League", "Titans"]
    assert repo.synergies[0].bonus_type == "percentage"
    assert repo.synergies[1].tiers[0].count_required == 2


def test_missing_files_give_empty_tables(tmp_path):
    repo = CatalogRepository(tmp_path)
    assert repo.champions == []
    assert repo.synergies == []
    assert len(repo.catalog) == 0


def test_invalid_json_gives_empty_table(tmp_path):
    (tmp_path / "champions.json").write_text("{not json")
    repo = CatalogRepository(tmp_path)
    assert repo.champions == []


def test_default_knowledge_dir():
    """The bundled knowledge directory loads."""
    repo = CatalogRepository()
    assert len(repo.champions) > 0
    assert len(repo.synergies) > 0
