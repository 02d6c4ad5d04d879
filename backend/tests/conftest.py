"""Shared fixtures for team builder tests."""
import pytest

from team_builder.models.champion import Champion
from team_builder.models.roster import EvaluatedMember


@pytest.fixture
def make_member():
    """Factory for scored team members."""

    def _make(
        champion_id: str,
        score: float | None = 10.0,
        synergies: tuple[str, ...] = (),
        champion_class: str = "Attacker",
        is_healer: bool = False,
        star_color_tier: str | None = None,
    ) -> EvaluatedMember:
        return EvaluatedMember(
            db_champion_id=champion_id,
            name=champion_id.title(),
            champion_class=champion_class,
            is_healer=is_healer,
            synergies=tuple(synergies),
            star_color_tier=star_color_tier,
            individual_score=score,
        )

    return _make


@pytest.fixture
def champions():
    """Small synthetic catalog."""
    return [
        Champion(id="alpha", name="Alpha", champion_class="Attacker", inherent_synergies=("League",)),
        Champion(id="bravo", name="Bravo", champion_class="Tank", inherent_synergies=("League", "Night")),
        Champion(id="charlie", name="Charlie", champion_class="Healer", inherent_synergies=("Night",)),
        Champion(
            id="delta",
            name="Delta",
            champion_class="Support",
            base_rarity="Legendary",
            inherent_synergies=("League",),
            can_upgrade=True,
            upgrade_synergy="Crown",
        ),
        Champion(id="echo", name="Echo", champion_class="Attacker", inherent_synergies=()),
    ]


@pytest.fixture
def anyio_backend():
    """Run anyio-marked tests on asyncio (the project does not depend on trio)."""
    return "asyncio"
