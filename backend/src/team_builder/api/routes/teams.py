"""REST endpoints for team evaluation and best-team search."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from team_builder.errors import DuplicateMemberError, InvalidTeamSizeError, SearchLimitExceededError
from team_builder.models.roster import GearPiece, LegacyPiece, RosterMember
from team_builder.models.team import NoValidTeamFound, SearchConstraints
from team_builder.repositories.catalog_repository import CatalogRepository
from team_builder.services.best_team_search import find_best_team
from team_builder.services.community_average_service import calculate_community_averages
from team_builder.services.scorers.individual_scorer import normalize_roster
from team_builder.services.team_calculator import TeamCalculator

router = APIRouter(prefix="/api/teams", tags=["teams"])


def _get_services(request: Request) -> tuple[CatalogRepository, TeamCalculator]:
    """Get catalog and calculator from app state."""
    return request.app.state.catalog_repository, request.app.state.calculator


class GearPieceIn(BaseModel):
    rarity: str = "None"
    has_synergy: bool = False


class LegacyPieceIn(BaseModel):
    id: Optional[str] = None
    rarity: str = "None"
    star_color_tier: str = "Unlocked"


class RosterMemberIn(BaseModel):
    db_champion_id: str
    star_color_tier: Optional[str] = None
    force_level: int = Field(default=0, ge=0)
    gear: dict[str, GearPieceIn] = Field(default_factory=dict)
    legacy_piece: Optional[LegacyPieceIn] = None
    inherent_synergies: Optional[list[str]] = None
    base_rarity: Optional[str] = None
    individual_score: Optional[float] = Field(default=None, ge=0)

    def to_domain(self) -> RosterMember:
        return RosterMember(
            db_champion_id=self.db_champion_id,
            star_color_tier=self.star_color_tier,
            force_level=self.force_level,
            gear={
                slot: GearPiece(rarity=piece.rarity, has_synergy=piece.has_synergy)
                for slot, piece in self.gear.items()
            },
            legacy_piece=(
                LegacyPiece(**self.legacy_piece.model_dump()) if self.legacy_piece else None
            ),
            inherent_synergies=(
                tuple(self.inherent_synergies) if self.inherent_synergies is not None else None
            ),
            base_rarity=self.base_rarity,
            individual_score=self.individual_score,
        )


class EvaluateTeamRequest(BaseModel):
    members: list[RosterMemberIn]


class BestTeamRequest(BaseModel):
    roster: list[RosterMemberIn]
    require_healer: bool = False
    excluded_champion_ids: list[str] = Field(default_factory=list)
    required_synergies: list[str] = Field(default_factory=list)


class SwapRequest(BaseModel):
    members: list[RosterMemberIn]
    index: int
    replacement: RosterMemberIn


class StarLevelIn(BaseModel):
    db_champion_id: str
    star_color_tier: Optional[str] = None


class CommunityAveragesRequest(BaseModel):
    rosters: list[list[StarLevelIn]]


def _warnings_payload(warnings) -> list[dict]:
    return [
        {"kind": w.kind, "db_champion_id": w.db_champion_id, "message": w.message}
        for w in warnings
    ]


@router.get("/catalog/champions")
async def list_champions(request: Request):
    """List catalog champions."""
    repo, _ = _get_services(request)
    return {"champions": [champion.to_dict() for champion in repo.champions]}


@router.get("/catalog/synergies")
async def list_synergies(request: Request):
    """List synergy rules in declaration order."""
    _, calculator = _get_services(request)
    return {"synergies": [rule.to_dict() for rule in calculator.synergy_rules]}


@router.post("/evaluate")
async def evaluate_team(request: Request, body: EvaluateTeamRequest):
    """Score a team of roster members."""
    repo, calculator = _get_services(request)
    members, warnings = normalize_roster(
        [m.to_domain() for m in body.members], repo.catalog, calculator.constants
    )
    try:
        team = calculator.evaluate_team(members)
    except (InvalidTeamSizeError, DuplicateMemberError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"team": team.to_dict(), "warnings": _warnings_payload(warnings)}


@router.post("/best")
def best_team(request: Request, body: BestTeamRequest):
    """Find the highest scoring team in a roster.

    Declared sync so the CPU-bound search runs in the threadpool.
    """
    repo, calculator = _get_services(request)
    roster, warnings = normalize_roster(
        [m.to_domain() for m in body.roster], repo.catalog, calculator.constants
    )
    constraints = SearchConstraints(
        require_healer=body.require_healer,
        excluded_champion_ids=frozenset(body.excluded_champion_ids),
        required_synergies=frozenset(body.required_synergies),
    )
    try:
        result = find_best_team(roster, constraints, calculator)
    except SearchLimitExceededError as e:
        raise HTTPException(status_code=422, detail=str(e))

    if isinstance(result, NoValidTeamFound):
        return {
            "team": None,
            "reason": result.reason,
            "eligible_count": result.eligible_count,
            "warnings": _warnings_payload(warnings),
        }
    return {"team": result.to_dict(), "reason": None, "warnings": _warnings_payload(warnings)}


@router.post("/swap")
async def swap_member(request: Request, body: SwapRequest):
    """Swap one member of a team and re-score it."""
    repo, calculator = _get_services(request)
    members, warnings = normalize_roster(
        [m.to_domain() for m in body.members], repo.catalog, calculator.constants
    )
    replacements, replacement_warnings = normalize_roster(
        [body.replacement.to_domain()], repo.catalog, calculator.constants
    )
    warnings += replacement_warnings
    if len(members) != len(body.members) or not replacements:
        raise HTTPException(
            status_code=422, detail="Team contains champions missing from the catalog or listed twice"
        )

    replacement = replacements[0]
    try:
        team = calculator.swap_member(members, body.index, replacement)
    except IndexError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ValueError as e:
        # InvalidTeamSizeError and DuplicateMemberError are ValueErrors too
        raise HTTPException(status_code=422, detail=str(e))
    return {"team": team.to_dict(), "warnings": _warnings_payload(warnings)}


@router.post("/community-averages")
async def community_averages(body: CommunityAveragesRequest):
    """Average star level per champion across rosters."""
    rosters = [
        [RosterMember(db_champion_id=m.db_champion_id, star_color_tier=m.star_color_tier) for m in roster]
        for roster in body.rosters
    ]
    return {"averages": calculate_community_averages(rosters)}
