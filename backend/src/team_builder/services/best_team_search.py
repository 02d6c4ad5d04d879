"""Exhaustive search for the highest scoring team in a roster.

Rosters hold tens of champions, so C(n, 5) stays in the low hundreds of
thousands and every subset can be scored. The search is capped by
``GameConstants.max_search_combinations``; larger rosters raise
``SearchLimitExceededError`` instead of blocking the caller.
"""
import logging
import math
from itertools import combinations
from typing import Callable, Optional, Sequence, Union

from team_builder.errors import SearchCancelledError, SearchLimitExceededError
from team_builder.models.roster import EvaluatedMember
from team_builder.models.team import NoValidTeamFound, SearchConstraints, Team
from team_builder.services.team_calculator import TeamCalculator

logger = logging.getLogger(__name__)

# Poll cancellation and report progress every N candidate subsets
CANCEL_CHECK_INTERVAL = 2048

ProgressCallback = Callable[[int, int], None]
CancelCheck = Callable[[], bool]

SearchResult = Union[Team, NoValidTeamFound]


def filter_roster(
    roster: Sequence[EvaluatedMember],
    constraints: SearchConstraints,
) -> list[EvaluatedMember]:
    """Apply exclusions and the synergy filter, in a fixed enumeration order.

    A champion listed more than once keeps only its first record.
    """
    seen: set[str] = set()
    eligible = []
    for member in roster:
        if member.db_champion_id in seen or member.db_champion_id in constraints.excluded_champion_ids:
            continue
        seen.add(member.db_champion_id)
        eligible.append(member)
    if constraints.required_synergies:
        eligible = [
            member for member in eligible
            if constraints.required_synergies.intersection(member.synergies)
        ]
    return sorted(eligible, key=lambda member: (member.db_champion_id, member.name))


def count_candidates(eligible: Sequence[EvaluatedMember], team_size: int, require_healer: bool) -> int:
    """Number of subsets the search will score."""
    total = math.comb(len(eligible), team_size)
    if require_healer:
        non_healers = sum(1 for member in eligible if not member.healer)
        total -= math.comb(non_healers, team_size)
    return total


def find_best_team(
    roster: Sequence[EvaluatedMember],
    constraints: SearchConstraints,
    calculator: TeamCalculator,
    *,
    progress: Optional[ProgressCallback] = None,
    should_cancel: Optional[CancelCheck] = None,
    max_combinations: Optional[int] = None,
) -> SearchResult:
    """Find the team with the highest total score.

    Ties keep the first subset in lexicographic order over the roster sorted
    by champion id. The roster is never modified.

    Args:
        roster: Scored roster members
        constraints: Healer requirement, excluded champions, synergy filter
        calculator: Team scorer
        progress: Called with (evaluated, total) while searching
        should_cancel: Polled while searching; returning True aborts
        max_combinations: Enumeration cap, defaults to the calculator's constants

    Returns:
        The best Team, or NoValidTeamFound when no subset satisfies the constraints

    Raises:
        SearchLimitExceededError: If the roster has too many candidate subsets
        SearchCancelledError: If should_cancel returned True
    """
    team_size = calculator.team_size
    eligible = filter_roster(roster, constraints)

    if len(eligible) < team_size:
        logger.info(f"Only {len(eligible)} eligible champions, need {team_size}")
        return NoValidTeamFound(reason="insufficient_members", eligible_count=len(eligible))

    if constraints.require_healer and not any(member.healer for member in eligible):
        logger.info("No healer among eligible champions")
        return NoValidTeamFound(reason="no_healer", eligible_count=len(eligible))

    total = count_candidates(eligible, team_size, constraints.require_healer)
    limit = max_combinations if max_combinations is not None else calculator.constants.max_search_combinations
    if total > limit:
        raise SearchLimitExceededError(total, limit)

    best: Optional[Team] = None
    evaluated = 0

    for subset in combinations(eligible, team_size):
        if constraints.require_healer and not any(member.healer for member in subset):
            continue

        team = calculator.evaluate_team(subset)
        evaluated += 1
        if best is None or team.total_score > best.total_score:
            best = team

        if evaluated % CANCEL_CHECK_INTERVAL == 0:
            if should_cancel is not None and should_cancel():
                raise SearchCancelledError(evaluated)
            if progress is not None:
                progress(evaluated, total)

    if progress is not None:
        progress(evaluated, total)

    if best is None:
        return NoValidTeamFound(reason="no_valid_combination", eligible_count=len(eligible))

    logger.info(
        f"Evaluated {evaluated} teams from {len(eligible)} champions, "
        f"best score {best.total_score:.1f}"
    )
    return best
