"""Exceptions raised by the scoring engine.

Data-integrity problems and empty search results are returned as values
(see ``DataIntegrityWarning`` and ``NoValidTeamFound`` in ``team_builder.models``),
not raised.
"""


class TeamBuilderError(Exception):
    """Base class for scoring engine errors."""


class InvalidTeamSizeError(TeamBuilderError, ValueError):
    """Raised when a team is evaluated with the wrong number of members."""

    def __init__(self, actual: int, expected: int = 5):
        self.actual = actual
        self.expected = expected
        super().__init__(f"A team must have exactly {expected} members, got {actual}")


class SearchLimitExceededError(TeamBuilderError):
    """Raised when a best-team search would enumerate more subsets than allowed."""

    def __init__(self, combinations: int, limit: int):
        self.combinations = combinations
        self.limit = limit
        super().__init__(
            f"Search would evaluate {combinations} teams, above the limit of {limit}. "
            "Exclude champions or add a synergy filter to narrow the roster."
        )


class SearchCancelledError(TeamBuilderError):
    """Raised when the caller cancels a running best-team search."""

    def __init__(self, evaluated: int):
        self.evaluated = evaluated
        super().__init__(f"Search cancelled after evaluating {evaluated} teams")


class DuplicateMemberError(TeamBuilderError, ValueError):
    """Raised when a team lists the same champion more than once."""

    def __init__(self, champion_ids: list[str]):
        self.champion_ids = champion_ids
        super().__init__(f"Champions appear more than once on the team: {', '.join(champion_ids)}")
