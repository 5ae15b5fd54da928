"""
Ranking and tiebreaker logic.

In-group order:
1. Points
2. Head-to-head score differential between the two tied teams
3. Aggregate score differential across all group matches

The cascade is a pairwise comparator. It is not guaranteed transitive for
three-way ties, so the result of a circular tie depends on which pairs the
(stable) sort happens to compare.

Cross-group buckets (all group winners, all runners-up, ...) are ordered by
points, then score difference, then scored points.
"""

from functools import cmp_to_key
from typing import Iterable, List, Sequence

from .errors import InsufficientTeams
from .models import MatchRecord, PointsTable, RankedBuckets


def get_h2h_differential(matches: Iterable[MatchRecord], team1: str, team2: str) -> int:
    """Score differential of team1 over team2 in the matches they played each other."""
    total = 0
    for match in matches:
        if match.involves(team1) and match.involves(team2):
            total += match.differential_for(team1)
    return total


def get_aggregate_differential(matches: Iterable[MatchRecord], team: str) -> int:
    """Score differential of a team over all given matches."""
    return sum(m.differential_for(team) for m in matches if m.involves(team))


def resolve_tie(
    team1: str,
    team2: str,
    table: PointsTable,
    matches: Sequence[MatchRecord]
) -> int:
    """
    Compare two teams in the same group.

    Returns:
        Negative if team1 ranks higher, positive if team2 ranks higher, 0 if
        still tied after every criterion
    """
    points_diff = table[team2].points - table[team1].points
    if points_diff != 0:
        return points_diff

    h2h = get_h2h_differential(matches, team1, team2)
    if h2h != 0:
        return -h2h

    return get_aggregate_differential(matches, team2) - get_aggregate_differential(matches, team1)


def rank_group(
    teams: Sequence[str],
    table: PointsTable,
    rounds: Sequence[Sequence[MatchRecord]]
) -> List[str]:
    """Order a group's teams using the tiebreaker cascade."""
    matches = [m for rnd in rounds for m in rnd]
    return sorted(teams, key=cmp_to_key(lambda a, b: resolve_tie(a, b, table, matches)))


def rank_by_criteria(teams: Iterable[str], table: PointsTable) -> List[str]:
    """Order teams from different groups by points, score difference, scored points."""
    return sorted(
        teams,
        key=lambda code: (
            -table[code].points,
            -table[code].score_difference,
            -table[code].scored_points
        )
    )


def rank_after_group_stage(group_rankings: dict, table: PointsTable) -> RankedBuckets:
    """
    Bucket group finishers by place and rank each bucket across groups.

    Raises:
        InsufficientTeams: If any group has fewer than three teams
    """
    first, second, third = [], [], []

    for group, ranked in group_rankings.items():
        if len(ranked) < 3:
            raise InsufficientTeams(
                f"Group {group} has {len(ranked)} teams; at least 3 are needed for knockout seeding"
            )
        first.append(ranked[0])
        second.append(ranked[1])
        third.append(ranked[2])

    return RankedBuckets(
        first=rank_by_criteria(first, table),
        second=rank_by_criteria(second, table),
        third=rank_by_criteria(third, table)
    )


def top_qualifiers(buckets: RankedBuckets, per_bucket: int = 3) -> List[str]:
    """Overall ranking: best group winners, then runners-up, then third places."""
    return buckets.first[:per_bucket] + buckets.second[:per_bucket] + buckets.third[:per_bucket]
