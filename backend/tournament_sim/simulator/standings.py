"""
Round-robin scheduling and the group points table.
"""

from typing import Iterable, List, Sequence, Tuple

from .errors import TournamentError, InsufficientTeams
from .models import MatchRecord, PointsTable, PointsTableEntry


WIN_POINTS = 2
LOSS_POINTS = 1
FORFEIT_LOSS_POINTS = 0


def generate_schedule(teams: Sequence[str]) -> List[List[Tuple[str, str]]]:
    """
    Build a round-robin schedule with the circle method.

    The first team stays fixed; after each round the last team moves to
    the second position. Team i plays team n-1-i within a round.

    Args:
        teams: Team codes in group order (even count, at least 2)

    Returns:
        n-1 rounds, each a list of n/2 (home, away) pairs
    """
    n = len(teams)
    if n < 2:
        raise InsufficientTeams(f"A group needs at least 2 teams, got {n}")
    if n % 2 != 0:
        raise TournamentError(f"Round-robin groups must have an even number of teams, got {n}")

    rotation = list(teams)
    rounds = []

    for _ in range(n - 1):
        rounds.append([(rotation[i], rotation[n - 1 - i]) for i in range(n // 2)])
        last = rotation.pop()
        rotation.insert(1, last)

    return rounds


def init_points_table(teams: Iterable[str]) -> PointsTable:
    """Create a zeroed points table entry for every team."""
    return {code: PointsTableEntry() for code in teams}


def update_points_table(table: PointsTable, match: MatchRecord) -> None:
    """
    Record one match in the points table.

    Win = 2, loss = 1, forfeit win = 2, forfeit loss = 0. Forfeited
    matches count as 0-0 for scored/received totals and differential.
    """
    winner = table[match.winner]
    loser = table[match.loser]

    if match.is_forfeit:
        winner.points += WIN_POINTS
        winner.wins += 1
        loser.points += FORFEIT_LOSS_POINTS
        loser.losses += 1
        loser.forfeit_losses += 1
        return

    home = table[match.home]
    away = table[match.away]

    home.scored_points += match.home_score
    home.received_points += match.away_score
    away.scored_points += match.away_score
    away.received_points += match.home_score

    diff = match.home_score - match.away_score
    home.score_difference += diff
    away.score_difference -= diff

    winner.points += WIN_POINTS
    winner.wins += 1
    loser.points += LOSS_POINTS
    loser.losses += 1
