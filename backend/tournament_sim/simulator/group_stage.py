"""
Group stage orchestration.

Runs every group's round-robin in sequence, updating the shared points
table and form map after each match.
"""

import logging
import random
from typing import List, Sequence, Tuple

from .form import apply_form_adjustment
from .match import play_match
from .models import (
    FormMap, FormUpdate, Groups, GroupStageResult, MatchFormUpdates,
    MatchRecord, PointsTable, Rankings
)
from .standings import generate_schedule, init_points_table, update_points_table
from .tiebreakers import rank_group
from ..core.config import SimulationSettings, DEFAULT_SETTINGS


logger = logging.getLogger(__name__)


def record_match_form(
    match: MatchRecord,
    form: FormMap,
    settings: SimulationSettings = DEFAULT_SETTINGS
) -> MatchFormUpdates:
    """
    Apply the form rule for a played match and capture the before/after values.

    Forfeited matches leave form unchanged.
    """
    if match.is_forfeit:
        updates = [
            FormUpdate(team=match.home, before=form[match.home], after=form[match.home]),
            FormUpdate(team=match.away, before=form[match.away], after=form[match.away])
        ]
    else:
        updates = list(apply_form_adjustment(
            form, match.home, match.away, match.home_score, match.away_score, settings
        ))
    return MatchFormUpdates(match=match, updates=updates)


def simulate_group(
    teams: Sequence[str],
    rankings: Rankings,
    form: FormMap,
    table: PointsTable,
    rng: random.Random,
    settings: SimulationSettings = DEFAULT_SETTINGS
) -> Tuple[List[List[MatchRecord]], List[MatchFormUpdates]]:
    """
    Play one group's full round-robin.

    Args:
        teams: Team codes in group order
        rankings: Team code -> strength ranking
        form: Shared form map, mutated in place
        table: Shared points table, mutated in place
        rng: Random source

    Returns:
        Tuple of (fixtures per round, form updates in play order)
    """
    rounds: List[List[MatchRecord]] = []
    form_updates: List[MatchFormUpdates] = []

    for pairs in generate_schedule(teams):
        round_matches = []
        for home, away in pairs:
            match = play_match(home, away, rankings, form, rng, settings)
            update_points_table(table, match)
            form_updates.append(record_match_form(match, form, settings))
            round_matches.append(match)
        rounds.append(round_matches)

    return rounds, form_updates


def simulate_group_stage(
    groups: Groups,
    form: FormMap,
    rng: random.Random,
    settings: SimulationSettings = DEFAULT_SETTINGS
) -> GroupStageResult:
    """
    Play every group and rank each one.

    Args:
        groups: Group label -> ordered teams
        form: Shared form map, mutated in place
        rng: Random source

    Returns:
        GroupStageResult with fixtures, form updates, points table and rankings
    """
    rankings = {team.code: team.ranking for members in groups.values() for team in members}
    table = init_points_table(rankings)
    result = GroupStageResult(points_table=table)

    for label, members in groups.items():
        codes = [team.code for team in members]
        logger.info("Simulating group %s (%d teams)", label, len(codes))

        rounds, updates = simulate_group(codes, rankings, form, table, rng, settings)
        result.fixtures[label] = rounds
        result.form_updates[label] = updates
        result.rankings[label] = rank_group(codes, table, rounds)

    return result
