"""
Tournament simulation pipeline.

exhibitions -> initial form -> group stage -> cross-group ranking ->
knockout draw -> knockout rounds -> podium
"""

import logging
import random
from typing import Optional

from .errors import TournamentError
from .form import calculate_initial_form
from .group_stage import simulate_group_stage
from .knockout import KnockoutRunner, draw_quarterfinals
from .models import Exhibitions, Groups, Roster, TournamentResult
from .tiebreakers import rank_after_group_stage, top_qualifiers
from ..core.config import SimulationSettings, DEFAULT_SETTINGS


logger = logging.getLogger(__name__)


def build_roster(groups: Groups) -> Roster:
    """Index every team by code, rejecting duplicates across groups."""
    roster: Roster = {}
    for label, members in groups.items():
        for team in members:
            if team.code in roster:
                raise TournamentError(
                    f"Team {team.code} appears in both group {roster[team.code].group} and group {label}"
                )
            roster[team.code] = team
    return roster


def simulate_tournament(
    groups: Groups,
    exhibitions: Exhibitions,
    rng: Optional[random.Random] = None,
    settings: SimulationSettings = DEFAULT_SETTINGS
) -> TournamentResult:
    """
    Run a full tournament simulation.

    Args:
        groups: Group label -> ordered teams
        exhibitions: Team code -> exhibition matches
        rng: Random source; seeded from settings.seed when omitted
        settings: Simulation constants

    Returns:
        TournamentResult with every stage's output

    Raises:
        MalformedRecord, UnknownTeam, InsufficientTeams: On invalid input
    """
    if rng is None:
        rng = random.Random(settings.seed)

    roster = build_roster(groups)
    rankings = {code: team.ranking for code, team in roster.items()}

    form = calculate_initial_form(exhibitions, roster, settings)
    initial_form = dict(form)

    group_stage = simulate_group_stage(groups, form, rng, settings)

    buckets = rank_after_group_stage(group_stage.rankings, group_stage.points_table)
    qualifiers = top_qualifiers(buckets)
    logger.info("Advancing to knockout stage: %s", ", ".join(qualifiers[:8]))

    draw = draw_quarterfinals(buckets, roster, rng)
    knockout = KnockoutRunner(draw, rankings, form, rng, settings).run()

    podium = knockout.podium
    logger.info("Podium: %s, %s, %s", podium.gold, podium.silver, podium.bronze)

    return TournamentResult(
        teams=roster,
        initial_form=initial_form,
        group_stage=group_stage,
        buckets=buckets,
        qualifiers=qualifiers,
        draw=draw,
        knockout=knockout,
        final_form=dict(form),
        seed=settings.seed
    )
