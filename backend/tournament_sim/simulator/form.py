"""
Team form tracking.

Form is a running sum: +/-0.1 for a win/loss, and a further +/-0.05 when
the margin is at least 15 points. The same rule applies to exhibition and
tournament matches.
"""

import logging
import re
from typing import Dict, Iterable, Optional, Tuple

from .errors import MalformedRecord, UnknownTeam
from .models import Exhibitions, FormMap, FormUpdate
from ..core.config import SimulationSettings, DEFAULT_SETTINGS


logger = logging.getLogger(__name__)

_RESULT_RE = re.compile(r"^\s*(\d+)\s*[-:]\s*(\d+)\s*$")


def parse_result(result: str) -> Tuple[int, int]:
    """Parse an "A-B" result string into two integer scores."""
    if not isinstance(result, str):
        raise MalformedRecord(f"Result must be a string, got {result!r}")

    match = _RESULT_RE.match(result)
    if match is None:
        raise MalformedRecord(f"Cannot parse result {result!r}")

    return int(match.group(1)), int(match.group(2))


def apply_form_adjustment(
    form: FormMap,
    team1: str,
    team2: str,
    team1_score: int,
    team2_score: int,
    settings: SimulationSettings = DEFAULT_SETTINGS
) -> Tuple[FormUpdate, FormUpdate]:
    """
    Adjust both teams' form in place from a match result.

    Returns:
        Tuple of (team1 update, team2 update)
    """
    before1 = form[team1]
    before2 = form[team2]

    diff = team1_score - team2_score

    if diff > 0:
        form[team1] += settings.win_step
        form[team2] -= settings.win_step
    elif diff < 0:
        form[team1] -= settings.win_step
        form[team2] += settings.win_step

    if abs(diff) >= settings.margin_threshold:
        bonus = settings.margin_bonus if diff > 0 else -settings.margin_bonus
        form[team1] += bonus
        form[team2] -= bonus

    return (
        FormUpdate(team=team1, before=before1, after=form[team1]),
        FormUpdate(team=team2, before=before2, after=form[team2])
    )


def _pair_key(team1: str, team2: str) -> Tuple[str, str]:
    return (min(team1, team2), max(team1, team2))


def calculate_initial_form(
    exhibitions: Exhibitions,
    roster: Iterable[str],
    settings: SimulationSettings = DEFAULT_SETTINGS
) -> FormMap:
    """
    Derive each team's starting form from its exhibition history.

    A match between two teams usually appears under both teams' lists.
    The first team (in iteration order) to list a pairing owns it; entries
    for the same pairing under the other team are skipped so the match is
    counted once.

    Args:
        exhibitions: Team code -> exhibition matches listed for that team
        roster: All known team codes

    Returns:
        Dict mapping team code -> form (0.0 for teams without exhibitions)

    Raises:
        UnknownTeam: If a team or opponent is not in the roster
        MalformedRecord: If a result string cannot be parsed
    """
    form: FormMap = {code: 0.0 for code in roster}
    owners: Dict[Tuple[str, str], str] = {}

    for team, matches in exhibitions.items():
        if team not in form:
            raise UnknownTeam(f"Exhibition team {team} is not in the roster")

        for match in matches:
            opponent = match.opponent
            if opponent not in form:
                raise UnknownTeam(f"Exhibition opponent {opponent} of {team} is not in the roster")

            key = _pair_key(team, opponent)
            owner: Optional[str] = owners.setdefault(key, team)
            if owner != team:
                continue

            team_score, opponent_score = parse_result(match.result)
            apply_form_adjustment(form, team, opponent, team_score, opponent_score, settings)

    logger.info("Computed initial form for %d teams from exhibitions", len(form))
    return form
