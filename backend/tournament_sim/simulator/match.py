"""
Single match simulation: score generation and outcome classification.
"""

import logging
import math
import random
from typing import Optional, Tuple

from .errors import UnknownTeam
from .models import FormMap, MatchRecord, Outcome, Rankings
from ..core.config import SimulationSettings, DEFAULT_SETTINGS


logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _lookup(mapping: dict, code: str, what: str):
    try:
        return mapping[code]
    except KeyError:
        raise UnknownTeam(f"No {what} for team {code}")


def simulate_score(
    team1: str,
    team2: str,
    rankings: Rankings,
    form: FormMap,
    rng: random.Random,
    settings: SimulationSettings = DEFAULT_SETTINGS
) -> Tuple[int, int]:
    """
    Generate a score pair from rankings (lower is stronger) and form.

    base = (80 + (20 - (ranking - form))) * (1 + U(0, 0.1))
    score = base + U(-5, 5) - (ranking2 - ranking1)

    The same ranking gap is subtracted from both sides. Form is rounded to
    two decimals first. Scores are rounded and clamped to [44, 122].
    """
    ranking1 = _lookup(rankings, team1, "ranking")
    ranking2 = _lookup(rankings, team2, "ranking")
    form1 = round(_lookup(form, team1, "form"), 2)
    form2 = round(_lookup(form, team2, "form"), 2)

    ranking_gap = ranking2 - ranking1

    base1 = (settings.base_score + (settings.ranking_offset - (ranking1 - form1))) * (1 + rng.random() * settings.max_boost)
    base2 = (settings.base_score + (settings.ranking_offset - (ranking2 - form2))) * (1 + rng.random() * settings.max_boost)

    half = settings.variability / 2
    score1 = base1 + (rng.random() * settings.variability - half) - ranking_gap
    score2 = base2 + (rng.random() * settings.variability - half) - ranking_gap

    final1 = max(settings.min_score, min(settings.max_score, _round_half_up(score1)))
    final2 = max(settings.min_score, min(settings.max_score, _round_half_up(score2)))

    return final1, final2


def classify_outcome(
    team1: str,
    team2: str,
    team1_score: int,
    team2_score: int,
    rng: random.Random,
    settings: SimulationSettings = DEFAULT_SETTINGS
) -> Tuple[Outcome, Optional[str]]:
    """
    Classify a match as a forfeit or a normal result.

    A forfeit happens with fixed probability regardless of the score; the
    forfeiting side is a coin flip. Equal scores count as a win for team1.

    Returns:
        Tuple of (outcome relative to team1, forfeiting team code or None)
    """
    if rng.random() < settings.forfeit_probability:
        forfeited_by = team1 if rng.random() < 0.5 else team2
        return Outcome.FORFEIT, forfeited_by

    if team1_score >= team2_score:
        return Outcome.WIN, None
    return Outcome.LOSS, None


def play_match(
    team1: str,
    team2: str,
    rankings: Rankings,
    form: FormMap,
    rng: random.Random,
    settings: SimulationSettings = DEFAULT_SETTINGS
) -> MatchRecord:
    """Simulate and classify a match, resolving its winner and loser."""
    score1, score2 = simulate_score(team1, team2, rankings, form, rng, settings)
    outcome, forfeited_by = classify_outcome(team1, team2, score1, score2, rng, settings)

    if outcome == Outcome.FORFEIT:
        loser = forfeited_by
        winner = team2 if forfeited_by == team1 else team1
        record = MatchRecord(
            home=team1, away=team2,
            home_score=None, away_score=None,
            outcome=outcome, winner=winner, loser=loser,
            forfeited_by=forfeited_by
        )
        logger.debug("%s - %s forfeited by %s", team1, team2, forfeited_by)
        return record

    winner, loser = (team1, team2) if outcome == Outcome.WIN else (team2, team1)
    logger.debug("%s - %s %d:%d", team1, team2, score1, score2)
    return MatchRecord(
        home=team1, away=team2,
        home_score=score1, away_score=score2,
        outcome=outcome, winner=winner, loser=loser
    )
