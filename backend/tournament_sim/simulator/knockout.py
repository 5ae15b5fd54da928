"""
Knockout stage: pot-based quarterfinal draw and the single-elimination rounds.

Pots for the eight-team bracket:
- D: top two group winners
- E: third group winner + best runner-up
- F: remaining two runners-up
- G: top two third-placed teams

D is drawn against G and E against F. Teams from the same group are kept
apart unless no eligible opponent is left in the opposing pot.
"""

import logging
import random
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from .errors import InsufficientTeams, UnknownTeam
from .group_stage import record_match_form
from .match import play_match
from .models import (
    FormMap, KnockoutDraw, KnockoutMatchup, KnockoutResult, MatchRecord,
    Pot, RankedBuckets, Rankings, Roster
)
from ..core.config import SemifinalMode, SimulationSettings, DEFAULT_SETTINGS


logger = logging.getLogger(__name__)


def build_pots(buckets: RankedBuckets) -> List[Pot]:
    """
    Assign qualifiers to pots D, E, F and G.

    Raises:
        InsufficientTeams: If fewer than 3 winners, 3 runners-up or 2 third places
    """
    if len(buckets.first) < 3 or len(buckets.second) < 3 or len(buckets.third) < 2:
        raise InsufficientTeams(
            "Knockout seeding needs 3 group winners, 3 runners-up and 2 third places; got "
            f"{len(buckets.first)}, {len(buckets.second)} and {len(buckets.third)}"
        )

    return [
        Pot(name="D", teams=[buckets.first[0], buckets.first[1]]),
        Pot(name="E", teams=[buckets.first[2], buckets.second[0]]),
        Pot(name="F", teams=[buckets.second[1], buckets.second[2]]),
        Pot(name="G", teams=[buckets.third[0], buckets.third[1]]),
    ]


def pair_pots(
    pot1: Sequence[str],
    pot2: Sequence[str],
    same_group: Callable[[str, str], bool]
) -> List[KnockoutMatchup]:
    """
    Greedily pair two pots, avoiding same-group matchups.

    Each team from pot1 takes the first pot2 team from a different group.
    When none is left it takes the next available team and the matchup is
    marked as relaxed.
    """
    remaining = list(pot2)
    matchups = []

    for home in pot1:
        if not remaining:
            break

        away = next((t for t in remaining if not same_group(home, t)), None)
        relaxed = away is None
        if relaxed:
            away = remaining[0]
            logger.warning("No eligible opponent for %s; pairing with same-group %s", home, away)

        remaining.remove(away)
        matchups.append(KnockoutMatchup(home=home, away=away, relaxed=relaxed))

    return matchups


def draw_quarterfinals(
    buckets: RankedBuckets,
    roster: Roster,
    rng: random.Random
) -> KnockoutDraw:
    """
    Build the pots, shuffle each one and draw the quarterfinal matchups.

    Returns:
        KnockoutDraw with pots in pre-shuffle order and the four matchups
    """
    pots = build_pots(buckets)

    def group_of(code: str) -> str:
        try:
            return roster[code].group
        except KeyError:
            raise UnknownTeam(f"Team {code} is not in the roster")

    def same_group(team1: str, team2: str) -> bool:
        return group_of(team1) == group_of(team2)

    shuffled = {}
    for pot in pots:
        teams = list(pot.teams)
        rng.shuffle(teams)
        shuffled[pot.name] = teams

    matchups = (
        pair_pots(shuffled["D"], shuffled["G"], same_group)
        + pair_pots(shuffled["E"], shuffled["F"], same_group)
    )

    return KnockoutDraw(pots=pots, matchups=matchups)


class KnockoutStage(str, Enum):
    """States of the knockout bracket."""
    QUARTERFINALS = "quarterfinals"
    SEMIFINALS = "semifinals"
    MEDAL_MATCHES = "medal_matches"
    COMPLETE = "complete"


def pair_semifinals(
    winners: Sequence[str],
    mode: SemifinalMode = SemifinalMode.FIXED,
    rng: Optional[random.Random] = None
) -> List[Tuple[str, str]]:
    """Pair quarterfinal winners: winner 1 vs 3 and winner 2 vs 4."""
    order = list(winners)
    if mode == SemifinalMode.SHUFFLED:
        if rng is None:
            raise ValueError("Shuffled semifinal pairing requires a random source")
        rng.shuffle(order)
    return [(order[0], order[2]), (order[1], order[3])]


class KnockoutRunner:
    """
    Plays the knockout bracket one stage at a time.

    Quarterfinals -> Semifinals -> third place match and final -> Complete.
    """

    def __init__(
        self,
        draw: KnockoutDraw,
        rankings: Rankings,
        form: FormMap,
        rng: random.Random,
        settings: SimulationSettings = DEFAULT_SETTINGS
    ):
        if len(draw.matchups) != 4:
            raise InsufficientTeams(
                f"Knockout bracket needs 4 quarterfinal matchups, got {len(draw.matchups)}"
            )

        self.draw = draw
        self.rankings = rankings
        self.form = form
        self.rng = rng
        self.settings = settings
        self.stage = KnockoutStage.QUARTERFINALS
        self.result = KnockoutResult()

    def _play(self, home: str, away: str) -> MatchRecord:
        match = play_match(home, away, self.rankings, self.form, self.rng, self.settings)
        self.result.form_updates.append(record_match_form(match, self.form, self.settings))
        return match

    def advance(self) -> KnockoutStage:
        """Play the current stage and move to the next one."""
        if self.stage == KnockoutStage.QUARTERFINALS:
            self.result.quarterfinals = [
                self._play(m.home, m.away) for m in self.draw.matchups
            ]
            self.stage = KnockoutStage.SEMIFINALS

        elif self.stage == KnockoutStage.SEMIFINALS:
            winners = [m.winner for m in self.result.quarterfinals]
            pairs = pair_semifinals(winners, self.settings.semifinal_mode, self.rng)
            self.result.semifinals = [self._play(home, away) for home, away in pairs]
            self.stage = KnockoutStage.MEDAL_MATCHES

        elif self.stage == KnockoutStage.MEDAL_MATCHES:
            losers = [m.loser for m in self.result.semifinals]
            finalists = [m.winner for m in self.result.semifinals]
            self.result.third_place = self._play(losers[0], losers[1])
            self.result.final = self._play(finalists[0], finalists[1])
            self.stage = KnockoutStage.COMPLETE

        logger.info("Knockout stage advanced to %s", self.stage.value)
        return self.stage

    def run(self) -> KnockoutResult:
        """Play all remaining stages."""
        while self.stage != KnockoutStage.COMPLETE:
            self.advance()
        return self.result
