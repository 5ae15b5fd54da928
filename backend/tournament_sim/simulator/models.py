"""
Data models for the tournament simulator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class Outcome(str, Enum):
    """Match outcome relative to the first-named (home) team."""
    WIN = "win"
    LOSS = "loss"
    FORFEIT = "forfeit"


@dataclass(frozen=True)
class Team:
    """A team from the input roster. Form is tracked separately in a FormMap."""

    code: str
    name: str
    ranking: int
    group: str

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "name": self.name,
            "ranking": self.ranking,
            "group": self.group
        }


@dataclass(frozen=True)
class ExhibitionMatch:
    """A prior exhibition match as listed under one team."""

    opponent: str
    result: str  # "teamScore-opponentScore"
    date: Optional[str] = None


@dataclass
class PointsTableEntry:
    """Group stage record for one team."""

    points: int = 0
    wins: int = 0
    losses: int = 0
    forfeit_losses: int = 0
    score_difference: int = 0
    scored_points: int = 0
    received_points: int = 0

    @property
    def matches_played(self) -> int:
        return self.wins + self.losses

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "points": self.points,
            "wins": self.wins,
            "losses": self.losses,
            "forfeit_losses": self.forfeit_losses,
            "score_difference": self.score_difference,
            "scored_points": self.scored_points,
            "received_points": self.received_points
        }


@dataclass(frozen=True)
class MatchRecord:
    """A played match. Scores are None when the match was forfeited."""

    home: str
    away: str
    home_score: Optional[int]
    away_score: Optional[int]
    outcome: Outcome
    winner: str
    loser: str
    forfeited_by: Optional[str] = None

    @property
    def is_forfeit(self) -> bool:
        return self.outcome == Outcome.FORFEIT

    @property
    def score_str(self) -> str:
        if self.is_forfeit:
            return ""
        return f"{self.home_score}:{self.away_score}"

    def involves(self, code: str) -> bool:
        return code in (self.home, self.away)

    def differential_for(self, code: str) -> int:
        """Signed score margin from the point of view of `code` (0 for forfeits)."""
        if self.is_forfeit:
            return 0
        diff = self.home_score - self.away_score
        return diff if code == self.home else -diff

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "home": self.home,
            "away": self.away,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "outcome": self.outcome.value,
            "winner": self.winner,
            "loser": self.loser,
            "forfeited_by": self.forfeited_by
        }


@dataclass(frozen=True)
class FormUpdate:
    """Form of one team before and after a match."""

    team: str
    before: float
    after: float

    def to_dict(self) -> dict:
        return {"team": self.team, "before": self.before, "after": self.after}


@dataclass(frozen=True)
class MatchFormUpdates:
    """Both form updates produced by one match."""

    match: MatchRecord
    updates: List[FormUpdate]

    def to_dict(self) -> dict:
        return {
            "match": self.match.to_dict(),
            "updates": [u.to_dict() for u in self.updates]
        }


@dataclass
class GroupStageResult:
    """Everything the group stage produces."""

    fixtures: Dict[str, List[List[MatchRecord]]] = field(default_factory=dict)
    form_updates: Dict[str, List[MatchFormUpdates]] = field(default_factory=dict)
    points_table: Dict[str, PointsTableEntry] = field(default_factory=dict)
    rankings: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def total_rounds(self) -> int:
        return max((len(rounds) for rounds in self.fixtures.values()), default=0)

    def to_dict(self) -> dict:
        return {
            "fixtures": {
                group: [[m.to_dict() for m in rnd] for rnd in rounds]
                for group, rounds in self.fixtures.items()
            },
            "form_updates": {
                group: [u.to_dict() for u in updates]
                for group, updates in self.form_updates.items()
            },
            "points_table": {code: e.to_dict() for code, e in self.points_table.items()},
            "rankings": {group: list(codes) for group, codes in self.rankings.items()}
        }


@dataclass
class RankedBuckets:
    """Group finishers by place, each list ordered by cross-group criteria."""

    first: List[str] = field(default_factory=list)
    second: List[str] = field(default_factory=list)
    third: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"first": self.first, "second": self.second, "third": self.third}


@dataclass(frozen=True)
class Pot:
    """A named seeding pot holding two qualified teams."""

    name: str
    teams: List[str]

    def to_dict(self) -> dict:
        return {"name": self.name, "teams": list(self.teams)}


@dataclass(frozen=True)
class KnockoutMatchup:
    """A quarterfinal pairing. `relaxed` marks a forced same-group pairing."""

    home: str
    away: str
    relaxed: bool = False

    def to_dict(self) -> dict:
        return {"home": self.home, "away": self.away, "relaxed": self.relaxed}


@dataclass
class KnockoutDraw:
    """Pots (pre-shuffle order) and the quarterfinal matchups drawn from them."""

    pots: List[Pot]
    matchups: List[KnockoutMatchup]

    def to_dict(self) -> dict:
        return {
            "pots": [p.to_dict() for p in self.pots],
            "quarterfinals": [m.to_dict() for m in self.matchups]
        }


@dataclass(frozen=True)
class Podium:
    """Final medal standings."""

    gold: str
    silver: str
    bronze: str

    def to_dict(self) -> dict:
        return {"gold": self.gold, "silver": self.silver, "bronze": self.bronze}


@dataclass
class KnockoutResult:
    """Results of every knockout round."""

    quarterfinals: List[MatchRecord] = field(default_factory=list)
    semifinals: List[MatchRecord] = field(default_factory=list)
    third_place: Optional[MatchRecord] = None
    final: Optional[MatchRecord] = None
    form_updates: List[MatchFormUpdates] = field(default_factory=list)

    @property
    def podium(self) -> Optional[Podium]:
        if self.final is None or self.third_place is None:
            return None
        return Podium(
            gold=self.final.winner,
            silver=self.final.loser,
            bronze=self.third_place.winner
        )

    def to_dict(self) -> dict:
        podium = self.podium
        return {
            "quarterfinals": [m.to_dict() for m in self.quarterfinals],
            "semifinals": [m.to_dict() for m in self.semifinals],
            "third_place": self.third_place.to_dict() if self.third_place else None,
            "final": self.final.to_dict() if self.final else None,
            "form_updates": [u.to_dict() for u in self.form_updates],
            "podium": podium.to_dict() if podium else None
        }


@dataclass
class TournamentResult:
    """Full output of one simulation run."""

    teams: Dict[str, Team]
    initial_form: Dict[str, float]
    group_stage: GroupStageResult
    buckets: RankedBuckets
    qualifiers: List[str]
    draw: KnockoutDraw
    knockout: KnockoutResult
    final_form: Dict[str, float]
    seed: Optional[int] = None

    @property
    def advancing(self) -> List[str]:
        """The eight qualifiers that entered the knockout stage."""
        return self.qualifiers[:8]

    @property
    def podium(self) -> Optional[Podium]:
        return self.knockout.podium

    def team_name(self, code: str) -> str:
        team = self.teams.get(code)
        return team.name if team else code

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "seed": self.seed,
            "teams": {code: t.to_dict() for code, t in self.teams.items()},
            "initial_form": dict(self.initial_form),
            "group_stage": self.group_stage.to_dict(),
            "buckets": self.buckets.to_dict(),
            "qualifiers": list(self.qualifiers),
            "advancing": self.advancing,
            "draw": self.draw.to_dict(),
            "knockout": self.knockout.to_dict(),
            "final_form": dict(self.final_form)
        }


# Type aliases for shared mutable state
FormMap = Dict[str, float]
PointsTable = Dict[str, PointsTableEntry]
Rankings = Dict[str, int]
Roster = Dict[str, Team]
Groups = Dict[str, List[Team]]
Exhibitions = Dict[str, List[ExhibitionMatch]]
