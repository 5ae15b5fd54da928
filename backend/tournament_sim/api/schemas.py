"""
Pydantic schemas for API request/response validation.
"""

from typing import Optional, List, Dict
from pydantic import BaseModel, Field

from ..sources.records import GroupTeamRecord, ExhibitionRecord


# ============== Simulation Schemas ==============

class SimulationRunRequest(BaseModel):
    """Run a simulation on inline tournament data."""
    groups: Dict[str, List[GroupTeamRecord]] = Field(..., min_length=1)
    exhibitions: Dict[str, List[ExhibitionRecord]] = Field(default_factory=dict)
    seed: Optional[int] = None
    semifinal_mode: Optional[str] = Field(None, pattern="^(fixed|shuffled)$")


class SourceRunRequest(BaseModel):
    """Run a simulation on data loaded from a source."""
    source: str = Field(..., pattern="^(file|http)$")
    groups_path: Optional[str] = None
    exhibitions_path: Optional[str] = None
    base_url: Optional[str] = None
    seed: Optional[int] = None
    semifinal_mode: Optional[str] = Field(None, pattern="^(fixed|shuffled)$")


class TeamResult(BaseModel):
    """A team from the roster."""
    code: str
    name: str
    ranking: int
    group: str


class MatchResult(BaseModel):
    """A played match."""
    home: str
    away: str
    home_score: Optional[int]
    away_score: Optional[int]
    outcome: str  # win, loss, forfeit
    winner: str
    loser: str
    forfeited_by: Optional[str] = None


class FormUpdateResult(BaseModel):
    """Form before and after a match."""
    team: str
    before: float
    after: float


class MatchFormUpdatesResult(BaseModel):
    """Form updates caused by one match."""
    match: MatchResult
    updates: List[FormUpdateResult]


class StandingResult(BaseModel):
    """Points table entry."""
    points: int
    wins: int
    losses: int
    forfeit_losses: int
    score_difference: int
    scored_points: int
    received_points: int


class GroupStageResponse(BaseModel):
    """Group stage output."""
    fixtures: Dict[str, List[List[MatchResult]]]
    form_updates: Dict[str, List[MatchFormUpdatesResult]]
    points_table: Dict[str, StandingResult]
    rankings: Dict[str, List[str]]


class BucketsResult(BaseModel):
    """Group finishers ranked across groups."""
    first: List[str]
    second: List[str]
    third: List[str]


class PotResult(BaseModel):
    """A seeding pot."""
    name: str
    teams: List[str]


class MatchupResult(BaseModel):
    """A quarterfinal pairing."""
    home: str
    away: str
    relaxed: bool


class DrawResult(BaseModel):
    """Knockout draw."""
    pots: List[PotResult]
    quarterfinals: List[MatchupResult]


class PodiumResult(BaseModel):
    """Medal winners."""
    gold: str
    silver: str
    bronze: str


class KnockoutResponse(BaseModel):
    """Knockout stage output."""
    quarterfinals: List[MatchResult]
    semifinals: List[MatchResult]
    third_place: Optional[MatchResult]
    final: Optional[MatchResult]
    form_updates: List[MatchFormUpdatesResult]
    podium: Optional[PodiumResult]


class SimulationResultsResponse(BaseModel):
    """Full simulation results response."""
    seed: Optional[int]
    teams: Dict[str, TeamResult]
    initial_form: Dict[str, float]
    group_stage: GroupStageResponse
    buckets: BucketsResult
    qualifiers: List[str]
    advancing: List[str]
    draw: DrawResult
    knockout: KnockoutResponse
    final_form: Dict[str, float]


# ============== Error Schemas ==============

class ErrorResponse(BaseModel):
    """API error response."""
    detail: str
    code: Optional[str] = None
