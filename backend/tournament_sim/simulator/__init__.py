"""
Basketball Tournament Simulator

Group stage round-robin followed by an eight-team knockout bracket.
"""

from .models import (
    Outcome,
    Team,
    ExhibitionMatch,
    PointsTableEntry,
    MatchRecord,
    FormUpdate,
    MatchFormUpdates,
    GroupStageResult,
    RankedBuckets,
    Pot,
    KnockoutMatchup,
    KnockoutDraw,
    KnockoutResult,
    Podium,
    TournamentResult,
)
from .errors import TournamentError, MalformedRecord, UnknownTeam, InsufficientTeams
from .form import calculate_initial_form, apply_form_adjustment, parse_result
from .match import simulate_score, classify_outcome, play_match
from .standings import generate_schedule, init_points_table, update_points_table
from .tiebreakers import resolve_tie, rank_group, rank_by_criteria, rank_after_group_stage, top_qualifiers
from .group_stage import simulate_group, simulate_group_stage
from .knockout import build_pots, pair_pots, draw_quarterfinals, pair_semifinals, KnockoutRunner, KnockoutStage
from .engine import simulate_tournament, build_roster

__all__ = [
    # Models
    "Outcome",
    "Team",
    "ExhibitionMatch",
    "PointsTableEntry",
    "MatchRecord",
    "FormUpdate",
    "MatchFormUpdates",
    "GroupStageResult",
    "RankedBuckets",
    "Pot",
    "KnockoutMatchup",
    "KnockoutDraw",
    "KnockoutResult",
    "Podium",
    "TournamentResult",
    # Errors
    "TournamentError",
    "MalformedRecord",
    "UnknownTeam",
    "InsufficientTeams",
    # Form
    "calculate_initial_form",
    "apply_form_adjustment",
    "parse_result",
    # Matches
    "simulate_score",
    "classify_outcome",
    "play_match",
    # Standings
    "generate_schedule",
    "init_points_table",
    "update_points_table",
    # Tiebreakers
    "resolve_tie",
    "rank_group",
    "rank_by_criteria",
    "rank_after_group_stage",
    "top_qualifiers",
    # Stages
    "simulate_group",
    "simulate_group_stage",
    "build_pots",
    "pair_pots",
    "draw_quarterfinals",
    "pair_semifinals",
    "KnockoutRunner",
    "KnockoutStage",
    # Engine
    "simulate_tournament",
    "build_roster",
]
