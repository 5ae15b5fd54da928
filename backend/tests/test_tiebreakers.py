"""
Tests for group ranking and tiebreakers.
"""

import pytest

from tournament_sim.simulator import (
    InsufficientTeams,
    PointsTableEntry,
    RankedBuckets,
    rank_after_group_stage,
    rank_by_criteria,
    rank_group,
    resolve_tie,
    top_qualifiers,
)
from tournament_sim.simulator.tiebreakers import get_aggregate_differential, get_h2h_differential

from .test_standings import make_forfeit, make_match


class TestHeadToHead:
    """Tests for differential helpers."""

    def test_h2h_from_either_side(self):
        """Test the head-to-head differential from both perspectives."""
        matches = [make_match("A", "B", 90, 80), make_match("A", "C", 70, 90)]
        assert get_h2h_differential(matches, "A", "B") == 10
        assert get_h2h_differential(matches, "B", "A") == -10

    def test_no_meeting_is_zero(self):
        """Test teams that never met have a zero differential."""
        matches = [make_match("A", "B", 90, 80)]
        assert get_h2h_differential(matches, "A", "C") == 0

    def test_forfeit_counts_as_zero(self):
        """Test forfeits add nothing to either differential."""
        matches = [make_forfeit("A", "B", forfeited_by="B")]
        assert get_h2h_differential(matches, "A", "B") == 0
        assert get_aggregate_differential(matches, "A") == 0

    def test_aggregate(self):
        """Test the aggregate differential sums every match."""
        matches = [make_match("A", "B", 90, 80), make_match("C", "A", 95, 70)]
        assert get_aggregate_differential(matches, "A") == -15


class TestResolveTie:
    """Tests for the pairwise tiebreaker cascade."""

    def test_points_decide_first(self):
        """Test more points ranks higher."""
        table = {"A": PointsTableEntry(points=5), "B": PointsTableEntry(points=4)}
        assert resolve_tie("A", "B", table, []) < 0
        assert resolve_tie("B", "A", table, []) > 0

    def test_head_to_head_breaks_points_tie(self):
        """Test head-to-head breaks a points tie."""
        table = {"A": PointsTableEntry(points=4), "B": PointsTableEntry(points=4)}
        matches = [make_match("B", "A", 80, 86)]
        assert resolve_tie("A", "B", table, matches) < 0

    def test_aggregate_when_head_to_head_level(self):
        """Test the aggregate differential breaks a level head-to-head."""
        table = {
            "A": PointsTableEntry(points=4),
            "B": PointsTableEntry(points=4),
            "C": PointsTableEntry(points=2),
        }
        matches = [
            make_forfeit("A", "B", forfeited_by="A"),
            make_match("A", "C", 100, 70),
            make_match("B", "C", 80, 75),
        ]
        assert resolve_tie("A", "B", table, matches) < 0
        assert resolve_tie("B", "A", table, matches) > 0

    def test_deterministic(self):
        """Test the same inputs always give the same answer."""
        table = {"A": PointsTableEntry(points=4), "B": PointsTableEntry(points=4)}
        matches = [make_match("A", "B", 81, 80), make_match("A", "C", 60, 90)]
        results = {resolve_tie("A", "B", table, matches) for _ in range(20)}
        assert len(results) == 1

    def test_fully_level_is_zero(self):
        """Test fully level teams compare equal."""
        table = {"A": PointsTableEntry(points=2), "B": PointsTableEntry(points=2)}
        assert resolve_tie("A", "B", table, []) == 0


class TestRankGroup:
    """Tests for in-group ranking."""

    def test_orders_by_points_then_tiebreak(self):
        """Test a group is ordered by points, then tiebreakers."""
        table = {
            "A": PointsTableEntry(points=4),
            "B": PointsTableEntry(points=6),
            "C": PointsTableEntry(points=4),
            "D": PointsTableEntry(points=3),
        }
        rounds = [[make_match("C", "A", 90, 70)]]
        assert rank_group(["A", "B", "C", "D"], table, rounds) == ["B", "C", "A", "D"]

    def test_stable_for_full_ties(self):
        """Test full ties keep their input order."""
        table = {code: PointsTableEntry(points=3) for code in "ABCD"}
        assert rank_group(["D", "A", "C", "B"], table, []) == ["D", "A", "C", "B"]


class TestCrossGroupRanking:
    """Tests for bucket ranking."""

    def test_rank_by_criteria(self):
        """Test buckets sort by points, score difference, then scored points."""
        table = {
            "A": PointsTableEntry(points=6, score_difference=10, scored_points=250),
            "B": PointsTableEntry(points=6, score_difference=10, scored_points=260),
            "C": PointsTableEntry(points=6, score_difference=25, scored_points=200),
            "D": PointsTableEntry(points=5, score_difference=40, scored_points=300),
        }
        assert rank_by_criteria(["A", "B", "C", "D"], table) == ["C", "B", "A", "D"]

    def test_rank_after_group_stage(self):
        """Test buckets collect teams by group placing."""
        table = {code: PointsTableEntry(points=p) for code, p in
                 {"A1": 6, "A2": 5, "A3": 4, "B1": 5, "B2": 4, "B3": 3}.items()}
        buckets = rank_after_group_stage({"A": ["A1", "A2", "A3"], "B": ["B1", "B2", "B3"]}, table)
        assert buckets.first == ["A1", "B1"]
        assert buckets.second == ["A2", "B2"]
        assert buckets.third == ["A3", "B3"]

    def test_small_group_raises(self):
        """Test a group of two raises InsufficientTeams."""
        table = {code: PointsTableEntry() for code in ("A1", "A2")}
        with pytest.raises(InsufficientTeams):
            rank_after_group_stage({"A": ["A1", "A2"]}, table)

    def test_top_qualifiers(self):
        """Test the top three of each bucket qualify in order."""
        buckets = RankedBuckets(
            first=["A1", "B1", "C1"], second=["B2", "A2", "C2"], third=["C3", "A3", "B3"]
        )
        assert top_qualifiers(buckets) == ["A1", "B1", "C1", "B2", "A2", "C2", "C3", "A3", "B3"]
