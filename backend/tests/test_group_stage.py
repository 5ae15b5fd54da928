"""
Tests for the group stage orchestration.
"""

import random

import pytest

from tournament_sim.core.config import SimulationSettings
from tournament_sim.simulator import (
    Team,
    init_points_table,
    simulate_group,
    simulate_group_stage,
)
from tournament_sim.simulator.group_stage import record_match_form

from .test_standings import make_forfeit, make_match


def four_team_group():
    return {
        "X": [
            Team(code="T1", name="Team 1", ranking=1, group="X"),
            Team(code="T2", name="Team 2", ranking=2, group="X"),
            Team(code="T3", name="Team 3", ranking=3, group="X"),
            Team(code="T4", name="Team 4", ranking=4, group="X"),
        ]
    }


class TestSimulateGroup:
    """Tests for a single group's round-robin."""

    @pytest.mark.parametrize("seed", [1, 2, 3, 42, 2024])
    def test_four_team_group_totals(self, seed):
        """Test each team plays 3 matches and each match hands out 3 points, or 2 if forfeited."""
        codes = ["T1", "T2", "T3", "T4"]
        rankings = {"T1": 1, "T2": 2, "T3": 3, "T4": 4}
        form = {code: 0.0 for code in codes}
        table = init_points_table(codes)

        rounds, updates = simulate_group(codes, rankings, form, table, random.Random(seed))

        matches = [m for rnd in rounds for m in rnd]
        assert len(rounds) == 3
        assert len(matches) == 6
        assert len(updates) == 6

        for code in codes:
            assert table[code].matches_played == 3

        forfeits = sum(m.is_forfeit for m in matches)
        assert sum(e.points for e in table.values()) == 3 * len(matches) - forfeits

        for entry in table.values():
            assert entry.points == 2 * entry.wins + (entry.losses - entry.forfeit_losses)

        assert sum(e.score_difference for e in table.values()) == 0

    def test_scores_in_bounds(self):
        """Test every played group match scores within bounds."""
        codes = ["T1", "T2", "T3", "T4"]
        rankings = {"T1": 1, "T2": 2, "T3": 3, "T4": 4}
        for seed in range(30):
            form = {code: 0.0 for code in codes}
            rounds, _ = simulate_group(codes, rankings, form, init_points_table(codes), random.Random(seed))
            for match in (m for rnd in rounds for m in rnd if not m.is_forfeit):
                assert 44 <= match.home_score <= 122
                assert 44 <= match.away_score <= 122

    def test_never_forfeits_when_disabled(self):
        """Test no forfeits occur with a zero forfeit probability."""
        codes = ["T1", "T2", "T3", "T4"]
        rankings = {"T1": 1, "T2": 2, "T3": 3, "T4": 4}
        form = {code: 0.0 for code in codes}
        table = init_points_table(codes)
        settings = SimulationSettings(forfeit_probability=0.0)

        rounds, _ = simulate_group(codes, rankings, form, table, random.Random(5), settings)

        assert not any(m.is_forfeit for rnd in rounds for m in rnd)
        assert sum(e.points for e in table.values()) == 18


class TestRecordMatchForm:
    """Tests for form tracking during the group stage."""

    def test_played_match_adjusts_form(self):
        """Test a played match applies the form rule."""
        form = {"A": 0.0, "B": 0.0}
        result = record_match_form(make_match("A", "B", 100, 80), form)
        assert form["A"] == pytest.approx(0.15)
        assert form["B"] == pytest.approx(-0.15)
        assert result.updates[0].before == 0.0
        assert result.updates[0].after == pytest.approx(0.15)

    def test_forfeit_leaves_form_unchanged(self):
        """Test a forfeit records updates that change nothing."""
        form = {"A": 0.3, "B": -0.2}
        result = record_match_form(make_forfeit("A", "B", forfeited_by="B"), form)
        assert form == {"A": 0.3, "B": -0.2}
        assert all(u.before == u.after for u in result.updates)


class TestSimulateGroupStage:
    """Tests for simulate_group_stage."""

    def test_all_groups_ranked(self, groups):
        """Test every group is simulated and ranked by points."""
        form = {t.code: 0.0 for members in groups.values() for t in members}
        result = simulate_group_stage(groups, form, random.Random(9))

        assert set(result.fixtures) == {"A", "B", "C"}
        assert result.total_rounds == 3
        for label, members in groups.items():
            assert sorted(result.rankings[label]) == sorted(t.code for t in members)
            points = [result.points_table[c].points for c in result.rankings[label]]
            assert points == sorted(points, reverse=True)

    def test_single_group_of_four(self):
        """Test a lone group of four plays a full round-robin."""
        groups = four_team_group()
        form = {t.code: 0.0 for t in groups["X"]}
        result = simulate_group_stage(groups, form, random.Random(123))

        assert len(result.points_table) == 4
        assert all(e.matches_played == 3 for e in result.points_table.values())

    def test_reproducible(self, groups):
        """Test the same seed produces the same group stage."""
        def run():
            form = {t.code: 0.0 for members in groups.values() for t in members}
            return simulate_group_stage(groups, form, random.Random(77)).to_dict()

        assert run() == run()
