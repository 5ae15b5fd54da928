"""
Plain-text rendering of a tournament result.
"""

from typing import List

from .simulator.models import MatchRecord, TournamentResult


def _match_line(result: TournamentResult, match: MatchRecord, separator: str = " - ") -> str:
    label = f"{result.team_name(match.home)}{separator}{result.team_name(match.away)}"
    if match.is_forfeit:
        return f"{label} (Forfeited by: {result.team_name(match.forfeited_by)})"
    return f"{label} ({match.score_str})"


def render_initial_form(result: TournamentResult) -> List[str]:
    lines = ["Team form after exhibition matches:"]
    for code, value in result.initial_form.items():
        lines.append(f"{code}: {value:.2f}")
    return lines


def render_fixtures(result: TournamentResult) -> List[str]:
    """Fixtures grouped by phase, each followed by the form updates it caused."""
    lines = []
    stage = result.group_stage

    for phase in range(stage.total_rounds):
        lines.append("")
        lines.append(f"Group phase - {phase + 1}. fixture")

        for group, rounds in stage.fixtures.items():
            if phase >= len(rounds):
                continue
            lines.append(f"Group {group}:")
            updates = {id(u.match): u for u in stage.form_updates[group]}

            for match in rounds[phase]:
                lines.append(f"    {_match_line(result, match)}")
                if match.is_forfeit:
                    continue
                for update in updates[id(match)].updates:
                    lines.append(
                        f"      Form update for {result.team_name(update.team)}: "
                        f"{update.before:.2f} -> {update.after:.2f}"
                    )
    return lines


def render_standings(result: TournamentResult) -> List[str]:
    lines = ["", "Final Group Stage Standings:"]
    table = result.group_stage.points_table

    for group, ranked in result.group_stage.rankings.items():
        lines.append("")
        lines.append(f"Group {group}")
        lines.append("Rank | Team               | Points | Wins | Losses | Scored | Received | Difference")

        for rank, code in enumerate(ranked, start=1):
            e = table[code]
            lines.append(
                f"{rank:<4} | {result.team_name(code):<18} | {e.points:<6} | {e.wins:<4} | "
                f"{e.losses:<6} | {e.scored_points:<6} | {e.received_points:<8} | {e.score_difference:+d}"
            )
    return lines


def render_final_ranking(result: TournamentResult) -> List[str]:
    lines = ["", "Final Rankings:"]
    for i, code in enumerate(result.qualifiers, start=1):
        lines.append(f"{i}. {result.team_name(code)}")
        if i == 8:
            lines.append("-------- Teams below this line are eliminated --------")

    advancing = ", ".join(result.team_name(code) for code in result.advancing)
    lines.append("")
    lines.append(f"Teams that advance to the knockout stage: {advancing}")
    return lines


def render_draw(result: TournamentResult) -> List[str]:
    lines = ["", "Pots:"]
    for pot in result.draw.pots:
        lines.append(f"    Pot {pot.name}")
        for code in pot.teams:
            lines.append(f"        {result.team_name(code)}")

    lines.append("")
    lines.append("Elimination round:")
    for matchup in result.draw.matchups:
        lines.append(f"    {result.team_name(matchup.home)} - {result.team_name(matchup.away)}")
    return lines


def render_knockout(result: TournamentResult) -> List[str]:
    knockout = result.knockout
    lines = ["", "Quarterfinals:"]
    lines += [f"    {_match_line(result, m)}" for m in knockout.quarterfinals]

    lines += ["", "Semifinals:"]
    lines += [f"    {_match_line(result, m)}" for m in knockout.semifinals]

    if knockout.third_place is not None:
        lines += ["", "Third Place Match:", f"    {_match_line(result, knockout.third_place)}"]
    if knockout.final is not None:
        lines += ["", "Final:", f"    {_match_line(result, knockout.final)}"]

    podium = result.podium
    if podium is not None:
        lines += [
            "",
            "Medals:",
            f"    1. {result.team_name(podium.gold)}",
            f"    2. {result.team_name(podium.silver)}",
            f"    3. {result.team_name(podium.bronze)}",
        ]
    return lines


def render_report(result: TournamentResult) -> str:
    """Render the full console report for a simulation run."""
    lines = (
        render_initial_form(result)
        + render_fixtures(result)
        + render_standings(result)
        + render_final_ranking(result)
        + render_draw(result)
        + render_knockout(result)
    )
    return "\n".join(lines) + "\n"
