"""Standings calculators for each tournament format.

Each calculator takes the tournament participants and their rounds (already
restricted to the tournament window) and returns ranked ``StandingEntry``
rows. A player without a round on a date did not play that day; a missing
round never counts as a score of zero.
"""

from __future__ import annotations

from itertools import combinations
from typing import Callable, Dict, List, Sequence

import structlog

from .indexing import days_played, filter_rounds, index_rounds
from .models import HOLE_COLORS, Participant, Round, StandingEntry, Tournament, TournamentFormat

LOGGER = structlog.get_logger(__name__)

Calculator = Callable[[Sequence[Participant], Sequence[Round], int], List[StandingEntry]]


def calc_stroke_play(
    participants: Sequence[Participant], rounds: Sequence[Round], team_size: int = 1
) -> List[StandingEntry]:
    """Lowest total strokes wins; players without a round sink to the bottom."""
    totals: Dict[str, int] = {p.user_id: 0 for p in participants}
    counts: Dict[str, int] = {p.user_id: 0 for p in participants}
    for played in rounds:
        if played.user_id in totals:
            totals[played.user_id] += played.total_strokes
            counts[played.user_id] += 1

    entries = [
        StandingEntry(
            user_id=p.user_id,
            display_name=p.display_name,
            team_id=p.team_id,
            score=totals[p.user_id],
            rounds_played=counts[p.user_id],
            detail=f"{totals[p.user_id]} strokes ({counts[p.user_id]} rounds)",
        )
        for p in participants
    ]
    return sorted(entries, key=lambda entry: (entry.rounds_played == 0, entry.score))


def calc_match_play(
    participants: Sequence[Participant], rounds: Sequence[Round], team_size: int = 1
) -> List[StandingEntry]:
    """Round-robin hole-by-hole matches among everyone who played each day.

    A won hole is worth one point and moves the net-holes count by one for
    each side. A halved hole is worth half a point each and leaves net holes
    unchanged.
    """
    index = index_rounds(rounds)
    points: Dict[str, float] = {p.user_id: 0.0 for p in participants}
    net_holes: Dict[str, int] = {p.user_id: 0 for p in participants}

    for day in index.values():
        for a, b in combinations(day, 2):
            for color in HOLE_COLORS:
                a_strokes = day[a].get(color)
                b_strokes = day[b].get(color)
                if a_strokes is None or b_strokes is None:
                    continue
                if a_strokes < b_strokes:
                    winner, loser = a, b
                elif b_strokes < a_strokes:
                    winner, loser = b, a
                else:
                    points[a] = points.get(a, 0.0) + 0.5
                    points[b] = points.get(b, 0.0) + 0.5
                    continue
                points[winner] = points.get(winner, 0.0) + 1
                net_holes[winner] = net_holes.get(winner, 0) + 1
                net_holes[loser] = net_holes.get(loser, 0) - 1

    entries = [
        StandingEntry(
            user_id=p.user_id,
            display_name=p.display_name,
            team_id=p.team_id,
            score=points[p.user_id],
            rounds_played=days_played(index, p.user_id),
            detail=f"{_format_points(points[p.user_id])} pts",
            classic_score=net_holes[p.user_id],
        )
        for p in participants
    ]
    return sorted(entries, key=lambda entry: -entry.score)


def calc_best_ball(
    participants: Sequence[Participant], rounds: Sequence[Round], team_size: int = 1
) -> List[StandingEntry]:
    """Team total of the lowest member score on each color, day by day."""
    if team_size <= 1:
        return calc_stroke_play(participants, rounds)

    teams: Dict[int, List[Participant]] = {}
    for p in participants:
        teams.setdefault(p.team_id or 0, []).append(p)

    index = index_rounds(rounds)
    entries: List[StandingEntry] = []
    for team_id in sorted(teams):
        members = teams[team_id]
        total = 0
        days = 0
        for day in index.values():
            playing = [day[m.user_id] for m in members if m.user_id in day]
            if not playing:
                continue
            days += 1
            for color in HOLE_COLORS:
                scores = [holes[color] for holes in playing if color in holes]
                if scores:
                    total += min(scores)

        names = " & ".join(m.display_name for m in members)
        entries.append(
            StandingEntry(
                user_id=members[0].user_id,
                display_name=f"Team {team_id}: {names}",
                team_id=team_id,
                score=total,
                rounds_played=days,
                detail=f"{total} strokes ({days} days)",
            )
        )
    return sorted(entries, key=lambda entry: (entry.rounds_played == 0, entry.score))


def calc_skins(
    participants: Sequence[Participant], rounds: Sequence[Round], team_size: int = 1
) -> List[StandingEntry]:
    """Outright low score on a color takes the skin plus everything carried over.

    The carryover is one running count over the whole tournament, walked in
    date order and then canonical color order.
    """
    index = index_rounds(rounds)
    skins: Dict[str, int] = {p.user_id: 0 for p in participants}
    carryover = 0

    for played_date in sorted(index):
        day = index[played_date]
        for color in HOLE_COLORS:
            scores = {user_id: holes[color] for user_id, holes in day.items() if color in holes}
            if len(scores) < 2:
                carryover += 1
                continue
            low = min(scores.values())
            winners = [user_id for user_id, strokes in scores.items() if strokes == low]
            if len(winners) == 1:
                skins[winners[0]] = skins.get(winners[0], 0) + 1 + carryover
                carryover = 0
            else:
                carryover += 1

    LOGGER.debug("standings.skins_carryover", carryover=carryover)
    entries = [
        StandingEntry(
            user_id=p.user_id,
            display_name=p.display_name,
            team_id=p.team_id,
            score=skins[p.user_id],
            rounds_played=days_played(index, p.user_id),
            detail=f"{skins[p.user_id]} skins",
        )
        for p in participants
    ]
    return sorted(entries, key=lambda entry: -entry.score)


CALCULATORS: Dict[TournamentFormat, Calculator] = {
    TournamentFormat.STROKE_PLAY: calc_stroke_play,
    TournamentFormat.MATCH_PLAY: calc_match_play,
    TournamentFormat.BEST_BALL: calc_best_ball,
    TournamentFormat.SKINS: calc_skins,
}


def compute_standings(
    tournament: Tournament,
    participants: Sequence[Participant],
    rounds: Sequence[Round],
) -> List[StandingEntry]:
    """Rank the participants of a tournament under its format."""
    if not participants:
        return []
    in_window = filter_rounds(tournament, participants, rounds)
    calculator = CALCULATORS[tournament.format]
    standings = calculator(participants, in_window, tournament.team_size)
    LOGGER.debug(
        "standings.computed",
        tournament_id=tournament.id,
        format=tournament.format.value,
        rounds=len(in_window),
        entries=len(standings),
    )
    return standings


def _format_points(value: float) -> str:
    return f"{value:g}"
