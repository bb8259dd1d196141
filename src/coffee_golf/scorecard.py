"""Day-by-day scorecard grid for a tournament."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Set

import structlog

from .indexing import filter_rounds, index_rounds
from .models import (
    HOLE_COLORS,
    HoleColor,
    Participant,
    Round,
    Scorecard,
    ScorecardCell,
    ScorecardDay,
    ScorecardRow,
    Tournament,
)

LOGGER = structlog.get_logger(__name__)


def sort_participants(participants: Sequence[Participant]) -> List[Participant]:
    """Column order: team ascending with unassigned players last, then name."""
    return sorted(
        participants,
        key=lambda p: (p.team_id is None, p.team_id or 0, p.display_name),
    )


def build_scorecard(
    tournament: Tournament,
    participants: Sequence[Participant],
    rounds: Sequence[Round],
) -> Scorecard:
    """Build one grid per played date with a row per color and a cell per player.

    In best ball a cell counts when it ties the team low for that color and
    day. In every other format each score that was played counts.
    """
    columns = sort_participants(participants)
    if not columns:
        return Scorecard()

    index = index_rounds(filter_rounds(tournament, columns, rounds))
    best_ball = tournament.is_best_ball

    teams: Dict[int, List[str]] = {}
    if best_ball:
        for p in columns:
            teams.setdefault(p.team_id or 0, []).append(p.user_id)

    days: List[ScorecardDay] = []
    for played_date in sorted(index):
        day = index[played_date]
        rows: List[ScorecardRow] = []
        for color in HOLE_COLORS:
            if best_ball:
                counting = _team_low_scorers(teams, day, color)
            else:
                counting = {p.user_id for p in columns if color in day.get(p.user_id, {})}
            rows.append(
                ScorecardRow(
                    color=color,
                    cells=[
                        ScorecardCell(
                            user_id=p.user_id,
                            display_name=p.display_name,
                            team_id=p.team_id,
                            strokes=_strokes(day, p.user_id, color),
                            is_counting=p.user_id in counting,
                        )
                        for p in columns
                    ],
                )
            )

        player_totals = {p.user_id: sum(day.get(p.user_id, {}).values()) for p in columns}
        team_totals: Dict[int, int] = {}
        if best_ball:
            for team_id, member_ids in teams.items():
                total = 0
                for color in HOLE_COLORS:
                    low = _team_low(member_ids, day, color)
                    if low is not None:
                        total += low
                team_totals[team_id] = total

        days.append(
            ScorecardDay(
                date=played_date,
                rows=rows,
                team_totals=team_totals,
                player_totals=player_totals,
            )
        )

    LOGGER.debug("scorecard.built", tournament_id=tournament.id, days=len(days))
    return Scorecard(participants=columns, days=days)


def _strokes(day: Dict[str, Dict[HoleColor, int]], user_id: str, color: HoleColor) -> Optional[int]:
    return day.get(user_id, {}).get(color)


def _team_low(member_ids: Sequence[str], day: Dict[str, Dict[HoleColor, int]], color: HoleColor) -> Optional[int]:
    scores = [day[uid][color] for uid in member_ids if color in day.get(uid, {})]
    return min(scores) if scores else None


def _team_low_scorers(
    teams: Dict[int, List[str]], day: Dict[str, Dict[HoleColor, int]], color: HoleColor
) -> Set[str]:
    counting: Set[str] = set()
    for member_ids in teams.values():
        low = _team_low(member_ids, day, color)
        if low is None:
            continue
        counting.update(uid for uid in member_ids if _strokes(day, uid, color) == low)
    return counting
