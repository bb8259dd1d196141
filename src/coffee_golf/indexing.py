"""Per-day lookup tables built from stored rounds."""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List

from .dates import within_window
from .models import HoleColor, Participant, Round, Tournament

# date -> user_id -> color -> strokes
DayIndex = Dict[date, Dict[str, Dict[HoleColor, int]]]


def index_rounds(rounds: Iterable[Round]) -> DayIndex:
    """Group hole scores by played date, then user, then color.

    Dates and users keep the order in which their rounds arrive.
    """
    by_date: DayIndex = {}
    for played in rounds:
        day = by_date.setdefault(played.played_date, {})
        day[played.user_id] = {hole.color: hole.strokes for hole in played.hole_scores}
    return by_date


def filter_rounds(
    tournament: Tournament,
    participants: Iterable[Participant],
    rounds: Iterable[Round],
) -> List[Round]:
    """Keep rounds by participants that fall inside the tournament window."""
    player_ids = {participant.user_id for participant in participants}
    return [
        played
        for played in rounds
        if played.user_id in player_ids
        and within_window(played.played_date, tournament.start_date, tournament.end_date)
    ]


def days_played(index: DayIndex, user_id: str) -> int:
    return sum(1 for day in index.values() if user_id in day)
