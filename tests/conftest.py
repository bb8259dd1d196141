from __future__ import annotations

from datetime import date
from itertools import count
from typing import Optional, Sequence

import pytest

from coffee_golf.models import (
    HOLE_COLORS,
    HoleScore,
    Participant,
    Round,
    Tournament,
    TournamentFormat,
)

_ids = count(1)


def make_round(user_id: str, played: date, strokes: Sequence[int]) -> Round:
    """Round with strokes given in canonical color order (blue .. green)."""
    return Round(
        id=f"r{next(_ids)}",
        user_id=user_id,
        played_date=played,
        total_strokes=sum(strokes),
        hole_scores=[
            HoleScore(color=color, strokes=value, hole_number=number)
            for number, (color, value) in enumerate(zip(HOLE_COLORS, strokes), start=1)
        ],
    )


def make_tournament(
    fmt: TournamentFormat,
    start: date = date(2026, 2, 1),
    end: date = date(2026, 2, 28),
    team_size: int = 1,
    tournament_id: str = "t1",
) -> Tournament:
    return Tournament(
        id=tournament_id,
        group_id="g1",
        name="February Cup",
        format=fmt,
        start_date=start,
        end_date=end,
        team_size=team_size,
    )


def player(user_id: str, name: str, team_id: Optional[int] = None) -> Participant:
    return Participant(user_id=user_id, display_name=name, team_id=team_id)


@pytest.fixture
def day_one() -> date:
    return date(2026, 2, 15)


@pytest.fixture
def day_two() -> date:
    return date(2026, 2, 16)


@pytest.fixture
def alice() -> Participant:
    return player("a", "Alice")


@pytest.fixture
def bob() -> Participant:
    return player("b", "Bob")


@pytest.fixture
def cara() -> Participant:
    return player("c", "Cara")
