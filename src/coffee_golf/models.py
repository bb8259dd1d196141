"""Pydantic models shared by the parser, the calculators and the scorecard."""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, model_validator


class HoleColor(str, Enum):
    """The five colored holes of a Coffee Golf round."""

    BLUE = "blue"
    YELLOW = "yellow"
    RED = "red"
    PURPLE = "purple"
    GREEN = "green"


# Canonical order used for every per-color traversal.
HOLE_COLORS: tuple[HoleColor, ...] = (
    HoleColor.BLUE,
    HoleColor.YELLOW,
    HoleColor.RED,
    HoleColor.PURPLE,
    HoleColor.GREEN,
)


class TournamentFormat(str, Enum):
    STROKE_PLAY = "stroke_play"
    MATCH_PLAY = "match_play"
    BEST_BALL = "best_ball"
    SKINS = "skins"


class TournamentStatus(str, Enum):
    LIVE = "Live"
    UPCOMING = "Upcoming"
    FINAL = "Final"


FORMAT_DISPLAY: Dict[TournamentFormat, Dict[str, str]] = {
    TournamentFormat.STROKE_PLAY: {
        "label": "Stroke Play",
        "description": "Lowest total strokes across the tournament wins.",
    },
    TournamentFormat.MATCH_PLAY: {
        "label": "Match Play",
        "description": "Every player faces every other player hole by hole each day.",
    },
    TournamentFormat.BEST_BALL: {
        "label": "Best Ball",
        "description": "Teams count their lowest score on each hole.",
    },
    TournamentFormat.SKINS: {
        "label": "Skins",
        "description": "Win a hole outright to take the skin; ties carry over.",
    },
}


class ParsedHole(BaseModel):
    """One hole extracted from a pasted result."""

    color: HoleColor
    strokes: int = Field(ge=1)
    hole_number: int = Field(ge=1, le=5)


class ParsedRound(BaseModel):
    """Normalised result of parsing a pasted score."""

    date: dt.date
    total_strokes: int
    holes: List[ParsedHole]


class HoleScore(BaseModel):
    color: HoleColor
    strokes: int
    hole_number: Optional[int] = None


class Round(BaseModel):
    """A stored daily round with its five hole scores."""

    id: str
    user_id: str
    played_date: dt.date
    total_strokes: int
    hole_scores: List[HoleScore] = Field(default_factory=list)
    raw_input: Optional[str] = None


class Participant(BaseModel):
    user_id: str
    team_id: Optional[int] = None
    display_name: str = "Unknown"


class Tournament(BaseModel):
    """Tournament settings; the date window is inclusive on both ends."""

    id: str
    group_id: str
    name: str = ""
    format: TournamentFormat
    start_date: dt.date
    end_date: dt.date
    team_size: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def check_window(self) -> "Tournament":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    @property
    def is_best_ball(self) -> bool:
        return self.format is TournamentFormat.BEST_BALL and self.team_size > 1


class StandingEntry(BaseModel):
    """A ranked line in the standings; a team line in best ball."""

    user_id: str
    display_name: str
    team_id: Optional[int] = None
    score: Union[int, float]
    rounds_played: int
    detail: str
    classic_score: Optional[int] = None


class ScorecardCell(BaseModel):
    user_id: str
    display_name: str
    team_id: Optional[int] = None
    strokes: Optional[int] = None
    is_counting: bool = False


class ScorecardRow(BaseModel):
    color: HoleColor
    cells: List[ScorecardCell]


class ScorecardDay(BaseModel):
    date: dt.date
    rows: List[ScorecardRow]
    team_totals: Dict[int, int] = Field(default_factory=dict)
    player_totals: Dict[str, int] = Field(default_factory=dict)


class Scorecard(BaseModel):
    participants: List[Participant] = Field(default_factory=list)
    days: List[ScorecardDay] = Field(default_factory=list)


class ColorStats(BaseModel):
    average: float
    best: int
    total_rounds: int


class PlayerStats(BaseModel):
    """Lifetime numbers for a single player."""

    total_rounds: int
    average_score: float
    best_round: int
    best_round_date: Optional[dt.date] = None
    current_streak: int
    per_color: Dict[HoleColor, ColorStats]


class LeaderboardEntry(BaseModel):
    user_id: str
    display_name: str
    total_strokes: int
    rounds_played: int
    average: float
    best_round: int
