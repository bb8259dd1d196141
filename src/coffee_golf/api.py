"""FastAPI application exposing the parser and the tournament calculators."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

import structlog
from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel, Field

from .config import Settings
from .dates import today_local, tournament_status
from .errors import DuplicateRound, ParseError, RoundNotFound, TournamentNotFound
from .main import configure_logging
from .models import (
    FORMAT_DISPLAY,
    LeaderboardEntry,
    ParsedRound,
    Participant,
    PlayerStats,
    Round,
    Scorecard,
    StandingEntry,
    Tournament,
    TournamentStatus,
)
from .parser import parse_score
from .scorecard import build_scorecard
from .service import submit_score, tournament_scorecard, tournament_standings
from .standings import compute_standings
from .stats import group_leaderboard, player_stats
from .store import InMemoryStore

settings = Settings()
configure_logging(settings.log_level.upper(), json_output=settings.log_json)
LOGGER = structlog.get_logger(__name__)

app = FastAPI(title="Coffee Golf", version="0.1.0")


class ParseRequest(BaseModel):
    """Request payload for /parse."""

    text: str


class TournamentRequest(BaseModel):
    """A tournament with the participants and rounds to score it with."""

    tournament: Tournament
    participants: List[Participant] = Field(default_factory=list)
    rounds: List[Round] = Field(default_factory=list)


class LeaderboardRequest(BaseModel):
    """Group members with the rounds they have played."""

    members: List[Participant] = Field(default_factory=list)
    rounds: List[Round] = Field(default_factory=list)


class StandingsResponse(BaseModel):
    label: str
    status: TournamentStatus
    standings: List[StandingEntry]


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@app.post("/parse", response_model=ParsedRound)
async def parse(request: ParseRequest) -> ParsedRound:
    """Parse a pasted Coffee Golf result."""

    try:
        return parse_score(request.text, today=today_local(settings.timezone))
    except ParseError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.post("/standings", response_model=StandingsResponse)
async def standings(request: TournamentRequest) -> StandingsResponse:
    """Rank the participants of a tournament."""

    tournament = request.tournament
    LOGGER.info("api.standings", tournament_id=tournament.id, format=tournament.format.value)
    entries = compute_standings(tournament, request.participants, request.rounds)
    return StandingsResponse(
        label=FORMAT_DISPLAY[tournament.format]["label"],
        status=tournament_status(
            tournament.start_date, tournament.end_date, today=today_local(settings.timezone)
        ),
        standings=entries,
    )


@app.post("/scorecard", response_model=Scorecard)
async def scorecard(request: TournamentRequest) -> Scorecard:
    """Build the day-by-day scorecard of a tournament."""

    LOGGER.info("api.scorecard", tournament_id=request.tournament.id)
    return build_scorecard(request.tournament, request.participants, request.rounds)


class SubmitRequest(BaseModel):
    """Request payload for submitting a pasted result."""

    text: str


class TournamentStandingsResponse(BaseModel):
    tournament: Tournament
    status: TournamentStatus
    standings: List[StandingEntry]


@lru_cache(maxsize=1)
def get_store() -> InMemoryStore:
    """Store backing the /tournaments and /rounds endpoints."""
    if settings.data_file is None:
        return InMemoryStore()
    return InMemoryStore.from_file(settings.data_file)


@app.get("/tournaments/{tournament_id}/standings", response_model=TournamentStandingsResponse)
async def stored_standings(
    tournament_id: str, store: InMemoryStore = Depends(get_store)
) -> TournamentStandingsResponse:
    try:
        tournament, entries = tournament_standings(store, tournament_id)
    except TournamentNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return TournamentStandingsResponse(
        tournament=tournament,
        status=tournament_status(
            tournament.start_date, tournament.end_date, today=today_local(settings.timezone)
        ),
        standings=entries,
    )


@app.get("/tournaments/{tournament_id}/scorecard", response_model=Scorecard)
async def stored_scorecard(tournament_id: str, store: InMemoryStore = Depends(get_store)) -> Scorecard:
    try:
        _, card = tournament_scorecard(store, tournament_id)
    except TournamentNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return card


@app.post("/users/{user_id}/rounds", response_model=Round, status_code=201)
async def submit(user_id: str, request: SubmitRequest, store: InMemoryStore = Depends(get_store)) -> Round:
    """Parse and store a user's round for the day it was played."""

    try:
        return submit_score(store, user_id, request.text, today=today_local(settings.timezone))
    except ParseError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except DuplicateRound as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc


@app.delete("/rounds/{round_id}", status_code=204)
async def delete_round(round_id: str, store: InMemoryStore = Depends(get_store)) -> None:
    try:
        store.delete_round(round_id)
    except RoundNotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.get("/users/{user_id}/stats", response_model=Optional[PlayerStats])
async def stats(user_id: str, store: InMemoryStore = Depends(get_store)) -> Optional[PlayerStats]:
    """Lifetime numbers for a player, or null before their first round."""

    return player_stats(store.rounds_for_user(user_id), today=today_local(settings.timezone))


@app.post("/leaderboard", response_model=List[LeaderboardEntry])
async def leaderboard(request: LeaderboardRequest) -> List[LeaderboardEntry]:
    """Rank group members by their average round."""

    LOGGER.info("api.leaderboard", members=len(request.members), rounds=len(request.rounds))
    return group_leaderboard(request.members, request.rounds)
