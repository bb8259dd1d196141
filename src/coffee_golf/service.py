"""Request-level operations that read through a store and run the scoring code."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

import structlog

from .errors import TournamentNotFound
from .models import Round, Scorecard, StandingEntry, Tournament
from .parser import parse_score
from .scorecard import build_scorecard
from .standings import compute_standings
from .store import InMemoryStore, RoundStore

LOGGER = structlog.get_logger(__name__)


def submit_score(store: InMemoryStore, user_id: str, raw_input: str, today: Optional[date] = None) -> Round:
    """Parse a pasted result and store it as the user's round for that date."""
    parsed = parse_score(raw_input, today=today)
    return store.add_round(user_id, parsed, raw_input=raw_input)


def tournament_standings(store: RoundStore, tournament_id: str) -> tuple[Tournament, List[StandingEntry]]:
    tournament = _require_tournament(store, tournament_id)
    participants = store.get_participants(tournament_id)
    if not participants:
        return tournament, []
    rounds = store.get_rounds(
        [p.user_id for p in participants], tournament.start_date, tournament.end_date
    )
    standings = compute_standings(tournament, participants, rounds)
    LOGGER.info("standings.served", tournament_id=tournament_id, entries=len(standings))
    return tournament, standings


def tournament_scorecard(store: RoundStore, tournament_id: str) -> tuple[Tournament, Scorecard]:
    tournament = _require_tournament(store, tournament_id)
    participants = store.get_participants(tournament_id)
    if not participants:
        return tournament, Scorecard()
    rounds = store.get_rounds(
        [p.user_id for p in participants], tournament.start_date, tournament.end_date
    )
    scorecard = build_scorecard(tournament, participants, rounds)
    LOGGER.info("scorecard.served", tournament_id=tournament_id, days=len(scorecard.days))
    return tournament, scorecard


def _require_tournament(store: RoundStore, tournament_id: str) -> Tournament:
    tournament = store.get_tournament(tournament_id)
    if tournament is None:
        raise TournamentNotFound(tournament_id)
    return tournament
