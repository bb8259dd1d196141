"""Storage interface the scoring code reads through, plus an in-memory store."""

from __future__ import annotations

import json
import uuid
from datetime import date
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol

import structlog

from .errors import DuplicateRound, RoundNotFound
from .models import HoleScore, ParsedRound, Participant, Round, Tournament

LOGGER = structlog.get_logger(__name__)


class RoundStore(Protocol):
    """Read side of whatever persists rounds, tournaments and memberships."""

    def get_rounds(self, participant_ids: Iterable[str], start: date, end: date) -> List[Round]:
        ...

    def get_participants(self, tournament_id: str) -> List[Participant]:
        ...

    def get_tournament(self, tournament_id: str) -> Optional[Tournament]:
        ...


class InMemoryStore:
    """Dict-backed store for the CLI, the API and tests."""

    def __init__(
        self,
        tournaments: Iterable[Tournament] = (),
        participants: Optional[Dict[str, List[Participant]]] = None,
        rounds: Iterable[Round] = (),
    ) -> None:
        self._tournaments: Dict[str, Tournament] = {t.id: t for t in tournaments}
        self._participants: Dict[str, List[Participant]] = dict(participants or {})
        self._rounds: Dict[str, Round] = {r.id: r for r in rounds}

    @classmethod
    def from_file(cls, path: Path) -> "InMemoryStore":
        """Load a snapshot shaped as ``{"tournaments", "participants", "rounds"}``."""
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        store = cls(
            tournaments=[Tournament.model_validate(item) for item in payload.get("tournaments", [])],
            participants={
                tournament_id: [Participant.model_validate(item) for item in items]
                for tournament_id, items in payload.get("participants", {}).items()
            },
            rounds=[Round.model_validate(item) for item in payload.get("rounds", [])],
        )
        LOGGER.info(
            "store.loaded",
            path=str(path),
            tournaments=len(store._tournaments),
            rounds=len(store._rounds),
        )
        return store

    def get_rounds(self, participant_ids: Iterable[str], start: date, end: date) -> List[Round]:
        wanted = set(participant_ids)
        matches = [
            r for r in self._rounds.values() if r.user_id in wanted and start <= r.played_date <= end
        ]
        return sorted(matches, key=lambda r: r.played_date)

    def get_participants(self, tournament_id: str) -> List[Participant]:
        return list(self._participants.get(tournament_id, []))

    def get_tournament(self, tournament_id: str) -> Optional[Tournament]:
        return self._tournaments.get(tournament_id)

    def rounds_for_user(self, user_id: str) -> List[Round]:
        return sorted(
            (r for r in self._rounds.values() if r.user_id == user_id),
            key=lambda r: r.played_date,
            reverse=True,
        )

    def find_round(self, user_id: str, played_date: date) -> Optional[Round]:
        for existing in self._rounds.values():
            if existing.user_id == user_id and existing.played_date == played_date:
                return existing
        return None

    def add_round(self, user_id: str, parsed: ParsedRound, raw_input: Optional[str] = None) -> Round:
        """Store a parsed round with its five hole scores, or nothing at all."""
        if self.find_round(user_id, parsed.date) is not None:
            raise DuplicateRound(parsed.date.isoformat())

        # Round and hole scores validate together before anything is inserted.
        stored = Round(
            id=uuid.uuid4().hex,
            user_id=user_id,
            played_date=parsed.date,
            total_strokes=parsed.total_strokes,
            hole_scores=[
                HoleScore(color=hole.color, strokes=hole.strokes, hole_number=hole.hole_number)
                for hole in parsed.holes
            ],
            raw_input=raw_input.strip() if raw_input else None,
        )
        self._rounds[stored.id] = stored
        LOGGER.info("store.round_added", round_id=stored.id, user_id=user_id, played_date=parsed.date.isoformat())
        return stored

    def delete_round(self, round_id: str) -> None:
        if self._rounds.pop(round_id, None) is None:
            raise RoundNotFound(round_id)
        LOGGER.info("store.round_deleted", round_id=round_id)
