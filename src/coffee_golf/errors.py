"""Exceptions raised by the scoring library."""

from __future__ import annotations


class CoffeeGolfError(Exception):
    """Base class for every error surfaced to callers."""


class ParseError(CoffeeGolfError, ValueError):
    """A pasted result could not be turned into a round."""


class DateNotFound(ParseError):
    def __init__(self) -> None:
        super().__init__('Could not find date. Expected format: "Coffee Golf - Mon DD"')


class DateUnparseable(ParseError):
    def __init__(self, fragment: str) -> None:
        self.fragment = fragment
        super().__init__(f'Could not parse date: "{fragment}"')


class StrokesNotFound(ParseError):
    def __init__(self) -> None:
        super().__init__('Could not find stroke count. Expected "X Strokes"')


class WrongColorCount(ParseError):
    def __init__(self, found: int) -> None:
        self.found = found
        super().__init__(f"Expected 5 color holes, found {found}")


class WrongDigitCount(ParseError):
    def __init__(self, found: int) -> None:
        self.found = found
        super().__init__(f"Expected 5 hole scores, found {found}")


class ScoreMismatch(ParseError):
    def __init__(self, computed: int, stated: int) -> None:
        self.computed = computed
        self.stated = stated
        super().__init__(f"Score mismatch: holes sum to {computed}, but header says {stated}")


class TournamentNotFound(CoffeeGolfError):
    def __init__(self, tournament_id: str) -> None:
        self.tournament_id = tournament_id
        super().__init__(f"Tournament {tournament_id} not found")


class DuplicateRound(CoffeeGolfError):
    def __init__(self, played_date: str) -> None:
        self.played_date = played_date
        super().__init__(
            f"You already submitted a score for {played_date}. Delete it first to resubmit."
        )


class RoundNotFound(CoffeeGolfError):
    def __init__(self, round_id: str) -> None:
        self.round_id = round_id
        super().__init__(f"Round {round_id} not found")
