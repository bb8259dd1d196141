"""Entry point for the coffee-golf command."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date as date_type
from typing import List, Optional

import structlog

from .config import Settings
from .dates import today_local, tournament_status
from .errors import CoffeeGolfError
from .parser import parse_score
from .service import tournament_scorecard, tournament_standings
from .store import InMemoryStore


def configure_logging(level: int | str = logging.INFO, *, json_output: bool = False) -> None:
    """Configure structlog + stdlib logging."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=sys.stderr,
    )
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


LOGGER = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """CLI argument parsing."""
    parser = argparse.ArgumentParser(description="Coffee Golf score parsing and tournament standings.")
    parser.add_argument(
        "--data",
        type=str,
        help="JSON snapshot of tournaments, participants and rounds (overrides COFFEE_GOLF_DATA_FILE).",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", help="Parse a pasted result and print it as JSON.")
    parse_cmd.add_argument("text", nargs="?", help="Result text; read from stdin when omitted.")

    standings_cmd = commands.add_parser("standings", help="Print tournament standings.")
    standings_cmd.add_argument("tournament_id")
    standings_cmd.add_argument(
        "--classic",
        action="store_true",
        help="Order match play by net holes instead of points.",
    )

    scorecard_cmd = commands.add_parser("scorecard", help="Print the day-by-day scorecard as JSON.")
    scorecard_cmd.add_argument("tournament_id")

    status_cmd = commands.add_parser("status", help="Show whether a date window is live, upcoming or final.")
    status_cmd.add_argument("start_date")
    status_cmd.add_argument("end_date")
    return parser


def run(args: argparse.Namespace, settings: Settings) -> int:
    """Execute a parsed command and return the process exit code."""
    today = today_local(settings.timezone)

    if args.command == "parse":
        text = args.text if args.text is not None else sys.stdin.read()
        parsed = parse_score(text, today=today)
        print(parsed.model_dump_json(indent=2))
        return 0

    if args.command == "status":
        try:
            start = date_type.fromisoformat(args.start_date)
            end = date_type.fromisoformat(args.end_date)
        except ValueError as exc:
            raise SystemExit(f"Invalid date: {exc}") from exc
        print(tournament_status(start, end, today=today).value)
        return 0

    store = _load_store(args.data, settings)

    if args.command == "standings":
        tournament, standings = tournament_standings(store, args.tournament_id)
        if args.classic:
            standings = sorted(standings, key=lambda entry: -(entry.classic_score or 0))
        status = tournament_status(tournament.start_date, tournament.end_date, today=today)
        print(f"{tournament.name or tournament.id} ({status.value})")
        for position, entry in enumerate(standings, start=1):
            print(f"{position:>3}. {entry.display_name}: {entry.detail}")
        return 0

    _, scorecard = tournament_scorecard(store, args.tournament_id)
    print(scorecard.model_dump_json(indent=2))
    return 0


def cli(argv: Optional[List[str]] = None) -> int:
    """Console script entrypoint."""
    args = build_parser().parse_args(argv)

    try:
        settings = Settings()
    except Exception as exc:  # pragma: no cover - startup validation
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level.upper(), json_output=settings.log_json)

    try:
        return run(args, settings)
    except CoffeeGolfError as exc:
        LOGGER.warning("cli.command_failed", command=args.command, error=str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        return 1


def _load_store(data: Optional[str], settings: Settings) -> InMemoryStore:
    path = data or settings.data_file
    if not path:
        raise SystemExit("No data file given. Pass --data or set COFFEE_GOLF_DATA_FILE.")
    try:
        return InMemoryStore.from_file(path)
    except (OSError, json.JSONDecodeError) as exc:
        raise SystemExit(f"Could not read {path}: {exc}") from exc


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(cli())
