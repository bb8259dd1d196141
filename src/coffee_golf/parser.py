"""Parser for the result text Coffee Golf shares after a round."""

from __future__ import annotations

import re
from datetime import date
from typing import List, Optional

import structlog
from dateutil.parser import parserinfo

from .errors import (
    DateNotFound,
    DateUnparseable,
    ParseError,
    ScoreMismatch,
    StrokesNotFound,
    WrongColorCount,
    WrongDigitCount,
)
from .models import HoleColor, ParsedHole, ParsedRound

LOGGER = structlog.get_logger(__name__)

COLOR_GLYPHS = {
    "\U0001F7E6": HoleColor.BLUE,
    "\U0001F7E8": HoleColor.YELLOW,
    "\U0001F7E5": HoleColor.RED,
    "\U0001F7EA": HoleColor.PURPLE,
    "\U0001F7E9": HoleColor.GREEN,
}

DATE_PATTERN = re.compile(r"Coffee\s+Golf\s*-\s*(\w+)\s+(\d{1,2})", re.IGNORECASE)
STROKES_PATTERN = re.compile(r"(\d+)\s*Strokes", re.IGNORECASE)
COLOR_PATTERN = re.compile("[" + "".join(COLOR_GLYPHS) + "]")
# Keycap digits: the ASCII digit, VARIATION SELECTOR-16, COMBINING ENCLOSING KEYCAP.
DIGIT_PATTERN = re.compile("([1-9])\uFE0F\u20E3")

HOLE_COUNT = 5

_MONTHS = parserinfo()


def parse_score(text: str, today: Optional[date] = None) -> ParsedRound:
    """Parse a pasted Coffee Golf result into a round.

    The year is taken from ``today`` (the local date by default) since the
    shared text only carries month and day. Raises a :class:`ParseError`
    subclass naming the step that failed; nothing is returned on partial
    success.
    """

    trimmed = (text or "").strip()
    try:
        played = _extract_date(trimmed, today or date.today())
        total_strokes = _extract_total(trimmed)
        colors = _extract_colors(trimmed)
        digits = _extract_digits(trimmed)
    except ParseError as exc:
        LOGGER.info("score.parse_failed", error=str(exc), error_type=type(exc).__name__)
        raise

    holes = [
        ParsedHole(color=color, strokes=strokes, hole_number=index)
        for index, (color, strokes) in enumerate(zip(colors, digits), start=1)
    ]

    computed = sum(digits)
    if computed != total_strokes:
        LOGGER.info("score.parse_failed", error_type="ScoreMismatch", computed=computed, stated=total_strokes)
        raise ScoreMismatch(computed, total_strokes)

    LOGGER.debug("score.parsed", played_date=played.isoformat(), total_strokes=total_strokes)
    return ParsedRound(date=played, total_strokes=total_strokes, holes=holes)


def _extract_date(text: str, today: date) -> date:
    match = DATE_PATTERN.search(text)
    if not match:
        raise DateNotFound()

    month_name, day_text = match.group(1), match.group(2)
    fragment = f"{month_name} {day_text}"
    month = _MONTHS.month(month_name)
    if month is None:
        raise DateUnparseable(fragment)
    try:
        return date(today.year, month, int(day_text))
    except ValueError as exc:
        raise DateUnparseable(fragment) from exc


def _extract_total(text: str) -> int:
    match = STROKES_PATTERN.search(text)
    if not match:
        raise StrokesNotFound()
    return int(match.group(1))


def _extract_colors(text: str) -> List[HoleColor]:
    glyphs = COLOR_PATTERN.findall(text)
    if len(glyphs) != HOLE_COUNT:
        raise WrongColorCount(len(glyphs))
    return [COLOR_GLYPHS[glyph] for glyph in glyphs]


def _extract_digits(text: str) -> List[int]:
    digits = DIGIT_PATTERN.findall(text)
    if len(digits) != HOLE_COUNT:
        raise WrongDigitCount(len(digits))
    return [int(digit) for digit in digits]
