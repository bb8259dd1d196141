from datetime import date

import pytest

from coffee_golf.dates import local_date_str, today_local, tournament_status, within_window
from coffee_golf.models import TournamentStatus

START = date(2026, 2, 10)
END = date(2026, 2, 20)


@pytest.mark.parametrize(
    "today, expected",
    [
        (date(2026, 2, 9), TournamentStatus.UPCOMING),
        (START, TournamentStatus.LIVE),
        (date(2026, 2, 15), TournamentStatus.LIVE),
        (END, TournamentStatus.LIVE),
        (date(2026, 2, 21), TournamentStatus.FINAL),
    ],
)
def test_tournament_status(today, expected):
    assert tournament_status(START, END, today=today) is expected


def test_local_date_str_pads_fields():
    assert local_date_str(date(2026, 3, 7)) == "2026-03-07"


def test_within_window_is_inclusive():
    assert within_window(START, START, END)
    assert within_window(END, START, END)
    assert not within_window(date(2026, 2, 21), START, END)


def test_today_local_with_unknown_zone_falls_back_to_utc():
    assert isinstance(today_local("Not/AZone"), date)
    assert today_local() == date.today()
