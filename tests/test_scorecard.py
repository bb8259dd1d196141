from datetime import date

from conftest import make_round, make_tournament, player

from coffee_golf.models import HOLE_COLORS, HoleColor, TournamentFormat
from coffee_golf.scorecard import build_scorecard, sort_participants


def cells_by_user(row):
    return {cell.user_id: cell for cell in row.cells}


def test_columns_sorted_by_team_then_name():
    participants = [
        player("z", "Zed"),
        player("b", "Bob", 2),
        player("a", "Alice", 2),
        player("c", "Cara", 1),
        player("y", "Amy"),
    ]

    assert [p.user_id for p in sort_participants(participants)] == ["c", "a", "b", "y", "z"]


def test_non_team_formats_count_every_played_cell(alice, bob, cara, day_one, day_two):
    tournament = make_tournament(TournamentFormat.STROKE_PLAY)
    rounds = [
        make_round("b", day_two, [1, 2, 3, 4, 5]),
        make_round("a", day_one, [2, 2, 2, 2, 2]),
        make_round("a", day_two, [3, 3, 3, 3, 3]),
    ]

    card = build_scorecard(tournament, [bob, cara, alice], rounds)

    assert [day.date for day in card.days] == [day_one, day_two]
    assert [p.user_id for p in card.participants] == ["a", "b", "c"]

    second = card.days[1]
    assert [row.color for row in second.rows] == list(HOLE_COLORS)
    blue = cells_by_user(second.rows[0])
    assert blue["a"].strokes == 3 and blue["a"].is_counting
    assert blue["b"].strokes == 1 and blue["b"].is_counting
    assert blue["c"].strokes is None and not blue["c"].is_counting
    assert second.player_totals == {"a": 15, "b": 15, "c": 0}
    assert second.team_totals == {}


def test_best_ball_marks_team_lows_including_ties(day_one):
    tournament = make_tournament(TournamentFormat.BEST_BALL, team_size=2)
    members = [
        player("a", "Alice", 1),
        player("b", "Bob", 1),
        player("c", "Cara", 2),
        player("d", "Dev", 2),
    ]
    rounds = [
        make_round("a", day_one, [1, 3, 2, 4, 2]),
        make_round("b", day_one, [2, 3, 1, 3, 2]),
        make_round("c", day_one, [4, 4, 4, 4, 4]),
    ]

    (day,) = build_scorecard(tournament, members, rounds).days
    rows = {row.color: cells_by_user(row) for row in day.rows}

    assert rows[HoleColor.BLUE]["a"].is_counting
    assert not rows[HoleColor.BLUE]["b"].is_counting
    assert rows[HoleColor.YELLOW]["a"].is_counting and rows[HoleColor.YELLOW]["b"].is_counting
    assert rows[HoleColor.RED]["b"].is_counting and not rows[HoleColor.RED]["a"].is_counting
    # a lone scorer is the team low even when it is the worst score on the card
    assert rows[HoleColor.BLUE]["c"].is_counting
    assert not rows[HoleColor.BLUE]["d"].is_counting

    assert day.team_totals == {1: 1 + 3 + 1 + 3 + 2, 2: 20}
    assert day.player_totals == {"a": 12, "b": 11, "c": 20, "d": 0}


def test_best_ball_groups_unassigned_players_as_team_zero(day_one):
    tournament = make_tournament(TournamentFormat.BEST_BALL, team_size=2)
    members = [
        player("a", "Alice", 1),
        player("b", "Bob"),
        player("c", "Cara"),
        player("d", "Dev", 0),
    ]
    rounds = [
        make_round("a", day_one, [5, 5, 5, 5, 5]),
        make_round("b", day_one, [2, 3, 4, 2, 2]),
        make_round("c", day_one, [3, 3, 2, 2, 4]),
    ]

    card = build_scorecard(tournament, members, rounds)
    (day,) = card.days
    rows = {row.color: cells_by_user(row) for row in day.rows}

    assert [p.user_id for p in card.participants] == ["d", "a", "b", "c"]
    assert rows[HoleColor.BLUE]["b"].is_counting and not rows[HoleColor.BLUE]["c"].is_counting
    assert rows[HoleColor.YELLOW]["b"].is_counting and rows[HoleColor.YELLOW]["c"].is_counting
    assert rows[HoleColor.RED]["c"].is_counting and not rows[HoleColor.RED]["b"].is_counting
    assert not rows[HoleColor.BLUE]["d"].is_counting
    # Alice is alone on team 1, so her worse scores still count for it
    assert all(rows[color]["a"].is_counting for color in HOLE_COLORS)
    assert day.team_totals == {0: 2 + 3 + 2 + 2 + 2, 1: 25}


def test_best_ball_with_team_size_one_counts_everyone(alice, bob, day_one):
    tournament = make_tournament(TournamentFormat.BEST_BALL, team_size=1)
    rounds = [make_round("a", day_one, [1, 1, 1, 1, 1]), make_round("b", day_one, [2, 2, 2, 2, 2])]

    (day,) = build_scorecard(tournament, [alice, bob], rounds).days

    assert all(cell.is_counting for row in day.rows for cell in row.cells)
    assert day.team_totals == {}


def test_rounds_outside_window_are_dropped(alice):
    tournament = make_tournament(
        TournamentFormat.SKINS, start=date(2026, 2, 10), end=date(2026, 2, 11)
    )
    rounds = [
        make_round("a", date(2026, 2, 9), [1, 1, 1, 1, 1]),
        make_round("a", date(2026, 2, 11), [2, 2, 2, 2, 2]),
    ]

    card = build_scorecard(tournament, [alice], rounds)

    assert [day.date for day in card.days] == [date(2026, 2, 11)]


def test_empty_inputs_give_no_days(alice):
    tournament = make_tournament(TournamentFormat.MATCH_PLAY)

    assert build_scorecard(tournament, [], []).days == []
    assert build_scorecard(tournament, [alice], []).days == []
