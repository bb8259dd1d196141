from datetime import date

from conftest import make_round, player

from coffee_golf.models import HoleColor
from coffee_golf.stats import group_leaderboard, player_stats


def test_player_stats_summary():
    today = date(2026, 2, 16)
    rounds = [
        make_round("a", date(2026, 2, 16), [2, 3, 2, 2, 3]),
        make_round("a", date(2026, 2, 15), [1, 2, 2, 2, 2]),
        make_round("a", date(2026, 2, 12), [4, 4, 4, 4, 4]),
    ]

    stats = player_stats(rounds, today=today)

    assert stats.total_rounds == 3
    assert stats.average_score == round((12 + 9 + 20) / 3, 1)
    assert stats.best_round == 9
    assert stats.best_round_date == date(2026, 2, 15)
    assert stats.current_streak == 2
    assert stats.per_color[HoleColor.BLUE].best == 1
    assert stats.per_color[HoleColor.BLUE].total_rounds == 3
    assert stats.per_color[HoleColor.YELLOW].average == 3


def test_streak_is_zero_without_a_round_today():
    rounds = [make_round("a", date(2026, 2, 15), [2, 2, 2, 2, 2])]

    assert player_stats(rounds, today=date(2026, 2, 16)).current_streak == 0


def test_no_rounds_means_no_stats():
    assert player_stats([]) is None


def test_group_leaderboard_orders_by_average_with_idle_members_last():
    members = [player("a", "Alice"), player("b", "Bob"), player("c", "Cara")]
    rounds = [
        make_round("a", date(2026, 2, 15), [3, 3, 3, 3, 3]),
        make_round("a", date(2026, 2, 16), [2, 2, 2, 2, 2]),
        make_round("c", date(2026, 2, 15), [2, 2, 2, 2, 3]),
    ]

    board = group_leaderboard(members, rounds)

    assert [e.user_id for e in board] == ["c", "a", "b"]
    assert board[1].average == 12.5
    assert board[1].best_round == 10
    assert board[1].total_strokes == 25
    assert board[2].rounds_played == 0
    assert board[2].average == 0
