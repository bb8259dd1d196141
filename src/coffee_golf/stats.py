"""Player history summaries and the group leaderboard."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence

from .models import HOLE_COLORS, ColorStats, HoleColor, LeaderboardEntry, Participant, PlayerStats, Round


def player_stats(rounds: Sequence[Round], today: Optional[date] = None) -> Optional[PlayerStats]:
    """Summarise one player's rounds; ``None`` when there are none."""

    if not rounds:
        return None

    today = today or date.today()
    newest_first = sorted(rounds, key=lambda r: r.played_date, reverse=True)
    total = sum(r.total_strokes for r in rounds)
    best = min(newest_first, key=lambda r: r.total_strokes)

    streak = 0
    for offset, played in enumerate(newest_first):
        if played.played_date != today - timedelta(days=offset):
            break
        streak += 1

    per_color: Dict[HoleColor, ColorStats] = {}
    for color in HOLE_COLORS:
        strokes = [hole.strokes for r in rounds for hole in r.hole_scores if hole.color == color]
        per_color[color] = ColorStats(
            average=sum(strokes) / len(strokes) if strokes else 0,
            best=min(strokes) if strokes else 0,
            total_rounds=len(strokes),
        )

    return PlayerStats(
        total_rounds=len(rounds),
        average_score=round(total / len(rounds), 1),
        best_round=best.total_strokes,
        best_round_date=best.played_date,
        current_streak=streak,
        per_color=per_color,
    )


def group_leaderboard(members: Sequence[Participant], rounds: Sequence[Round]) -> List[LeaderboardEntry]:
    """Rank group members by average round, members without rounds last."""

    entries: List[LeaderboardEntry] = []
    for member in members:
        own = [r.total_strokes for r in rounds if r.user_id == member.user_id]
        entries.append(
            LeaderboardEntry(
                user_id=member.user_id,
                display_name=member.display_name,
                total_strokes=sum(own),
                rounds_played=len(own),
                average=round(sum(own) / len(own), 1) if own else 0,
                best_round=min(own) if own else 0,
            )
        )
    return sorted(entries, key=lambda entry: (entry.rounds_played == 0, entry.average))
