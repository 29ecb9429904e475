"""Player roster queries and per-player statistics."""

from __future__ import annotations

from typing import Any

from flask import current_app
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from tuskers.errors import InternalError, NotFound
from tuskers.extensions import db
from tuskers.models import Player, PlayerStats
from tuskers.services.content import players, serialize_player
from tuskers.services.crud import CRUDService
from tuskers.services.upsert import dialect_insert

STAT_FIELDS = (
    'matches',
    'runs_scored',
    'balls_faced',
    'fours',
    'sixes',
    'wickets_taken',
    'balls_bowled',
    'runs_conceded',
    'catches',
    'run_outs',
    'stumpings',
)


class PlayerStatsService(CRUDService[PlayerStats]):
    """Stats rows are addressed by player, never by their own id."""

    def __init__(self):
        super().__init__(PlayerStats, label='Player stats')

    def get_for_player(self, player_id: int) -> PlayerStats | None:
        return db.session.execute(
            select(PlayerStats).where(PlayerStats.player_id == player_id)
        ).scalars().first()

    def upsert(self, player_id: int, data: dict[str, Any]) -> PlayerStats:
        """
        Insert or update the single stats row for a player.

        The write is one ``INSERT ... ON CONFLICT (player_id) DO UPDATE`` so
        two first-time saves for the same player cannot both try to insert.

        Args:
            player_id: Player the stats belong to
            data: Counter values keyed by STAT_FIELDS

        Returns:
            The stats row after the write

        Raises:
            NotFound: the player does not exist
        """
        if db.session.get(Player, player_id) is None:
            raise NotFound("Player not found")

        values = {key: data[key] for key in STAT_FIELDS if data.get(key) is not None}
        stmt = build_stats_upsert_statement(db.session.get_bind().dialect.name, player_id, values)
        try:
            db.session.execute(stmt)
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Failed to save {self.model_name} for player {player_id}: {e}")
            raise InternalError("Failed to save player stats") from e
        self._commit('save')

        self._log('saved', player_id, values)
        return self.get_for_player(player_id)


def build_stats_upsert_statement(dialect_name: str, player_id: int, values: dict[str, Any]):
    """
    Build the upsert for a player's stats row.

    A new row takes ``values`` and the column defaults for every other
    counter; an existing row only has the counters in ``values`` replaced.
    """
    table = PlayerStats.__table__
    stmt = dialect_insert(dialect_name)(table).values(player_id=player_id, **values)
    return stmt.on_conflict_do_update(
        index_elements=[table.c.player_id],
        set_={**values, 'updated_at': func.now()},
    )


player_stats = PlayerStatsService()


def get_players_with_stats() -> list[tuple[Player, PlayerStats | None]]:
    """Active players left-joined to their stats, in jersey order.

    Players without a stats row come back paired with ``None``.
    """
    rows = db.session.execute(
        select(Player, PlayerStats)
        .outerjoin(PlayerStats, PlayerStats.player_id == Player.id)
        .where(Player.is_active.is_(True))
        .order_by(*players.ordering)
    ).all()
    return [(player, stats) for player, stats in rows]


def serialize_player_stats(stats: PlayerStats) -> dict[str, Any]:
    return {
        'id': stats.id,
        'playerId': stats.player_id,
        'matches': stats.matches,
        'runsScored': stats.runs_scored,
        'ballsFaced': stats.balls_faced,
        'fours': stats.fours,
        'sixes': stats.sixes,
        'wicketsTaken': stats.wickets_taken,
        'ballsBowled': stats.balls_bowled,
        'runsConceded': stats.runs_conceded,
        'catches': stats.catches,
        'runOuts': stats.run_outs,
        'stumpings': stats.stumpings,
        'updatedAt': stats.updated_at.isoformat() if stats.updated_at else None,
    }


def serialize_player_with_stats(player: Player, stats: PlayerStats | None) -> dict[str, Any]:
    """Player payload with a ``stats`` key only when a stats row exists."""
    payload = serialize_player(player)
    if stats is not None:
        payload['stats'] = serialize_player_stats(stats)
    return payload


__all__ = [
    'STAT_FIELDS',
    'PlayerStatsService',
    'player_stats',
    'build_stats_upsert_statement',
    'get_players_with_stats',
    'serialize_player_stats',
    'serialize_player_with_stats',
]
