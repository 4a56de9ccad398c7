"""SQLite persistence for finished games and the wins leaderboard."""

from __future__ import annotations

import json
import logging
import sqlite3
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from snakes_ladders.game import GameStats

log = logging.getLogger(__name__)

GUEST_NAME = "Guest"


@dataclass
class LeaderboardEntry:
    name: str
    wins: int


class LeaderboardDB:
    """Thin wrapper around a SQLite database of game outcomes."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(self.path)
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._create_tables()

    def _create_tables(self) -> None:
        self._conn.executescript("""
            CREATE TABLE IF NOT EXISTS games (
                id          INTEGER PRIMARY KEY AUTOINCREMENT,
                players     TEXT NOT NULL,
                winner      TEXT,
                reason      TEXT NOT NULL,
                turns       INTEGER NOT NULL,
                stats       TEXT NOT NULL,
                created_at  TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            );
            CREATE TABLE IF NOT EXISTS leaderboard (
                name        TEXT PRIMARY KEY,
                wins        INTEGER NOT NULL DEFAULT 0
            );
        """)
        self._conn.commit()

    def record_game(
        self,
        player_names: list[str],
        winner: str | None,
        reason: str,
        turns: int,
        stats: GameStats | None = None,
    ) -> int:
        """Store a finished game and credit the winner. Returns the game id."""
        if winner is not None:
            winner = winner or GUEST_NAME
        cur = self._conn.execute(
            "INSERT INTO games (players, winner, reason, turns, stats) VALUES (?, ?, ?, ?, ?)",
            (
                json.dumps(player_names),
                winner,
                reason,
                turns,
                json.dumps(asdict(stats) if stats is not None else {}),
            ),
        )
        if winner is not None:
            self._increment_wins(winner)
        self._conn.commit()
        log.debug("Recorded game %d (winner=%s)", cur.lastrowid, winner)
        return cur.lastrowid

    def record_win(self, name: str | None) -> None:
        self._increment_wins(name)
        self._conn.commit()

    def _increment_wins(self, name: str | None) -> None:
        self._conn.execute(
            "INSERT INTO leaderboard (name, wins) VALUES (?, 1) "
            "ON CONFLICT(name) DO UPDATE SET wins = wins + 1",
            (name or GUEST_NAME,),
        )

    def top(self, limit: int = 10) -> list[LeaderboardEntry]:
        """Highest win counts first; ties broken by name."""
        rows = self._conn.execute(
            "SELECT name, wins FROM leaderboard ORDER BY wins DESC, name LIMIT ?",
            (limit,),
        ).fetchall()
        return [LeaderboardEntry(name=r[0], wins=r[1]) for r in rows]

    def list_games(self) -> list[dict]:
        self._conn.row_factory = sqlite3.Row
        try:
            rows = self._conn.execute(
                "SELECT id, players, winner, reason, turns, stats, created_at "
                "FROM games ORDER BY id"
            ).fetchall()
        finally:
            self._conn.row_factory = None
        games = []
        for r in rows:
            game = dict(r)
            game["players"] = json.loads(game["players"])
            game["stats"] = json.loads(game["stats"])
            games.append(game)
        return games

    def close(self) -> None:
        self._conn.close()
