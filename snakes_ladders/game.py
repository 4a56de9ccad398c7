"""Game session: state, statistics and a runner for hot-seat games."""

from __future__ import annotations

import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Protocol

from snakes_ladders.engine import (
    DICE_FACES,
    MoveResult,
    RandomSource,
    initialize_player_positions,
    move_player,
    next_player,
    roll_dice,
    should_end_turn,
)
from snakes_ladders.errors import GameNotActive, InvalidPlayerCount

log = logging.getLogger(__name__)


# ── Structured types ────────────────────────────────────────────────

@dataclass
class GameStats:
    """Running tallies for one game."""

    snakes_hit: int = 0
    ladders_climbed: int = 0
    total_dice_rolls: int = 0
    dice_distribution: list[int] = field(default_factory=lambda: [0] * DICE_FACES)
    longest_turn: int = 0
    shortest_turn: int | None = None  # None until someone moves

    def record_roll(self, value: int) -> None:
        self.total_dice_rolls += 1
        self.dice_distribution[value - 1] += 1

    def record_move(self, steps: int, move: MoveResult) -> None:
        self.longest_turn = max(self.longest_turn, steps)
        if self.shortest_turn is None or steps < self.shortest_turn:
            self.shortest_turn = steps
        if move.teleported:
            if move.final_position < move.target_position:
                self.snakes_hit += 1
            else:
                self.ladders_climbed += 1


@dataclass
class GameState:
    """Mutable state that evolves during a game."""

    game_mode: str | None = None
    player_names: list[str] = field(default_factory=list)
    positions: list[int] = field(default_factory=list)
    current_player: int = 0
    turn_count: int = 0
    winner: int | None = None
    started_at: float | None = None
    ended_at: float | None = None
    stats: GameStats = field(default_factory=GameStats)

    @classmethod
    def start(cls, game_mode: str, player_names: list[str]) -> GameState:
        if len(player_names) < 1:
            raise InvalidPlayerCount(len(player_names))
        return cls(
            game_mode=game_mode,
            player_names=list(player_names),
            positions=initialize_player_positions(len(player_names)),
            turn_count=1,
            started_at=time.time(),
        )

    @property
    def player_count(self) -> int:
        return len(self.positions)

    @property
    def is_active(self) -> bool:
        return self.game_mode is not None and self.ended_at is None

    @property
    def is_over(self) -> bool:
        return self.ended_at is not None

    def duration(self) -> float:
        if self.started_at is None:
            return 0.0
        end = self.ended_at if self.ended_at is not None else time.time()
        return end - self.started_at

    def _require_active(self) -> None:
        if not self.is_active:
            raise GameNotActive("Game is not active.")

    def roll_dice(self, rng: RandomSource | None = None) -> int:
        self._require_active()
        value = roll_dice(rng)
        self.stats.record_roll(value)
        return value

    def move_current_player(self, dice_value: int) -> MoveResult:
        """Move whoever's turn it is. Ends the game if they reach 100."""
        self._require_active()
        move = move_player(self.positions, self.current_player, dice_value)
        self.stats.record_move(dice_value, move)
        if should_end_turn(self.positions, self.current_player):
            self.winner = self.current_player
            self.ended_at = time.time()
            log.info("%s wins on turn %d", self.player_names[self.winner], self.turn_count)
        return move

    def finish(self) -> None:
        """End the game without a winner."""
        self._require_active()
        self.ended_at = time.time()

    def advance_turn(self) -> None:
        self._require_active()
        self.current_player = next_player(self.current_player, self.player_count)
        self.turn_count += 1

    def export_state(self) -> dict:
        """JSON-safe snapshot of the whole game."""
        return {
            "game_mode": self.game_mode,
            "player_names": list(self.player_names),
            "positions": list(self.positions),
            "current_player": self.current_player,
            "turn_count": self.turn_count,
            "winner": self.winner,
            "is_active": self.is_active,
            "is_over": self.is_over,
            "started_at": self.started_at,
            "ended_at": self.ended_at,
            "duration": self.duration(),
            "stats": asdict(self.stats),
        }


@dataclass
class TurnRecord:
    """Record of one player's turn."""

    turn_number: int
    player: int
    dice_value: int
    start_position: int
    target_position: int
    final_position: int
    teleported: bool = False
    bounced: bool = False
    won: bool = False


@dataclass
class GameResult:
    winner: int | None  # player index, or None if max_turns ran out
    reason: str  # "win" | "max_turns"
    turns: int = 0
    winner_name: str | None = None


# ── Observer ────────────────────────────────────────────────────────

class GameObserver(Protocol):
    """Receives a record after every turn."""

    def on_turn(self, record: TurnRecord) -> None: ...


@dataclass
class ListObserver:
    """Default observer: collects records into a list."""

    records: list[TurnRecord] = field(default_factory=list)

    def on_turn(self, record: TurnRecord) -> None:
        self.records.append(record)


# ── Runner ───────────────────────────────────────────────────────────

class GameRunner:
    """Play one full game, rolling for every player in turn."""

    def __init__(
        self,
        player_names: list[str],
        rng: RandomSource | None = None,
        max_turns: int = 1000,
        observer: GameObserver | None = None,
        game_mode: str = "hotseat",
    ):
        self.state = GameState.start(game_mode, player_names)
        self.rng = rng
        self.max_turns = max_turns
        self.observer = observer or ListObserver()

    def play(self) -> GameResult:
        state = self.state
        while state.turn_count <= self.max_turns:
            record = self._play_turn()
            self.observer.on_turn(record)
            if record.won:
                return GameResult(
                    winner=record.player,
                    reason="win",
                    turns=record.turn_number,
                    winner_name=state.player_names[record.player],
                )
            if state.turn_count >= self.max_turns:
                break
            state.advance_turn()

        state.finish()
        log.warning("No winner after %d turns", self.max_turns)
        return GameResult(winner=None, reason="max_turns", turns=min(state.turn_count, self.max_turns))

    def _play_turn(self) -> TurnRecord:
        state = self.state
        player = state.current_player
        dice_value = state.roll_dice(self.rng)
        move = state.move_current_player(dice_value)
        return TurnRecord(
            turn_number=state.turn_count,
            player=player,
            dice_value=dice_value,
            start_position=move.start_position,
            target_position=move.target_position,
            final_position=move.final_position,
            teleported=move.teleported,
            bounced=move.bounced,
            won=move.won,
        )
