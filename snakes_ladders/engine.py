"""Turn engine: dice, player positions and move resolution.

Everything here is a plain function over a caller-owned list of positions.
The caller drives the sequence: roll → move → check win → next player.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Protocol

from snakes_ladders.board import (
    DEFAULT_TELEPORTS,
    TOTAL_SQUARES,
    Point,
    TeleportTable,
    calculate_target_position,
    get_teleport_destination,
    is_winning_position,
    square_to_point,
)
from snakes_ladders.errors import InvalidDiceValue, InvalidPlayerCount, InvalidPlayerIndex

log = logging.getLogger(__name__)

DICE_FACES = 6
DEFAULT_PLAYER_COUNT = 4
START_SQUARE = 1


class RandomSource(Protocol):
    """Anything with ``random.Random.randint``'s signature."""

    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True)
class MoveResult:
    """What happened after a player moved."""

    start_position: int
    target_position: int  # landing square, before any teleport
    final_position: int
    teleported: bool = False
    won: bool = False
    bounced: bool = False
    waypoints: tuple[Point, ...] = ()

    def summary(self) -> dict:
        """The result as seen by UI and leaderboard code."""
        return {
            "finalPosition": self.final_position,
            "teleported": self.teleported,
            "won": self.won,
        }


# ── Dice & setup ─────────────────────────────────────────────────────

def roll_dice(rng: RandomSource | None = None) -> int:
    """Roll one six-sided die. Pass a seeded ``random.Random`` for repeatable games."""
    source = rng if rng is not None else random
    return source.randint(1, DICE_FACES)


def initialize_player_positions(player_count: int = DEFAULT_PLAYER_COUNT) -> list[int]:
    _check_player_count(player_count)
    return [START_SQUARE] * player_count


# ── Movement ─────────────────────────────────────────────────────────

def _walked_squares(start: int, dice_value: int, target: int) -> list[int]:
    """Squares the pawn passes through, start and target included."""
    if start + dice_value <= TOTAL_SQUARES:
        return list(range(start, target + 1))
    # Bounce: up to the last square, then back down
    return list(range(start, TOTAL_SQUARES + 1)) + list(range(TOTAL_SQUARES - 1, target - 1, -1))


def move_player(
    positions: list[int],
    player_index: int,
    dice_value: int,
    teleports: TeleportTable = DEFAULT_TELEPORTS,
) -> MoveResult:
    """Move ``positions[player_index]`` by *dice_value* and resolve teleports.

    MUTATES *positions*: the player's entry is overwritten with the final
    resting square (after any snake or ladder). No other entry is touched.
    Inputs are validated before anything is written.
    """
    if not 0 <= player_index < len(positions):
        raise InvalidPlayerIndex(player_index, len(positions))
    _check_dice_value(dice_value)

    start = positions[player_index]
    target = calculate_target_position(start, dice_value)
    waypoints = tuple(square_to_point(sq) for sq in _walked_squares(start, dice_value, target))

    dest = get_teleport_destination(target, teleports)
    final = dest if dest is not None else target
    positions[player_index] = final

    result = MoveResult(
        start_position=start,
        target_position=target,
        final_position=final,
        teleported=dest is not None,
        won=is_winning_position(final),
        bounced=start + dice_value > TOTAL_SQUARES,
        waypoints=waypoints,
    )
    log.debug(
        "Player %d rolled %d: %d → %d%s",
        player_index, dice_value, start, target,
        f" → {final}" if result.teleported else "",
    )
    return result


# ── Turn sequencing ──────────────────────────────────────────────────

def should_end_turn(positions: list[int], player_index: int) -> bool:
    """True when the player has won. Only flags game over, nothing else."""
    if not 0 <= player_index < len(positions):
        raise InvalidPlayerIndex(player_index, len(positions))
    return is_winning_position(positions[player_index])


def next_player(current_player: int, player_count: int = DEFAULT_PLAYER_COUNT) -> int:
    _check_player_count(player_count)
    return (current_player + 1) % player_count


def _check_dice_value(dice_value: int) -> None:
    # bool is an int subclass
    if isinstance(dice_value, bool) or not isinstance(dice_value, int):
        raise InvalidDiceValue(dice_value)
    if not 1 <= dice_value <= DICE_FACES:
        raise InvalidDiceValue(dice_value)


def _check_player_count(player_count: int) -> None:
    if player_count < 1:
        raise InvalidPlayerCount(player_count)
