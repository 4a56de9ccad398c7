"""Board layout and movement rules for Snakes & Ladders."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, NamedTuple

BOARD_SIZE = 10
TOTAL_SQUARES = BOARD_SIZE * BOARD_SIZE
TILE_SIZE = 1.0

# fmt: off
SNAKES: Mapping[int, int] = MappingProxyType({
    27:  5,  40:  3,  54: 31,  66: 45,
    76: 58,  89: 53,  99: 41,
})

LADDERS: Mapping[int, int] = MappingProxyType({
     2: 23,   8: 34,  20: 41,  32: 51,
    41: 79,  74: 92,
})
# fmt: on


class Point(NamedTuple):
    """Centre of a tile. ``y`` is the board plane and always 0."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class TeleportTable:
    """Read-only snake and ladder tables, shared by every game."""

    snakes: Mapping[int, int] = field(default_factory=lambda: SNAKES)
    ladders: Mapping[int, int] = field(default_factory=lambda: LADDERS)

    def __post_init__(self) -> None:
        # Freeze plain dicts handed in by callers
        object.__setattr__(self, "snakes", MappingProxyType(dict(self.snakes)))
        object.__setattr__(self, "ladders", MappingProxyType(dict(self.ladders)))

        overlap = set(self.snakes) & set(self.ladders)
        if overlap:
            raise ValueError(f"Squares cannot hold both a snake and a ladder: {sorted(overlap)}")
        for sq, dest in self.snakes.items():
            if not 1 <= dest < sq <= TOTAL_SQUARES:
                raise ValueError(f"Snake {sq} → {dest} must go down the board.")
        for sq, dest in self.ladders.items():
            if not 1 <= sq < dest <= TOTAL_SQUARES:
                raise ValueError(f"Ladder {sq} → {dest} must go up the board.")

    def destination(self, square: int) -> int | None:
        dest = self.snakes.get(square)
        if dest is None:
            dest = self.ladders.get(square)
        return dest


DEFAULT_TELEPORTS = TeleportTable()


# ── Path ─────────────────────────────────────────────────────────────

def _index_to_point(index: int) -> Point:
    row = index // BOARD_SIZE
    col = index % BOARD_SIZE
    if row % 2 == 1:
        col = BOARD_SIZE - 1 - col
    half = TILE_SIZE / 2
    return Point(col * TILE_SIZE + half, 0.0, row * TILE_SIZE + half)


def generate_path() -> list[Point]:
    """Tile centres for squares 1..100 in serpentine order.

    Row 0 runs left-to-right, row 1 right-to-left, and so on.
    Square *n* is at ``path[n - 1]``.
    """
    return [_index_to_point(i) for i in range(TOTAL_SQUARES)]


def square_to_point(square: int) -> Point:
    if not 1 <= square <= TOTAL_SQUARES:
        raise ValueError(f"Square {square} is off the board.")
    return _index_to_point(square - 1)


# ── Rules ────────────────────────────────────────────────────────────

def calculate_target_position(current_position: int, dice_value: int) -> int:
    """Square reached by moving *dice_value* steps from *current_position*.

    Overshooting 100 bounces back by the excess (98 + 5 → 97). Only one
    reflection is applied; the result is clamped to the board.
    """
    target = current_position + dice_value
    if target > TOTAL_SQUARES:
        target = TOTAL_SQUARES - (target - TOTAL_SQUARES)
    return max(1, min(TOTAL_SQUARES, target))


def get_teleport_destination(
    position: int,
    teleports: TeleportTable = DEFAULT_TELEPORTS,
) -> int | None:
    return teleports.destination(position)


def is_snake(square: int, teleports: TeleportTable = DEFAULT_TELEPORTS) -> bool:
    return square in teleports.snakes


def is_ladder(square: int, teleports: TeleportTable = DEFAULT_TELEPORTS) -> bool:
    return square in teleports.ladders


def is_winning_position(position: int) -> bool:
    return position == TOTAL_SQUARES
