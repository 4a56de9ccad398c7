"""Tests for snakes_ladders.board."""

import pytest

from snakes_ladders.board import (
    BOARD_SIZE,
    DEFAULT_TELEPORTS,
    LADDERS,
    SNAKES,
    TOTAL_SQUARES,
    Point,
    TeleportTable,
    calculate_target_position,
    generate_path,
    get_teleport_destination,
    is_ladder,
    is_snake,
    is_winning_position,
    square_to_point,
)


# ── constants ────────────────────────────────────────────────────────

def test_board_dimensions():
    assert BOARD_SIZE == 10
    assert TOTAL_SQUARES == 100


def test_snake_and_ladder_counts():
    assert len(SNAKES) == 7
    assert len(LADDERS) == 6


def test_snakes_go_down_and_ladders_go_up():
    for sq, dest in SNAKES.items():
        assert 1 <= dest < sq <= 100
    for sq, dest in LADDERS.items():
        assert 1 <= sq < dest <= 100


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        SNAKES[50] = 1  # type: ignore[index]
    with pytest.raises(TypeError):
        DEFAULT_TELEPORTS.ladders[3] = 30  # type: ignore[index]


# ── path ─────────────────────────────────────────────────────────────

def test_path_has_one_point_per_square():
    assert len(generate_path()) == 100


def test_path_serpentine_corners():
    path = generate_path()
    assert path[0] == Point(0.5, 0.0, 0.5)
    assert path[9] == Point(9.5, 0.0, 0.5)    # end of row 0, left-to-right
    assert path[10] == Point(9.5, 0.0, 1.5)   # start of row 1, right-to-left
    assert path[19] == Point(0.5, 0.0, 1.5)
    assert path[99] == Point(0.5, 0.0, 9.5)   # row 9 runs right-to-left


def test_path_is_flat():
    assert all(p.y == 0 for p in generate_path())


def test_consecutive_squares_are_adjacent_tiles():
    path = generate_path()
    for a, b in zip(path, path[1:]):
        assert abs(a.x - b.x) + abs(a.z - b.z) == pytest.approx(1.0)


def test_generate_path_is_repeatable():
    assert generate_path() == generate_path()


def test_square_to_point_matches_path():
    path = generate_path()
    assert square_to_point(1) == path[0]
    assert square_to_point(37) == path[36]
    assert square_to_point(100) == path[99]


@pytest.mark.parametrize("square", [0, 101, -5])
def test_square_to_point_off_board(square):
    with pytest.raises(ValueError):
        square_to_point(square)


# ── target position ──────────────────────────────────────────────────

def test_normal_move():
    assert calculate_target_position(1, 6) == 7
    assert calculate_target_position(50, 3) == 53


def test_exact_landing_on_100():
    assert calculate_target_position(94, 6) == 100


def test_overshoot_bounces_back():
    assert calculate_target_position(98, 5) == 97
    assert calculate_target_position(99, 6) == 95
    assert calculate_target_position(100, 1) == 99


def test_large_overshoot_single_reflection():
    assert calculate_target_position(95, 12) == 93


def test_target_always_on_board():
    for pos in range(1, 101):
        for dice in range(1, 7):
            assert 1 <= calculate_target_position(pos, dice) <= 100


# ── teleports ────────────────────────────────────────────────────────

def test_snake_destination():
    assert get_teleport_destination(27) == 5
    assert get_teleport_destination(99) == 41


def test_ladder_destination():
    assert get_teleport_destination(2) == 23
    assert get_teleport_destination(74) == 92


def test_no_teleport():
    assert get_teleport_destination(1) is None
    assert get_teleport_destination(50) is None


def test_is_snake_and_is_ladder():
    assert is_snake(40) is True
    assert is_snake(2) is False
    assert is_ladder(8) is True
    assert is_ladder(27) is False
    assert is_ladder(50) is False


def test_custom_table():
    table = TeleportTable(snakes={10: 1}, ladders={3: 60})
    assert get_teleport_destination(10, table) == 1
    assert get_teleport_destination(3, table) == 60
    assert get_teleport_destination(27, table) is None


def test_custom_table_is_frozen_copy():
    snakes = {10: 1}
    table = TeleportTable(snakes=snakes, ladders={})
    snakes[10] = 5
    assert table.snakes[10] == 1


def test_table_rejects_square_with_both():
    with pytest.raises(ValueError):
        TeleportTable(snakes={30: 10}, ladders={30: 50})


def test_table_rejects_upward_snake():
    with pytest.raises(ValueError):
        TeleportTable(snakes={10: 20}, ladders={})


def test_table_rejects_downward_ladder():
    with pytest.raises(ValueError):
        TeleportTable(snakes={}, ladders={50: 20})


# ── win ──────────────────────────────────────────────────────────────

def test_only_100_wins():
    assert is_winning_position(100) is True
    for pos in range(1, 100):
        assert is_winning_position(pos) is False
