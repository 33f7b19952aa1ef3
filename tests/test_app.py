import pytest

from gridsnake.app import (
    WINDOW_SIZE,
    tile_center,
    tile_extent,
    tile_rect,
)
from gridsnake.game import ARENA_SIZE, FOOD_SIZE, Position


@pytest.mark.parametrize("width, height", [(500, 500), (800, 300)])
def test_tile_centers_are_symmetric(width, height):
    low = tile_center(Position(0, 0), width, height)
    high = tile_center(Position(ARENA_SIZE - 1, ARENA_SIZE - 1), width, height)
    assert low[0] == pytest.approx(-high[0])
    assert low[1] == pytest.approx(-high[1])


def test_adjacent_tiles_are_one_tile_apart():
    width, height = WINDOW_SIZE
    a = tile_center(Position(2, 5), width, height)
    b = tile_center(Position(3, 6), width, height)
    assert b[0] - a[0] == pytest.approx(width / ARENA_SIZE)
    assert b[1] - a[1] == pytest.approx(height / ARENA_SIZE)


def test_full_tile_extent_is_one_grid_cell():
    assert tile_extent(1.0, 500, 300) == pytest.approx((500 / ARENA_SIZE, 300 / ARENA_SIZE))


def test_top_left_tile_touches_window_corner():
    left, top, w, h = tile_rect(Position(0, ARENA_SIZE - 1), 1.0, 500, 400)
    assert left == pytest.approx(0.0)
    assert top == pytest.approx(0.0)
    assert (w, h) == pytest.approx((500 / ARENA_SIZE, 400 / ARENA_SIZE))


def test_bottom_right_tile_touches_window_corner():
    left, top, w, h = tile_rect(Position(ARENA_SIZE - 1, 0), 1.0, 500, 400)
    assert left + w == pytest.approx(500)
    assert top + h == pytest.approx(400)


def test_smaller_sprite_shares_tile_centre():
    pos = Position(4, 7)
    full = tile_rect(pos, 1.0, 500, 500)
    food = tile_rect(pos, FOOD_SIZE, 500, 500)
    assert full[0] + full[2] / 2 == pytest.approx(food[0] + food[2] / 2)
    assert full[1] + full[3] / 2 == pytest.approx(food[1] + food[3] / 2)
    assert food[2] < full[2]


def test_main_rejects_unknown_option():
    from gridsnake.app import main

    with pytest.raises(SystemExit):
        main(["--no-such-option"])