"""Unit tests for /src/cube_chess/topology.py"""

from itertools import islice

import pytest

from src.cube_chess.geometry import BOARD_SIZE, Face
from src.cube_chess.square import Square, all_squares
from src.cube_chess.topology import (
    DEFAULT_RAY_LIMIT,
    DIAGONAL_DIRECTIONS,
    ORTHOGONAL_DIRECTIONS,
    Direction,
    step,
    step_diagonal,
    step_path,
    trace_diagonal_ray,
    trace_ray,
)

OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


# --- STEPPING WITHIN A FACE ---
@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.NORTH, Square(Face.FRONT, 3, 4)),
        (Direction.SOUTH, Square(Face.FRONT, 3, 2)),
        (Direction.EAST, Square(Face.FRONT, 4, 3)),
        (Direction.WEST, Square(Face.FRONT, 2, 3)),
    ],
)
def test_step_inside_face(direction: Direction, expected: Square) -> None:
    assert step(Square(Face.FRONT, 3, 3), direction) == expected


# --- CROSSING EDGES ---
@pytest.mark.parametrize("u", range(BOARD_SIZE))
def test_front_north_edge_leads_to_top(u: int) -> None:
    assert step(Square(Face.FRONT, u, 7), Direction.NORTH) == Square(Face.TOP, u, 0)


@pytest.mark.parametrize("u", range(BOARD_SIZE))
def test_front_south_edge_leads_to_bottom(u: int) -> None:
    assert step(Square(Face.FRONT, u, 0), Direction.SOUTH) == Square(Face.BOTTOM, u, 7)


@pytest.mark.parametrize("v", range(BOARD_SIZE))
def test_front_side_edges(v: int) -> None:
    assert step(Square(Face.FRONT, 7, v), Direction.EAST) == Square(Face.RIGHT, 0, v)
    assert step(Square(Face.FRONT, 0, v), Direction.WEST) == Square(Face.LEFT, 7, v)


def test_step_never_leaves_the_cube() -> None:
    for square in all_squares():
        for direction in ORTHOGONAL_DIRECTIONS:
            neighbour = step(square, direction)
            assert neighbour is not None
            assert neighbour.is_within_bounds()
            assert neighbour != square


def test_step_back_inside_face() -> None:
    """Away from the edges, stepping back returns to the start."""
    for square in all_squares():
        if not (0 < square.u < BOARD_SIZE - 1 and 0 < square.v < BOARD_SIZE - 1):
            continue
        for direction in ORTHOGONAL_DIRECTIONS:
            assert step(step(square, direction), OPPOSITE[direction]) == square


@pytest.mark.parametrize("u", range(BOARD_SIZE))
def test_top_and_back_fold(u: int) -> None:
    """North from the far edge of the top face lands on the back face, whose north leads straight back."""
    top_square = Square(Face.TOP, u, 7)
    back_square = step(top_square, Direction.NORTH)
    assert back_square == Square(Face.BACK, 7 - u, 7)
    assert step(back_square, Direction.NORTH) == top_square


@pytest.mark.parametrize("u", range(BOARD_SIZE))
def test_back_and_bottom_fold(u: int) -> None:
    back_square = Square(Face.BACK, u, 0)
    bottom_square = step(back_square, Direction.SOUTH)
    assert bottom_square == Square(Face.BOTTOM, 7 - u, 0)
    assert step(bottom_square, Direction.SOUTH) == back_square


# --- DIAGONALS / PATHS ---
def test_step_diagonal() -> None:
    origin = Square(Face.FRONT, 3, 3)
    assert step_diagonal(origin, Direction.NORTH, Direction.EAST) == Square(Face.FRONT, 4, 4)
    assert step_diagonal(origin, Direction.SOUTH, Direction.WEST) == Square(Face.FRONT, 2, 2)


def test_step_diagonal_over_corner() -> None:
    """The intermediate square is on the next face, the second leg is taken from there."""
    corner = Square(Face.FRONT, 7, 7)
    assert step_diagonal(corner, Direction.NORTH, Direction.EAST) == Square(Face.RIGHT, 0, 7)


def test_step_path() -> None:
    origin = Square(Face.FRONT, 1, 0)
    path = (Direction.NORTH, Direction.NORTH, Direction.EAST)
    assert step_path(origin, path) == Square(Face.FRONT, 2, 2)
    assert step_path(origin, ()) == origin


# --- RAYS ---
def test_ray_within_face() -> None:
    ray = list(islice(trace_ray(Square(Face.FRONT, 3, 3), Direction.EAST), 4))
    assert ray == [Square(Face.FRONT, u, 3) for u in range(4, 8)]


def test_horizontal_ray_goes_around_the_cube() -> None:
    """East from the front face passes right, back and left before coming back to where it started."""
    origin = Square(Face.FRONT, 3, 3)
    ray = list(trace_ray(origin, Direction.EAST, limit=4 * BOARD_SIZE))
    assert len(ray) == 4 * BOARD_SIZE
    assert ray[-1] == origin
    assert len(set(ray[:-1])) == 4 * BOARD_SIZE - 1
    assert {square.face for square in ray} == {Face.FRONT, Face.RIGHT, Face.BACK, Face.LEFT}


def test_ray_respects_limit() -> None:
    assert len(list(trace_ray(Square(Face.FRONT, 0, 0), Direction.NORTH, limit=5))) == 5
    assert list(trace_ray(Square(Face.FRONT, 0, 0), Direction.NORTH, limit=0)) == []


def test_every_ray_stops_at_default_limit() -> None:
    for square in all_squares():
        for direction in ORTHOGONAL_DIRECTIONS:
            assert len(list(trace_ray(square, direction))) <= DEFAULT_RAY_LIMIT
        for diagonal in DIAGONAL_DIRECTIONS:
            assert len(list(trace_diagonal_ray(square, diagonal))) <= DEFAULT_RAY_LIMIT


def test_diagonal_ray() -> None:
    ray = list(
        islice(trace_diagonal_ray(Square(Face.FRONT, 3, 3), DIAGONAL_DIRECTIONS[0]), 5)
    )
    assert ray[:4] == [Square(Face.FRONT, i, i) for i in range(4, 8)]
    assert ray[4] == Square(Face.RIGHT, 0, 7)
