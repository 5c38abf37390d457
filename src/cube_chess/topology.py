"""
Walking over the surface of the cube.

Directions are local to the face a square is on: east/west move along the face's u-axis,
north/south along its v-axis. Stepping off the edge of a face continues on the adjacent face,
at the same lattice coordinate but with the normal pointing in the direction of travel.
"""

from enum import StrEnum
from functools import lru_cache
from typing import Iterator, Optional, Sequence

from src.cube_chess.geometry import BOARD_SIZE, Coord, Face, FACE_DEFINITIONS, vector_to_normal
from src.cube_chess.square import Square


class Direction(StrEnum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


Diagonal = tuple[Direction, Direction]

ORTHOGONAL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.SOUTH,
    Direction.EAST,
    Direction.WEST,
)

DIAGONAL_DIRECTIONS: tuple[Diagonal, ...] = (
    (Direction.NORTH, Direction.EAST),
    (Direction.NORTH, Direction.WEST),
    (Direction.SOUTH, Direction.EAST),
    (Direction.SOUTH, Direction.WEST),
)

# A straight line may cross several faces before it ends
DEFAULT_RAY_LIMIT = BOARD_SIZE * 6


@lru_cache(maxsize=None)
def step(square: Square, direction: Direction) -> Optional[Square]:
    """Neighbour of the square in the given direction. None only if the step would leave the cube."""
    face, u, v = square.face, square.u, square.v
    if direction == Direction.EAST and u < BOARD_SIZE - 1:
        return Square(face, u + 1, v)
    if direction == Direction.WEST and u > 0:
        return Square(face, u - 1, v)
    if direction == Direction.NORTH and v < BOARD_SIZE - 1:
        return Square(face, u, v + 1)
    if direction == Direction.SOUTH and v > 0:
        return Square(face, u, v - 1)
    return _wrap(square, direction)


def _wrap(square: Square, direction: Direction) -> Optional[Square]:
    """Cross the edge: keep the lattice coordinate, swap the normal for the direction of travel."""
    descriptor = square.descriptor()
    normal = vector_to_normal(_direction_vector(square.face, direction))
    if normal == descriptor.normal:
        # would move off the cube
        return None
    return Square.from_descriptor(descriptor.coord, normal)


def _direction_vector(face: Face, direction: Direction) -> Coord:
    definition = FACE_DEFINITIONS[face]
    if direction == Direction.EAST:
        return definition.u_axis
    if direction == Direction.WEST:
        return -definition.u_axis
    if direction == Direction.NORTH:
        return definition.v_axis
    return -definition.v_axis


def step_diagonal(
    square: Square, first: Direction, second: Direction
) -> Optional[Square]:
    """A diagonal step is two orthogonal steps. The intermediate square is never inspected."""
    intermediate = step(square, first)
    if intermediate is None:
        return None
    return step(intermediate, second)


def step_path(square: Square, directions: Sequence[Direction]) -> Optional[Square]:
    """Follow a sequence of orthogonal steps (knight jumps). Any failing leg invalidates the path."""
    current: Optional[Square] = square
    for direction in directions:
        if current is None:
            return None
        current = step(current, direction)
    return current


def trace_ray(
    origin: Square, direction: Direction, limit: int = DEFAULT_RAY_LIMIT
) -> Iterator[Square]:
    """Squares along a straight line, excluding the origin. Ends at a dead end or after `limit` squares."""
    current = origin
    for _ in range(limit):
        next_square = step(current, direction)
        if next_square is None:
            return
        current = next_square
        yield current


def trace_diagonal_ray(
    origin: Square, diagonal: Diagonal, limit: int = DEFAULT_RAY_LIMIT
) -> Iterator[Square]:
    """Same as trace_ray, but every step is a diagonal step."""
    current = origin
    first, second = diagonal
    for _ in range(limit):
        next_square = step_diagonal(current, first, second)
        if next_square is None:
            return
        current = next_square
        yield current
