"""
Rotating one layer (slice) of the cube.

Every piece on the layer is carried along: its lattice coordinate and its face normal are rotated
together, and the rotated pair is resolved back into a square, possibly on another face.
A rotation never captures.
"""

from typing import Mapping

from src.cube_chess.geometry import Axis, rotate_coord, rotate_normal
from src.cube_chess.moves import CubeMove
from src.cube_chess.pieces import Piece
from src.cube_chess.square import Square


def is_on_layer(square: Square, axis: Axis, layer: int) -> bool:
    return square.coord().component(axis) == layer


def rotate_square(square: Square, move: CubeMove) -> Square:
    descriptor = square.descriptor()
    coord = rotate_coord(descriptor.coord, move.axis, move.direction)
    normal = rotate_normal(descriptor.normal, move.axis, move.direction)
    return Square.from_descriptor(coord, normal)


def rotate_layer(position: Mapping[Square, Piece], move: CubeMove) -> dict[Square, Piece]:
    """
    Returns the new position; the given one is left untouched.

    All pieces on the layer are lifted off first and only then put down again, so a destination
    that is also an origin of this same rotation never loses or duplicates a piece.
    """
    rotated = dict(position)
    updates = [
        (square, rotate_square(square, move), piece)
        for square, piece in position.items()
        if is_on_layer(square, move.axis, move.layer)
    ]
    for origin, _, _ in updates:
        del rotated[origin]
    for _, destination, piece in updates:
        rotated[destination] = piece
    return rotated
