"""
A square on the cube

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from src.core.exceptions import InvalidSquareError
from src.cube_chess.geometry import (
    BOARD_SIZE,
    Coord,
    Face,
    Normal,
    coord_to_face_position,
    face_position_to_coord,
    face_to_normal,
)

SQUARE_ID_SEPARATOR = ":"


@dataclass(frozen=True)
class SquareDescriptor:
    """Where a square lives in the shared lattice frame."""

    coord: Coord
    normal: Normal


@dataclass(frozen=True)
class Square:
    face: Face
    u: int
    v: int

    @classmethod
    def from_id(cls, square_id: str) -> Square:
        """Square ids look like 'front:0:7'"""
        parts = square_id.split(SQUARE_ID_SEPARATOR)
        if len(parts) != 3:
            raise InvalidSquareError(f"Invalid square id {square_id!r}")
        face_name, u, v = parts
        try:
            square = cls(Face(face_name), int(u), int(v))
        except ValueError as exc:
            raise InvalidSquareError(f"Invalid square id {square_id!r}") from exc
        if not square.is_within_bounds():
            raise InvalidSquareError(f"Square id {square_id!r} is off the board")
        # rejects padded or signed numbers such as "01", "+1" or " 1"
        if square.to_id() != square_id:
            raise InvalidSquareError(f"Invalid square id {square_id!r}")
        return square

    def to_id(self) -> str:
        return SQUARE_ID_SEPARATOR.join((self.face.value, str(self.u), str(self.v)))

    def __str__(self) -> str:
        return self.to_id()

    def is_within_bounds(self) -> bool:
        return (0 <= self.u < BOARD_SIZE) and (0 <= self.v < BOARD_SIZE)

    @classmethod
    def from_descriptor(cls, coord: Coord, normal: Normal) -> Square:
        face, u, v = coord_to_face_position(coord, normal)
        return cls(face, u, v)

    def descriptor(self) -> SquareDescriptor:
        return SquareDescriptor(
            coord=self.coord(),
            normal=self.normal(),
        )

    def coord(self) -> Coord:
        return face_position_to_coord(self.face, self.u, self.v)

    def normal(self) -> Normal:
        return face_to_normal(self.face)


def all_squares() -> Iterator[Square]:
    """Every one of the 6 * N * N squares, face by face."""
    for face in Face:
        for u in range(BOARD_SIZE):
            for v in range(BOARD_SIZE):
                yield Square(face, u, v)
