"""
Coordinate system of the cube.

Six N x N faces are folded onto the surface of an N x N x N lattice. Every square is addressed
locally as (face, u, v), and globally as a lattice coordinate (x, y, z) together with the outward
normal of the face it sits on. Squares on a cube edge share their lattice coordinate with the
neighbouring face, so the normal is what tells them apart.

    coordinate = origin + u * u_axis + v * v_axis
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import NamedTuple

# Every face is N x N. 8 gives the classical chess board on each face.
BOARD_SIZE = 8
HALF_EXTENT = (BOARD_SIZE - 1) / 2


class Axis(StrEnum):
    X = "x"
    Y = "y"
    Z = "z"


class RotationDirection(StrEnum):
    CW = "cw"
    CCW = "ccw"
    HALF = "180"


class Face(StrEnum):
    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class Coord(NamedTuple):
    """Integer lattice position (or a unit direction vector in the same frame)."""

    x: int
    y: int
    z: int

    def component(self, axis: Axis) -> int:
        return getattr(self, axis.value)

    def __neg__(self) -> Coord:
        return Coord(-self.x, -self.y, -self.z)


class Normal(Enum):
    """The six outward unit directions. The value is the vector itself."""

    PX = Coord(1, 0, 0)
    NX = Coord(-1, 0, 0)
    PY = Coord(0, 1, 0)
    NY = Coord(0, -1, 0)
    PZ = Coord(0, 0, 1)
    NZ = Coord(0, 0, -1)


@dataclass(frozen=True)
class FaceDefinition:
    normal: Normal
    origin: Coord
    u_axis: Coord
    v_axis: Coord


_TOP = BOARD_SIZE - 1

FACE_DEFINITIONS: dict[Face, FaceDefinition] = {
    Face.FRONT: FaceDefinition(
        normal=Normal.PZ,
        origin=Coord(0, 0, _TOP),
        u_axis=Coord(1, 0, 0),
        v_axis=Coord(0, 1, 0),
    ),
    Face.BACK: FaceDefinition(
        normal=Normal.NZ,
        origin=Coord(_TOP, 0, 0),
        u_axis=Coord(-1, 0, 0),
        v_axis=Coord(0, 1, 0),
    ),
    Face.LEFT: FaceDefinition(
        normal=Normal.NX,
        origin=Coord(0, 0, 0),
        u_axis=Coord(0, 0, 1),
        v_axis=Coord(0, 1, 0),
    ),
    Face.RIGHT: FaceDefinition(
        normal=Normal.PX,
        origin=Coord(_TOP, 0, _TOP),
        u_axis=Coord(0, 0, -1),
        v_axis=Coord(0, 1, 0),
    ),
    Face.TOP: FaceDefinition(
        normal=Normal.PY,
        origin=Coord(0, _TOP, _TOP),
        u_axis=Coord(1, 0, 0),
        v_axis=Coord(0, 0, -1),
    ),
    Face.BOTTOM: FaceDefinition(
        normal=Normal.NY,
        origin=Coord(0, 0, 0),
        u_axis=Coord(1, 0, 0),
        v_axis=Coord(0, 0, 1),
    ),
}

NORMAL_TO_FACE: dict[Normal, Face] = {
    definition.normal: face for face, definition in FACE_DEFINITIONS.items()
}


def face_to_normal(face: Face) -> Normal:
    return FACE_DEFINITIONS[face].normal


def normal_to_face(normal: Normal) -> Face:
    return NORMAL_TO_FACE[normal]


def vector_to_normal(vector: Coord) -> Normal:
    """Only unit axis vectors are valid normals (ValueError otherwise)."""
    return Normal(Coord(*vector))


def face_position_to_coord(face: Face, u: int, v: int) -> Coord:
    definition = FACE_DEFINITIONS[face]
    origin, u_axis, v_axis = definition.origin, definition.u_axis, definition.v_axis
    return Coord(
        origin.x + u_axis.x * u + v_axis.x * v,
        origin.y + u_axis.y * u + v_axis.y * v,
        origin.z + u_axis.z * u + v_axis.z * v,
    )


def coord_to_face_position(coord: Coord, normal: Normal) -> tuple[Face, int, int]:
    """Inverse of face_position_to_coord: the face is fixed by the normal, then solve for u and v."""
    face = normal_to_face(normal)
    definition = FACE_DEFINITIONS[face]
    u = _project_axis(coord, definition.origin, definition.u_axis)
    v = _project_axis(coord, definition.origin, definition.v_axis)
    return face, u, v


def _project_axis(coord: Coord, origin: Coord, axis: Coord) -> int:
    """Each face axis has exactly one non-zero component (+1 or -1): solve along that component."""
    for component in Axis:
        step = axis.component(component)
        if step != 0:
            return (coord.component(component) - origin.component(component)) // step
    return 0


# --- ROTATIONS ---
def _quarter_turn(
    x: float, y: float, z: float, axis: Axis, clockwise: bool
) -> tuple[float, float, float]:
    """Right-hand-rule quarter turn of the two components perpendicular to the axis."""
    if axis == Axis.X:
        return x, (-z if clockwise else z), (y if clockwise else -y)
    if axis == Axis.Y:
        return (z if clockwise else -z), y, (-x if clockwise else x)
    return (-y if clockwise else y), (x if clockwise else -x), z


def _rotate(
    x: float, y: float, z: float, axis: Axis, direction: RotationDirection
) -> tuple[float, float, float]:
    turns = 2 if direction == RotationDirection.HALF else 1
    clockwise = direction == RotationDirection.CW
    for _ in range(turns):
        x, y, z = _quarter_turn(x, y, z, axis, clockwise)
    return x, y, z


def rotate_coord(coord: Coord, axis: Axis, direction: RotationDirection) -> Coord:
    """Rotate a lattice coordinate about the geometric middle of the cube."""
    x, y, z = _rotate(
        coord.x - HALF_EXTENT,
        coord.y - HALF_EXTENT,
        coord.z - HALF_EXTENT,
        axis,
        direction,
    )
    # recentred values are half-integers: round away the floating point noise
    return Coord(
        round(x + HALF_EXTENT),
        round(y + HALF_EXTENT),
        round(z + HALF_EXTENT),
    )


def rotate_vector(vector: Coord, axis: Axis, direction: RotationDirection) -> Coord:
    x, y, z = _rotate(vector.x, vector.y, vector.z, axis, direction)
    return Coord(int(x), int(y), int(z))


def rotate_normal(normal: Normal, axis: Axis, direction: RotationDirection) -> Normal:
    return vector_to_normal(rotate_vector(normal.value, axis, direction))
