"""Defines the chess pieces that live on the cube"""

from dataclasses import dataclass, replace
from typing import Self

from src.core.shared_types import Color, PieceType

# Only the first character of the color makes it into position fingerprints
COLOR_CHARACTER: dict[Color, str] = {color: color.value[0] for color in Color}


def opposite(color: Color) -> Color:
    return Color.BLACK if color == Color.WHITE else Color.WHITE


@dataclass(frozen=True)
class Piece:
    """
    A piece keeps its identity for as long as it stays on the cube.
    Pieces are immutable: moving or promoting one creates an updated copy.
    """

    identity: str
    color: Color
    type: PieceType
    has_moved: bool = False

    def moved(self) -> Self:
        return replace(self, has_moved=True)

    def promoted_to(self, new_type: PieceType) -> Self:
        """A promoted piece is a new piece: it gets its own identity."""
        return replace(
            self,
            identity=f"{self.identity}={new_type.value}",
            type=new_type,
            has_moved=True,
        )

    def to_record(self) -> dict[str, str | bool]:
        return {
            "identity": self.identity,
            "color": self.color.value,
            "type": self.type.value,
            "has_moved": self.has_moved,
        }

    @classmethod
    def from_record(cls, record: dict) -> Self:
        return cls(
            identity=record["identity"],
            color=Color(record["color"]),
            type=PieceType(record["type"]),
            has_moved=bool(record.get("has_moved", False)),
        )
