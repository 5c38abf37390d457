"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Both the domain layer (Game) and the db layer convert to/from the model defined here.
"""

from dataclasses import dataclass, field
from typing import Any

# Type aliases to make GameModel easier to read
MoveCode = str
PieceRecord = dict[str, Any]


@dataclass
class GameModel:
    """Transport-safe representation of a cube chess game used between Service, DB, and Game layers."""

    starting_position: list[PieceRecord]
    starting_turn: str
    moves: list[MoveCode]
    redo_moves: list[MoveCode]
    position: str
    status: str
    notation: list[str] = field(default_factory=list)
