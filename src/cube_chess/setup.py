"""Starting position: White on the front face, Black on the back face."""

from dataclasses import dataclass

from src.cube_chess.geometry import BOARD_SIZE, Face
from src.cube_chess.pieces import Color, Piece, PieceType
from src.cube_chess.square import Square
from src.cube_chess.state import GameState

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True)
class ArmySetup:
    face: Face
    back_rank: int
    pawn_rank: int
    color: Color
    id_prefix: str


ARMIES: tuple[ArmySetup, ...] = (
    ArmySetup(Face.FRONT, 0, 1, Color.WHITE, "w"),
    ArmySetup(Face.BACK, BOARD_SIZE - 1, BOARD_SIZE - 2, Color.BLACK, "b"),
)


def _create_piece(army: ArmySetup, piece_type: PieceType, file: int) -> Piece:
    return Piece(
        identity=f"{army.id_prefix}-{piece_type.value}-{file}",
        color=army.color,
        type=piece_type,
    )


def initial_entries() -> list[tuple[Square, Piece]]:
    entries: list[tuple[Square, Piece]] = []
    for army in ARMIES:
        for file, piece_type in enumerate(BACK_RANK):
            entries.append(
                (Square(army.face, file, army.back_rank), _create_piece(army, piece_type, file))
            )
        for file in range(len(BACK_RANK)):
            entries.append(
                (Square(army.face, file, army.pawn_rank), _create_piece(army, PieceType.PAWN, file))
            )
    return entries


def build_initial_state() -> GameState:
    return GameState.from_squares(initial_entries())
