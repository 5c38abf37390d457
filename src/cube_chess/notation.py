"""
Human readable move notation
---

* square: face letter + file letter + rank digit, ex) 'Fe2' is front:4:1
* piece move: piece symbol (none for pawns) + from square + 'x' (capture) or '-' + to square (+ '=Q' on promotion)
* cube move: axis + layer counted from 1 + direction, ex) 'Y1180' rotates the bottom layer by 180 degrees
"""

from string import ascii_lowercase

from src.core.exceptions import InvalidSquareError
from src.cube_chess.geometry import Face
from src.cube_chess.moves import CubeMove, Move, PieceMove
from src.cube_chess.pieces import PieceType
from src.cube_chess.square import Square

FACE_TAG: dict[Face, str] = {
    Face.FRONT: "F",
    Face.BACK: "B",
    Face.LEFT: "L",
    Face.RIGHT: "R",
    Face.TOP: "T",
    Face.BOTTOM: "D",
}
TAG_TO_FACE: dict[str, Face] = {tag: face for face, tag in FACE_TAG.items()}

PIECE_SYMBOL: dict[PieceType, str] = {
    PieceType.KING: "K",
    PieceType.QUEEN: "Q",
    PieceType.ROOK: "R",
    PieceType.BISHOP: "B",
    PieceType.KNIGHT: "N",
    PieceType.PAWN: "",
}


def square_label(square: Square) -> str:
    return f"{FACE_TAG[square.face]}{ascii_lowercase[square.u]}{square.v + 1}"


def parse_square_label(label: str) -> Square:
    if len(label) < 3 or label[0] not in TAG_TO_FACE or label[1] not in ascii_lowercase:
        raise InvalidSquareError(f"Cannot interpret {label!r} as a square label")
    if not label[2:].isdecimal() or label[2] == "0":
        raise InvalidSquareError(f"Cannot interpret {label!r} as a square label")

    square = Square(TAG_TO_FACE[label[0]], ascii_lowercase.index(label[1]), int(label[2:]) - 1)
    if not square.is_within_bounds():
        raise InvalidSquareError(f"Square label {label!r} is off the board")
    return square


def describe_move(move: Move) -> str:
    if isinstance(move, CubeMove):
        return _describe_cube_move(move)
    return _describe_piece_move(move)


def _describe_piece_move(move: PieceMove) -> str:
    symbol = PIECE_SYMBOL[move.piece_type]
    capture = "x" if move.capture else "-"
    suffix = f"={PIECE_SYMBOL[move.promotion]}" if move.promotion else ""
    return f"{symbol}{square_label(move.from_square)}{capture}{square_label(move.to_square)}{suffix}"


def _describe_cube_move(move: CubeMove) -> str:
    return f"{move.axis.value.upper()}{move.layer + 1}{move.direction.value.upper()}"

