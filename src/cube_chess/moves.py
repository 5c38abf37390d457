"""
Moves, and the geometry of how each piece type moves over the cube.

Key idea: Use strategy pattern to define candidate move sets for each piece type.
A move is either a piece move or a cube move (rotating one layer of the cube).

Legality (not leaving your own king in check) is checked later by the move generator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, Protocol, Union

from src.core.exceptions import InvalidMoveCodeError
from src.cube_chess.geometry import BOARD_SIZE, Axis, RotationDirection
from src.cube_chess.pieces import Color, Piece, PieceType
from src.cube_chess.square import Square
from src.cube_chess.topology import (
    DIAGONAL_DIRECTIONS,
    ORTHOGONAL_DIRECTIONS,
    Direction,
    step,
    step_diagonal,
    step_path,
    trace_diagonal_ray,
    trace_ray,
)

PIECE_MOVE_SEPARATOR = ">"
CUBE_MOVE_SEPARATOR = ":"


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece(self, square: Square) -> Optional[Piece]: ...


@dataclass(frozen=True)
class PieceMove:
    from_square: Square
    to_square: Square
    piece_type: PieceType
    capture: bool = False
    promotion: Optional[PieceType] = None

    def to_code(self) -> str:
        return build_piece_move_code(self.from_square.to_id(), self.to_square.to_id())


@dataclass(frozen=True)
class CubeMove:
    """Rotate every square whose lattice coordinate along `axis` equals `layer`."""

    axis: Axis
    layer: int
    direction: RotationDirection

    def to_code(self) -> str:
        return build_cube_move_code(self.axis, self.layer, self.direction)


Move = Union[PieceMove, CubeMove]


# --- MOVE CODES ---
def build_piece_move_code(from_square_id: str, to_square_id: str) -> str:
    """ex) 'front:4:1>front:4:3'. Capture and promotion follow from the board, so are not encoded."""
    return f"{from_square_id}{PIECE_MOVE_SEPARATOR}{to_square_id}"


def build_cube_move_code(axis: Axis, layer: int, direction: RotationDirection) -> str:
    """ex) 'y:0:180'"""
    return CUBE_MOVE_SEPARATOR.join((axis.value, str(layer), direction.value))


def decode_move(code: str, board: Board) -> Move:
    """
    Turn a move code back into a Move, filling in what the board tells us
    (moving piece type, capture, forced promotion).
    """
    if PIECE_MOVE_SEPARATOR in code:
        return _decode_piece_move(code, board)
    return _decode_cube_move(code)


def _decode_piece_move(code: str, board: Board) -> PieceMove:
    from_id, _, to_id = code.partition(PIECE_MOVE_SEPARATOR)
    from_square = Square.from_id(from_id)
    to_square = Square.from_id(to_id)
    moving_piece = board.piece(from_square)
    if moving_piece is None:
        raise InvalidMoveCodeError(f"No piece on {from_id} for move {code!r}")
    if moving_piece.type == PieceType.PAWN:
        return _pawn_move(from_square, to_square, moving_piece, board)
    return PieceMove(
        from_square,
        to_square,
        moving_piece.type,
        capture=board.piece(to_square) is not None,
    )


def _decode_cube_move(code: str) -> CubeMove:
    parts = code.split(CUBE_MOVE_SEPARATOR)
    if len(parts) != 3:
        raise InvalidMoveCodeError(f"Cannot interpret {code!r} as a move")
    axis, layer, direction = parts
    try:
        move = CubeMove(Axis(axis), int(layer), RotationDirection(direction))
    except ValueError as exc:
        raise InvalidMoveCodeError(f"Cannot interpret {code!r} as a cube move") from exc
    if not 0 <= move.layer < BOARD_SIZE:
        raise InvalidMoveCodeError(f"Layer out of range in {code!r}")
    return move


# --- MOVEMENT RULES ---
def sliding_moves(
    square: Square, board: Board, rays: Iterable[Iterator[Square]]
) -> list[PieceMove]:
    """
    Raycasting algorithm
    -----

    Move along each ray until we hit another piece. The first occupied square is included
    as a capture when it holds an opponent's piece.

    A ray over the cube can come back on itself. Since stepping is deterministic, a square seen
    twice means the rest of the ray only repeats, so that is where the ray ends.
    """
    mover = board.piece(square)
    assert mover is not None

    moves: list[PieceMove] = []
    for ray in rays:
        visited: set[Square] = set()
        for target in ray:
            if target in visited:
                break
            visited.add(target)

            occupant = board.piece(target)
            if occupant is None:
                moves.append(PieceMove(square, target, mover.type))
                continue
            if occupant.color != mover.color:
                moves.append(PieceMove(square, target, mover.type, capture=True))
            break
    return moves


def single_step_moves(
    square: Square, board: Board, targets: Iterable[Optional[Square]]
) -> list[PieceMove]:
    """Kings and knights land on a single target per direction: empty or an opponent's piece."""
    mover = board.piece(square)
    assert mover is not None

    moves: list[PieceMove] = []
    for target in targets:
        if target is None:
            continue
        occupant = board.piece(target)
        if occupant is not None and occupant.color == mover.color:
            continue
        moves.append(
            PieceMove(square, target, mover.type, capture=occupant is not None)
        )
    return moves


def orthogonal_rays(square: Square) -> list[Iterator[Square]]:
    return [trace_ray(square, direction) for direction in ORTHOGONAL_DIRECTIONS]


def diagonal_rays(square: Square) -> list[Iterator[Square]]:
    return [trace_diagonal_ray(square, diagonal) for diagonal in DIAGONAL_DIRECTIONS]


def candidate_rook_moves(square: Square, board: Board) -> list[PieceMove]:
    """Rooks slide along the four face-local directions"""
    return sliding_moves(square, board, orthogonal_rays(square))


def candidate_bishop_moves(square: Square, board: Board) -> list[PieceMove]:
    """Bishops slide along diagonal steps"""
    return sliding_moves(square, board, diagonal_rays(square))


def candidate_queen_moves(square: Square, board: Board) -> list[PieceMove]:
    """
    The Queen combines the rook moves and the bishop moves
    """
    return sliding_moves(square, board, orthogonal_rays(square) + diagonal_rays(square))


def candidate_king_moves(square: Square, board: Board) -> list[PieceMove]:
    """
    The king can move by a single square at the time, orthogonally or diagonally.
    """
    orthogonal = [step(square, direction) for direction in ORTHOGONAL_DIRECTIONS]
    diagonal = [step_diagonal(square, first, second) for first, second in DIAGONAL_DIRECTIONS]
    return single_step_moves(square, board, orthogonal + diagonal)


KNIGHT_PATHS: tuple[tuple[Direction, ...], ...] = (
    (Direction.NORTH, Direction.NORTH, Direction.EAST),
    (Direction.NORTH, Direction.NORTH, Direction.WEST),
    (Direction.SOUTH, Direction.SOUTH, Direction.EAST),
    (Direction.SOUTH, Direction.SOUTH, Direction.WEST),
    (Direction.EAST, Direction.EAST, Direction.NORTH),
    (Direction.EAST, Direction.EAST, Direction.SOUTH),
    (Direction.WEST, Direction.WEST, Direction.NORTH),
    (Direction.WEST, Direction.WEST, Direction.SOUTH),
)


def candidate_knight_moves(square: Square, board: Board) -> list[PieceMove]:
    """Knights jump two steps one way, then one step sideways. Squares passed over do not matter."""
    targets = [step_path(square, path) for path in KNIGHT_PATHS]
    return single_step_moves(square, board, targets)


# Black moves down its home face, White moves up its home face
PAWN_FORWARD: dict[Color, Direction] = {
    Color.WHITE: Direction.NORTH,
    Color.BLACK: Direction.SOUTH,
}


def is_promotion_square(square: Square, color: Color) -> bool:
    """
    A pawn promotes once it cannot make any more forward progress:
    either there is no forward neighbour, or forward folds back onto this very square
    (where two faces meet such that 'forward' flips, pawns would bounce between two squares).
    """
    forward = PAWN_FORWARD[color]
    ahead = step(square, forward)
    if ahead is None:
        return True
    return step(ahead, forward) == square


def _pawn_move(
    from_square: Square, to_square: Square, pawn: Piece, board: Board
) -> PieceMove:
    promotion = (
        PieceType.QUEEN if is_promotion_square(to_square, pawn.color) else None
    )
    return PieceMove(
        from_square,
        to_square,
        PieceType.PAWN,
        capture=board.piece(to_square) is not None,
        promotion=promotion,
    )


def candidate_pawn_moves(square: Square, board: Board) -> list[PieceMove]:
    """
    A pawn:
    - moves by a single square forward (onto an empty square).
    - can move by two in its first move, if both squares are empty.
    - takes diagonally forward.
    - is forced to promote to a queen when it reaches a square without forward progress.
    """
    pawn = board.piece(square)
    assert pawn is not None
    forward = PAWN_FORWARD[pawn.color]

    moves: list[PieceMove] = []
    one_ahead = step(square, forward)
    if one_ahead is not None and board.piece(one_ahead) is None:
        moves.append(_pawn_move(square, one_ahead, pawn, board))
        if not pawn.has_moved:
            two_ahead = step(one_ahead, forward)
            if two_ahead is not None and board.piece(two_ahead) is None:
                moves.append(_pawn_move(square, two_ahead, pawn, board))

    for side in (Direction.EAST, Direction.WEST):
        target = step_diagonal(square, forward, side)
        if target is None:
            continue
        occupant = board.piece(target)
        if occupant is not None and occupant.color != pawn.color:
            moves.append(_pawn_move(square, target, pawn, board))
    return moves


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Square, Board], list[PieceMove]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}
