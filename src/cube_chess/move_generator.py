"""
Legal moves
-----

1. candidate piece moves of the side to move (movement rules, see moves.py)
2. drop every candidate that leaves the mover's own king in check (one trial move + check test each)
3. if the side to move is not in check: offer every layer rotation of the cube

Rotations are never filtered per move: by the rules of this variant a rotation is assumed not to expose
the mover's own king, and a rotation can never be used to get out of check.
"""

from itertools import product

from src.cube_chess.geometry import BOARD_SIZE, Axis, RotationDirection
from src.cube_chess.moves import CubeMove, Move, PieceMove
from src.cube_chess.pieces import Color
from src.cube_chess.state import GameState

CUBE_AXES: tuple[Axis, ...] = (Axis.X, Axis.Y, Axis.Z)
ROTATION_DIRECTIONS: tuple[RotationDirection, ...] = (
    RotationDirection.CW,
    RotationDirection.CCW,
    RotationDirection.HALF,
)


def generate_cube_moves() -> list[CubeMove]:
    """3 axes x N layers x 3 directions"""
    return [
        CubeMove(axis, layer, direction)
        for axis, layer, direction in product(
            CUBE_AXES, range(BOARD_SIZE), ROTATION_DIRECTIONS
        )
    ]


def is_in_check(state: GameState, color: Color) -> bool:
    """Is the king of `color` attacked? A color without a king is never in check."""
    return state.board.is_check(color)


def is_king_in_check(state: GameState, color: Color) -> bool:
    return is_in_check(state, color)


def leaves_king_safe(state: GameState, move: PieceMove) -> bool:
    """Play the move on a copy and check whether the mover's king is attacked afterwards."""
    return not is_in_check(state.apply_move(move), state.turn)


def generate_pseudo_legal_moves(state: GameState) -> list[PieceMove]:
    return state.board.generate_candidate_moves(state.turn)


def generate_legal_piece_moves(state: GameState) -> list[PieceMove]:
    return [
        move for move in generate_pseudo_legal_moves(state) if leaves_king_safe(state, move)
    ]


def generate_legal_moves(state: GameState) -> list[Move]:
    """Piece moves first, then (only when not in check) all cube rotations."""
    legal_moves: list[Move] = list(generate_legal_piece_moves(state))
    if not is_in_check(state, state.turn):
        legal_moves.extend(generate_cube_moves())
    return legal_moves
