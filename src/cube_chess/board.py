"""The Board implements all rules that affect the `position` (the configuration of pieces on the cube's squares)"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Self

from src.core.exceptions import EmptySquareError, GameStateError
from src.cube_chess.moves import MOVEMENT_RULES, CandidateMovesFn, CubeMove, PieceMove
from src.cube_chess.pieces import Color, Piece, PieceType, opposite
from src.cube_chess.rotation import rotate_layer
from src.cube_chess.square import Square


@dataclass(frozen=True)
class Board:
    """
    Read-only mapping from square to piece. Empty squares are simply absent.
    Every update returns a new Board.
    """

    position: Mapping[Square, Piece]

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", MappingProxyType(dict(self.position)))

    @classmethod
    def from_entries(cls, entries: Iterable[tuple[Square, Piece]]) -> Self:
        """Construct a board from (square, piece) pairs. A square can hold one piece at most."""
        position: dict[Square, Piece] = {}
        for square, piece in entries:
            if square in position:
                raise GameStateError(f"Two pieces placed on {square}")
            position[square] = piece
        return cls(position)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.position.get(square)

    def locate_color(self, color: Color) -> list[Square]:
        return [
            square for square, piece in self.position.items() if piece.color == color
        ]

    def locate_king(self, color: Color) -> Optional[Square]:
        return next(
            (
                square
                for square, piece in self.position.items()
                if piece.type == PieceType.KING and piece.color == color
            ),
            None,
        )

    def has_only_king(self, color: Color) -> bool:
        return all(
            piece.type == PieceType.KING
            for piece in self.position.values()
            if piece.color == color
        )

    # --- MOVE GENERATION ---
    def piece_moves(self, square: Square) -> list[PieceMove]:
        """Candidate moves of the piece on the square. The same move reached along two rays is listed once."""
        piece = self.piece(square)
        if piece is None:
            return []
        movement_rule: CandidateMovesFn = MOVEMENT_RULES[piece.type]
        return list(dict.fromkeys(movement_rule(square, self)))

    def generate_candidate_moves(self, color: Color) -> list[PieceMove]:
        """
        Before knowing the set of legal moves, we use raycasting to find candidate moves,
        which will later be tested for legality (making sure it does not put yourself in check.)
        """
        candidate_moves: list[PieceMove] = []
        for starting_square in self.locate_color(color):
            candidate_moves.extend(self.piece_moves(starting_square))
        return candidate_moves

    def is_square_attacked(self, square: Square, by_color: Color) -> bool:
        """A square is attacked if any piece of `by_color` has a capturing candidate move onto it."""
        return any(
            move.capture and move.to_square == square
            for move in self.generate_candidate_moves(by_color)
        )

    def is_check(self, color: Color) -> bool:
        """A missing king is not in check: losing the king is an end-of-game condition for the caller."""
        king_square = self.locate_king(color)
        if king_square is None:
            return False
        return self.is_square_attacked(king_square, opposite(color))

    # --- UPDATES ---
    def with_piece_move(self, move: PieceMove) -> Self:
        """Relocate (and possibly promote) the moving piece. Whatever stood on the target square is gone."""
        moving_piece = self.piece(move.from_square)
        if moving_piece is None:
            raise EmptySquareError(f"No piece on {move.from_square}")

        position = dict(self.position)
        del position[move.from_square]
        position[move.to_square] = (
            moving_piece.promoted_to(move.promotion)
            if move.promotion
            else moving_piece.moved()
        )
        return type(self)(position)

    def rotated(self, move: CubeMove) -> Self:
        return type(self)(rotate_layer(self.position, move))
