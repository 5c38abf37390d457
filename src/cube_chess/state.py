"""
Representation of a single moment in the game: the board plus everything needed to continue from it.

A GameState is never changed after it has been created. Applying a move returns a brand new state,
so earlier states can be kept around for undo/redo and shared freely.
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Self

from src.core.exceptions import EmptySquareError
from src.cube_chess.board import Board
from src.cube_chess.moves import CubeMove, Move, PieceMove
from src.cube_chess.pieces import COLOR_CHARACTER, Color, Piece, PieceType, opposite
from src.cube_chess.square import Square

FINGERPRINT_SEPARATOR = "|"


@dataclass(frozen=True)
class CastlingRights:
    """Kept for completeness of the position record. Move generation never reads these."""

    king_side: bool = True
    queen_side: bool = True


def _default_castling() -> dict[Color, CastlingRights]:
    return {color: CastlingRights() for color in Color}


@dataclass(frozen=True)
class GameState:
    """
    Board + side to move + bookkeeping
    ----

    * castling rights and the en passant target exist as data only (never produced or used by move generation)
    * the half move clock counts moves since the last pawn move or capture. Cube moves always count.
    * the full move number starts at 1 and increments after every move black makes.
    * the repetition ledger counts how often every position fingerprint occurred during the whole game.
    """

    board: Board
    turn: Color = Color.WHITE
    castling: Mapping[Color, CastlingRights] = field(default_factory=_default_castling)
    en_passant_target: Optional[Square] = None
    half_move_clock: int = 0
    full_move_number: int = 1
    repetition: Mapping[str, int] = field(default_factory=dict)
    last_move: Optional[Move] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "castling", MappingProxyType(dict(self.castling)))
        object.__setattr__(self, "repetition", MappingProxyType(dict(self.repetition)))

    @classmethod
    def from_squares(
        cls, entries: Iterable[tuple[Square, Piece]], turn: Color = Color.WHITE
    ) -> Self:
        """Starting point of a game. The starting position counts as its first occurrence."""
        state = cls(board=Board.from_entries(entries), turn=turn)
        return state._with_snapshot()

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]], turn: Color) -> Self:
        """Reverse of `to_records()`"""
        return cls.from_squares(
            ((Square.from_id(record["square"]), Piece.from_record(dict(record))) for record in records),
            turn=turn,
        )

    def to_records(self) -> list[dict[str, Any]]:
        """Piece placement as plain data (used to persist the starting position of a game)."""
        return [
            {"square": square.to_id(), **piece.to_record()}
            for square, piece in sorted(
                self.board.position.items(), key=lambda item: item[0].to_id()
            )
        ]

    def piece(self, square: Square) -> Optional[Piece]:
        return self.board.piece(square)

    # --- FINGERPRINT / REPETITION ---
    def fingerprint(self) -> str:
        """Every piece as `square:<color character><type>`, ordered by square id, followed by the side to move."""
        entries = sorted(
            self.board.position.items(), key=lambda item: item[0].to_id()
        )
        payload = FINGERPRINT_SEPARATOR.join(
            f"{square.to_id()}:{COLOR_CHARACTER[piece.color]}{piece.type.value}"
            for square, piece in entries
        )
        return f"{payload}{FINGERPRINT_SEPARATOR}{self.turn.value}"

    def repetition_count(self, fingerprint: Optional[str] = None) -> int:
        """How often the given (default: current) position occurred so far."""
        return self.repetition.get(fingerprint or self.fingerprint(), 0)

    def _with_snapshot(self) -> Self:
        signature = self.fingerprint()
        ledger = dict(self.repetition)
        ledger[signature] = ledger.get(signature, 0) + 1
        return replace(self, repetition=ledger)

    # --- TRANSITIONS ---
    def apply_move(self, move: Move) -> "GameState":
        """The state after the move. This state is left exactly as it was."""
        if isinstance(move, CubeMove):
            return self._apply_cube_move(move)
        return self._apply_piece_move(move)

    def _apply_piece_move(self, move: PieceMove) -> "GameState":
        moving_piece = self.piece(move.from_square)
        if moving_piece is None:
            raise EmptySquareError(f"No piece on {move.from_square} to move")

        resets_clock = moving_piece.type == PieceType.PAWN or move.capture
        next_state = replace(
            self,
            board=self.board.with_piece_move(move),
            turn=opposite(self.turn),
            half_move_clock=0 if resets_clock else self.half_move_clock + 1,
            full_move_number=self._next_full_move_number(),
            last_move=move,
        )
        return next_state._with_snapshot()

    def _apply_cube_move(self, move: CubeMove) -> "GameState":
        next_state = replace(
            self,
            board=self.board.rotated(move),
            turn=opposite(self.turn),
            en_passant_target=None,
            half_move_clock=self.half_move_clock + 1,
            full_move_number=self._next_full_move_number(),
            last_move=move,
        )
        return next_state._with_snapshot()

    def _next_full_move_number(self) -> int:
        return self.full_move_number + 1 if self.turn == Color.BLACK else self.full_move_number


def apply_move(state: GameState, move: Move) -> GameState:
    """Function form of `GameState.apply_move`."""
    return state.apply_move(move)
