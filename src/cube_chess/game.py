"""
The Game class is the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating everything required to play a turn of cube chess:
checking requested moves against the legal moves, keeping the history of states for undo/redo,
and deciding when the game is over.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import GameStateError, IllegalMoveError
from src.core.models import GameModel
from src.core.shared_types import Status
from src.cube_chess.move_generator import generate_legal_moves, is_in_check
from src.cube_chess.moves import Move, decode_move
from src.cube_chess.notation import describe_move
from src.cube_chess.pieces import Color, opposite
from src.cube_chess.setup import build_initial_state
from src.cube_chess.state import GameState

logger = logging.getLogger(__name__)

# A position reached this many times ends the game in a draw
REPETITION_LIMIT = 3


@dataclass(frozen=True)
class Turn:
    """A move and the state it produced."""

    move: Move
    state: GameState


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    initial_state: GameState
    played: list[Turn] = field(default_factory=list)
    undone: list[Turn] = field(default_factory=list)
    status: Status = Status.IN_PROGRESS

    @classmethod
    def new_game(cls, starting_state: Optional[GameState] = None) -> Self:
        """Start from the standard setup, unless a starting state is given."""
        game = cls(initial_state=starting_state or build_initial_state())
        game._update_game_status()
        return game

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Rebuild every snapshot by replaying the recorded moves from the starting position."""
        # Validation
        if model.status not in {status.value for status in Status}:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(status.value for status in Status)}"
            )

        initial_state = GameState.from_records(
            model.starting_position, Color(model.starting_turn)
        )
        played = _replay(initial_state, model.moves)
        current = played[-1].state if played else initial_state
        # the redo stack is stored bottom to top, so its top is the next move to replay
        undone = list(reversed(_replay(current, list(reversed(model.redo_moves)))))
        return cls(initial_state, played, undone, Status(model.status))

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            starting_position=self.initial_state.to_records(),
            starting_turn=self.initial_state.turn.value,
            moves=[turn.move.to_code() for turn in self.played],
            redo_moves=[turn.move.to_code() for turn in self.undone],
            position=self.state.fingerprint(),
            status=self.status.value,
            notation=self.notation,
        )

    @property
    def state(self) -> GameState:
        return self.played[-1].state if self.played else self.initial_state

    @property
    def notation(self) -> list[str]:
        return [describe_move(turn.move) for turn in self.played]

    @property
    def can_undo(self) -> bool:
        return bool(self.played)

    @property
    def can_redo(self) -> bool:
        return bool(self.undone)

    @property
    def winner(self) -> Optional[Color]:
        """
        Checkmate: the player to move got mated. King-only / captured king: the side that still has an army / a king.
        No winner when both sides are in the same situation (two bare kings, or no kings at all).
        """
        board = self.state.board
        if self.status == Status.CHECKMATE:
            return opposite(self.state.turn)
        if self.status == Status.KING_CAPTURED:
            with_king = [color for color in Color if board.locate_king(color) is not None]
            return with_king[0] if len(with_king) == 1 else None
        if self.status == Status.KING_ONLY_LOSS:
            king_only = [color for color in Color if board.has_only_king(color)]
            return opposite(king_only[0]) if len(king_only) == 1 else None
        return None

    def legal_moves(self) -> list[Move]:
        """The moves the player to move can choose from."""
        self._assert_in_progress()
        return generate_legal_moves(self.state)

    def make_move(self, move_code: str) -> Move:
        """
        Attempt to make a move
        -----

        1. interpret the move code on the current board
        2. check it is one of the legal moves
        3. push the new state (a new move makes the undone moves unreachable)
        4. update game status
        """
        self._assert_in_progress()

        requested = decode_move(move_code, self.state.board)
        if requested not in generate_legal_moves(self.state):
            raise IllegalMoveError(f"Move not allowed: {move_code}")

        self.played.append(Turn(requested, self.state.apply_move(requested)))
        self.undone.clear()
        logger.debug("Played %s (%s)", move_code, describe_move(requested))

        self._update_game_status()
        return requested

    def undo(self) -> Move:
        """Step back to the state before the last move. Undo also reopens a finished game."""
        if not self.played:
            raise GameStateError("Nothing to undo.")
        turn = self.played.pop()
        self.undone.append(turn)
        self._update_game_status()
        return turn.move

    def redo(self) -> Move:
        if not self.undone:
            raise GameStateError("Nothing to redo.")
        turn = self.undone.pop()
        self.played.append(turn)
        self._update_game_status()
        return turn.move

    # -- PRIVATE HELPERS ---
    def _assert_in_progress(self) -> None:
        if self.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

    def _update_game_status(self) -> None:
        new_status = evaluate_status(self.state)
        if new_status != self.status:
            logger.info("Game status changed: %s -> %s", self.status, new_status)
        self.status = new_status


def evaluate_status(state: GameState) -> Status:
    """
    Checks, in this order:
    1. a king got captured (possible, since rotations are not checked for exposing your own king)
    2. a player has nothing but the king left
    3. no legal moves: checkmate when in check, stalemate otherwise
    4. three-fold repetition
    """
    board = state.board
    if any(board.locate_king(color) is None for color in Color):
        return Status.KING_CAPTURED

    if any(board.has_only_king(color) for color in Color):
        return Status.KING_ONLY_LOSS

    if not generate_legal_moves(state):
        return Status.CHECKMATE if is_in_check(state, state.turn) else Status.STALEMATE

    if state.repetition_count() >= REPETITION_LIMIT:
        return Status.DRAW_REPETITION

    return Status.IN_PROGRESS


def _replay(state: GameState, move_codes: list[str]) -> list[Turn]:
    turns: list[Turn] = []
    for code in move_codes:
        move = decode_move(code, state.board)
        state = state.apply_move(move)
        turns.append(Turn(move, state))
    return turns
