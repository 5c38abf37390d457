"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    CubeMoveRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    PieceMoveRequest,
    PieceResponse,
    RedoRequest,
    UndoRequest,
)
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.cube_chess.game import Game
from src.cube_chess.move_generator import is_king_in_check
from src.cube_chess.moves import build_cube_move_code, build_piece_move_code
from src.cube_chess.setup import initial_entries
from src.cube_chess.state import GameState
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class GameService:
    """Orchestration of layers for a cube chess game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Set up the standard position, with the requested side to move first."""
        new_game = Game.new_game(
            GameState.from_squares(initial_entries(), turn=request.starting_turn)
        )

        # Store the GameModel in the repository
        _, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s", game_id)

        return self._create_game_response(game_id, new_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state."""
        game = Game.from_model(self._fetch_game(request.game_id))
        return self._create_game_response(request.game_id, game)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """retrieve set of legal moves, as move codes."""
        game = Game.from_model(self._fetch_game(request.game_id))
        return LegalMovesResponse(
            game_id=request.game_id,
            turn=game.state.turn,
            legal_moves=[move.to_code() for move in game.legal_moves()],
        )

    def make_piece_move(self, request: PieceMoveRequest) -> GameResponse:
        """Move a piece from one square to another."""
        move_code = build_piece_move_code(request.from_square, request.to_square)
        return self._play(request.game_id, move_code)

    def make_cube_move(self, request: CubeMoveRequest) -> GameResponse:
        """Rotate one layer of the cube."""
        move_code = build_cube_move_code(request.axis, request.layer, request.direction)
        return self._play(request.game_id, move_code)

    def undo_move(self, request: UndoRequest) -> GameResponse:
        game = Game.from_model(self._fetch_game(request.game_id))
        undone = game.undo()
        logger.info("Game %s: undid %s", request.game_id, undone.to_code())
        return self._store(request.game_id, game)

    def redo_move(self, request: RedoRequest) -> GameResponse:
        game = Game.from_model(self._fetch_game(request.game_id))
        redone = game.redo()
        logger.info("Game %s: redid %s", request.game_id, redone.to_code())
        return self._store(request.game_id, game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with game_id={request.game_id} not found.")
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _play(self, game_id: UUID, move_code: str) -> GameResponse:
        game = Game.from_model(self._fetch_game(game_id))
        game.make_move(move_code)
        logger.info("Game %s: played %s, status %s", game_id, move_code, game.status)
        return self._store(game_id, game)

    def _store(self, game_id: UUID, game: Game) -> GameResponse:
        self.repo.update_game(game_id, game.to_model())
        return self._create_game_response(game_id, game)

    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        """Convert the state of the Game to a GameResponse (for game with given ID.)"""
        state = game.state
        return GameResponse(
            game_id=game_id,
            turn=state.turn,
            status=game.status,
            winner=game.winner,
            in_check=is_king_in_check(state, state.turn),
            pieces={
                square.to_id(): PieceResponse(
                    identity=piece.identity, color=piece.color, type=piece.type
                )
                for square, piece in state.board.position.items()
            },
            move_history=game.notation,
            can_undo=game.can_undo,
            can_redo=game.can_redo,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
