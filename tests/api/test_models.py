from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from src.api.models import CreateGameRequest, CubeMoveRequest, PieceMoveRequest
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color
from src.cube_chess.geometry import Axis, RotationDirection


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - CreateGameRequest --
def test_white_starts_by_default() -> None:
    assert CreateGameRequest().starting_turn == Color.WHITE
    assert CreateGameRequest(starting_turn="black").starting_turn == Color.BLACK


# -- Validation - PieceMoveRequest --
def test_valid_square_ids(mock_id: UUID) -> None:
    """Test that PieceMoveRequest accepts correctly written square ids."""
    request = PieceMoveRequest(
        game_id=mock_id, from_square="front:4:1", to_square="front:4:3"
    )
    assert request.from_square == "front:4:1"
    assert request.to_square == "front:4:3"


@pytest.mark.parametrize(
    "square",
    [
        "e2",  # board notation, not a square id
        "front:8:0",  # off the board
        "middle:0:0",  # not a face
        "front:0",  # missing rank
    ],
)
def test_invalid_from_square(mock_id: UUID, square: str) -> None:
    """Test that an exception is raised when using invalid square id."""
    with pytest.raises(InvalidRequestError):
        _ = PieceMoveRequest(game_id=mock_id, from_square=square, to_square="front:4:3")


@pytest.mark.parametrize("square", ["e4", "back:-1:0"])
def test_invalid_to_square(mock_id: UUID, square: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = PieceMoveRequest(game_id=mock_id, from_square="front:4:1", to_square=square)


# -- Validation - CubeMoveRequest --
def test_valid_cube_move(mock_id: UUID) -> None:
    request = CubeMoveRequest(game_id=mock_id, axis="x", layer=7, direction="180")
    assert request.axis == Axis.X
    assert request.direction == RotationDirection.HALF


@pytest.mark.parametrize("layer", [-1, 8, 100])
def test_layer_out_of_range(mock_id: UUID, layer: int) -> None:
    with pytest.raises(InvalidRequestError):
        _ = CubeMoveRequest(game_id=mock_id, axis="x", layer=layer, direction="cw")


def test_unknown_axis(mock_id: UUID) -> None:
    with pytest.raises(ValidationError):
        _ = CubeMoveRequest(game_id=mock_id, axis="w", layer=0, direction="cw")
