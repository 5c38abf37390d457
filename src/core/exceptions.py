"""Custom exceptions. Every layer raises (a subclass of) GameError so the service can propagate a single type."""


class GameError(Exception):
    """Base class for anything that goes wrong while playing a game."""


class InvalidSquareError(GameError):
    """Square id or label cannot be parsed, or lies outside the board."""


class InvalidMoveCodeError(GameError):
    """A move code cannot be parsed."""


class EmptySquareError(GameError):
    """A piece move was requested from a square without a piece."""


class IllegalMoveError(GameError):
    """The requested move is not among the legal moves."""


class GameStateError(GameError):
    """The request does not make sense in the current state of the game."""


class InvalidRequestError(GameError):
    """Request data rejected by the API models."""


class RepositoryError(GameError):
    """Persistence layer could not find / store a game."""
